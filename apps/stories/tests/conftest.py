import pytest

from apps.stories.models import TravelerStory


@pytest.fixture
def story(traveler):
    """Approved story by ``traveler``."""
    return TravelerStory.objects.create(
        user=traveler,
        title='Sunrise on Kibo',
        story='Six days on the Machame route.',
        location='Kilimanjaro',
        duration='6 days',
        highlights=['Barranco Wall', 'Uhuru Peak'],
        is_approved=True,
    )


@pytest.fixture
def pending_story(traveler):
    return TravelerStory.objects.create(
        user=traveler,
        title='Stone Town walk',
        story='Spice market and doors.',
        location='Zanzibar',
    )
