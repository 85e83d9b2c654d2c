"""Tests for provider analytics aggregation."""

import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

from apps.analytics.analytics import AnalyticsQueries, growth_rate
from apps.analytics.exceptions import InvalidTimeRangeError
from apps.bookings.models import BookingStatus
from apps.reviews.models import Review


class TestGrowthRate:

    def test_zero_when_no_previous(self):
        assert growth_rate(Decimal('500'), Decimal('0')) == 0

    def test_rounded_to_one_decimal(self):
        assert growth_rate(4, 3) == 33.3

    def test_negative(self):
        assert growth_rate(Decimal('50'), Decimal('200')) == -75.0


@pytest.mark.django_db
class TestProviderAnalytics:

    def test_empty_provider(self, provider, now):
        data = AnalyticsQueries.provider_analytics(provider.id, now=now)

        assert data['revenue'] == {'total': Decimal('0.00'), 'growth': 0, 'trend': 'up'}
        assert data['bookings']['total'] == 0
        assert data['customers'] == {'total': 0, 'growth': 0, 'trend': 'neutral'}
        assert data['rating']['average'] == 0
        assert data['top_services'] == []
        assert data['top_countries'] == []
        assert len(data['monthly_data']) == 6

    def test_revenue_counts_only_confirmed_and_completed(self, provider, traveler, make_booking, now):
        make_booking(traveler, days_ago=2, participants=3)
        make_booking(traveler, days_ago=3, status=BookingStatus.COMPLETED)
        make_booking(traveler, days_ago=4, status=BookingStatus.PENDING)
        make_booking(traveler, days_ago=5, status=BookingStatus.CANCELLED)

        data = AnalyticsQueries.provider_analytics(provider.id, now=now)

        assert data['revenue']['total'] == Decimal('400.00')
        assert data['bookings']['total'] == 2

    def test_growth_zero_when_previous_period_empty(self, provider, traveler, make_booking, now):
        make_booking(traveler, days_ago=1)

        data = AnalyticsQueries.provider_analytics(provider.id, time_range='7days', now=now)

        assert data['revenue']['growth'] == 0
        assert data['bookings']['growth'] == 0
        assert data['revenue']['trend'] == 'up'

    def test_growth_against_previous_window(self, provider, traveler, make_booking, now):
        make_booking(traveler, days_ago=2)
        make_booking(traveler, days_ago=10)
        make_booking(traveler, days_ago=11)

        data = AnalyticsQueries.provider_analytics(provider.id, time_range='7days', now=now)

        assert data['bookings']['total'] == 1
        assert data['bookings']['growth'] == -50.0
        assert data['bookings']['trend'] == 'down'
        assert data['revenue']['growth'] == -50.0

    def test_customers_count_distinct_travelers_in_window(
        self, provider, traveler, other_traveler, make_booking, now
    ):
        make_booking(traveler, days_ago=1)
        make_booking(traveler, days_ago=2, status=BookingStatus.PENDING)
        make_booking(other_traveler, days_ago=3, status=BookingStatus.CANCELLED)
        make_booking(other_traveler, days_ago=60)

        data = AnalyticsQueries.provider_analytics(provider.id, now=now)

        assert data['customers']['total'] == 2

    def test_rating_from_reviews_of_window_bookings(self, provider, traveler, service, make_booking, now):
        first = make_booking(traveler, days_ago=1, status=BookingStatus.COMPLETED)
        second = make_booking(traveler, days_ago=2, status=BookingStatus.COMPLETED)
        old = make_booking(traveler, days_ago=90, status=BookingStatus.COMPLETED)
        for booking, rating in ((first, 5), (second, 4), (old, 1)):
            Review.objects.create(
                booking=booking, traveler=traveler, service=service, provider=provider, rating=rating
            )

        data = AnalyticsQueries.provider_analytics(provider.id, now=now)

        assert data['rating']['average'] == 4.5
        assert data['rating']['total'] == 2

    def test_top_services_by_revenue(self, provider, traveler, service, second_service, make_booking, now):
        make_booking(traveler, days_ago=1, target=second_service)
        make_booking(traveler, days_ago=1, participants=2)
        booking = make_booking(traveler, days_ago=2, status=BookingStatus.COMPLETED)
        Review.objects.create(booking=booking, traveler=traveler, service=service, provider=provider, rating=4)

        top = AnalyticsQueries.provider_analytics(provider.id, now=now)['top_services']

        assert [s['name'] for s in top] == ['Ngorongoro Day Safari', 'Materuni Waterfalls Hike']
        assert top[0]['bookings'] == 2
        assert top[0]['revenue'] == Decimal('300.00')
        assert top[0]['rating'] == 4.0
        assert top[1]['rating'] == 0

    def test_top_countries_with_unknown(self, provider, traveler, other_traveler, make_booking, now):
        from apps.accounts.models import User

        nomad = User.objects.create_user(
            email='nomad@example.com', password='TestPass123!', first_name='No', last_name='Where'
        )
        make_booking(traveler, days_ago=1)
        make_booking(traveler, days_ago=2, status=BookingStatus.PENDING)
        make_booking(other_traveler, days_ago=3)
        make_booking(nomad, days_ago=4)

        countries = AnalyticsQueries.provider_analytics(provider.id, now=now)['top_countries']

        assert countries[0] == {'country': 'Kenya', 'bookings': 2, 'percentage': 50}
        assert {'country': 'Unknown', 'bookings': 1, 'percentage': 25} in countries

    def test_monthly_data_six_months_oldest_first(self, provider, traveler, make_booking, now):
        make_booking(traveler, days_ago=0, created_at=datetime(2026, 6, 2, tzinfo=dt_timezone.utc))
        make_booking(traveler, days_ago=0, created_at=datetime(2026, 1, 20, tzinfo=dt_timezone.utc))
        make_booking(traveler, days_ago=0, created_at=datetime(2025, 12, 20, tzinfo=dt_timezone.utc))

        monthly = AnalyticsQueries.provider_analytics(provider.id, now=now)['monthly_data']

        assert [m['month'] for m in monthly] == ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun']
        assert monthly[0]['bookings'] == 1
        assert monthly[-1]['revenue'] == Decimal('100.00')
        assert sum(m['bookings'] for m in monthly) == 2

    def test_other_providers_bookings_ignored(self, provider, other_provider, traveler, make_booking, now):
        from apps.catalog.models import Service

        foreign = Service.objects.create(provider=other_provider, title='Dhow cruise', price=Decimal('70'))
        make_booking(traveler, days_ago=1, target=foreign)

        data = AnalyticsQueries.provider_analytics(provider.id, now=now)

        assert data['bookings']['total'] == 0

    def test_invalid_time_range(self, provider):
        with pytest.raises(InvalidTimeRangeError):
            AnalyticsQueries.provider_analytics(provider.id, time_range='2weeks')

    def test_one_year_window(self, provider, traveler, make_booking, now):
        make_booking(traveler, days_ago=300)

        assert AnalyticsQueries.provider_analytics(provider.id, time_range='1year', now=now)['bookings']['total'] == 1
        assert AnalyticsQueries.provider_analytics(provider.id, time_range='90days', now=now)['bookings']['total'] == 0
