"""
Management command to create sample data for testing the API.

Usage:
    python manage.py create_sample_data

This creates:
- 1 admin, 2 service providers, 3 travelers
- Services for each provider
- Promotions (featured + trending)
- Bookings in several states
- Reviews and traveler stories
"""

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, UserType
from apps.accounts.services import register_user
from apps.bookings.models import Booking, BookingStatus
from apps.bookings.services import create_booking, transition_booking
from apps.catalog.models import Service
from apps.catalog.services import create_service, promote_service
from apps.reviews.services import create_review
from apps.stories.models import TravelerStory
from apps.stories.services import create_story


SAMPLE_PASSWORD = 'password123!'

PROVIDERS = [
    {
        'email': 'kili@example.com',
        'first_name': 'Baraka',
        'last_name': 'Laizer',
        'business_name': 'Kilimanjaro Trails',
        'provider_details': {'country': 'Tanzania', 'region': 'Kilimanjaro', 'location': 'Moshi'},
        'services': [
            ('Machame Route Trek', 'trekking', Decimal('1800000'), 'Moshi'),
            ('Materuni Waterfalls Hike', 'hiking', Decimal('85000'), 'Moshi'),
        ],
    },
    {
        'email': 'dhow@example.com',
        'first_name': 'Ali',
        'last_name': 'Omar',
        'business_name': 'Zanzibar Dhow Tours',
        'provider_details': {'country': 'Tanzania', 'region': 'Zanzibar', 'location': 'Stone Town'},
        'services': [
            ('Sunset Dhow Cruise', 'boat_tour', Decimal('60000'), 'Stone Town'),
            ('Spice Farm Tour', 'cultural', Decimal('45000'), 'Kizimbani'),
        ],
    },
]

TRAVELERS = [
    ('alice@example.com', 'Alice', 'Mwangi', 'Kenya'),
    ('bob@example.com', 'Bob', 'Jensen', 'Denmark'),
    ('carla@example.com', 'Carla', 'Reyes', ''),
]


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        if User.objects.filter(email=PROVIDERS[0]['email']).exists():
            self.stdout.write(self.style.WARNING('Sample data already present, use --clear to recreate.'))
            return

        self.stdout.write('Creating sample data...')

        self.create_admin()
        services = self.create_providers()
        travelers = self.create_travelers()
        self.create_promotions(services)
        self.create_bookings(travelers, services)
        self.create_stories(travelers)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        for provider in PROVIDERS:
            self.stdout.write(f"  {provider['email']} / {SAMPLE_PASSWORD} (provider)")
        for email, *_ in TRAVELERS:
            self.stdout.write(f"  {email} / {SAMPLE_PASSWORD} (traveler)")

    def clear_data(self):
        """Remove sample accounts; everything else cascades."""
        emails = [p['email'] for p in PROVIDERS] + [t[0] for t in TRAVELERS] + ['admin@example.com']
        User.objects.filter(email__in=emails).delete()

    def create_admin(self):
        User.objects.create_superuser(
            email='admin@example.com',
            password='admin123',
            first_name='Admin',
            last_name='User',
        )

    def create_providers(self):
        self.stdout.write('  Creating providers and services...')
        services = []
        for data in PROVIDERS:
            user = register_user(
                email=data['email'],
                password=SAMPLE_PASSWORD,
                first_name=data['first_name'],
                last_name=data['last_name'],
                user_type=UserType.SERVICE_PROVIDER,
                business_name=data['business_name'],
                provider_details=data['provider_details'],
            )
            user.provider_profile.is_verified = True
            user.provider_profile.save(update_fields=['is_verified'])

            for title, category, price, location in data['services']:
                services.append(create_service(
                    user=user,
                    title=title,
                    category=category,
                    price=price,
                    location=location,
                    country=data['provider_details']['country'],
                    region=data['provider_details']['region'],
                ))
        return services

    def create_travelers(self):
        self.stdout.write('  Creating travelers...')
        return [
            register_user(
                email=email,
                password=SAMPLE_PASSWORD,
                first_name=first_name,
                last_name=last_name,
                country=country,
            )
            for email, first_name, last_name, country in TRAVELERS
        ]

    def create_promotions(self, services):
        self.stdout.write('  Creating promotions...')
        first, _, third, _ = services
        promote_service(
            service_id=first.id,
            user=first.provider.user,
            promotion_type='featured',
            location='both',
        )
        promote_service(
            service_id=third.id,
            user=third.provider.user,
            promotion_type='trending',
            location='trending_section',
            duration_days=14,
        )

    def create_bookings(self, travelers, services):
        self.stdout.write('  Creating bookings and reviews...')
        now = timezone.now()
        plan = [
            (0, 0, 2, BookingStatus.COMPLETED, 5),
            (1, 0, 1, BookingStatus.COMPLETED, 4),
            (0, 2, 3, BookingStatus.CONFIRMED, None),
            (2, 3, 2, BookingStatus.PENDING, None),
            (1, 2, 1, BookingStatus.CANCELLED, None),
        ]
        for traveler_idx, service_idx, participants, final_status, rating in plan:
            traveler = travelers[traveler_idx]
            service = services[service_idx]
            booking = create_booking(
                traveler=traveler,
                service_id=service.id,
                booking_date=now + timedelta(days=14),
                participants=participants,
            )
            self.advance(booking, final_status, traveler, service.provider.user)

            if rating:
                create_review(
                    traveler=traveler,
                    service_id=service.id,
                    booking_id=booking.id,
                    rating=rating,
                    comment='Sample review',
                )

        # Spread creation dates so analytics have history
        for offset, booking in enumerate(Booking.objects.order_by('created_at')):
            Booking.objects.filter(id=booking.id).update(created_at=now - timedelta(days=20 * offset))

    def advance(self, booking, final_status, traveler, provider_user):
        path = {
            BookingStatus.PENDING: [],
            BookingStatus.CONFIRMED: [(BookingStatus.CONFIRMED, provider_user)],
            BookingStatus.COMPLETED: [
                (BookingStatus.CONFIRMED, provider_user),
                (BookingStatus.COMPLETED, provider_user),
            ],
            BookingStatus.CANCELLED: [(BookingStatus.CANCELLED, traveler)],
        }[final_status]
        for status, actor in path:
            transition_booking(booking_id=booking.id, new_status=status, actor=actor)

    def create_stories(self, travelers):
        self.stdout.write('  Creating stories...')
        story = create_story(
            user=travelers[0],
            title='Sunrise on Kibo',
            story='Six days on the Machame route with the best crew.',
            location='Kilimanjaro',
            duration='6 days',
            highlights=['Barranco Wall', 'Uhuru Peak'],
        )
        TravelerStory.objects.filter(id=story.id).update(is_approved=True)
        create_story(
            user=travelers[1],
            title='Stone Town at dusk',
            story='Dhow cruise and Forodhani food market.',
            location='Zanzibar',
        )
