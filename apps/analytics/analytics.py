"""
Analytics Module
=================

Read-only aggregations over bookings and reviews that power the provider
dashboard.

Classes:
    AnalyticsQueries: Static methods for analytics queries.

Example:
    Provider dashboard for the last 30 days::

        from apps.analytics.analytics import AnalyticsQueries

        data = AnalyticsQueries.provider_analytics(provider.id, time_range='30days')
        print(f"Revenue: {data['revenue']['total']} ({data['revenue']['growth']}%)")

Note:
    Nothing here writes to the database. All methods are static and
    return plain dictionaries suitable for serialization.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from django.db.models import Avg, Count, Sum
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.bookings.models import Booking, FULFILLED_STATUSES
from apps.reviews.models import Review
from .exceptions import InvalidTimeRangeError


TIME_RANGES = {
    '7days': timedelta(days=7),
    '30days': timedelta(days=30),
    '90days': timedelta(days=90),
    '1year': timedelta(days=365),
}

MONTH_LABELS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

TOP_SERVICES_LIMIT = 5
TOP_COUNTRIES_LIMIT = 5
MONTHS_OF_HISTORY = 6
UNKNOWN_COUNTRY = 'Unknown'


def growth_rate(current, previous) -> float:
    """Percentage change rounded to one decimal; 0 when there is no baseline."""
    if not previous:
        return 0.0
    return round(float((Decimal(current) - Decimal(previous)) / Decimal(previous) * 100), 1)


def trend(growth: float) -> str:
    return 'up' if growth >= 0 else 'down'


def _month_start(year: int, month: int, tzinfo) -> datetime:
    # Month arithmetic on a 1-based month that may have under/overflowed
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime(year, month, 1, tzinfo=tzinfo)


class AnalyticsQueries:
    """
    Aggregation queries for analytics endpoints.

    Methods:
        provider_analytics: Revenue, bookings, customers, rating, top
            services, top countries and monthly series for a provider.
    """

    @staticmethod
    def window(time_range, now=None):
        """
        Resolve ``time_range`` into the current and previous windows.

        Returns:
            tuple: ``(start, now, previous_start)`` where the current window
            is ``[start, now]`` and the previous one ``[previous_start, start)``.

        Raises:
            InvalidTimeRangeError: If ``time_range`` is not supported.
        """
        if time_range not in TIME_RANGES:
            raise InvalidTimeRangeError(
                f"Invalid time range: '{time_range}'. "
                f"Valid options: {', '.join(TIME_RANGES)}"
            )
        now = now or timezone.now()
        span = TIME_RANGES[time_range]
        start = now - span
        return start, now, start - span

    @staticmethod
    def provider_analytics(provider_id, time_range='30days', now=None):
        """
        Dashboard figures for one provider.

        Bookings created inside the window are considered. Revenue and
        booking counts use only confirmed or completed bookings; customers
        and countries use every booking in the window.

        Args:
            provider_id (UUID): Provider whose bookings are aggregated.
            time_range (str, optional): One of ``7days``, ``30days``,
                ``90days`` or ``1year``. Defaults to ``30days``.
            now (datetime, optional): End of the window. Defaults to now.

        Returns:
            dict: A dictionary containing:
                - revenue (dict): total, growth, trend.
                - bookings (dict): total, growth, trend.
                - customers (dict): total distinct travelers, growth 0,
                  trend ``neutral``.
                - rating (dict): average (one decimal), total rated
                  bookings, growth 0, trend ``neutral``.
                - top_services (list[dict]): name, bookings, revenue, rating.
                - top_countries (list[dict]): country, bookings, percentage.
                - monthly_data (list[dict]): month, revenue, bookings for
                  the last six calendar months, oldest first.

        Raises:
            InvalidTimeRangeError: If ``time_range`` is not supported.

        Note:
            Growth is ``round((current - previous) / previous * 100, 1)``
            and 0 when the previous window had nothing.
        """
        start, now, previous_start = AnalyticsQueries.window(time_range, now)

        provider_bookings = Booking.objects.filter(provider_id=provider_id)
        bookings = provider_bookings.filter(created_at__gte=start, created_at__lte=now)
        fulfilled = bookings.filter(status__in=FULFILLED_STATUSES)
        previous = provider_bookings.filter(
            created_at__gte=previous_start,
            created_at__lt=start,
            status__in=FULFILLED_STATUSES,
        )

        current_totals = fulfilled.aggregate(
            revenue=Coalesce(Sum('total_amount'), Decimal('0.00')),
            count=Count('id'),
        )
        previous_totals = previous.aggregate(
            revenue=Coalesce(Sum('total_amount'), Decimal('0.00')),
            count=Count('id'),
        )

        revenue_growth = growth_rate(current_totals['revenue'], previous_totals['revenue'])
        bookings_growth = growth_rate(current_totals['count'], previous_totals['count'])

        customers = bookings.order_by().values('traveler_id').distinct().count()

        ratings = Review.objects.filter(booking__in=bookings).aggregate(
            avg=Avg('rating'),
            count=Count('id'),
        )

        return {
            'revenue': {
                'total': current_totals['revenue'],
                'growth': revenue_growth,
                'trend': trend(revenue_growth),
            },
            'bookings': {
                'total': current_totals['count'],
                'growth': bookings_growth,
                'trend': trend(bookings_growth),
            },
            'customers': {
                'total': customers,
                'growth': 0,
                'trend': 'neutral',
            },
            'rating': {
                'average': round(float(ratings['avg']), 1) if ratings['avg'] is not None else 0,
                'total': ratings['count'],
                'growth': 0,
                'trend': 'neutral',
            },
            'top_services': AnalyticsQueries.top_services(fulfilled),
            'top_countries': AnalyticsQueries.top_countries(bookings),
            'monthly_data': AnalyticsQueries.monthly_data(provider_bookings, now),
        }

    @staticmethod
    def top_services(fulfilled, limit=TOP_SERVICES_LIMIT):
        """Best earning services among ``fulfilled`` bookings."""
        rows = list(
            fulfilled.order_by()
            .values('service_id', 'service__title')
            .annotate(bookings=Count('id'), revenue=Sum('total_amount'))
            .order_by('-revenue', 'service__title')[:limit]
        )

        service_ids = [row['service_id'] for row in rows]
        ratings = {
            row['service_id']: row['avg']
            for row in (
                Review.objects.filter(booking__in=fulfilled, service_id__in=service_ids)
                .order_by()
                .values('service_id')
                .annotate(avg=Avg('rating'))
            )
        }

        return [
            {
                'name': row['service__title'],
                'bookings': row['bookings'],
                'revenue': row['revenue'],
                'rating': round(float(ratings[row['service_id']]), 1) if ratings.get(row['service_id']) else 0,
            }
            for row in rows
        ]

    @staticmethod
    def top_countries(bookings, limit=TOP_COUNTRIES_LIMIT):
        """
        Traveler countries by booking count.

        Travelers without a country are grouped as ``Unknown``. The
        percentage is each country's share of all bookings in the window,
        rounded to an integer.
        """
        counts = {}
        for row in bookings.order_by().values('traveler__country').annotate(n=Count('id')):
            country = row['traveler__country'] or UNKNOWN_COUNTRY
            counts[country] = counts.get(country, 0) + row['n']

        total = sum(counts.values())
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:limit]

        return [
            {
                'country': country,
                'bookings': count,
                'percentage': round(count / total * 100) if total else 0,
            }
            for country, count in ranked
        ]

    @staticmethod
    def monthly_data(provider_bookings, now, months=MONTHS_OF_HISTORY):
        """
        Revenue and fulfilled booking count per calendar month.

        Covers ``months`` months ending with the one containing ``now``,
        oldest first, regardless of the selected window.
        """
        local_now = timezone.localtime(now)
        tz = local_now.tzinfo
        fulfilled = provider_bookings.filter(status__in=FULFILLED_STATUSES)

        series = []
        for offset in range(months - 1, -1, -1):
            month_start = _month_start(local_now.year, local_now.month - offset, tz)
            next_month = _month_start(month_start.year, month_start.month + 1, tz)
            totals = fulfilled.filter(
                created_at__gte=month_start,
                created_at__lt=next_month,
            ).aggregate(
                revenue=Coalesce(Sum('total_amount'), Decimal('0.00')),
                count=Count('id'),
            )
            series.append({
                'month': MONTH_LABELS[month_start.month - 1],
                'revenue': totals['revenue'],
                'bookings': totals['count'],
            })
        return series
