from collections import defaultdict
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional

from app.db.stores import CallStore
from app.models.call import CallRecord
from app.models.dashboard import DailyAverage, DashboardSnapshot, SentimentDistribution
from app.models.enums import Sentiment

WINDOW_DAYS = 7


def _utc_date(dt: datetime) -> date:
    """Calendar day of a timestamp; naive timestamps are taken as UTC."""
    if dt.tzinfo is None:
        return dt.date()
    return dt.astimezone(timezone.utc).date()


# ── Success rate & sentiment ─────────────────────────────────────────────────

def _success_rate(calls: list[CallRecord]) -> float:
    if not calls:
        return 0
    successful = sum(1 for c in calls if c.successful)
    return successful / len(calls) * 100


def _sentiment_distribution(calls: list[CallRecord]) -> SentimentDistribution:
    counts = {s: 0 for s in Sentiment}
    for c in calls:
        counts[Sentiment.classify(c.sentiment)] += 1
    return SentimentDistribution(
        positive=counts[Sentiment.POSITIVE],
        negative=counts[Sentiment.NEGATIVE],
        neutral=counts[Sentiment.NEUTRAL],
    )


# ── Daily averages ───────────────────────────────────────────────────────────

def _average_day(day: date, calls: list[CallRecord]) -> DailyAverage:
    n = len(calls)
    return DailyAverage(
        date=day.isoformat(),
        avg_duration=sum(c.duration for c in calls) / n,
        avg_offer_iterations=sum(c.offer_iterations for c in calls) / n,
        avg_offer_difference=sum(
            abs(c.final_offer - c.final_counter_offer) for c in calls
        ) / n,
    )


def _daily_averages(calls: list[CallRecord], today: date) -> list[DailyAverage]:
    """One entry per day from today-6 to today; empty days are all zeros."""
    first_day = today - timedelta(days=WINDOW_DAYS - 1)

    by_day: dict[date, list[CallRecord]] = defaultdict(list)
    for c in calls:
        day = _utc_date(c.created_at)
        if first_day <= day <= today:
            by_day[day].append(c)

    days = [first_day + timedelta(days=i) for i in range(WINDOW_DAYS)]
    return [
        _average_day(d, by_day[d]) if d in by_day else DailyAverage(date=d.isoformat())
        for d in days
    ]


# ── Public entry points ──────────────────────────────────────────────────────

def aggregate(
    records: Iterable[CallRecord],
    as_of: Optional[datetime] = None,
) -> DashboardSnapshot:
    calls = list(records)
    today = _utc_date(as_of or datetime.now(timezone.utc))

    return DashboardSnapshot(
        success_rate=_success_rate(calls),
        sentiment_distribution=_sentiment_distribution(calls),
        daily_averages=_daily_averages(calls, today),
        total_calls=len(calls),
    )


def get_dashboard(
    call_store: CallStore,
    as_of: Optional[datetime] = None,
) -> DashboardSnapshot:
    return aggregate(call_store.all(), as_of=as_of)
