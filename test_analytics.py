from datetime import date, datetime, timedelta, timezone

import pytest

from app.models.enums import Sentiment
from app.services.analytics_service import aggregate, get_dashboard
from conftest import InMemoryCallStore, make_call

AS_OF = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def _at(day: int, hour: int = 12) -> datetime:
    return datetime(2024, 1, day, hour, 0, tzinfo=timezone.utc)


# ── Success rate & totals ────────────────────────────────

def test_empty_history():
    snap = aggregate([], as_of=AS_OF)
    assert snap.success_rate == 0
    assert snap.total_calls == 0
    assert snap.sentiment_distribution.model_dump() == {
        "positive": 0, "negative": 0, "neutral": 0,
    }
    assert len(snap.daily_averages) == 7
    assert all(
        d.avg_duration == 0
        and d.avg_offer_iterations == 0
        and d.avg_offer_difference == 0
        for d in snap.daily_averages
    )


def test_success_rate_two_of_three():
    calls = [
        make_call("a", successful=True),
        make_call("b", successful=False),
        make_call("c", successful=True),
    ]
    snap = aggregate(calls, as_of=AS_OF)
    assert snap.success_rate == pytest.approx(200 / 3)
    assert snap.total_calls == 3


def test_success_rate_counts_calls_outside_daily_window():
    calls = [
        make_call("old", successful=True, created_at=_at(1)),
        make_call("new", successful=False, created_at=_at(15)),
    ]
    snap = aggregate(calls, as_of=AS_OF)
    assert snap.success_rate == 50
    assert snap.total_calls == 2


# ── Sentiment ────────────────────────────────────────────

def test_sentiment_classification_is_case_insensitive():
    assert Sentiment.classify("POSITIVE") is Sentiment.POSITIVE
    assert Sentiment.classify("Negative") is Sentiment.NEGATIVE
    assert Sentiment.classify("frustrated") is Sentiment.NEUTRAL
    assert Sentiment.classify("positive ") is Sentiment.NEUTRAL
    assert Sentiment.classify("") is Sentiment.NEUTRAL


def test_sentiment_counts_sum_to_total():
    raw = ["Positive", "NEGATIVE", "neutral", "frustrated", "positive ", "", "negative"]
    calls = [make_call(f"c{i}", sentiment=s) for i, s in enumerate(raw)]
    dist = aggregate(calls, as_of=AS_OF).sentiment_distribution
    assert (dist.positive, dist.negative, dist.neutral) == (1, 2, 4)
    assert dist.positive + dist.negative + dist.neutral == len(calls)


# ── Daily averages ───────────────────────────────────────

def test_daily_averages_cover_last_seven_days_ending_today():
    snap = aggregate([make_call(created_at=_at(3))], as_of=AS_OF)
    dates = [d.date for d in snap.daily_averages]
    expected = [(date(2024, 1, 9) + timedelta(days=i)).isoformat() for i in range(7)]
    assert dates == expected


def test_daily_averages_per_day_means():
    calls = [
        make_call("a", duration=100, offer_iterations=1,
                  final_offer=4000, final_counter_offer=4200, created_at=_at(15, 1)),
        make_call("b", duration=200, offer_iterations=3,
                  final_offer=3000, final_counter_offer=2900, created_at=_at(15, 23)),
        make_call("c", duration=60, offer_iterations=4,
                  final_offer=2500, final_counter_offer=2500, created_at=_at(10)),
    ]
    by_date = {d.date: d for d in aggregate(calls, as_of=AS_OF).daily_averages}

    today = by_date["2024-01-15"]
    assert today.avg_duration == 150
    assert today.avg_offer_iterations == 2
    assert today.avg_offer_difference == 150

    earlier = by_date["2024-01-10"]
    assert (earlier.avg_duration, earlier.avg_offer_iterations,
            earlier.avg_offer_difference) == (60, 4, 0)

    empty = by_date["2024-01-12"]
    assert (empty.avg_duration, empty.avg_offer_iterations,
            empty.avg_offer_difference) == (0, 0, 0)


def test_daily_averages_ignore_calls_outside_window():
    calls = [
        make_call("too-old", duration=999, created_at=_at(8)),
        make_call("future", duration=999, created_at=_at(16)),
        make_call("first-day", duration=30, created_at=_at(9, 0)),
    ]
    snap = aggregate(calls, as_of=AS_OF)
    assert snap.daily_averages[0].date == "2024-01-09"
    assert snap.daily_averages[0].avg_duration == 30
    assert all(d.avg_duration != 999 for d in snap.daily_averages)
    assert snap.total_calls == 3


def test_daily_grouping_uses_utc_calendar_date():
    # 23:30 in New York on the 14th is the 15th in UTC
    late = datetime(2024, 1, 14, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    # 08:00 on the 16th in Sydney is still the 15th in UTC
    as_of = datetime(2024, 1, 16, 8, 0, tzinfo=timezone(timedelta(hours=10)))
    snap = aggregate([make_call(duration=90, created_at=late)], as_of=as_of)
    assert snap.daily_averages[-1].date == "2024-01-15"
    assert snap.daily_averages[-1].avg_duration == 90


def test_snapshot_serializes_with_camel_case_keys():
    body = aggregate([make_call()], as_of=AS_OF).model_dump(by_alias=True)
    assert set(body) == {
        "successRate", "sentimentDistribution", "dailyAverages", "totalCalls",
    }
    assert set(body["dailyAverages"][0]) == {
        "date", "avgDuration", "avgOfferIterations", "avgOfferDifference",
    }


# ── get_dashboard ────────────────────────────────────────

def test_get_dashboard_reads_call_store():
    store = InMemoryCallStore([
        make_call("a", successful=True),
        make_call("b", successful=False, sentiment="Negative"),
    ])
    snap = get_dashboard(store, as_of=AS_OF)
    assert snap.total_calls == 2
    assert snap.success_rate == 50
    assert snap.sentiment_distribution.negative == 1
