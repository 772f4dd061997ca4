from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SentimentDistribution(BaseModel):
    positive: int = 0
    negative: int = 0
    neutral: int = 0


class DailyAverage(BaseModel):
    model_config = _CAMEL

    date: str
    avg_duration: float = 0
    avg_offer_iterations: float = 0
    avg_offer_difference: float = 0


class DashboardSnapshot(BaseModel):
    model_config = _CAMEL

    success_rate: float
    sentiment_distribution: SentimentDistribution
    daily_averages: list[DailyAverage]
    total_calls: int
