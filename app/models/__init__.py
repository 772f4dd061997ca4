from app.models.enums import Sentiment
from app.models.load import Load, LoadDetails
from app.models.negotiation import NegotiationRequest, NegotiationResponse
from app.models.call import CallDataRequest, CallDataResponse, CallRecord
from app.models.dashboard import DailyAverage, DashboardSnapshot, SentimentDistribution

__all__ = [
    "Sentiment",
    "Load",
    "LoadDetails",
    "NegotiationRequest",
    "NegotiationResponse",
    "CallDataRequest",
    "CallDataResponse",
    "CallRecord",
    "DailyAverage",
    "DashboardSnapshot",
    "SentimentDistribution",
]
