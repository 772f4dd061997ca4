from enum import Enum


class Sentiment(str, Enum):
    """Coarse tone of a call. Anything that is not positive or negative is
    neutral."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @classmethod
    def classify(cls, raw: str) -> "Sentiment":
        value = raw.lower()
        if value == cls.POSITIVE.value:
            return cls.POSITIVE
        if value == cls.NEGATIVE.value:
            return cls.NEGATIVE
        return cls.NEUTRAL
