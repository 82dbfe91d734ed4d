"""Hour Kind Enum."""

from enum import Enum


class HourKind(str, Enum):
    """영업시간 규칙 종류."""

    REGULAR = "regular"
    DELIVERY = "delivery"
