"""Domain models for prizes."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class PrizeStatus(StrEnum):
    UPCOMING = "upcoming"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Prize:
    id: str
    title: str
    value: float
    status: PrizeStatus
    start_date: datetime
    competition_id: str | None = None
    winner_id: str | None = None


@dataclass(frozen=True)
class PrizeStats:
    total_prizes: int
    total_value: float
    completed_prizes: int
