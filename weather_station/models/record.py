"""Append-only store of completed submissions."""

import json
from collections.abc import Iterator
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from weather_station.logic.classify import DisplayTag
from weather_station.models.weather import WeatherOutcome


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Record(BaseModel):
    """One submission: the picked pair, its lookup outcome and display tag."""

    model_config = ConfigDict(frozen=True)

    country: str
    city: str
    outcome: WeatherOutcome
    tag: DisplayTag
    created_at: datetime = Field(default_factory=_utcnow)


class RecordStore:
    """Ordered, append-only list of records.

    The column views (countries, cities, outcomes, tags) are derived from
    the same list, so index k refers to the same submission in all of them.
    """

    def __init__(self):
        self._records: list[Record] = []

    def append(self, record: Record) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    @property
    def countries(self) -> tuple[str, ...]:
        return tuple(r.country for r in self._records)

    @property
    def cities(self) -> tuple[str, ...]:
        return tuple(r.city for r in self._records)

    @property
    def outcomes(self) -> tuple[WeatherOutcome, ...]:
        return tuple(r.outcome for r in self._records)

    @property
    def tags(self) -> tuple[DisplayTag, ...]:
        return tuple(r.tag for r in self._records)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(
            [r.model_dump(mode="json") for r in self._records],
            indent=indent, ensure_ascii=False,
        )
