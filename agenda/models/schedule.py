from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass, field
from datetime import date, datetime, time, tzinfo
from typing import Any

from agenda.utils.clock import format_time, to_minutes


DEFAULT_CONSULTATION_DURATION = 30  # minutes
DEFAULT_INTER_PATIENT_INTERVAL = 5  # minutes


class Weekday(enum.Enum):
    SEGUNDA = "Segunda"
    TERCA = "Terça"
    QUARTA = "Quarta"
    QUINTA = "Quinta"
    SEXTA = "Sexta"
    SABADO = "Sábado"
    DOMINGO = "Domingo"

    @classmethod
    def from_date(cls, d: date) -> Weekday:
        return _WEEKDAYS[d.weekday()]

    @classmethod
    def lookup(cls, name: str) -> Weekday | None:
        return _BY_NAME.get(unicodedata.normalize("NFC", name).strip().casefold())


_WEEKDAYS: list[Weekday] = list(Weekday)
_BY_NAME: dict[str, Weekday] = {day.value.casefold(): day for day in Weekday}


@dataclass(frozen=True)
class TimeSlot:
    time: time
    is_available: bool
    is_lunch_break: bool = False

    @property
    def label(self) -> str:
        return format_time(self.time)

    @property
    def serialize(self) -> dict[str, Any]:
        return {"time": self.label, "available": self.is_available, "lunch_break": self.is_lunch_break}


@dataclass(frozen=True)
class LunchBreak:
    start: time
    end: time

    def contains(self, t: time) -> bool:
        return to_minutes(self.start) <= to_minutes(t) < to_minutes(self.end)

    @property
    def serialize(self) -> dict[str, Any]:
        return {"start": format_time(self.start), "end": format_time(self.end)}


@dataclass(frozen=True)
class ScheduleConfig:
    consultation_duration_minutes: int = DEFAULT_CONSULTATION_DURATION
    inter_patient_interval_minutes: int = DEFAULT_INTER_PATIENT_INTERVAL
    lunch_break: LunchBreak | None = None

    @property
    def step_minutes(self) -> int:
        return max(self.consultation_duration_minutes + self.inter_patient_interval_minutes, 1)

    @property
    def serialize(self) -> dict[str, Any]:
        return {
            "consultation_duration": self.consultation_duration_minutes,
            "inter_patient_interval": self.inter_patient_interval_minutes,
            "lunch_break": self.lunch_break.serialize if self.lunch_break else None,
        }


@dataclass(frozen=True)
class DaySchedule:
    weekday: Weekday
    is_open: bool = False
    start_time: time | None = None
    end_time: time | None = None
    slots: tuple[TimeSlot, ...] = ()

    @classmethod
    def closed(cls, weekday: Weekday) -> DaySchedule:
        return cls(weekday=weekday)

    @property
    def serialize(self) -> dict[str, Any]:
        return {
            "weekday": self.weekday.value,
            "is_open": self.is_open,
            "start": format_time(self.start_time) if self.start_time is not None else None,
            "end": format_time(self.end_time) if self.end_time is not None else None,
            "slots": [slot.serialize for slot in self.slots],
        }


@dataclass(frozen=True)
class WeeklySchedule:
    """
    Structured form of a professional's weekly schedule text.

    `malformed_days` lists the days whose line was present but could not be read and
    `defaulted_directives` the directives that fell back to their default value, so
    that callers can report what was ignored.
    """

    days: dict[Weekday, DaySchedule]
    config: ScheduleConfig = field(default_factory=ScheduleConfig)
    malformed_days: frozenset[Weekday] = frozenset()
    defaulted_directives: frozenset[str] = frozenset()

    def __getitem__(self, weekday: Weekday) -> DaySchedule:
        return self.days[weekday]

    @property
    def open_days(self) -> list[Weekday]:
        return [day for day in Weekday if self.days[day].is_open]


@dataclass(frozen=True)
class BookedSlot:
    date: date
    time: time

    @property
    def key(self) -> tuple[date, str]:
        return self.date, format_time(self.time)

    @classmethod
    def from_datetime(cls, dt: datetime, tz: tzinfo | None = None) -> BookedSlot:
        if tz is not None and dt.tzinfo is not None:
            dt = dt.astimezone(tz)
        return cls(date=dt.date(), time=dt.time().replace(second=0, microsecond=0))

    @classmethod
    def parse(cls, value: str, tz: tzinfo | None = None) -> BookedSlot | None:
        try:
            dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except (AttributeError, ValueError):
            return None
        return cls.from_datetime(dt, tz)


@dataclass(frozen=True)
class AvailableDate:
    date: date
    weekday: Weekday
    schedule: DaySchedule

    @property
    def serialize(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "weekday": self.weekday.value,
            "start": format_time(self.schedule.start_time) if self.schedule.start_time is not None else None,
            "end": format_time(self.schedule.end_time) if self.schedule.end_time is not None else None,
        }
