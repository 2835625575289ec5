"""
Parser for the free-text weekly schedule stored on a professional's record.

The text is a line based format, for example:

    Segunda: 8h:00 às 13h00
    Terça: ❌ Agenda Fechada
    Duração da Consulta: 60 Minutos
    Intervalo entre Pacientes para atendimento: 5 minutos
    intervalo para o almoço: 12 às 13h00

Lines that cannot be understood are ignored. A weekday without a readable line is closed.
"""

import re
import unicodedata
from datetime import time

from agenda.exceptions.schedule import MissingScheduleError
from agenda.models.schedule import (
    DEFAULT_CONSULTATION_DURATION,
    DEFAULT_INTER_PATIENT_INTERVAL,
    DaySchedule,
    LunchBreak,
    ScheduleConfig,
    Weekday,
    WeeklySchedule,
)
from agenda.utils.clock import clock_time, to_minutes


DURATION_DIRECTIVE = re.compile(r"duração d[ae] consulta", re.IGNORECASE)
INTERVAL_DIRECTIVE = re.compile(r"intervalo entre pacientes", re.IGNORECASE)
LUNCH_DIRECTIVE = re.compile(r"intervalo (?:para o )?almoço", re.IGNORECASE)
CLOSED_MARKERS = ("❌", "fechado", "agenda fechada")

MINUTES_PATTERN = re.compile(r"(\d+)\s*minutos?", re.IGNORECASE)
# an hour never starts right after a digit or a colon, so "8:00h" cannot be read from its minutes
DAY_RANGE_PATTERN = re.compile(
    r"(?<![\d:])(\d{1,2})h?:?(\d{2})?h?\s*[àa]s\s*(\d{1,2})h?:?(\d{2})?h?", re.IGNORECASE
)
LUNCH_RANGE_PATTERN = re.compile(
    r"(?<![\d:])(\d{1,2})h?(?::?(\d{2}))?h?\s*(?:[àa]s|a|-)\s*(\d{1,2})h?(?::?(\d{2}))?h?", re.IGNORECASE
)


def parse_schedule(text: str | None) -> WeeklySchedule:
    if text is None:
        raise MissingScheduleError

    lines = unicodedata.normalize("NFC", text).splitlines()
    defaulted: set[str] = set()

    duration_text = _directive(lines, DURATION_DIRECTIVE)
    duration = _parse_minutes(duration_text, minimum=1)
    if duration is None:
        if duration_text is not None:
            defaulted.add("duration")
        duration = DEFAULT_CONSULTATION_DURATION

    interval_text = _directive(lines, INTERVAL_DIRECTIVE)
    interval = _parse_minutes(interval_text, minimum=0)
    if interval is None:
        if interval_text is not None:
            defaulted.add("interval")
        interval = DEFAULT_INTER_PATIENT_INTERVAL

    lunch_text = _directive(lines, LUNCH_DIRECTIVE)
    lunch_break = _parse_lunch_break(lunch_text)
    if lunch_text is not None and lunch_break is None:
        defaulted.add("lunch_break")

    config = ScheduleConfig(
        consultation_duration_minutes=duration,
        inter_patient_interval_minutes=interval,
        lunch_break=lunch_break,
    )

    days = {weekday: DaySchedule.closed(weekday) for weekday in Weekday}
    malformed: set[Weekday] = set()
    for line in lines:
        if ":" not in line:
            continue

        name, _, rest = line.partition(":")
        weekday = Weekday.lookup(name)
        if weekday is None:
            continue

        # a repeated day overwrites the earlier line
        days[weekday] = day = parse_day(weekday, rest)
        if day.is_open or _is_closed(rest):
            malformed.discard(weekday)
        else:
            malformed.add(weekday)

    return WeeklySchedule(
        days=days, config=config, malformed_days=frozenset(malformed), defaulted_directives=frozenset(defaulted)
    )


def parse_day(weekday: Weekday, text: str) -> DaySchedule:
    """Read the part of a day line after the colon. Anything unreadable means closed."""

    if _is_closed(text):
        return DaySchedule.closed(weekday)

    match = DAY_RANGE_PATTERN.search(text)
    if not match:
        return DaySchedule.closed(weekday)

    start, end = _match_range(match)
    if start is None or end is None:
        return DaySchedule.closed(weekday)

    return DaySchedule(weekday=weekday, is_open=True, start_time=start, end_time=end)


def _is_closed(text: str) -> bool:
    text = text.lower()
    return any(marker in text for marker in CLOSED_MARKERS)


def _directive(lines: list[str], keyword: re.Pattern[str]) -> str | None:
    """Return what follows the keyword on the first line that mentions it."""

    for line in lines:
        if match := keyword.search(line):
            return line[match.end() :]
    return None


def _parse_minutes(text: str | None, minimum: int) -> int | None:
    if text is None or not (match := MINUTES_PATTERN.search(text)):
        return None
    minutes = int(match.group(1))
    return minutes if minutes >= minimum else None


def _parse_lunch_break(text: str | None) -> LunchBreak | None:
    if text is None or not (match := LUNCH_RANGE_PATTERN.search(text)):
        return None

    start, end = _match_range(match)
    if start is None or end is None or to_minutes(start) >= to_minutes(end):
        return None

    return LunchBreak(start=start, end=end)


def _match_range(match: re.Match[str]) -> tuple[time | None, time | None]:
    start_hour, start_minute, end_hour, end_minute = match.groups()
    return clock_time(start_hour, start_minute), clock_time(end_hour, end_minute)
