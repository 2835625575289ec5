from datetime import date, time

import pytest

from agenda.models import BookedSlot, DaySchedule, LunchBreak, ScheduleConfig, TimeSlot, Weekday
from agenda.services import availability
from agenda.services.availability import available_dates, filter_booked, slots_for_date
from agenda.services.schedule_parser import parse_schedule
from agenda.services.slots import generate_slots


MONDAY = date(2025, 6, 2)

SCHEDULE = parse_schedule(
    "Segunda: 8h:00 às 13h00\n"
    "Terça: ❌ Agenda Fechada\n"
    "Quinta: 14h às 18h\n"
    "Duração da Consulta: 60 Minutos\n"
    "Intervalo entre Pacientes para atendimento: 5 minutos\n"
    "intervalo para o almoço: 12 às 13h00\n"
)


@pytest.fixture
def slots() -> list[TimeSlot]:
    day = DaySchedule(weekday=Weekday.SEGUNDA, is_open=True, start_time=time(8, 0), end_time=time(12, 0))
    return generate_slots(day, ScheduleConfig(30, 5, LunchBreak(time(10, 0), time(11, 0))))


def test__filter_booked(slots: list[TimeSlot]) -> None:
    booked = {BookedSlot(MONDAY, time(8, 35)), BookedSlot(MONDAY, time(11, 30))}

    result = filter_booked(slots, MONDAY, booked)

    assert [slot.time for slot in result] == [slot.time for slot in slots]
    assert [slot.label for slot in result if slot.is_available] == ["08:00", "09:10", "09:45"]


def test__filter_booked_keeps_lunch_flag(slots: list[TimeSlot]) -> None:
    result = filter_booked(slots, MONDAY, [BookedSlot(MONDAY, time(10, 20))])

    slot = next(slot for slot in result if slot.label == "10:20")
    assert slot.is_lunch_break
    assert not slot.is_available


def test__filter_booked_other_date(slots: list[TimeSlot]) -> None:
    result = filter_booked(slots, MONDAY, [BookedSlot(date(2025, 6, 9), time(8, 0))])

    assert result == slots


def test__filter_booked_ignores_unmatched_times(slots: list[TimeSlot]) -> None:
    result = filter_booked(slots, MONDAY, [BookedSlot(MONDAY, time(8, 1)), BookedSlot(MONDAY, time(23, 0))])

    assert result == slots


def test__filter_booked_is_idempotent(slots: list[TimeSlot]) -> None:
    booked = [BookedSlot(MONDAY, time(8, 0)), BookedSlot(MONDAY, time(9, 45))]

    once = filter_booked(slots, MONDAY, booked)

    assert filter_booked(once, MONDAY, booked) == once


def test__filter_booked_never_reenables(slots: list[TimeSlot]) -> None:
    small = [BookedSlot(MONDAY, time(8, 0))]
    large = [*small, BookedSlot(MONDAY, time(9, 10))]

    with_small = filter_booked(slots, MONDAY, small)
    with_large = filter_booked(with_small, MONDAY, large)

    for a, b in zip(with_small, with_large):
        assert a.is_available or not b.is_available
    assert filter_booked(slots, MONDAY, []) == slots


def test__filter_booked_accepts_generator(slots: list[TimeSlot]) -> None:
    result = filter_booked(iter(slots), MONDAY, (BookedSlot(MONDAY, t) for t in [time(8, 0)]))

    assert not result[0].is_available
    assert len(result) == len(slots)


def test__available_dates() -> None:
    result = available_dates(SCHEDULE, horizon_days=14, start=MONDAY)

    assert [d.date for d in result] == [date(2025, 6, 2), date(2025, 6, 5), date(2025, 6, 9), date(2025, 6, 12)]
    assert [d.weekday for d in result] == [Weekday.SEGUNDA, Weekday.QUINTA, Weekday.SEGUNDA, Weekday.QUINTA]
    assert result[0].schedule == SCHEDULE[Weekday.SEGUNDA]


def test__available_dates_includes_start() -> None:
    result = available_dates(SCHEDULE, horizon_days=1, start=MONDAY)

    assert [d.date for d in result] == [MONDAY]


def test__available_dates_excludes_horizon_end() -> None:
    result = available_dates(SCHEDULE, horizon_days=7, start=date(2025, 6, 6))

    assert [d.date for d in result] == [date(2025, 6, 9), date(2025, 6, 12)]


@pytest.mark.parametrize("horizon_days", [0, -3])
def test__available_dates_empty_horizon(horizon_days: int) -> None:
    assert available_dates(SCHEDULE, horizon_days=horizon_days, start=MONDAY) == []


def test__available_dates_all_closed() -> None:
    assert available_dates(parse_schedule("Segunda: fechado"), start=MONDAY) == []


def test__available_dates_defaults_to_today(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(availability, "today", lambda: date(2025, 6, 3))

    result = available_dates(SCHEDULE)

    assert result[0].date == date(2025, 6, 5)
    assert all(date(2025, 6, 3) <= d.date < date(2025, 7, 3) for d in result)
    assert len(result) == 8


def test__slots_for_date() -> None:
    result = slots_for_date(SCHEDULE, MONDAY, [BookedSlot(MONDAY, time(9, 5))])

    assert [(slot.label, slot.is_available) for slot in result] == [
        ("08:00", True),
        ("09:05", False),
        ("10:10", True),
        ("11:15", True),
    ]


def test__slots_for_closed_date() -> None:
    assert slots_for_date(SCHEDULE, date(2025, 6, 3)) == []
