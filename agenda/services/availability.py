from dataclasses import replace
from datetime import date, timedelta
from typing import Iterable

from agenda.models.schedule import AvailableDate, BookedSlot, TimeSlot, Weekday, WeeklySchedule
from agenda.services.slots import generate_slots
from agenda.utils.clock import today


def filter_booked(slots: Iterable[TimeSlot], day: date, booked: Iterable[BookedSlot]) -> list[TimeSlot]:
    """
    Mark the slots that collide with an existing appointment on `day` as unavailable.

    The lunch break flag is left untouched, so a slot can be both booked and in the lunch break.
    """

    taken = {slot.key for slot in booked}
    return [replace(slot, is_available=False) if (day, slot.label) in taken else slot for slot in slots]


def available_dates(schedule: WeeklySchedule, horizon_days: int = 30, start: date | None = None) -> list[AvailableDate]:
    """Return the open dates among the next `horizon_days` calendar days, `start` included."""

    start = start or today()
    out = []
    for offset in range(max(horizon_days, 0)):
        d = start + timedelta(days=offset)
        weekday = Weekday.from_date(d)
        if (day := schedule[weekday]).is_open:
            out.append(AvailableDate(date=d, weekday=weekday, schedule=day))
    return out


def slots_for_date(schedule: WeeklySchedule, day: date, booked: Iterable[BookedSlot] = ()) -> list[TimeSlot]:
    slots = generate_slots(schedule[Weekday.from_date(day)], schedule.config)
    return filter_booked(slots, day, booked)
