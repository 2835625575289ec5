"""Slot generation for a single day of a weekly schedule."""

from dataclasses import replace

from agenda.models.schedule import DaySchedule, ScheduleConfig, TimeSlot, Weekday, WeeklySchedule
from agenda.utils.clock import from_minutes, to_minutes


def generate_slots(day: DaySchedule, config: ScheduleConfig) -> list[TimeSlot]:
    """
    Return the ordered time slots of an open day.

    A slot is emitted every `config.step_minutes` starting at the opening time, as long as a full consultation
    still ends before closing time. Slots inside the lunch break are kept but marked unavailable.
    """

    if not day.is_open or day.start_time is None or day.end_time is None:
        return []

    start, end = to_minutes(day.start_time), to_minutes(day.end_time)
    duration = config.consultation_duration_minutes
    step = config.step_minutes

    slots = []
    current = start
    while current + duration <= end:
        t = from_minutes(current)
        lunch = config.lunch_break is not None and config.lunch_break.contains(t)
        slots.append(TimeSlot(time=t, is_available=not lunch, is_lunch_break=lunch))
        current += step

    return slots


def with_slots(day: DaySchedule, config: ScheduleConfig) -> DaySchedule:
    return replace(day, slots=tuple(generate_slots(day, config)))


def weekly_overview(schedule: WeeklySchedule) -> dict[Weekday, DaySchedule]:
    return {weekday: with_slots(schedule[weekday], schedule.config) for weekday in Weekday}
