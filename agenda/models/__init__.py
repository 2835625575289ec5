from .schedule import (
    AvailableDate,
    BookedSlot,
    DaySchedule,
    LunchBreak,
    ScheduleConfig,
    TimeSlot,
    Weekday,
    WeeklySchedule,
)


__all__ = [
    "AvailableDate",
    "BookedSlot",
    "DaySchedule",
    "LunchBreak",
    "ScheduleConfig",
    "TimeSlot",
    "Weekday",
    "WeeklySchedule",
]
