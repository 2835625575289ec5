import datetime

from pydantic import BaseModel, Field


class Slot(BaseModel):
    time: str = Field(description="Start time of the slot (HH:MM)")
    available: bool = Field(description="Whether the slot can be booked")
    lunch_break: bool = Field(description="Whether the slot lies within the lunch break")


class LunchBreak(BaseModel):
    start: str = Field(description="Start of the lunch break (HH:MM)")
    end: str = Field(description="End of the lunch break (HH:MM), exclusive")


class ScheduleConfig(BaseModel):
    consultation_duration: int = Field(description="Duration of a consultation in minutes")
    inter_patient_interval: int = Field(description="Interval between two patients in minutes")
    lunch_break: LunchBreak | None = Field(None, description="Daily lunch break")


class Day(BaseModel):
    weekday: str = Field(description="Name of the weekday (Segunda, Terça, ...)")
    is_open: bool = Field(description="Whether the professional works on this day")
    start: str | None = Field(None, description="Opening time (HH:MM)")
    end: str | None = Field(None, description="Closing time (HH:MM)")
    slots: list[Slot] = Field(description="Time slots of the day")


class Overview(BaseModel):
    days: list[Day] = Field(description="Schedule of every weekday, Monday first")
    config: ScheduleConfig = Field(description="Settings shared by all days")


class AvailableDate(BaseModel):
    date: str = Field(description="Calendar date (YYYY-MM-DD)")
    weekday: str = Field(description="Name of the weekday")
    start: str | None = Field(None, description="Opening time (HH:MM)")
    end: str | None = Field(None, description="Closing time (HH:MM)")


class ScheduleText(BaseModel):
    schedule: str | None = Field(None, description="Free text weekly schedule of the professional")


class DatesQuery(ScheduleText):
    start: datetime.date | None = Field(None, description="First date to consider (defaults to today)")
    horizon_days: int | None = Field(None, ge=1, le=366, description="Number of days to look ahead")


class SlotsQuery(ScheduleText):
    date: datetime.date = Field(description="Date to generate the slots for")
    booked: list[str] = Field([], description="Start datetimes (ISO 8601) of the existing appointments")
