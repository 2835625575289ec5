"""Endpoints that turn a professional's schedule text into bookable dates and slots."""

from typing import Any

from fastapi import APIRouter

from agenda.exceptions.api_exception import responses
from agenda.exceptions.schedule import MissingScheduleError, ScheduleUnavailableError
from agenda.logger import get_logger
from agenda.models import BookedSlot, Weekday, WeeklySchedule
from agenda.schemas.schedule import AvailableDate, DatesQuery, Overview, ScheduleText, Slot, SlotsQuery
from agenda.services.availability import available_dates, slots_for_date
from agenda.services.schedule_parser import parse_schedule
from agenda.services.slots import weekly_overview
from agenda.settings import settings
from agenda.utils.clock import local_timezone, today


router = APIRouter()

logger = get_logger(__name__)


def _parse(text: str | None) -> WeeklySchedule:
    try:
        schedule = parse_schedule(text)
    except MissingScheduleError:
        raise ScheduleUnavailableError from None

    for weekday in filter(schedule.malformed_days.__contains__, Weekday):
        logger.warning(f"Could not read the hours of {weekday.value}, treating the day as closed")
    for directive in sorted(schedule.defaulted_directives):
        logger.warning(f"Could not read the {directive} directive, using the default")

    return schedule


def _booked_slots(values: list[str]) -> list[BookedSlot]:
    tz = local_timezone(settings.timezone)
    out = []
    for value in values:
        if (slot := BookedSlot.parse(value, tz)) is None:
            logger.warning(f"Ignoring malformed appointment datetime {value!r}")
            continue
        out.append(slot)
    return out


@router.post("/schedule/overview", responses=responses(Overview, ScheduleUnavailableError))
async def get_overview(data: ScheduleText) -> Any:
    """
    Return the schedule of every weekday with its time slots.

    Slots within the lunch break are included but marked as unavailable.
    """

    schedule = _parse(data.schedule)
    return {
        "days": [day.serialize for day in weekly_overview(schedule).values()],
        "config": schedule.config.serialize,
    }


@router.post("/schedule/dates", responses=responses(list[AvailableDate], ScheduleUnavailableError))
async def get_available_dates(data: DatesQuery) -> Any:
    """Return the dates on which the professional works, starting today unless `start` is given."""

    schedule = _parse(data.schedule)
    horizon = data.horizon_days or settings.horizon_days
    start = data.start or today(local_timezone(settings.timezone))
    return [d.serialize for d in available_dates(schedule, horizon, start)]


@router.post("/schedule/slots", responses=responses(list[Slot], ScheduleUnavailableError))
async def get_slots(data: SlotsQuery) -> Any:
    """
    Return the time slots of the given date.

    Slots that start at the same time as one of the `booked` appointments are marked as unavailable.
    """

    schedule = _parse(data.schedule)
    return [slot.serialize for slot in slots_for_date(schedule, data.date, _booked_slots(data.booked))]
