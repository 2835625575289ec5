from starlette import status

from agenda.exceptions.api_exception import APIException


class MissingScheduleError(ValueError):
    """Raised when there is no schedule text to parse at all."""

    def __init__(self) -> None:
        super().__init__("schedule text is missing")


class ScheduleUnavailableError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Schedule not available"
    description = "The professional has no schedule information."
