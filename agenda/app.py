import sentry_sdk
from fastapi import FastAPI

from agenda.endpoints import schedule
from agenda.exceptions.api_exception import APIException, api_exception_handler
from agenda.logger import get_logger
from agenda.settings import settings


logger = get_logger(__name__)

if settings.sentry_dsn:
    logger.debug("initializing sentry")
    sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.sentry_environment)


app = FastAPI(title="Clinic Agenda", root_path=settings.root_path, debug=settings.debug)
app.include_router(schedule.router, tags=["schedule"])
app.add_exception_handler(APIException, api_exception_handler)  # type: ignore
