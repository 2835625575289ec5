from typing import Any, Type

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class APIException(HTTPException):
    status_code: int
    detail: Any
    description: str

    def __init__(self) -> None:
        super().__init__(self.status_code, self.detail)


async def api_exception_handler(_: Request, exc: APIException) -> JSONResponse:
    return JSONResponse({"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers)


def responses(default: Type[BaseModel] | Type[Any] | None = None, *args: Type[APIException]) -> dict[int | str, Any]:
    """Build the OpenAPI `responses` mapping of a route from the exceptions it may raise."""

    exceptions: dict[int, list[Type[APIException]]] = {}
    for exc in args:
        exceptions.setdefault(exc.status_code, []).append(exc)

    out: dict[int | str, Any] = {}
    for status_code, excs in exceptions.items():
        examples = {exc.__name__: {"description": exc.description, "value": {"detail": exc.detail}} for exc in excs}
        out[status_code] = {
            "description": " / ".join(exc.description for exc in excs),
            "content": {"application/json": {"examples": examples}},
        }

    if default is not None:
        out[200] = {"model": default}

    return out
