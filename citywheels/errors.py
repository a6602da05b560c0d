# citywheels/errors.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ---------- ошибки сервисного слоя ----------

class MissingFieldsError(ValueError):
    """Не пришли обязательные поля. missing: {поле: True/False}."""

    def __init__(self, missing: dict[str, bool]):
        super().__init__("Missing required fields")
        self.missing = missing


class DuplicateError(ValueError):
    pass


class VehicleUnavailableError(LookupError):
    def __init__(self, vehicle_id: int):
        super().__init__("Vehicle not found or not available")
        self.vehicle_id = vehicle_id


# ---------- ошибки HTTP-слоя ----------

class ApiError(Exception):
    """
    Ошибка, которую роутер отдаёт клиенту как
    {"success": false, "error": ..., "details": ...}.
    """

    def __init__(self, status_code: int, error: str, details: Any = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def client_error(exc: Exception) -> ApiError:
    if isinstance(exc, MissingFieldsError):
        return ApiError(status.HTTP_400_BAD_REQUEST, str(exc), {"missing": exc.missing})
    return ApiError(status.HTTP_400_BAD_REQUEST, str(exc))


def store_error(error: str, exc: Exception) -> ApiError:
    # сообщение драйвера БД оставляем в details для диагностики
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, error, str(exc))


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    body: dict[str, Any] = {"success": False, "error": exc.error}
    if exc.details is not None:
        body["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
