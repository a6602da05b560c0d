# citywheels/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .db import init_db
from .errors import register_error_handlers

from .routers import (
    drivers as drivers_router,
    passengers as passengers_router,
    vehicles as vehicles_router,
    rides as rides_router,
    payments as payments_router,
    records as records_router,
    health as health_router,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
)

app = FastAPI(title="CityWheels")

# --- CORS ---
allowed_origins = (
    [o.strip() for o in settings.ALLOWED_ORIGINS.split(",")]
    if settings.ALLOWED_ORIGINS
    else ["*"]
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Ошибки в формате {"success": false, "error": ...} ---
register_error_handlers(app)

# --- Подключение роутеров ---
app.include_router(drivers_router.router)
app.include_router(passengers_router.router)
app.include_router(vehicles_router.router)
app.include_router(rides_router.router)         # бронирование + поездки для отзывов
app.include_router(payments_router.router)
app.include_router(records_router.router)       # отзывы, промо, поддержка
app.include_router(health_router.router)


# --- Инициализация БД ---
@app.on_event("startup")
def on_startup():
    if settings.AUTO_CREATE_TABLES:
        init_db()
