# citywheels/services/rides.py
from __future__ import annotations

import logging
from typing import NamedTuple

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from ..config import settings
from ..db import atomic
from ..errors import VehicleUnavailableError
from ..models import Availability, Driver, Passenger, Ride, RideStatus, Vehicle
from ..utils.payload import as_int, require_fields

logger = logging.getLogger(__name__)

BOOKING_FIELDS = ("pickUpLocation", "dropOffLocation", "passenger", "driver", "vehicle")


class PassengerNotFoundError(LookupError):
    pass


class DriverMismatchError(ValueError):
    pass


class Booking(NamedTuple):
    ride: Ride
    driver: Driver
    vehicle: Vehicle


def compute_fare(distance_units: int | None = None) -> int:
    """
    Тариф: база + стоимость единицы расстояния * число единиц.
    Реального расстояния пока нет, берём фиксированное число единиц из настроек.
    """
    units = settings.FIXED_DISTANCE_UNITS if distance_units is None else distance_units
    return settings.BASE_FARE + settings.DISTANCE_FARE * units


def _available_vehicle(db: Session, vehicle_id: int) -> tuple[Vehicle, Driver] | None:
    # блокируем строки авто и водителя до конца транзакции
    row = db.execute(
        select(Vehicle, Driver)
        .join(Driver, Driver.id == Vehicle.driver_id)
        .where(Vehicle.id == vehicle_id, Vehicle.status == Availability.AVAILABLE)
        .with_for_update()
    ).one_or_none()
    return (row[0], row[1]) if row else None


def _claim_vehicle(db: Session, vehicle_id: int) -> bool:
    # повторная проверка статуса в момент записи: из двух бронирований выигрывает одно
    result = db.execute(
        update(Vehicle)
        .where(Vehicle.id == vehicle_id, Vehicle.status == Availability.AVAILABLE)
        .values(status=Availability.UNAVAILABLE)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def book_ride(db: Session, payload: dict) -> Booking:
    """
    Бронирование поездки.
    - все пять полей обязательны;
    - авто должно быть Available, водитель должен быть владельцем авто;
    - поездка создаётся со статусом Pending, авто и водитель становятся Unavailable
      в одной транзакции; любая ошибка откатывает всё.
    """
    require_fields(payload, BOOKING_FIELDS)

    pickup = str(payload["pickUpLocation"]).strip()
    dropoff = str(payload["dropOffLocation"]).strip()
    passenger_id = as_int(payload["passenger"], "passenger")
    driver_id = as_int(payload["driver"], "driver")
    vehicle_id = as_int(payload["vehicle"], "vehicle")

    with atomic(db):
        found = _available_vehicle(db, vehicle_id)
        if not found:
            raise VehicleUnavailableError(vehicle_id)
        vehicle, driver = found

        if db.get(Passenger, passenger_id) is None:
            raise PassengerNotFoundError("Passenger not found")

        if vehicle.driver_id != driver_id:
            raise DriverMismatchError(f"Driver {driver_id} does not operate vehicle {vehicle_id}")

        ride = Ride(
            fare=compute_fare(),
            status=RideStatus.PENDING,
            pickup_location=pickup,
            dropoff_location=dropoff,
            vehicle_id=vehicle.id,
            passenger_id=passenger_id,
            driver_id=driver.id,
        )
        db.add(ride)
        db.flush()

        if not _claim_vehicle(db, vehicle.id):
            raise VehicleUnavailableError(vehicle_id)

        db.execute(
            update(Driver)
            .where(Driver.id == driver.id)
            .values(status=Availability.UNAVAILABLE)
            .execution_options(synchronize_session=False)
        )

    logger.info(
        "Ride %s booked: vehicle=%s driver=%s passenger=%s fare=%s",
        ride.id, vehicle.id, driver.id, passenger_id, ride.fare,
    )
    return Booking(ride, driver, vehicle)


def list_completed_rides(db: Session) -> list[dict]:
    rows = db.execute(
        select(Ride, Passenger.name, Driver.name)
        .join(Passenger, Passenger.id == Ride.passenger_id)
        .join(Driver, Driver.id == Ride.driver_id)
        .where(Ride.status == RideStatus.COMPLETED)
        .order_by(Ride.id.desc())
    ).all()
    return [
        {
            "RideID": r.id,
            "PickUpLocation": r.pickup_location,
            "DropOffLocation": r.dropoff_location,
            "PassengerName": passenger_name,
            "DriverName": driver_name,
        }
        for r, passenger_name, driver_name in rows
    ]
