# citywheels/services/registration.py
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import atomic
from ..errors import DuplicateError
from ..models import Availability, Driver, Passenger, Vehicle
from ..utils.payload import as_decimal, as_int, clean_str, require_fields

logger = logging.getLogger(__name__)

VEHICLE_FIELDS = ("driverID", "make", "licensePlate", "color", "insurancePolicyNumber", "capacity")


def _parse_availability(raw) -> Availability:
    value = (clean_str(raw) or Availability.AVAILABLE.value).lower()
    for member in Availability:
        if member.value.lower() == value:
            return member
    raise ValueError(f"Unknown status: {raw}")


# -------- Водители --------

def register_driver(db: Session, payload: dict) -> Driver:
    require_fields(payload, ("name",))

    d = Driver(
        name=clean_str(payload.get("name")),
        contact_number=clean_str(payload.get("contactNo")),
        status=_parse_availability(payload.get("status")),
        schedule=clean_str(payload.get("schedule")),
        rating=as_decimal(payload.get("rating"), "rating"),
        insurance_document=clean_str(payload.get("insuranceDocument")),
        driving_license_number=clean_str(payload.get("drivingLicenseNumber")),
        preferred_payment_method=clean_str(payload.get("preferredPaymentMethod")),
    )
    with atomic(db):
        db.add(d)
        db.flush()
    logger.info("Driver %s registered", d.id)
    return d


def list_drivers(db: Session) -> list[dict]:
    rows = db.execute(select(Driver.id, Driver.name).order_by(Driver.name)).all()
    # ключи в стиле колонок таблиц: клиенты читают DriverID/Name
    return [{"DriverID": i, "Name": n} for i, n in rows]


# -------- Пассажиры --------

def register_passenger(db: Session, payload: dict) -> Passenger:
    require_fields(payload, ("name",))

    p = Passenger(
        name=clean_str(payload.get("name")),
        contact_no=clean_str(payload.get("contactNo")),
        email=clean_str(payload.get("email")),
        payment_details=clean_str(payload.get("paymentDetails")),
    )
    with atomic(db):
        db.add(p)
        db.flush()
    logger.info("Passenger %s registered", p.id)
    return p


def list_passengers(db: Session) -> list[dict]:
    rows = db.execute(select(Passenger.id, Passenger.name).order_by(Passenger.name)).all()
    return [{"PassengerID": i, "Name": n} for i, n in rows]


# -------- Автомобили --------

def register_vehicle(db: Session, payload: dict) -> Vehicle:
    """
    Регистрация авто: водитель должен существовать, номер должен быть уникальным.
    Новое авто сразу Available.
    """
    require_fields(payload, VEHICLE_FIELDS)

    driver_id = as_int(payload["driverID"], "driverID")
    plate = clean_str(payload["licensePlate"])
    capacity = as_int(payload["capacity"], "capacity")

    if db.get(Driver, driver_id) is None:
        raise LookupError(f"Driver with ID {driver_id} not found")

    taken = db.execute(
        select(Vehicle.id).where(Vehicle.license_plate == plate).limit(1)
    ).scalar_one_or_none()
    if taken:
        raise DuplicateError("Vehicle with this license plate already exists")

    v = Vehicle(
        driver_id=driver_id,
        make=clean_str(payload["make"]),
        license_plate=plate,
        color=clean_str(payload["color"]),
        vehicle_type=clean_str(payload.get("vehicleType")) or "Car",
        insurance_policy_number=clean_str(payload["insurancePolicyNumber"]),
        child_seat_available=bool(payload.get("childSeatAvailable")),
        capacity=capacity,
        status=Availability.AVAILABLE,
    )
    try:
        with atomic(db):
            db.add(v)
            db.flush()
    except IntegrityError:
        # номер заняли между проверкой и вставкой
        raise DuplicateError("Vehicle with this license plate already exists")

    logger.info("Vehicle %s (%s) registered for driver %s", v.id, plate, driver_id)
    return v
