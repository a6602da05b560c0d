# citywheels/routers/rides.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import client_error, store_error
from ..services.rides import book_ride, list_completed_rides

logger = logging.getLogger(__name__)

router = APIRouter(tags=["rides"])


@router.post("/api/rides")
def api_book_ride(payload: dict, db: Session = Depends(get_db)):
    """
    Бронирование: {pickUpLocation, dropOffLocation, passenger, driver, vehicle}.
    Тариф считается на сервере.
    """
    logger.info("Ride booking request: %s", payload)
    try:
        booking = book_ride(db, payload)
    except (LookupError, ValueError) as e:
        logger.warning("Ride booking rejected: %s", e)
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Ride booking failed")
        raise store_error("Database error", e)

    return {
        "success": True,
        "rideId": booking.ride.id,
        "fare": booking.ride.fare,
        "driverName": booking.driver.name,
        "vehicleMake": booking.vehicle.make,
        "message": "Ride booked successfully!",
    }


# завершённые поездки, по которым можно оставить отзыв
@router.get("/api/rides-for-feedback")
def api_rides_for_feedback(db: Session = Depends(get_db)):
    try:
        return list_completed_rides(db)
    except SQLAlchemyError as e:
        logger.exception("Rides fetch error")
        raise store_error("Failed to load rides", e)
