# citywheels/services/records.py
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ..db import atomic
from ..models import Feedback, Maintenance, Promotion, SupportRequest
from ..utils.payload import as_date, as_decimal, as_int, clean_str, require_fields

logger = logging.getLogger(__name__)


def _insert(db: Session, obj):
    with atomic(db):
        db.add(obj)
        db.flush()
    logger.info("%s %s created", type(obj).__name__, obj.id)
    return obj


def submit_feedback(db: Session, payload: dict) -> Feedback:
    require_fields(payload, ("rideId", "rating"))
    from_id = payload.get("fromUserId")
    to_id = payload.get("toUserId")
    return _insert(db, Feedback(
        ride_id=as_int(payload["rideId"], "rideId"),
        from_user_id=as_int(from_id, "fromUserId") if from_id not in (None, "") else None,
        to_user_id=as_int(to_id, "toUserId") if to_id not in (None, "") else None,
        rating=as_int(payload["rating"], "rating"),
        comments=clean_str(payload.get("comments")),
    ))


def log_maintenance(db: Session, payload: dict) -> Maintenance:
    require_fields(payload, ("vehicleId",))
    return _insert(db, Maintenance(
        vehicle_id=as_int(payload["vehicleId"], "vehicleId"),
        performed_by=clean_str(payload.get("performedBy")),
        cost=as_decimal(payload.get("cost"), "cost"),
        description=clean_str(payload.get("description")),
        date=as_date(payload.get("date"), "date"),
    ))


def add_promotion(db: Session, payload: dict) -> Promotion:
    require_fields(payload, ("code",))
    return _insert(db, Promotion(
        promo_code=clean_str(payload["code"]),
        description=clean_str(payload.get("description")),
        eligibility_criteria=clean_str(payload.get("criteria")),
        expiry_date=as_date(payload.get("expiry"), "expiry"),
        discount_amount=as_decimal(payload.get("discount"), "discount"),
    ))


def submit_support_request(db: Session, payload: dict) -> SupportRequest:
    require_fields(payload, ("rideId", "passengerId", "issueDescription"))
    return _insert(db, SupportRequest(
        ride_id=as_int(payload["rideId"], "rideId"),
        passenger_id=as_int(payload["passengerId"], "passengerId"),
        issue_description=clean_str(payload["issueDescription"]),
        resolution_status="Pending",
    ))
