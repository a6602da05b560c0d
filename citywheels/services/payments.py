# citywheels/services/payments.py
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import atomic
from ..errors import DuplicateError
from ..models import PAYMENT_COMPLETED, Payment, Ride, RideStatus
from ..utils.payload import as_decimal, as_int, require_fields

logger = logging.getLogger(__name__)

PAYMENT_FIELDS = ("rideId", "paymentMethod", "amount", "paymentStatus")

# как нарушение uniq_payment_per_ride выглядит в MySQL / SQLite
_DUPLICATE_MARKERS = ("uniq_payment_per_ride", "payments.ride_id")


def is_duplicate_payment(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return any(marker in message for marker in _DUPLICATE_MARKERS)


def _ride_for_update(db: Session, ride_id: int) -> Ride | None:
    return db.execute(
        select(Ride).where(Ride.id == ride_id).with_for_update()
    ).scalar_one_or_none()


def record_payment(db: Session, payload: dict) -> Payment:
    """
    Оплата поездки. Вторая оплата той же поездки отклоняется.
    Статус "Completed" завершает поездку в той же транзакции, что и запись оплаты.
    """
    require_fields(payload, PAYMENT_FIELDS)

    ride_id = as_int(payload["rideId"], "rideId")
    amount = as_decimal(payload["amount"], "amount")
    method = str(payload["paymentMethod"]).strip()
    payment_status = str(payload["paymentStatus"]).strip()

    try:
        with atomic(db):
            ride = _ride_for_update(db, ride_id)
            if not ride:
                raise LookupError(f"Ride with ID {ride_id} not found")

            existing = db.execute(
                select(Payment.id).where(Payment.ride_id == ride.id).limit(1)
            ).scalar_one_or_none()
            if existing:
                raise DuplicateError("Payment already exists for this ride")

            payment = Payment(
                ride_id=ride.id,
                payment_method=method,
                amount=amount,
                payment_status=payment_status,
            )
            db.add(payment)

            if payment_status == PAYMENT_COMPLETED:
                ride.status = RideStatus.COMPLETED
            db.flush()
    except IntegrityError as e:
        # параллельный запрос успел записать оплату; прочие нарушения отдаём как ошибку БД
        if not is_duplicate_payment(e):
            raise
        raise DuplicateError("Payment already exists for this ride")

    logger.info("Payment %s recorded for ride %s (%s)", payment.id, ride_id, payment_status)
    return payment
