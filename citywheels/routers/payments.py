# citywheels/routers/payments.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import client_error, store_error
from ..services.payments import record_payment

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])


@router.post("/api/payments", status_code=status.HTTP_201_CREATED)
def api_record_payment(payload: dict, db: Session = Depends(get_db)):
    logger.info("Payment request received: %s", payload)
    try:
        p = record_payment(db, payload)
    except (LookupError, ValueError) as e:
        logger.warning("Payment rejected: %s", e)
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Payment error")
        raise store_error("Failed to record payment", e)

    return {"success": True, "paymentId": p.id, "message": "Payment recorded successfully"}
