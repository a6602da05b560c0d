# citywheels/routers/records.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import client_error, store_error
from ..services.records import add_promotion, submit_feedback, submit_support_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["records"])


@router.post("/api/feedback", status_code=status.HTTP_201_CREATED)
def api_submit_feedback(payload: dict, db: Session = Depends(get_db)):
    try:
        f = submit_feedback(db, payload)
    except ValueError as e:
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Feedback insert failed")
        raise store_error("Failed to submit feedback", e)
    return {"success": True, "feedbackId": f.id}


@router.post("/api/promotions", status_code=status.HTTP_201_CREATED)
def api_add_promotion(payload: dict, db: Session = Depends(get_db)):
    try:
        p = add_promotion(db, payload)
    except ValueError as e:
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Promotion creation error")
        raise store_error("Failed to add promotion", e)
    return {"success": True, "promotionId": p.id}


@router.post("/api/support", status_code=status.HTTP_201_CREATED)
def api_submit_support(payload: dict, db: Session = Depends(get_db)):
    try:
        r = submit_support_request(db, payload)
    except ValueError as e:
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Support request insert failed")
        raise store_error("Failed to submit request", e)
    return {"success": True, "requestId": r.id}
