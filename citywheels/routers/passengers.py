# citywheels/routers/passengers.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import client_error, store_error
from ..services.registration import list_passengers, register_passenger

logger = logging.getLogger(__name__)

router = APIRouter(tags=["passengers"])


@router.post("/api/passengers", status_code=status.HTTP_201_CREATED)
def api_register_passenger(payload: dict, db: Session = Depends(get_db)):
    try:
        p = register_passenger(db, payload)
    except ValueError as e:
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Passenger insert failed")
        raise store_error("Failed to add passenger", e)
    return {"success": True, "passengerId": p.id}


@router.get("/api/passengers")
def api_list_passengers(db: Session = Depends(get_db)):
    try:
        return list_passengers(db)
    except SQLAlchemyError as e:
        logger.exception("Passengers fetch error")
        raise store_error("Failed to load passengers", e)
