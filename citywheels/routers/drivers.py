# citywheels/routers/drivers.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import client_error, store_error
from ..services.registration import list_drivers, register_driver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["drivers"])


@router.post("/api/drivers", status_code=status.HTTP_201_CREATED)
def api_register_driver(payload: dict, db: Session = Depends(get_db)):
    try:
        d = register_driver(db, payload)
    except ValueError as e:
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Driver insert failed")
        raise store_error("Failed to add driver", e)
    return {"success": True, "driverId": d.id}


@router.get("/api/drivers")
def api_list_drivers(db: Session = Depends(get_db)):
    try:
        return list_drivers(db)
    except SQLAlchemyError as e:
        logger.exception("Drivers fetch error")
        raise store_error("Failed to load drivers", e)
