# citywheels/routers/vehicles.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db
from ..errors import client_error, store_error
from ..services.records import log_maintenance
from ..services.registration import register_vehicle

logger = logging.getLogger(__name__)

router = APIRouter(tags=["vehicles"])


@router.post("/api/vehicles", status_code=status.HTTP_201_CREATED)
def api_register_vehicle(payload: dict, db: Session = Depends(get_db)):
    logger.info("Vehicle registration request: %s", payload)
    try:
        v = register_vehicle(db, payload)
    except (LookupError, ValueError) as e:
        logger.warning("Vehicle registration rejected: %s", e)
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Vehicle registration failed")
        raise store_error("Database operation failed", e)

    return {"success": True, "vehicleId": v.id, "message": "Vehicle registered successfully"}


@router.post("/api/maintenance", status_code=status.HTTP_201_CREATED)
def api_log_maintenance(payload: dict, db: Session = Depends(get_db)):
    try:
        m = log_maintenance(db, payload)
    except ValueError as e:
        raise client_error(e)
    except SQLAlchemyError as e:
        logger.exception("Maintenance insert failed")
        raise store_error("Failed to log maintenance", e)
    return {"success": True, "maintenanceId": m.id}
