# citywheels/models/driver.py
from sqlalchemy import Column, Integer, String, Numeric
from .base import Base
from .enums import Availability, db_enum


class Driver(Base):
    __tablename__ = "drivers"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    contact_number = Column(String(50), nullable=True)

    # Available → Unavailable при бронировании поездки
    status = Column(db_enum(Availability, "driver_status"), nullable=False, default=Availability.AVAILABLE)
    schedule = Column(String(200), nullable=True)
    rating = Column(Numeric(3, 2), nullable=True)

    insurance_document       = Column(String(200), nullable=True)
    driving_license_number   = Column(String(50), nullable=True)
    preferred_payment_method = Column(String(50), nullable=True)
