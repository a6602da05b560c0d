# citywheels/models/vehicle.py
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base
from .enums import Availability, db_enum


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True)
    driver_id = Column(Integer, ForeignKey("drivers.id"), nullable=False, index=True)

    make = Column(String(80), nullable=False)
    license_plate = Column(String(20), nullable=False, unique=True)
    color = Column(String(40), nullable=False)
    vehicle_type = Column(String(40), nullable=False, default="Car")
    insurance_policy_number = Column(String(80), nullable=False)
    child_seat_available = Column(Boolean, nullable=False, default=False)
    capacity = Column(Integer, nullable=False)

    status = Column(db_enum(Availability, "vehicle_status"), nullable=False, default=Availability.AVAILABLE)

    driver = relationship("Driver")
