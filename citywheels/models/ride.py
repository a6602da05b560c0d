# citywheels/models/ride.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from .base import Base
from .enums import RideStatus, db_enum


class Ride(Base):
    __tablename__ = "rides"

    id = Column(Integer, primary_key=True)

    # тариф считает сервер, с клиента не принимается
    fare = Column(Integer, nullable=False)
    status = Column(db_enum(RideStatus, "ride_status"), nullable=False, default=RideStatus.PENDING)

    pickup_location  = Column(String(255), nullable=False)
    dropoff_location = Column(String(255), nullable=False)

    vehicle_id   = Column(Integer, ForeignKey("vehicles.id"), nullable=False)
    passenger_id = Column(Integer, ForeignKey("passengers.id"), nullable=False)
    driver_id    = Column(Integer, ForeignKey("drivers.id"), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    vehicle = relationship("Vehicle")
    passenger = relationship("Passenger")
    driver = relationship("Driver")

    __table_args__ = (Index("ix_rides_status", "status"),)
