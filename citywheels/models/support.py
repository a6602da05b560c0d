# citywheels/models/support.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from .base import Base


class SupportRequest(Base):
    __tablename__ = "support_requests"

    id = Column(Integer, primary_key=True)
    ride_id = Column(Integer, ForeignKey("rides.id"), nullable=False, index=True)
    passenger_id = Column(Integer, ForeignKey("passengers.id"), nullable=False)

    issue_description = Column(String(1000), nullable=False)
    date_submitted = Column(DateTime(timezone=True), server_default=func.now())
    resolution_status = Column(String(20), nullable=False, default="Pending")
