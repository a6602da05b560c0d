# citywheels/models/maintenance.py
from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey
from .base import Base


class Maintenance(Base):
    __tablename__ = "maintenance"

    id = Column(Integer, primary_key=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False, index=True)

    performed_by = Column(String(100), nullable=True)
    cost = Column(Numeric(10, 2), nullable=True)
    description = Column(String(500), nullable=True)
    date = Column(Date, nullable=True)
