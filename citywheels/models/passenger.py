# citywheels/models/passenger.py
from sqlalchemy import Column, Integer, String
from .base import Base


class Passenger(Base):
    __tablename__ = "passengers"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    contact_no = Column(String(50), nullable=True)
    email = Column(String(120), nullable=True)
    payment_details = Column(String(200), nullable=True)
