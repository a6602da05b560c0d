# citywheels/models/promotion.py
from sqlalchemy import Column, Integer, String, Date, Numeric
from .base import Base


class Promotion(Base):
    __tablename__ = "promotions"

    id = Column(Integer, primary_key=True)
    promo_code = Column(String(40), nullable=False)
    description = Column(String(300), nullable=True)
    eligibility_criteria = Column(String(300), nullable=True)
    expiry_date = Column(Date, nullable=True)
    discount_amount = Column(Numeric(10, 2), nullable=True)
