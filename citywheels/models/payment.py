# citywheels/models/payment.py
import datetime as dt

from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey, UniqueConstraint
from .base import Base

# статус, при котором поездка считается завершённой
PAYMENT_COMPLETED = "Completed"


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True)
    ride_id = Column(Integer, ForeignKey("rides.id"), nullable=False)

    payment_method = Column(String(50), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    payment_status = Column(String(20), nullable=False)
    transaction_date = Column(Date, nullable=False, default=dt.date.today)

    __table_args__ = (
        # одна оплата на поездку
        UniqueConstraint("ride_id", name="uniq_payment_per_ride"),
    )
