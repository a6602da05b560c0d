# citywheels/models/feedback.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from .base import Base


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True)
    ride_id = Column(Integer, ForeignKey("rides.id"), nullable=False, index=True)

    # отзыв может оставить и пассажир, и водитель, поэтому без FK
    from_user_id = Column(Integer, nullable=True)
    to_user_id   = Column(Integer, nullable=True)

    rating = Column(Integer, nullable=False)
    comments = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
