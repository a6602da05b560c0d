# citywheels/models/__init__.py
from .base import Base
from .enums import Availability, RideStatus
from .driver import Driver
from .passenger import Passenger
from .vehicle import Vehicle
from .ride import Ride
from .payment import Payment, PAYMENT_COMPLETED
from .feedback import Feedback
from .maintenance import Maintenance
from .promotion import Promotion
from .support import SupportRequest

__all__ = [
    "Base", "Availability", "RideStatus",
    "Driver", "Passenger", "Vehicle", "Ride", "Payment", "PAYMENT_COMPLETED",
    "Feedback", "Maintenance", "Promotion", "SupportRequest",
]
