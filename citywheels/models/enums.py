# citywheels/models/enums.py
import enum

from sqlalchemy import Enum


class Availability(str, enum.Enum):
    AVAILABLE   = "Available"
    UNAVAILABLE = "Unavailable"


class RideStatus(str, enum.Enum):
    PENDING   = "Pending"
    COMPLETED = "Completed"


def db_enum(enum_cls, name: str) -> Enum:
    # в таблицах храним значения ("Available"), а не имена членов
    return Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])
