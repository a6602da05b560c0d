import os

# до импорта приложения: движок по умолчанию не должен ходить в MySQL
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from citywheels.db import get_db, make_engine
from citywheels.main import app
from citywheels.models import Availability, Base, Driver, Passenger, Vehicle


# --- Fixtures ---

@pytest.fixture
def engine(tmp_path):
    """
    Отдельная файловая SQLite-база на каждый тест:
    разные сессии получают разные соединения, как с настоящим сервером БД.
    """
    eng = make_engine(f"sqlite:///{tmp_path / 'citywheels.db'}")
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def fleet(db_session):
    """Водитель с доступным авто и пассажир."""
    driver = Driver(name="Imran Ali", status=Availability.AVAILABLE)
    passenger = Passenger(name="Sana Malik", contact_no="0300-1234567")
    db_session.add_all([driver, passenger])
    db_session.flush()

    vehicle = Vehicle(
        driver_id=driver.id,
        make="Toyota",
        license_plate="LEA-1234",
        color="White",
        insurance_policy_number="POL-1",
        capacity=4,
        status=Availability.AVAILABLE,
    )
    db_session.add(vehicle)
    db_session.commit()
    return {"driver": driver.id, "passenger": passenger.id, "vehicle": vehicle.id}


@pytest.fixture
def booking(fleet):
    return {
        "pickUpLocation": "Gulberg",
        "dropOffLocation": "DHA Phase 5",
        "passenger": fleet["passenger"],
        "driver": fleet["driver"],
        "vehicle": fleet["vehicle"],
    }
