from sqlalchemy import func, select

from citywheels.models import Availability, Driver, Vehicle


def _vehicle(driver_id, plate="LEB-777"):
    return {
        "driverID": driver_id,
        "make": "Suzuki",
        "licensePlate": plate,
        "color": "Silver",
        "insurancePolicyNumber": "POL-77",
        "capacity": 4,
    }


def _vehicle_count(session_factory) -> int:
    with session_factory() as s:
        return s.execute(select(func.count(Vehicle.id))).scalar_one()


# --- Drivers ---

def test_register_driver(client, session_factory):
    resp = client.post("/api/drivers", json={
        "name": "Usman Tariq",
        "contactNo": "0321-0000000",
        "schedule": "Mon-Fri",
        "rating": 4.5,
        "drivingLicenseNumber": "DL-1",
    })

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    with session_factory() as s:
        d = s.get(Driver, body["driverId"])
        assert d.name == "Usman Tariq"
        assert d.status == Availability.AVAILABLE


def test_register_driver_with_status(client, session_factory):
    resp = client.post("/api/drivers", json={"name": "Usman", "status": "unavailable"})

    assert resp.status_code == 201
    with session_factory() as s:
        assert s.get(Driver, resp.json()["driverId"]).status == Availability.UNAVAILABLE


def test_register_driver_rejects_unknown_status(client):
    resp = client.post("/api/drivers", json={"name": "Usman", "status": "asleep"})
    assert resp.status_code == 400


def test_register_driver_requires_name(client):
    resp = client.post("/api/drivers", json={"contactNo": "123"})

    assert resp.status_code == 400
    assert resp.json()["details"]["missing"] == {"name": True}


def test_drivers_listed_by_name(client):
    for name in ("Zain", "Ahmed", "Maria"):
        client.post("/api/drivers", json={"name": name})

    resp = client.get("/api/drivers")

    assert resp.status_code == 200
    assert [d["Name"] for d in resp.json()] == ["Ahmed", "Maria", "Zain"]
    assert all("DriverID" in d for d in resp.json())


# --- Passengers ---

def test_register_and_list_passengers(client):
    created = client.post("/api/passengers", json={"name": "Noor", "email": "noor@example.com"})
    client.post("/api/passengers", json={"name": "Ayesha"})

    assert created.status_code == 201
    assert created.json()["passengerId"]

    listed = client.get("/api/passengers").json()
    assert [p["Name"] for p in listed] == ["Ayesha", "Noor"]
    assert all("PassengerID" in p for p in listed)


# --- Vehicles ---

def test_register_vehicle(client, session_factory, fleet):
    resp = client.post("/api/vehicles", json={**_vehicle(fleet["driver"]), "childSeatAvailable": True})

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    with session_factory() as s:
        v = s.get(Vehicle, body["vehicleId"])
        assert v.status == Availability.AVAILABLE
        assert v.vehicle_type == "Car"
        assert v.child_seat_available is True
        assert v.driver_id == fleet["driver"]


def test_duplicate_plate_rejected(client, session_factory, fleet):
    first = client.post("/api/vehicles", json=_vehicle(fleet["driver"]))
    second = client.post("/api/vehicles", json=_vehicle(fleet["driver"]))

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["error"] == "Vehicle with this license plate already exists"
    assert _vehicle_count(session_factory) == 2  # авто из fleet + первое


def test_vehicle_for_unknown_driver_rejected(client, session_factory):
    resp = client.post("/api/vehicles", json=_vehicle(12345))

    assert resp.status_code == 400
    assert resp.json()["error"] == "Driver with ID 12345 not found"
    assert _vehicle_count(session_factory) == 0


def test_vehicle_missing_fields(client, session_factory):
    resp = client.post("/api/vehicles", json={"driverID": 1, "make": "Honda", "capacity": 0})

    assert resp.status_code == 400
    missing = resp.json()["details"]["missing"]
    assert missing["licensePlate"] is True
    assert missing["capacity"] is True
    assert missing["make"] is False
    assert _vehicle_count(session_factory) == 0
