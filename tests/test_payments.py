from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from citywheels.models import Payment, Ride, RideStatus
from citywheels.services import payments


def _book(client, booking) -> int:
    resp = client.post("/api/rides", json=booking)
    assert resp.status_code == 200
    return resp.json()["rideId"]


def _payment(ride_id, status="Completed"):
    return {"rideId": ride_id, "paymentMethod": "Cash", "amount": 150, "paymentStatus": status}


def test_completed_payment_completes_ride(client, session_factory, booking):
    ride_id = _book(client, booking)

    resp = client.post("/api/payments", json=_payment(ride_id))

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    with session_factory() as s:
        assert s.get(Ride, ride_id).status == RideStatus.COMPLETED
        payment = s.get(Payment, body["paymentId"])
        assert payment.ride_id == ride_id
        assert payment.payment_method == "Cash"
        assert payment.transaction_date is not None

    feedback_rides = client.get("/api/rides-for-feedback").json()
    assert [r["RideID"] for r in feedback_rides] == [ride_id]


def test_other_status_leaves_ride_pending(client, session_factory, booking):
    ride_id = _book(client, booking)

    resp = client.post("/api/payments", json=_payment(ride_id, status="Pending"))

    assert resp.status_code == 201
    with session_factory() as s:
        assert s.get(Ride, ride_id).status == RideStatus.PENDING


def test_second_payment_for_ride_rejected(client, session_factory, booking):
    ride_id = _book(client, booking)
    assert client.post("/api/payments", json=_payment(ride_id, status="Pending")).status_code == 201

    resp = client.post("/api/payments", json=_payment(ride_id))

    assert resp.status_code == 400
    assert resp.json()["error"] == "Payment already exists for this ride"
    with session_factory() as s:
        assert s.execute(select(func.count(Payment.id))).scalar_one() == 1
        # отклонённая оплата не завершает поездку
        assert s.get(Ride, ride_id).status == RideStatus.PENDING


def test_payment_for_unknown_ride(client):
    resp = client.post("/api/payments", json=_payment(404))

    assert resp.status_code == 400
    assert resp.json()["error"] == "Ride with ID 404 not found"


def test_payment_missing_fields(client):
    resp = client.post("/api/payments", json={"rideId": 1, "paymentMethod": "Card"})

    assert resp.status_code == 400
    assert resp.json()["details"]["missing"] == {
        "rideId": False,
        "paymentMethod": False,
        "amount": True,
        "paymentStatus": True,
    }


def test_payment_amount_must_be_numeric(client, booking):
    ride_id = _book(client, booking)

    resp = client.post("/api/payments", json={**_payment(ride_id), "amount": "lots"})

    assert resp.status_code == 400
    assert "amount" in resp.json()["error"]


def test_concurrent_duplicate_payment_maps_to_duplicate(client, booking, monkeypatch):
    ride_id = _book(client, booking)

    def unique_violation(db, rid):
        raise IntegrityError("INSERT INTO payments", {}, Exception("UNIQUE constraint failed: payments.ride_id"))

    monkeypatch.setattr(payments, "_ride_for_update", unique_violation)

    resp = client.post("/api/payments", json=_payment(ride_id))

    assert resp.status_code == 400
    assert resp.json()["error"] == "Payment already exists for this ride"


def test_other_integrity_errors_are_store_errors(client, session_factory, booking, monkeypatch):
    ride_id = _book(client, booking)

    def fk_violation(db, rid):
        raise IntegrityError("INSERT INTO payments", {}, Exception("FOREIGN KEY constraint failed"))

    monkeypatch.setattr(payments, "_ride_for_update", fk_violation)

    resp = client.post("/api/payments", json=_payment(ride_id))

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Failed to record payment"
    assert "FOREIGN KEY" in body["details"]
    with session_factory() as s:
        assert s.execute(select(func.count(Payment.id))).scalar_one() == 0
