import pytest

TRAVELER = {
    "firstName": "Ana",
    "lastName": "Silva",
    "dateOfBirth": "1990-05-17",
    "nationality": "Portuguese",
    "email": "ana@example.com",
    "phone": "+351 912 345 678",
}


@pytest.fixture
def package_id(create_package):
    return create_package(price=1000, groupSize={"min": 1, "max": 3})["id"]


def booking(package_id, travelers=1, **overrides):
    body = {
        "packageId": int(package_id),
        "travelers": [dict(TRAVELER) for _ in range(travelers)],
        "travelDate": "2025-04-01",
    }
    body.update(overrides)
    return body


def test_create_booking_computes_total(client, package_id):
    response = client.post("/api/bookings", json=booking(package_id, travelers=2))

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Booking created successfully"
    assert body["data"]["status"] == "pending"
    assert body["data"]["totalAmount"] == 2000
    assert body["data"]["paidAmount"] == 0
    assert body["data"]["travelDate"] == "2025-04-01"
    assert body["data"]["travelers"][0]["firstName"] == "Ana"


def test_explicit_total_is_kept(client, package_id):
    response = client.post("/api/bookings", json=booking(package_id, totalAmount=1800))

    assert response.json()["data"]["totalAmount"] == 1800


def test_booking_over_group_size(client, package_id):
    response = client.post("/api/bookings", json=booking(package_id, travelers=4))

    assert response.status_code == 400
    assert response.json()["error"] == "This package accepts at most 3 travelers per booking"


def test_booking_requires_travelers_and_valid_email(client, package_id):
    response = client.post("/api/bookings", json=booking(package_id, travelers=0))
    assert response.status_code == 400

    body = booking(package_id)
    body["travelers"][0]["email"] = "not-an-email"
    response = client.post("/api/bookings", json=body)
    assert response.status_code == 400
    assert any(d.startswith("travelers.0.email:") for d in response.json()["details"])


def test_booking_unknown_package(client):
    response = client.post("/api/bookings", json=booking("777"))

    assert response.status_code == 404
    assert response.json()["error"] == "Tour package not found"


def test_get_booking(client, package_id):
    booking_id = client.post("/api/bookings", json=booking(package_id)).json()["data"]["id"]

    assert client.get(f"/api/bookings/{booking_id}").json()["data"]["id"] == booking_id
    assert client.get("/api/bookings/555").status_code == 404
    assert client.get("/api/bookings/x1").json()["error"] == "Invalid booking ID format"


def test_status_lifecycle(client, package_id):
    booking_id = client.post("/api/bookings", json=booking(package_id)).json()["data"]["id"]

    response = client.patch(f"/api/bookings/{booking_id}/status", json={"status": "confirmed"})
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "confirmed"

    response = client.patch(f"/api/bookings/{booking_id}/status", json={"status": "completed"})
    assert response.json()["data"]["status"] == "completed"

    response = client.patch(f"/api/bookings/{booking_id}/status", json={"status": "cancelled"})
    assert response.status_code == 400
    assert response.json()["error"] == "Cannot change booking status from completed to cancelled"


def test_unknown_status_is_rejected(client, package_id):
    booking_id = client.post("/api/bookings", json=booking(package_id)).json()["data"]["id"]

    response = client.patch(f"/api/bookings/{booking_id}/status", json={"status": "refunded"})

    assert response.status_code == 400


def test_record_payments(client, package_id):
    booking_id = client.post("/api/bookings", json=booking(package_id)).json()["data"]["id"]

    response = client.post(f"/api/bookings/{booking_id}/payments", json={
        "amount": 400,
        "method": "credit-card",
        "transactionId": "txn-001",
    })
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["paidAmount"] == 400
    assert data["paymentHistory"][0]["method"] == "credit-card"
    assert data["paymentHistory"][0]["status"] == "completed"

    response = client.post(f"/api/bookings/{booking_id}/payments", json={
        "amount": 600,
        "method": "paypal",
        "status": "pending",
        "transactionId": "txn-002",
    })
    data = response.json()["data"]
    assert data["paidAmount"] == 400
    assert [p["transactionId"] for p in data["paymentHistory"]] == ["txn-001", "txn-002"]


def test_payment_method_and_status_are_validated(client, package_id):
    booking_id = client.post("/api/bookings", json=booking(package_id)).json()["data"]["id"]

    response = client.post(f"/api/bookings/{booking_id}/payments", json={
        "amount": 100,
        "method": "bitcoin",
        "status": "lost",
        "transactionId": "txn-003",
    })

    assert response.status_code == 400
    details = response.json()["details"]
    assert any(d.startswith("method:") for d in details)
    assert any(d.startswith("status:") for d in details)


def test_no_payments_on_cancelled_booking(client, package_id):
    booking_id = client.post("/api/bookings", json=booking(package_id)).json()["data"]["id"]
    client.patch(f"/api/bookings/{booking_id}/status", json={"status": "cancelled"})

    response = client.post(f"/api/bookings/{booking_id}/payments", json={
        "amount": 100,
        "method": "cash",
        "transactionId": "txn-004",
    })

    assert response.status_code == 400
    assert response.json()["error"] == "Cannot record a payment on a cancelled booking"
