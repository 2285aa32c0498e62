INQUIRY = {
    "name": "Maria Rodriguez",
    "email": "Maria@Example.com",
    "phone": "+34 600 000 000",
    "subject": "Honeymoon in Santorini",
    "message": "We would like a quote for two people in June.",
}


def test_create_inquiry(client):
    response = client.post("/api/inquiries", json=INQUIRY)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Thank you! We will get back to you shortly."
    assert body["data"]["email"] == "maria@example.com"
    assert body["data"]["status"] == "new"
    assert body["data"]["priority"] == "medium"


def test_create_inquiry_validation(client):
    response = client.post("/api/inquiries", json=dict(INQUIRY, email="nope", message=""))

    assert response.status_code == 400
    details = response.json()["details"]
    assert any(d.startswith("email:") for d in details)
    assert any(d.startswith("message:") for d in details)


def test_triage_inquiry(client):
    inquiry_id = client.post("/api/inquiries", json=INQUIRY).json()["data"]["id"]

    response = client.patch(
        f"/api/inquiries/{inquiry_id}",
        json={"status": "in-progress", "priority": "high", "response": "Sent a quote."},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert (data["status"], data["priority"], data["response"]) == ("in-progress", "high", "Sent a quote.")

    response = client.patch(f"/api/inquiries/{inquiry_id}", json={"status": "resolved"})
    assert response.json()["data"]["priority"] == "high"


def test_triage_rejects_unknown_status(client):
    inquiry_id = client.post("/api/inquiries", json=INQUIRY).json()["data"]["id"]

    response = client.patch(f"/api/inquiries/{inquiry_id}", json={"status": "archived"})

    assert response.status_code == 400


def test_triage_unknown_inquiry(client):
    response = client.patch("/api/inquiries/42", json={"status": "closed"})

    assert response.status_code == 404
    assert response.json()["error"] == "Inquiry not found"


def test_list_inquiries_by_status(client):
    first = client.post("/api/inquiries", json=INQUIRY).json()["data"]["id"]
    client.post("/api/inquiries", json=dict(INQUIRY, subject="Safari dates"))
    client.patch(f"/api/inquiries/{first}", json={"status": "closed"})

    response = client.get("/api/inquiries", params={"status": "new"})
    assert [i["subject"] for i in response.json()["data"]] == ["Safari dates"]

    response = client.get("/api/inquiries")
    assert [i["subject"] for i in response.json()["data"]] == ["Safari dates", "Honeymoon in Santorini"]


def test_inquiry_interest_must_exist(client, create_package):
    response = client.post("/api/inquiries", json=dict(INQUIRY, packageInterest=99))
    assert response.status_code == 404
    assert response.json()["error"] == "Tour package not found"

    response = client.post("/api/inquiries", json=dict(INQUIRY, destinationInterest=99))
    assert response.status_code == 404
    assert response.json()["error"] == "Destination not found"

    package_id = int(create_package()["id"])
    response = client.post("/api/inquiries", json=dict(INQUIRY, packageInterest=package_id))
    assert response.status_code == 201
    assert response.json()["data"]["packageInterest"] == package_id


def test_deleting_a_package_clears_the_interest(client, create_package):
    package_id = create_package()["id"]
    inquiry_id = client.post("/api/inquiries", json=dict(INQUIRY, packageInterest=int(package_id))).json()["data"]["id"]

    client.delete(f"/api/packages/{package_id}")

    inquiries = client.get("/api/inquiries").json()["data"]
    assert [(i["id"], i["packageInterest"]) for i in inquiries] == [(inquiry_id, None)]
