import re

import pytest

from leadhub.models.demo import Demo
from leadhub.models.enquiry import Enquiry
from leadhub.models.general_lead import GeneralLead

IST_PATTERN = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}, \d{1,2}:\d{2}:\d{2} (am|pm)$")


def _demo_payload(**overrides):
    payload = {
        "name": " Ravi ",
        "email": "Ravi@Example.COM",
        "phone": "9999999999",
        "city": "Pune",
        "course": "MBA",
        "type": "video",
    }
    payload.update(overrides)
    return payload


def test_general_lead_is_saved(client, db_session):
    body = {"name": "N", "email": "n@x.com", "phone": "123", "message": "Call me"}

    response = client.post("/leads/general", json=body)

    assert response.status_code == 201
    assert response.json() == {"success": True, "message": "Lead submitted successfully"}
    lead = db_session.query(GeneralLead).one()
    assert lead.message == "Call me"


def test_general_lead_lists_missing_fields(client, db_session):
    response = client.post("/leads/general", json={"name": "N", "email": "n@x.com", "phone": ""})

    assert response.status_code == 400
    payload = response.json()
    assert payload["message"] == "All fields are required"
    assert [error["field"] for error in payload["errors"]] == ["phone", "message"]
    assert db_session.query(GeneralLead).count() == 0


def test_demo_request_is_saved(client, db_session):
    response = client.post("/demo", json=_demo_payload())

    assert response.status_code == 201
    payload = response.json()
    assert payload["message"] == "Booking request submitted successfully"
    data = payload["data"]
    assert data["name"] == "Ravi"
    assert data["email"] == "ravi@example.com"
    assert data["type"] == "video"
    assert data["createdAt"]
    assert "created_at" not in data
    assert IST_PATTERN.match(data["createdAtIST"])
    assert db_session.query(Demo).count() == 1


@pytest.mark.parametrize("demo_type", ["video", "home"])
def test_demo_accepts_known_types(client, demo_type):
    response = client.post("/demo", json=_demo_payload(type=demo_type))

    assert response.status_code == 201


def test_demo_unknown_type_fails_in_store(client, db_session):
    response = client.post("/demo", json=_demo_payload(type="online"))

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server error"}
    assert db_session.query(Demo).count() == 0


def test_demo_missing_fields(client):
    response = client.post("/demo", json=_demo_payload(city=None, type=""))

    assert response.status_code == 400
    payload = response.json()
    assert payload["message"] == "All fields are required"
    assert [error["field"] for error in payload["errors"]] == ["city", "type"]


def test_enquiry_is_saved_as_pending(client, db_session):
    body = {"name": "E", "email": "e@x.com", "phone": "55", "course": "BBA"}

    response = client.post("/enquiry", json=body)

    assert response.status_code == 201
    payload = response.json()
    assert payload["message"] == "Enquiry submitted successfully"
    enquiry = payload["enquiry"]
    assert enquiry["status"] == "pending"
    assert enquiry["course"] == "BBA"
    assert enquiry["university"] is None
    assert enquiry["message"] is None
    assert db_session.query(Enquiry).one().status == "pending"


def test_enquiry_requires_contact_fields(client, db_session):
    response = client.post("/enquiry", json={"name": "E", "email": "e@x.com", "phone": "   "})

    assert response.status_code == 400
    assert response.json()["message"] == "Name, email, and phone are required"
    assert db_session.query(Enquiry).count() == 0


def test_lead_forms_accept_duplicates(client, db_session):
    body = {"name": "N", "email": "n@x.com", "phone": "123", "message": "Hi"}

    client.post("/leads/general", json=body)
    client.post("/leads/general", json=body)

    assert db_session.query(GeneralLead).count() == 2


def test_general_lead_accepts_numeric_phone(client, db_session):
    body = {"name": "N", "email": "n@x.com", "phone": 9876543210, "message": "Call me"}

    response = client.post("/leads/general", json=body)

    assert response.status_code == 201
    assert db_session.query(GeneralLead).one().phone == "9876543210"


def test_demo_and_enquiry_accept_numeric_phone(client):
    demo = client.post("/demo", json=_demo_payload(phone=9876543210))
    enquiry = client.post("/enquiry", json={"name": "E", "email": "e@x.com", "phone": 9876543210})

    assert demo.status_code == 201
    assert demo.json()["data"]["phone"] == "9876543210"
    assert enquiry.status_code == 201
    assert enquiry.json()["enquiry"]["phone"] == "9876543210"
