from conftest import bearer, signup

from salon_api.security_utils import create_access_token

BOOKING = {"service": "Silk Press", "date": "2025-06-01", "time": "10:00"}


def test_silk_press_booking_and_deposit(client):
    headers = bearer(create_access_token(7))

    created = client.post("/api/appointments", json=BOOKING, headers=headers)

    assert created.status_code == 201
    appointment = created.json()
    assert appointment["userId"] == 7
    assert appointment["status"] == "pending_payment"
    assert appointment["paymentStatus"] == "unpaid"
    assert appointment["depositPaid"] is False
    assert appointment["paidAt"] is None

    confirmed = client.post(
        f"/api/appointments/{appointment['id']}/confirm-payment",
        json={"paymentIntentId": "pi_123", "depositAmount": 30},
        headers=headers,
    )

    assert confirmed.status_code == 200
    body = confirmed.json()
    assert body["status"] == "pending"
    assert body["paymentStatus"] == "deposit_paid"
    assert body["depositPaid"] is True
    assert body["paymentIntentId"] == "pi_123"
    assert body["depositAmount"] == 30
    assert body["paidAt"]


def test_create_defaults_optional_fields(client, auth_headers):
    appointment = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()

    assert appointment["notes"] == ""
    assert appointment["customerName"] == ""
    assert appointment["customerPhone"] == ""
    assert appointment["customerEmail"] == ""
    assert appointment["stylistId"] is None
    assert appointment["createdAt"]


def test_create_requires_service_date_and_time(client, auth_headers):
    for missing in ("service", "date", "time"):
        body = {k: v for k, v in BOOKING.items() if k != missing}
        response = client.post("/api/appointments", json=body, headers=auth_headers)
        assert response.status_code == 400, missing

    response = client.post("/api/appointments", json={**BOOKING, "time": ""}, headers=auth_headers)
    assert response.status_code == 400


def test_create_requires_token(client):
    assert client.post("/api/appointments", json=BOOKING).status_code == 401


def test_double_booking_is_allowed(client, auth_headers):
    first = client.post("/api/appointments", json=BOOKING, headers=auth_headers)
    second = client.post("/api/appointments", json=BOOKING, headers=auth_headers)

    assert first.status_code == second.status_code == 201
    assert first.json()["id"] != second.json()["id"]


def test_my_appointments_never_include_other_users(client):
    alice = bearer(signup(client, "alice@example.com"))
    bob = bearer(signup(client, "bob@example.com"))
    client.post("/api/appointments", json=BOOKING, headers=alice)
    client.post("/api/appointments", json={**BOOKING, "service": "Wig Installation"}, headers=bob)
    client.post("/api/appointments", json={**BOOKING, "time": "14:00"}, headers=alice)

    mine = client.get("/api/appointments/my", headers=alice).json()

    assert len(mine) == 2
    assert all(a["userId"] == 1 for a in mine)
    assert [a["service"] for a in client.get("/api/appointments/my", headers=bob).json()] == [
        "Wig Installation"
    ]


def test_list_all_is_public(client, auth_headers):
    client.post("/api/appointments", json=BOOKING, headers=auth_headers)

    response = client.get("/api/appointments")

    assert response.status_code == 200
    assert len(response.json()) == 1


def test_any_token_holder_can_update_status_with_free_text(client, auth_headers):
    appointment = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()
    other = bearer(create_access_token(99))

    response = client.put(
        f"/api/appointments/{appointment['id']}",
        json={"status": "running late", "notes": "Client called"},
        headers=other,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "running late"
    assert response.json()["notes"] == "Client called"
    assert response.json()["paymentStatus"] == "unpaid"


def test_update_with_empty_status_only_changes_notes(client, auth_headers):
    appointment = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()

    response = client.put(
        f"/api/appointments/{appointment['id']}",
        json={"status": "", "notes": "Bring photos"},
        headers=auth_headers,
    )

    assert response.json()["status"] == "pending_payment"
    assert response.json()["notes"] == "Bring photos"


def test_update_without_notes_keeps_notes(client, auth_headers):
    appointment = client.post(
        "/api/appointments", json={**BOOKING, "notes": "Sensitive scalp"}, headers=auth_headers
    ).json()

    response = client.put(
        f"/api/appointments/{appointment['id']}", json={"status": "confirmed"}, headers=auth_headers
    )

    assert response.json()["status"] == "confirmed"
    assert response.json()["notes"] == "Sensitive scalp"


def test_status_update_after_deposit_keeps_payment_status(client, auth_headers):
    appointment_id = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()["id"]
    client.post(
        f"/api/appointments/{appointment_id}/confirm-payment",
        json={"paymentIntentId": "pi_1", "depositAmount": 30},
        headers=auth_headers,
    )

    response = client.put(
        f"/api/appointments/{appointment_id}", json={"status": "confirmed"}, headers=auth_headers
    )

    assert response.json()["status"] == "confirmed"
    assert response.json()["paymentStatus"] == "deposit_paid"
    assert response.json()["depositPaid"] is True


def test_update_unknown_appointment_is_404(client, auth_headers):
    response = client.put("/api/appointments/42", json={"status": "confirmed"}, headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Appointment not found"}


def test_update_unknown_appointment_is_404_even_with_invalid_body(client, auth_headers):
    response = client.put("/api/appointments/999", json={"status": 5}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Appointment not found"}


def test_update_existing_appointment_with_invalid_body_is_400(client, auth_headers):
    appointment_id = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()["id"]

    response = client.put(
        f"/api/appointments/{appointment_id}", json={"status": 5}, headers=auth_headers
    )

    assert response.status_code == 400
    assert "details" in response.json()
    assert client.get("/api/appointments").json()[0]["status"] == "pending_payment"


def test_confirm_payment_unknown_appointment_is_404_even_with_invalid_body(client, auth_headers):
    response = client.post(
        "/api/appointments/999/confirm-payment",
        json={"depositAmount": "thirty"},
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_non_integer_appointment_id_is_404(client, auth_headers):
    assert client.put("/api/appointments/abc", json={}, headers=auth_headers).status_code == 404
    assert client.delete("/api/appointments/abc", headers=auth_headers).status_code == 404
    assert client.delete("/api/appointments/abc").status_code == 401


def test_confirm_payment_unknown_appointment_is_404(client, auth_headers):
    response = client.post(
        "/api/appointments/42/confirm-payment",
        json={"paymentIntentId": "pi_123", "depositAmount": 30},
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_confirm_payment_twice_overwrites(client, auth_headers):
    appointment_id = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()["id"]
    url = f"/api/appointments/{appointment_id}/confirm-payment"

    client.post(url, json={"paymentIntentId": "pi_1", "depositAmount": 30}, headers=auth_headers)
    second = client.post(url, json={"paymentIntentId": "pi_2", "depositAmount": 45}, headers=auth_headers)

    assert second.json()["paymentIntentId"] == "pi_2"
    assert second.json()["depositAmount"] == 45
    assert second.json()["status"] == "pending"


def test_delete_appointment(client, auth_headers):
    appointment_id = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()["id"]

    response = client.delete(f"/api/appointments/{appointment_id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/appointments").json() == []
    assert client.delete(f"/api/appointments/{appointment_id}", headers=auth_headers).status_code == 404


def test_appointment_ids_survive_deletion(client, auth_headers):
    first = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()["id"]
    client.delete(f"/api/appointments/{first}", headers=auth_headers)
    second = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()["id"]

    assert second > first


def test_mutations_require_token(client, auth_headers):
    appointment_id = client.post("/api/appointments", json=BOOKING, headers=auth_headers).json()["id"]

    assert client.put(f"/api/appointments/{appointment_id}", json={"status": "x"}).status_code == 401
    assert client.delete(f"/api/appointments/{appointment_id}").status_code == 401
    assert (
        client.post(f"/api/appointments/{appointment_id}/confirm-payment", json={}).status_code
        == 401
    )
