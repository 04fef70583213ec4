"""Integration tests for /shipments endpoints."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from tests.shared.fixtures.api import assert_error_body

pytestmark = pytest.mark.integration

NEW_SHIPMENT = {
    "basic_information": {
        "shipment_title": "Server rack",
        "destination": "Hamburg, DE",
        "carrier": "DHL",
        "weight": 120.5,
        "weight_unit": "kg",
    },
    "customer_fields": {"customer": "ACME"},
    "notes": "Handle with care",
}


def _create(client, headers, payload=None):
    response = client.post("/shipments", json=payload or NEW_SHIPMENT, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestShipmentsAuthorization:
    def test_requires_authentication(self, test_client):
        response = test_client.post("/shipments", json=NEW_SHIPMENT)

        assert_error_body(response, 401, "Authentication Error", "Authentication required")

    def test_workers_may_create(self, test_client, worker_headers):
        shipment = _create(test_client, worker_headers)

        assert shipment["created_by"] == "worker@example.com"


class TestCreateShipment:
    def test_create_assigns_tracking_number_for_today(
        self,
        test_client,
        supervisor_headers,
    ):
        shipment = _create(test_client, supervisor_headers)

        today = datetime.now(tz=timezone.utc).strftime("%Y%m%d")
        assert shipment["tracking_number"] == f"DKIQ{today}000001"
        assert shipment["status"] == "CREATED"
        assert shipment["basic_information"]["carrier"] == "DHL"
        assert shipment["customer_fields"] == {"customer": "ACME"}

    def test_tracking_numbers_are_sequential(self, test_client, supervisor_headers):
        numbers = [
            _create(test_client, supervisor_headers)["tracking_number"] for _ in range(3)
        ]

        assert [n[-6:] for n in numbers] == ["000001", "000002", "000003"]
        assert len({n[:12] for n in numbers}) == 1

    def test_missing_title_is_rejected(self, test_client, supervisor_headers):
        response = test_client.post(
            "/shipments",
            json={"basic_information": {"destination": "Hamburg"}},
            headers=supervisor_headers,
        )

        assert response.status_code == 422

    def test_too_many_images_is_rejected(self, test_client, supervisor_headers):
        payload = {**NEW_SHIPMENT, "image_ids": [str(i) for i in range(11)]}

        response = test_client.post("/shipments", json=payload, headers=supervisor_headers)

        assert response.status_code == 422


class TestShipmentQueries:
    def test_get_by_id_and_tracking_number(self, test_client, supervisor_headers):
        created = _create(test_client, supervisor_headers)

        by_id = test_client.get(f"/shipments/{created['id']}", headers=supervisor_headers)
        by_number = test_client.get(
            f"/shipments/tracking/{created['tracking_number']}",
            headers=supervisor_headers,
        )

        assert by_id.status_code == 200
        assert by_number.status_code == 200
        assert by_id.json()["id"] == by_number.json()["id"] == created["id"]

    def test_list(self, test_client, supervisor_headers):
        _create(test_client, supervisor_headers)
        _create(test_client, supervisor_headers)

        response = test_client.get("/shipments", headers=supervisor_headers)

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_unknown_shipment(self, test_client, supervisor_headers):
        response = test_client.get(f"/shipments/{uuid4()}", headers=supervisor_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "SHIPMENT_NOT_FOUND"

    def test_tracking_number_date(self, test_client, supervisor_headers):
        created = _create(test_client, supervisor_headers)

        response = test_client.get(
            f"/shipments/tracking/{created['tracking_number']}/date",
            headers=supervisor_headers,
        )

        assert response.status_code == 200
        assert response.json()["date"] == datetime.now(tz=timezone.utc).date().isoformat()

    def test_tracking_number_date_of_invalid_number(self, test_client, supervisor_headers):
        response = test_client.get(
            "/shipments/tracking/INVALID/date",
            headers=supervisor_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid tracking number format"
        assert response.json()["code"] == "INVALID_TRACKING_NUMBER"


class TestShipmentUpdates:
    def test_update_status(self, test_client, supervisor_headers, worker_headers):
        created = _create(test_client, supervisor_headers)

        response = test_client.put(
            f"/shipments/{created['id']}/status",
            json={"status": "IN_TRANSIT"},
            headers=worker_headers,
        )

        assert response.status_code == 200
        assert response.json()["status"] == "IN_TRANSIT"
        assert response.json()["last_modified_by"] == "worker@example.com"

    def test_delete(self, test_client, supervisor_headers):
        created = _create(test_client, supervisor_headers)

        response = test_client.delete(
            f"/shipments/{created['id']}",
            headers=supervisor_headers,
        )

        assert response.status_code == 204
        missing = test_client.get(
            f"/shipments/{created['id']}",
            headers=supervisor_headers,
        )
        assert missing.status_code == 404
