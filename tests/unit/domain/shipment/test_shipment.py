"""Unit tests for the Shipment aggregate and BasicInformation."""

import pytest

from dockeriq.domain.shared.exceptions import ValidationError
from dockeriq.domain.shipment import BasicInformation, Shipment
from tests.shared.fixtures import make_basic_information, make_shipment


class TestBasicInformation:
    def test_requires_title(self):
        with pytest.raises(ValidationError, match="title is required"):
            BasicInformation(shipment_title="  ", destination="Hamburg")

    def test_requires_destination(self):
        with pytest.raises(ValidationError, match="Destination is required"):
            BasicInformation(shipment_title="Rack", destination="")

    def test_title_length_limit(self):
        with pytest.raises(ValidationError, match="100"):
            BasicInformation(shipment_title="x" * 101, destination="Hamburg")

    def test_destination_length_limit(self):
        with pytest.raises(ValidationError, match="200"):
            BasicInformation(shipment_title="Rack", destination="x" * 201)

    def test_from_dict_ignores_unknown_keys(self):
        info = BasicInformation.from_dict(
            {"shipment_title": "Rack", "destination": "Hamburg", "legacy": 1},
        )
        assert info.to_dict()["shipment_title"] == "Rack"


class TestShipment:
    def test_create_sets_status_created(self):
        shipment = make_shipment(created_by="worker@example.com")

        assert shipment.status == "CREATED"
        assert shipment.created_by == "worker@example.com"
        assert shipment.last_modified_by == "worker@example.com"

    def test_too_many_images(self):
        with pytest.raises(ValidationError, match="Maximum 10 images"):
            Shipment.create(
                tracking_number="DKIQ20240115000001",
                basic_information=make_basic_information(),
                created_by="worker@example.com",
                image_ids=[str(i) for i in range(11)],
            )

    def test_notes_length_limit(self):
        with pytest.raises(ValidationError, match="Notes"):
            Shipment.create(
                tracking_number="DKIQ20240115000001",
                basic_information=make_basic_information(),
                created_by="worker@example.com",
                notes="x" * 1001,
            )

    def test_update_status(self):
        shipment = make_shipment()

        shipment.update_status("IN_TRANSIT", "boss@example.com")

        assert shipment.status == "IN_TRANSIT"
        assert shipment.last_modified_by == "boss@example.com"

    def test_update_status_rejects_blank(self):
        with pytest.raises(ValidationError):
            make_shipment().update_status("  ", "boss@example.com")
