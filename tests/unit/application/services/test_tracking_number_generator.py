"""Unit tests for TrackingNumberGenerator."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from dockeriq.application.services import TrackingNumberGenerator
from dockeriq.domain.shared.exceptions import ValidationError
from dockeriq.domain.shipment import InvalidTrackingNumberError, ShipmentRepository
from tests.shared.fixtures import JAN_15_2024, FixedClock


class InMemoryTrackingNumbers:
    """Answers prefix queries from a plain list."""

    def __init__(self, numbers=None):
        self.numbers = list(numbers or [])

    async def find_tracking_numbers_starting_with(self, prefix):
        return [n for n in self.numbers if n.startswith(prefix)]


class TestGenerate:
    """Tests for daily sequenced generation."""

    def setup_method(self):
        self.store = InMemoryTrackingNumbers()
        self.clock = FixedClock(JAN_15_2024)
        self.generator = TrackingNumberGenerator(self.store, clock=self.clock)

    @pytest.mark.asyncio
    async def test_first_number_of_the_day(self):
        assert await self.generator.generate() == "DKIQ20240115000001"

    @pytest.mark.asyncio
    async def test_sequential_numbers_when_each_is_persisted(self):
        generated = []
        for _ in range(5):
            number = await self.generator.generate()
            self.store.numbers.append(number)
            generated.append(number)

        assert generated == [f"DKIQ20240115{n:06d}" for n in range(1, 6)]

    @pytest.mark.asyncio
    async def test_next_is_max_plus_one_not_count_plus_one(self):
        self.store.numbers = ["DKIQ20240115000003", "DKIQ20240115000010"]

        assert await self.generator.generate() == "DKIQ20240115000011"

    @pytest.mark.asyncio
    async def test_unparseable_suffix_counts_as_zero(self):
        self.store.numbers = ["DKIQ20240115ABCDEF", "DKIQ20240115000002"]

        assert await self.generator.generate() == "DKIQ20240115000003"

    @pytest.mark.asyncio
    async def test_only_unparseable_suffixes_restart_at_one(self):
        self.store.numbers = ["DKIQ20240115XXXXXX"]

        assert await self.generator.generate() == "DKIQ20240115000001"

    @pytest.mark.asyncio
    async def test_sequence_restarts_each_day(self):
        self.store.numbers = ["DKIQ20240114000099"]

        assert await self.generator.generate() == "DKIQ20240115000001"

    @pytest.mark.asyncio
    async def test_queries_by_prefix_and_day(self):
        repo = Mock(spec=ShipmentRepository)
        repo.find_tracking_numbers_starting_with = AsyncMock(return_value=[])
        generator = TrackingNumberGenerator(repo, clock=self.clock)

        await generator.generate()

        repo.find_tracking_numbers_starting_with.assert_awaited_once_with(
            "DKIQ20240115",
        )

    @pytest.mark.asyncio
    async def test_configured_prefix(self):
        generator = TrackingNumberGenerator(self.store, prefix="ABCD", clock=self.clock)

        assert await generator.generate() == "ABCD20240115000001"
        assert generator.prefix == "ABCD"

    @pytest.mark.asyncio
    async def test_generated_number_is_valid_and_dated_today(self):
        number = await self.generator.generate()

        assert self.generator.validate_format(number)
        assert self.generator.extract_date(number) == "2024-01-15"

    @pytest.mark.asyncio
    async def test_default_clock_uses_utc_today(self):
        generator = TrackingNumberGenerator(InMemoryTrackingNumbers())

        before = datetime.now(tz=timezone.utc).date().isoformat()
        number = await generator.generate()
        after = datetime.now(tz=timezone.utc).date().isoformat()

        assert generator.extract_date(number) in {before, after}


class TestGenerateWithPrefix:
    """Sequences are scoped per prefix."""

    def setup_method(self):
        self.store = InMemoryTrackingNumbers(
            ["DKIQ20240115000005", "TEST20240115000002"],
        )
        self.generator = TrackingNumberGenerator(
            self.store,
            clock=FixedClock(JAN_15_2024),
        )

    @pytest.mark.asyncio
    async def test_custom_prefix_has_its_own_sequence(self):
        assert await self.generator.generate_with_prefix("TEST") == "TEST20240115000003"

    @pytest.mark.asyncio
    async def test_default_prefix_unaffected(self):
        assert await self.generator.generate() == "DKIQ20240115000006"

    @pytest.mark.asyncio
    async def test_empty_prefix_rejected(self):
        with pytest.raises(ValidationError):
            await self.generator.generate_with_prefix("")


class TestValidateFormat:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("DKIQ20240115000001", True),
            ("DKIQ2024011500000", False),
            ("DKIQ20240115000001X", False),
            ("dkiq20240115000001", False),
            ("", False),
            (None, False),
        ],
    )
    def test_validate_format(self, value, expected):
        assert TrackingNumberGenerator.validate_format(value) is expected


class TestExtractDate:
    def test_extract_date(self):
        assert TrackingNumberGenerator.extract_date("DKIQ20231231000123") == "2023-12-31"

    @pytest.mark.parametrize("value", ["", "DKIQ2024", "not a tracking number", None])
    def test_invalid_raises(self, value):
        with pytest.raises(InvalidTrackingNumberError):
            TrackingNumberGenerator.extract_date(value)
