"""Tests for bounded field adapters."""

import pytest
from pydantic import TypeAdapter, ValidationError

from rfc3339kit.domain.fields import (
    DAY_ADAPTER,
    HOUR_ADAPTER,
    MILLISECOND_ADAPTER,
    MINUTE_ADAPTER,
    MONTH_ADAPTER,
    SECOND_ADAPTER,
    YEAR_ADAPTER,
)

BOUNDS = [
    (YEAR_ADAPTER, 0, 9999),
    (MONTH_ADAPTER, 1, 12),
    (DAY_ADAPTER, 1, 31),
    (HOUR_ADAPTER, 0, 23),
    (MINUTE_ADAPTER, 0, 59),
    (SECOND_ADAPTER, 0, 59),
    (MILLISECOND_ADAPTER, 0, 999),
]


class TestBoundedFields:
    @pytest.mark.parametrize("adapter,low,high", BOUNDS)
    def test_accepts_endpoints(self, adapter: TypeAdapter[int], low: int, high: int) -> None:
        assert adapter.validate_python(low) == low
        assert adapter.validate_python(high) == high

    @pytest.mark.parametrize("adapter,low,high", BOUNDS)
    def test_rejects_below(self, adapter: TypeAdapter[int], low: int, high: int) -> None:
        with pytest.raises(ValidationError):
            adapter.validate_python(low - 1)

    @pytest.mark.parametrize("adapter,low,high", BOUNDS)
    def test_rejects_above(self, adapter: TypeAdapter[int], low: int, high: int) -> None:
        with pytest.raises(ValidationError):
            adapter.validate_python(high + 1)

    def test_hour_24_rejected(self) -> None:
        """No 24:00 end-of-day form."""
        with pytest.raises(ValidationError):
            HOUR_ADAPTER.validate_python(24)

    def test_second_60_rejected(self) -> None:
        """Leap seconds are not represented."""
        with pytest.raises(ValidationError):
            SECOND_ADAPTER.validate_python(60)
