from datetime import datetime

import pytest

from pickup_tracker.core.exceptions import ValidationError
from pickup_tracker.services.order_numbers import DateCodedOrderNumbers, SequentialOrderNumbers, build_policy

NOW = datetime(2026, 8, 7, 9, 30)


def test_sequential_starts_at_one():
    assert SequentialOrderNumbers().next_number([], NOW) == "WHS-001"


def test_sequential_uses_highest_number_not_count():
    existing = ["WHS-001", "WHS-005", "WHS-003"]
    assert SequentialOrderNumbers().next_number(existing, NOW) == "WHS-006"


def test_sequential_ignores_other_formats():
    existing = ["WHS-708-01", "ABC-900", None]
    assert SequentialOrderNumbers().next_number(existing, NOW) == "WHS-001"


def test_sequential_grows_past_three_digits():
    assert SequentialOrderNumbers().next_number(["WHS-999"], NOW) == "WHS-1000"


def test_date_coded_format():
    assert DateCodedOrderNumbers().next_number([], NOW) == "WHS-708-01"


def test_date_coded_counts_only_today():
    existing = ["WHS-708-01", "WHS-708-02", "WHS-608-07"]
    assert DateCodedOrderNumbers().next_number(existing, NOW) == "WHS-708-03"


def test_build_policy():
    assert isinstance(build_policy("sequential"), SequentialOrderNumbers)
    assert isinstance(build_policy("date_coded", "ABC"), DateCodedOrderNumbers)
    with pytest.raises(ValidationError):
        build_policy("random")


def test_floor_wins_over_lower_existing_numbers():
    assert SequentialOrderNumbers().next_number(["WHS-001"], NOW, floor=7) == "WHS-008"
    assert SequentialOrderNumbers().next_number(["WHS-009"], NOW, floor=7) == "WHS-010"


def test_date_coded_floor_applies_to_its_day():
    policy = DateCodedOrderNumbers()
    assert policy.scope(NOW) == "WHS-708"
    assert policy.next_number([], NOW, floor=4) == "WHS-708-05"


def test_sequence_of_reads_only_its_scope():
    assert SequentialOrderNumbers().sequence_of("WHS-042", NOW) == 42
    assert SequentialOrderNumbers().sequence_of("WHS-708-01", NOW) is None
    assert DateCodedOrderNumbers().sequence_of("WHS-708-03", NOW) == 3
    assert DateCodedOrderNumbers().sequence_of("WHS-608-03", NOW) is None
