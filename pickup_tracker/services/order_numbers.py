"""
Order number allocation policies

Two formats exist and they are not compatible with each other, so a store
uses exactly one of them (ORDER_NUMBER_SCHEME).

Numbers are never handed out twice: next_number() takes the highest
sequence still in use and the persisted high-water mark for the same
scope, whichever is larger.
"""
import re
from datetime import datetime
from typing import Iterable, Optional

from pickup_tracker.core.exceptions import ValidationError

SCHEME_SEQUENTIAL = "sequential"
SCHEME_DATE_CODED = "date_coded"


class OrderNumberPolicy:
    """Allocates the next free order number given every number already in use"""

    width = 3

    def __init__(self, prefix: str = "WHS"):
        self.prefix = prefix

    def scope(self, now: datetime) -> str:
        """Numbers sharing a scope share one sequence"""
        raise NotImplementedError

    def sequence_of(self, number: Optional[str], now: datetime) -> Optional[int]:
        """Sequence part of `number`, or None when it belongs to another scope"""
        match = re.match(rf"^{re.escape(self.scope(now))}-(\d+)$", number or "")
        return int(match.group(1)) if match else None

    def next_number(self, existing: Iterable[str], now: datetime, floor: int = 0) -> str:
        highest = floor
        for number in existing:
            sequence = self.sequence_of(number, now)
            if sequence is not None:
                highest = max(highest, sequence)
        return f"{self.scope(now)}-{highest + 1:0{self.width}d}"


class SequentialOrderNumbers(OrderNumberPolicy):
    """WHS-001, WHS-002, ..."""

    def scope(self, now: datetime) -> str:
        return self.prefix


class DateCodedOrderNumbers(OrderNumberPolicy):
    """WHS-<day><month>-<seq>, e.g. WHS-708-01 for the first order on 7 August"""

    width = 2

    def date_code(self, now: datetime) -> str:
        return f"{now.day}{now.month:02d}"

    def scope(self, now: datetime) -> str:
        return f"{self.prefix}-{self.date_code(now)}"


def build_policy(scheme: str, prefix: str = "WHS") -> OrderNumberPolicy:
    if scheme == SCHEME_SEQUENTIAL:
        return SequentialOrderNumbers(prefix)
    if scheme == SCHEME_DATE_CODED:
        return DateCodedOrderNumbers(prefix)
    raise ValidationError(f"Unknown order number scheme: {scheme}")
