from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from ...credit.model import CreditEntry
from .base import AllocationResult, CreditAllocationStrategy

logger = logging.getLogger(__name__)


class OldestFirstAllocation(CreditAllocationStrategy):
    """Consume whole entries from the oldest date; the last one touched may be
    reduced instead of removed. Entries dated the same day keep their input order.
    """

    def allocate(self, entries: Sequence[CreditEntry], amount: Decimal) -> AllocationResult:
        remaining = Decimal(amount)
        kept: list[CreditEntry] = []
        removed: list[CreditEntry] = []
        reduced: list[CreditEntry] = []

        for entry in sorted(entries, key=lambda e: e.date):
            if remaining <= 0:
                kept.append(entry)
            elif entry.amount <= remaining:
                remaining -= entry.amount
                removed.append(entry)
                logger.debug("credit %s consumed (%s), %s left to deduct", entry.id, entry.amount, remaining)
            else:
                partial = entry.with_amount(entry.amount - remaining)
                logger.debug("credit %s reduced %s -> %s", entry.id, entry.amount, partial.amount)
                remaining = Decimal("0")
                kept.append(partial)
                reduced.append(partial)

        return AllocationResult(kept=kept, removed=removed, reduced=reduced)
