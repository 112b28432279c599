from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence

from ...credit.model import CreditEntry


@dataclass(frozen=True)
class AllocationResult:
    """How a deduction was spread over one employee's credit entries."""

    kept: list[CreditEntry]
    removed: list[CreditEntry] = field(default_factory=list)
    reduced: list[CreditEntry] = field(default_factory=list)


class CreditAllocationStrategy(ABC):
    """Strategy interface: decide which credit entries a deduction consumes."""

    @abstractmethod
    def allocate(self, entries: Sequence[CreditEntry], amount: Decimal) -> AllocationResult:
        raise NotImplementedError
