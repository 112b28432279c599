from __future__ import annotations

from typing import Protocol

from ..payments.model import PaymentRecord
from .model import SettlementPlan


class SettlementRepository(Protocol):
    def apply_settlement(self, plan: SettlementPlan) -> PaymentRecord:
        """Write the payment, the reduced credit and the salary clear-out atomically.

        Raises ConcurrentSettlementError (and writes nothing) when the employee's
        version no longer equals `plan.expected_version`.
        """

        raise NotImplementedError
