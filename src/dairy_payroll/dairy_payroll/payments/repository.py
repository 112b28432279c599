from __future__ import annotations

from typing import Protocol, Sequence

from .model import NewPaymentRecord, PaymentRecord


class PaymentRepository(Protocol):
    def insert_payment_record(self, record: NewPaymentRecord) -> PaymentRecord:
        raise NotImplementedError

    def list_payment_records(self) -> Sequence[PaymentRecord]:
        """All payment records, payment_date descending."""

        raise NotImplementedError
