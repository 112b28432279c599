from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CreditEntry, CreditEntryInput


class CreditRepository(Protocol):
    def list_credit_entries(self) -> Sequence[CreditEntry]:
        """All credit entries, date descending."""

        raise NotImplementedError

    def insert_credit_entry(self, entry: CreditEntryInput) -> CreditEntry:
        raise NotImplementedError

    def update_credit_entry(self, entry_id: str, entry: CreditEntryInput) -> Optional[CreditEntry]:
        raise NotImplementedError

    def delete_credit_entry(self, entry_id: str) -> bool:
        raise NotImplementedError

    def replace_all_credit_entries(self, entries: Sequence[CreditEntry]) -> None:
        """Bulk delete-then-reinsert of the whole collection."""

        raise NotImplementedError
