from __future__ import annotations

from typing import Protocol, Sequence

from .model import NewSalaryEntry, SalaryEntry


class SalaryRepository(Protocol):
    def list_salary_entries(self) -> Sequence[SalaryEntry]:
        """All salary entries, date descending."""

        raise NotImplementedError

    def insert_salary_entry(self, entry: NewSalaryEntry) -> SalaryEntry:
        raise NotImplementedError

    def delete_salary_entry(self, entry_id: str) -> bool:
        raise NotImplementedError
