from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.validators import require_mobile, require_non_empty


@dataclass(frozen=True)
class Employee:
    """Domain entity: a person delivering milk and drawing credit.

    `version` is bumped by every settlement so that two operators settling
    the same employee cannot both succeed.
    """

    id: str
    name: str
    mobile: str
    created_at: datetime
    version: int = 0

    def __post_init__(self):
        require_non_empty(self.name, "Name")
        require_mobile(self.mobile)

    @property
    def label(self) -> str:
        return f"{self.name} ({self.mobile})"
