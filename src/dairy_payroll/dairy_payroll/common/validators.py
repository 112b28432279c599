from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.constants import AMOUNT_DECIMALS, MOBILE_DIGITS
from ..core.exceptions import ValidationError

_MOBILE_RE = re.compile(rf"^[0-9]{{{MOBILE_DIGITS}}}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_mobile(value: str) -> str:
    mobile = require_non_empty(value, "Mobile number")
    if not _MOBILE_RE.match(mobile):
        raise ValidationError(f"Please enter a valid {MOBILE_DIGITS}-digit mobile number")
    return mobile


def parse_amount(value: Any, field_name: str) -> Decimal:
    """Parse user input (str/int/float/Decimal) into a finite Decimal that fits a DECIMAL(n,2) column."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"Please enter a valid {field_name.lower()}")
    if not amount.is_finite():
        raise ValidationError(f"Please enter a valid {field_name.lower()}")
    if -amount.normalize().as_tuple().exponent > AMOUNT_DECIMALS:
        raise ValidationError(f"{field_name} can have at most {AMOUNT_DECIMALS} decimal places")
    return amount


def require_positive(value: Decimal, field_name: str) -> Decimal:
    if value <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return value
