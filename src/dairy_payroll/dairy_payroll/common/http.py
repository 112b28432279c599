from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import wraps
from typing import Any

from flask import jsonify, request
from werkzeug.exceptions import BadRequest

from ..core.exceptions import ConcurrentSettlementError, NotFoundError, ValidationError
from .datetime_utils import parse_optional_date

logger = logging.getLogger(__name__)


def to_jsonable(value: Any) -> Any:
    """Dataclasses/Decimal/date to plain JSON types (money stays a string)."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise BadRequest("Expected a JSON object")
    return data


def json_view(view):
    """Serialize the return value and map domain errors to HTTP status codes."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            result = view(*args, **kwargs)
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except ConcurrentSettlementError as e:
            return jsonify({"error": str(e)}), 409
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except BadRequest as e:
            return jsonify({"error": e.description}), 400
        except Exception:
            logger.exception("unhandled error in %s", request.path)
            return jsonify({"error": "Internal server error"}), 500

        status = 200
        if isinstance(result, tuple):
            result, status = result
        return jsonify(to_jsonable(result)), status

    return wrapper


def date_arg(value: Any, field_name: str):
    """Optional YYYY-MM-DD input; blank gives None."""
    try:
        return parse_optional_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
