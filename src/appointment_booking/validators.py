from datetime import datetime

from flask import request

from .errors import ValidationError
from .models.appointment import APPOINTMENT_STATUSES


def get_payload():
    # Missing or malformed JSON counts as an empty body
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def require_fields(data, fields, message):
    if not all(data.get(field) for field in fields):
        raise ValidationError(message)


def parse_date(value):
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Invalid appointment_date format. Use YYYY-MM-DD")


def parse_time(value):
    value = str(value).strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise ValidationError("Invalid appointment_time format. Use HH:MM or HH:MM:SS")


def validate_status(status):
    if not status or status not in APPOINTMENT_STATUSES:
        raise ValidationError("Valid status is required")
    return status
