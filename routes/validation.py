"""Form field checks shared by the mutation routes.

Each parser returns ``(value, error)``; a non-empty error means the
submission must be rejected without writing anything.
"""

import math
from datetime import date

from store.blobs import allowed_attachment

MAX_AMOUNT = 99999999.99
MAX_LABEL_LENGTH = 100
MAX_NOTES_LENGTH = 1000


def parse_amount(raw, field='Amount', required=True):
    raw = (raw or '').strip()
    if not raw:
        if required:
            return None, f"{field} is required."
        return 0.0, None
    try:
        value = float(raw)
    except ValueError:
        return None, f"{field} must be a number."
    if not math.isfinite(value):
        return None, f"{field} must be a number."
    if value < 0:
        return None, f"{field} cannot be negative."
    if value > MAX_AMOUNT:
        return None, f"{field} is too large."
    return round(value, 2), None


def parse_date(raw, field='Date'):
    raw = (raw or '').strip()
    if not raw:
        return None, f"{field} is required."
    try:
        return date.fromisoformat(raw).isoformat(), None
    except ValueError:
        return None, f"{field} must be a valid date (YYYY-MM-DD)."


def parse_label(raw, field, max_length=MAX_LABEL_LENGTH, required=True):
    value = (raw or '').strip()
    if required and not value:
        return None, f"{field} is required."
    if len(value) > max_length:
        return None, f"{field} must be at most {max_length} characters."
    return value, None


def parse_notes(raw):
    return parse_label(raw, 'Notes', max_length=MAX_NOTES_LENGTH, required=False)


def check_attachment(file, allowed_ext):
    """Return the uploaded file if one was sent, plus an error for a bad extension."""
    if not file or not file.filename:
        return None, None
    if not allowed_attachment(file.filename, allowed_ext):
        return None, "Attachment must be one of: " + ", ".join(sorted(allowed_ext)) + "."
    return file, None


def first_error(*results):
    for _, error in results:
        if error:
            return error
    return None
