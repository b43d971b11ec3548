"""Form Validator

Validates an admission form field by field. Unlike the other calculators it
never fails as a whole: every broken field is reported at once so a form can
show all its errors together.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from constants import (
    AGE_RANGE,
    ASCII_DIGITS,
    FORM_ERRORS,
    NAME_LENGTH,
    PHONE_FIRST_DIGITS,
    PHONE_LENGTH,
    PINCODE_LENGTH,
)
from core.logging import get_logger
from core.numeric import Number, is_number

logger = get_logger(__name__)


@dataclass(frozen=True)
class FormResult:
    """Outcome of validating a form."""

    is_valid: bool
    errors: Dict[str, str] = field(default_factory=dict)


def is_digits(value: str) -> bool:
    """True if every character is an ASCII digit 0-9."""
    return all(char in ASCII_DIGITS for char in value)


def coerce_number(value: Any) -> Optional[Number]:
    """Coerce a form value to a number the way a browser form would.

    Numbers pass through, bools become 0/1, and strings are parsed after
    trimming (a blank string reads as 0). Anything else is None.

    Examples:
        >>> coerce_number(" 22 ")
        22
        >>> coerce_number("22.5")
        22.5
        >>> coerce_number("abc") is None
        True
    """
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    if value is None:
        return 0
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text == "":
        return 0
    if "_" in text:
        return None
    for convert in (int, float):
        try:
            number = convert(text)
        except ValueError:
            continue
        return number if is_number(number) else None
    return None


def is_truthy(value: Any) -> bool:
    """Truthiness, with NaN counted as false."""
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def valid_name(value: Any) -> bool:
    low, high = NAME_LENGTH
    return (
        isinstance(value, str)
        and value.strip() != ""
        and low <= len(value) <= high
    )


def valid_email(value: Any) -> bool:
    """Exactly one "@", with a "." somewhere after it."""
    if not isinstance(value, str) or value.count("@") != 1:
        return False
    _, domain = value.split("@")
    return "." in domain


def valid_phone(value: Any) -> bool:
    """Ten-digit Indian mobile number starting with 6, 7, 8 or 9."""
    return (
        isinstance(value, str)
        and len(value) == PHONE_LENGTH
        and is_digits(value)
        and value[0] in PHONE_FIRST_DIGITS
    )


def valid_age(value: Any) -> bool:
    low, high = AGE_RANGE
    age = coerce_number(value)
    if age is None or not math.isfinite(age):
        return False
    return float(age).is_integer() and low <= age <= high


def valid_pincode(value: Any) -> bool:
    """Six-digit pincode that doesn't start with 0."""
    return (
        isinstance(value, str)
        and len(value) == PINCODE_LENGTH
        and is_digits(value)
        and not value.startswith("0")
    )


def valid_state(value: Any) -> bool:
    state = "" if value is None else value
    return isinstance(state, str) and state.strip() != ""


# Checked in this order; each check sees only its own field
FIELD_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "name": valid_name,
    "email": valid_email,
    "phone": valid_phone,
    "age": valid_age,
    "pincode": valid_pincode,
    "state": valid_state,
    "agreeTerms": is_truthy,
}


def validate_form(form_data: Any) -> FormResult:
    """Validate every field of an admission form.

    Args:
        form_data: Mapping with name, email, phone, age, pincode, state and
            agreeTerms. Missing fields are treated as None; a non-mapping
            is treated as an empty form.

    Returns:
        FormResult with is_valid and a field -> message mapping of errors

    Examples:
        >>> validate_form({"name": "", "email": "a@b.co", "phone": "9876543210",
        ...                "age": 20, "pincode": "400001", "state": "Goa"}).errors
        {'name': 'Name must be 2-50 characters', 'agreeTerms': 'Must agree to terms'}
    """
    if not isinstance(form_data, Mapping):
        logger.debug("Form data is not a mapping; validating as empty")
        form_data = {}

    errors = {
        name: FORM_ERRORS[name]
        for name, check in FIELD_CHECKS.items()
        if not check(form_data.get(name))
    }

    if errors:
        logger.debug("Form failed on: {}", ", ".join(errors))
    return FormResult(is_valid=not errors, errors=errors)
