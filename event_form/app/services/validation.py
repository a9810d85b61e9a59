"""
Field validation for the event creation form.

Each field has its own pure check returning an error message or
``None``.  ``validate`` runs every check independently so that all
errors surface at once, and never mutates the draft.
"""

import datetime
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..schemas.event import EventDraft, FieldError


EVENTNAME_MIN_LENGTH = 2
LOCAL_MIN_LENGTH = 2
HOUR_MIN_LENGTH = 4
DESCRIPTION_MIN_LENGTH = 10


def check_eventname(value: str) -> Optional[str]:
    if len(value) < EVENTNAME_MIN_LENGTH:
        return f"O nome do evento deve ter pelo menos {EVENTNAME_MIN_LENGTH} caracteres"
    return None


def check_local(value: str) -> Optional[str]:
    if len(value) < LOCAL_MIN_LENGTH:
        return "Digite um local válido"
    return None


def check_date(value: object) -> Optional[str]:
    """The date is optional, but anything present must be a calendar date."""
    if value is None or isinstance(value, datetime.date):
        return None
    return "Por favor, insira uma data"


def check_hour(value: str) -> Optional[str]:
    # "HH:MM" is the expected shape; only the length is enforced.
    if len(value) < HOUR_MIN_LENGTH:
        return "Digite um horário válido"
    return None


def check_description(value: str) -> Optional[str]:
    if len(value) < DESCRIPTION_MIN_LENGTH:
        return f"A descrição do evento deve ter pelo menos {DESCRIPTION_MIN_LENGTH} caracteres"
    return None


# Order matches the form layout.
FIELD_CHECKS: Dict[str, Callable[[object], Optional[str]]] = {
    "eventname": check_eventname,
    "local": check_local,
    "date": check_date,
    "hour": check_hour,
    "description": check_description,
}


@dataclass
class ValidationResult:
    errors: List[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_for(self, name: str) -> Optional[str]:
        for error in self.errors:
            if error.field == name:
                return error.message
        return None


def validate(draft: EventDraft) -> ValidationResult:
    """Check every field of ``draft`` and collect all failures."""
    errors = []
    for name, check in FIELD_CHECKS.items():
        message = check(getattr(draft, name))
        if message is not None:
            errors.append(FieldError(field=name, message=message))
    return ValidationResult(errors=errors)
