"""
Form controller for event creation.

``FormController`` owns one draft.  Fields are updated one at a time,
validation runs explicitly, and ``submit`` sends the validated draft to
the remote events API exactly once per call.  The outcome is projected
into a single status message, which replaces the previous one.

There is no retry and no duplicate-submission guard: a second call to
``submit`` while a first one is in flight issues a second request.

``FormRegistry`` keeps one controller per organizer, in memory.
"""

import logging
from typing import Any, Dict, Optional

import requests

from events_api import EventsAPI

from ..core.config import settings
from ..schemas.event import EventCreateRequest, EventDraft, FormState
from .validation import ValidationResult, validate


logger = logging.getLogger(__name__)


SUCCESS_MESSAGE = "Evento criado com sucesso!"
ERROR_PREFIX = "Erro ao criar o evento: "
TRANSPORT_ERROR_MESSAGE = ERROR_PREFIX + "falha na comunicação com o servidor"
UNKNOWN_ERROR_MESSAGE = "Erro desconhecido ao criar o evento"


def build_request(draft: EventDraft, organizer_id: str) -> EventCreateRequest:
    """Map form fields to the wire payload.

    The draft must have passed :func:`validate`.
    """
    return EventCreateRequest(
        title=draft.eventname,
        location=draft.local,
        description=draft.description,
        date=draft.date,
        organizer_id=organizer_id,
    )


def error_message(error: Dict[str, Any]) -> str:
    """Turn an API client error into the status line."""
    if error.get("structured") and error.get("message"):
        return ERROR_PREFIX + error["message"]
    return TRANSPORT_ERROR_MESSAGE


class FormController:
    """Field state, validation and submission for one organizer."""

    def __init__(self, api: EventsAPI, organizer_id: str) -> None:
        self.api = api
        self.organizer_id = organizer_id
        self.draft = EventDraft()
        self.validation = ValidationResult()
        self.message: Optional[str] = None

    def set_field(self, name: str, value: object) -> None:
        self.draft.set_field(name, value)

    def validate(self) -> ValidationResult:
        """Validate the current draft and keep the result for display."""
        self.validation = validate(self.draft)
        return self.validation

    def submit(self) -> bool:
        """Validate and, when valid, create the event remotely.

        Returns ``True`` only when the remote API accepted the event.
        On validation failure no request is made and the status message
        is left as it was.
        """
        if not self.validate().is_valid:
            logger.info(
                "Submission blocked for organizer %s: %d invalid field(s)",
                self.organizer_id,
                len(self.validation.errors),
            )
            return False
        request = build_request(self.draft, self.organizer_id)
        try:
            _, error = self.api.create_event(request.to_payload())
        except requests.RequestException:
            logger.exception("Transport failure while creating event")
            self.message = TRANSPORT_ERROR_MESSAGE
            return False
        except Exception:
            logger.exception("Unexpected failure while creating event")
            self.message = UNKNOWN_ERROR_MESSAGE
            return False
        if error:
            self.message = error_message(error)
            return False
        logger.info("Event '%s' created for organizer %s", request.title, self.organizer_id)
        self.message = SUCCESS_MESSAGE
        return True

    def state(self) -> FormState:
        return FormState(
            draft=self.draft.to_read(),
            errors=list(self.validation.errors),
            message=self.message,
        )


class FormRegistry:
    """In-memory map of organizer identifier to form controller."""

    def __init__(self, api: EventsAPI) -> None:
        self.api = api
        self.forms: Dict[str, FormController] = {}

    def get(self, organizer_id: str) -> FormController:
        """Return the organizer's form, creating an empty one on first access."""
        form = self.forms.get(organizer_id)
        if form is None:
            # Concurrent first requests must end up sharing one form.
            form = self.forms.setdefault(organizer_id, FormController(self.api, organizer_id))
        return form

    def discard(self, organizer_id: str) -> None:
        self.forms.pop(organizer_id, None)


def create_registry() -> FormRegistry:
    """Build a registry backed by an API client configured from settings."""
    api = EventsAPI(
        base_url=settings.events_api_base_url,
        openapi_path=settings.openapi_spec_path or None,
        api_key=settings.events_api_key or None,
        timeout=settings.events_api_timeout,
    )
    return FormRegistry(api)
