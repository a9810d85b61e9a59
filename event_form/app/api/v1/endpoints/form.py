"""
Event creation form endpoints for API v1.

These routes stand in for the browser page: each field update is a
separate call, validation and submission are explicit, and every
response carries the full form state (draft, per-field errors and the
status line).  Each authenticated organizer gets their own draft.

The handlers are plain functions because submission blocks on the
remote events API; FastAPI runs them in its worker thread pool.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from event_form.app.core.security import get_current_organizer
from event_form.app.schemas.event import FieldValue, FormState
from event_form.app.services.form_controller import FormController, FormRegistry


router = APIRouter()


def get_form_registry(request: Request) -> FormRegistry:
    return request.app.state.forms


def get_form(
    organizer_id: str = Depends(get_current_organizer),
    registry: FormRegistry = Depends(get_form_registry),
) -> FormController:
    return registry.get(organizer_id)


@router.get("", response_model=FormState)
def read_form(form: FormController = Depends(get_form)) -> FormState:
    """Return the current draft, field errors and status message."""
    return form.state()


@router.put("/fields/{field_name}", response_model=FormState)
def set_field(
    field_name: str,
    body: FieldValue,
    form: FormController = Depends(get_form),
) -> FormState:
    """Update one field of the draft.

    Raises 404 for names that are not form fields.  Validation does not
    run here; errors shown from a previous attempt are kept until the
    next validation.
    """
    try:
        form.set_field(field_name, body.value)
    except KeyError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown form field: {field_name}",
        ) from e
    return form.state()


@router.post("/validate", response_model=FormState)
def validate_form(form: FormController = Depends(get_form)) -> FormState:
    """Run validation without submitting."""
    form.validate()
    return form.state()


@router.post("/submit", response_model=FormState)
def submit_form(form: FormController = Depends(get_form)) -> FormState:
    """Validate the draft and, when valid, create the event remotely.

    The response is always 200: the outcome is reported through
    ``errors`` (validation) and ``message`` (remote result).
    """
    form.submit()
    return form.state()


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def discard_form(
    organizer_id: str = Depends(get_current_organizer),
    registry: FormRegistry = Depends(get_form_registry),
) -> None:
    """Discard the organizer's draft, as when navigating away from the page."""
    registry.discard(organizer_id)
    return None
