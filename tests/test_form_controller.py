"""Tests for form submission and the status message."""

import threading
from unittest.mock import Mock

import pytest
import requests

from events_api import EventsAPI
from event_form.app.services.form_controller import (
    SUCCESS_MESSAGE,
    TRANSPORT_ERROR_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    FormController,
    FormRegistry,
)


@pytest.fixture
def api():
    mock = Mock()
    mock.create_event.return_value = ({"id": "evt-1"}, None)
    return mock


def fill(form, **overrides):
    values = {
        "eventname": "Meetup",
        "local": "Downtown Hall",
        "date": "2025-09-01",
        "hour": "18:00",
        "description": "Monthly community meetup",
    }
    values.update(overrides)
    for name, value in values.items():
        form.set_field(name, value)


def test_submit_success_sets_message(api):
    form = FormController(api, "organizer-1")
    fill(form)

    assert form.submit() is True
    assert form.message == SUCCESS_MESSAGE
    assert form.state().errors == []
    payload = api.create_event.call_args.args[0]
    assert payload["title"] == "Meetup"
    assert payload["location"] == "Downtown Hall"
    assert payload["date"] == "2025-09-01"
    assert payload["organizerId"] == "organizer-1"


def test_success_clears_previous_field_errors(api):
    form = FormController(api, "organizer-1")
    fill(form, eventname="M")
    form.submit()
    assert form.state().errors

    form.set_field("eventname", "Meetup")
    form.submit()

    assert form.message == SUCCESS_MESSAGE
    assert form.state().errors == []


def test_draft_is_kept_after_success(api):
    form = FormController(api, "organizer-1")
    fill(form)
    form.submit()
    assert form.draft.eventname == "Meetup"


def test_invalid_draft_is_not_sent(api):
    form = FormController(api, "organizer-1")
    fill(form, description="short")

    assert form.submit() is False
    api.create_event.assert_not_called()
    assert [e.field for e in form.state().errors] == ["description"]
    assert form.message is None


def test_structured_error_message_shown(api):
    api.create_event.return_value = (
        None,
        {"status_code": 409, "message": "Duplicate event", "structured": True},
    )
    form = FormController(api, "organizer-1")
    fill(form)

    assert form.submit() is False
    assert "Duplicate event" in form.message


def test_unstructured_error_uses_generic_message(api):
    api.create_event.return_value = (
        None,
        {"status_code": None, "message": "connection refused", "structured": False},
    )
    form = FormController(api, "organizer-1")
    fill(form)

    form.submit()

    assert form.message == TRANSPORT_ERROR_MESSAGE
    assert "connection refused" not in form.message


def test_raised_transport_error_uses_generic_message(api):
    api.create_event.side_effect = requests.ConnectionError("unreachable")
    form = FormController(api, "organizer-1")
    fill(form)

    form.submit()

    assert form.message == TRANSPORT_ERROR_MESSAGE


def test_other_exception_uses_unknown_message(api):
    api.create_event.side_effect = RuntimeError("boom")
    form = FormController(api, "organizer-1")
    fill(form)

    assert form.submit() is False
    assert form.message == UNKNOWN_ERROR_MESSAGE


def test_new_attempt_replaces_previous_message(api):
    api.create_event.side_effect = [
        (None, {"status_code": 409, "message": "Duplicate event", "structured": True}),
        ({"id": "evt-1"}, None),
    ]
    form = FormController(api, "organizer-1")
    fill(form)

    form.submit()
    form.submit()

    assert form.message == SUCCESS_MESSAGE


def test_repeated_submit_sends_each_time(api):
    form = FormController(api, "organizer-1")
    fill(form)

    form.submit()
    form.submit()

    assert api.create_event.call_count == 2


def test_registry_keeps_one_form_per_organizer(api):
    registry = FormRegistry(api)
    form = registry.get("organizer-1")
    form.set_field("eventname", "Meetup")

    assert registry.get("organizer-1") is form
    assert registry.get("organizer-2").draft.eventname == ""

    registry.discard("organizer-1")
    assert registry.get("organizer-1").draft.eventname == ""


def test_server_message_list_reaches_status_line():
    session = Mock(spec=requests.Session)
    response = requests.Response()
    response.status_code = 400
    response.url = "http://api.test/events"
    response._content = (
        b'{"statusCode": 400, "message": ["title must be shorter"], "error": "Bad Request"}'
    )
    session.request.return_value = response
    form = FormController(EventsAPI(base_url="http://api.test", session=session), "organizer-1")
    fill(form)

    form.submit()

    assert form.message == "Erro ao criar o evento: title must be shorter"


def test_error_response_without_message_uses_generic_message():
    session = Mock(spec=requests.Session)
    response = requests.Response()
    response.status_code = 500
    response.url = "http://api.test/events"
    response._content = b'{"error": "Internal"}'
    session.request.return_value = response
    form = FormController(EventsAPI(base_url="http://api.test", session=session), "organizer-1")
    fill(form)

    form.submit()

    assert form.message == TRANSPORT_ERROR_MESSAGE
    assert form.message.endswith("falha na comunicação com o servidor")


def test_concurrent_first_access_shares_one_form(api):
    registry = FormRegistry(api)
    barrier = threading.Barrier(8)
    forms = []

    def worker():
        barrier.wait()
        forms.append(registry.get("organizer-1"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(form is registry.get("organizer-1") for form in forms)
