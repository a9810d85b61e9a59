"""Tests for the form field checks."""

import datetime

import pytest

from event_form.app.schemas.event import EventDraft
from event_form.app.services.validation import validate


def make_draft(**overrides):
    values = {
        "eventname": "Meetup",
        "local": "Downtown Hall",
        "date": datetime.date(2025, 9, 1),
        "hour": "18:00",
        "description": "Monthly community meetup",
    }
    values.update(overrides)
    return EventDraft(**values)


def test_valid_draft_passes():
    result = validate(make_draft())
    assert result.is_valid
    assert result.errors == []


def test_date_is_optional():
    assert validate(make_draft(date=None)).is_valid


@pytest.mark.parametrize("eventname", ["", "M"])
def test_short_eventname_mentions_minimum_length(eventname):
    result = validate(make_draft(eventname=eventname))
    assert not result.is_valid
    assert "2" in result.error_for("eventname")


@pytest.mark.parametrize("description", ["", "too short"])
def test_short_description_rejected(description):
    result = validate(make_draft(description=description))
    assert result.error_for("description") is not None
    assert "10" in result.error_for("description")


@pytest.mark.parametrize("hour", ["", "9h", "180"])
def test_short_hour_rejected(hour):
    assert validate(make_draft(hour=hour)).error_for("hour") == "Digite um horário válido"


def test_hour_shape_is_not_parsed():
    assert validate(make_draft(hour="abcd")).is_valid


def test_short_local_rejected():
    assert validate(make_draft(local="X")).error_for("local") == "Digite um local válido"


def test_unparseable_date_rejected():
    result = validate(make_draft(date="31/02/2025"))
    assert result.error_for("date") == "Por favor, insira uma data"


def test_length_counts_untrimmed_value():
    assert validate(make_draft(eventname="  ")).is_valid


def test_all_errors_reported_together():
    result = validate(EventDraft())
    assert [e.field for e in result.errors] == ["eventname", "local", "hour", "description"]


def test_validate_is_idempotent():
    draft = make_draft(eventname="M", hour="1")
    first = validate(draft)
    second = validate(draft)
    assert first == second
    assert draft == make_draft(eventname="M", hour="1")
