"""Tests for the command line entry points."""

from unittest.mock import Mock, patch

import pytest

import create_token
import run
from event_form.app.core.security import decode_access_token


def test_run_configures_logging_before_serving():
    calls = Mock()
    with patch("run.setup_logging", calls.setup_logging), patch("run.Server", calls.Server):
        run.main()

    names = [name for name, _, _ in calls.mock_calls]
    assert names[0] == "setup_logging"
    assert "Server().run" in names


def test_create_token_carries_user_id(capsys):
    with patch("sys.argv", ["create_token.py", "--user-id", "organizer-1", "--days", "1"]):
        create_token.main()

    claims = decode_access_token(capsys.readouterr().out.strip())
    assert claims["user_id"] == "organizer-1"


@pytest.mark.parametrize("days", ["0", "-3"])
def test_create_token_rejects_non_positive_days(days):
    with patch("sys.argv", ["create_token.py", "--user-id", "organizer-1", "--days", days]):
        with pytest.raises(SystemExit):
            create_token.main()
