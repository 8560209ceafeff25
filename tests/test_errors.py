import pytest

from webparse.errors import (
    FailedGetResults,
    SelectorError,
    SessionBroken,
    WebParserError,
)


def test_session_broken_default_message():
    assert str(SessionBroken()) == "Chromedriver session is broken!"


def test_failed_get_results_default_message():
    assert str(FailedGetResults()) == FailedGetResults.default_message


def test_custom_message_overrides_default():
    assert str(SessionBroken("tab closed")) == "tab closed"


@pytest.mark.parametrize("error_type", [SelectorError, FailedGetResults, SessionBroken])
def test_all_errors_share_base(error_type):
    error = error_type("boom")
    assert isinstance(error, WebParserError)
    assert str(error) == "boom"


def test_selector_error_keeps_message():
    error = SelectorError("bad selector")
    assert isinstance(error, WebParserError)
    assert str(error) == "bad selector"