"""Tests for fetching the remote library text."""

from unittest.mock import Mock, patch

import pytest
import requests  # type: ignore[import-untyped]

from copreader import parser
from copreader.errors import TransportError
from copreader.parser.fetch_document import export_url


def _response(
    text: str = "", status: int = 200, content_type: str = "text/plain"
) -> Mock:
    return Mock(
        text=text,
        ok=200 <= status < 400,
        status_code=status,
        reason="Not Found" if status == 404 else "OK",
        headers={"Content-Type": content_type},
    )


def test_fetch_remote_text_returns_text() -> None:
    """Downloads the plain-text export of the document."""

    with patch("requests.get", return_value=_response("# C")) as mock_get:
        text = parser.fetch_remote_text("abc123")

    assert text == "# C"
    mock_get.assert_called_once_with(export_url("abc123"), timeout=30)
    assert export_url("abc123") == (
        "https://docs.google.com/document/d/abc123/export?format=txt"
    )


def test_fetch_remote_text_uses_session() -> None:
    session = Mock()
    session.get.return_value = _response("# C")

    with patch("requests.get") as mock_get:
        assert parser.fetch_remote_text("abc", session=session) == "# C"
        mock_get.assert_not_called()

    session.get.assert_called_once()


def test_fetch_remote_text_requires_id() -> None:
    with pytest.raises(TransportError):
        parser.fetch_remote_text("  ")


def test_fetch_remote_text_status_error() -> None:
    with patch("requests.get", return_value=_response(status=404)):
        with pytest.raises(TransportError) as info:
            parser.fetch_remote_text("abc")

    assert info.value.status_code == 404
    assert info.value.doc_id == "abc"


def test_fetch_remote_text_html_page() -> None:
    """A private document answers with a sign-in page."""

    response = _response(
        "<html></html>", content_type="text/html; charset=utf-8"
    )
    with patch("requests.get", return_value=response):
        with pytest.raises(TransportError):
            parser.fetch_remote_text("abc")


def test_fetch_remote_text_connection_error() -> None:
    with patch(
        "requests.get", side_effect=requests.ConnectionError("offline")
    ):
        with pytest.raises(TransportError) as info:
            parser.fetch_remote_text("abc")

    assert info.value.status_code is None
    assert isinstance(info.value.__cause__, requests.ConnectionError)
