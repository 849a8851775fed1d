"""Tests for the requests-based page fetcher."""

from __future__ import annotations

import pytest
import requests
from pytest_mock import MockerFixture

from bcscout.errors import TransportError
from bcscout.platform.http import PageFetcher, RequestsPageFetcher, format_user_agent
from bcscout.platform.markup import first_text


def test_format_user_agent_with_contact() -> None:
    assert format_user_agent("app", "1.2.3", "mailto:test@example.com") == "app/1.2.3 (mailto:test@example.com)"


def test_format_user_agent_without_contact() -> None:
    assert format_user_agent("app", "1.2.3", "  ") == "app/1.2.3"


def test_fetch_parses_response_body(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value.content = b"<html><body><h1> Hello </h1></body></html>"

    fetcher = RequestsPageFetcher(session=session, timeout=3.0, user_agent="bcscout/test")
    document = fetcher.fetch("https://example.com/page")

    assert isinstance(fetcher, PageFetcher)
    assert first_text(document, "h1") == "Hello"
    session.get.assert_called_once_with(
        "https://example.com/page",
        headers={"Accept": "text/html", "User-Agent": "bcscout/test"},
        timeout=3.0,
    )


def test_default_user_agent(mocker: MockerFixture) -> None:
    fetcher = RequestsPageFetcher(session=mocker.Mock(spec=requests.Session))
    assert fetcher.user_agent.startswith("bcscout/")


def test_connection_error_becomes_transport_error(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(TransportError) as exc_info:
        _ = RequestsPageFetcher(session=session).fetch("https://example.com/")

    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
    assert "https://example.com/" in str(exc_info.value)


def test_http_error_status_becomes_transport_error(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error")

    with pytest.raises(TransportError):
        _ = RequestsPageFetcher(session=session).fetch("https://example.com/missing")


def test_close_releases_owned_session(mocker: MockerFixture) -> None:
    session_cls = mocker.patch("bcscout.platform.http.fetcher.requests.Session")

    fetcher = RequestsPageFetcher()
    fetcher.close()

    session_cls.return_value.close.assert_called_once_with()


def test_close_leaves_injected_session_open(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)

    RequestsPageFetcher(session=session).close()

    session.close.assert_not_called()


def test_context_manager_closes_session(mocker: MockerFixture) -> None:
    session_cls = mocker.patch("bcscout.platform.http.fetcher.requests.Session")
    session_cls.return_value.get.return_value.content = b"<p>ok</p>"

    with RequestsPageFetcher() as fetcher:
        assert first_text(fetcher.fetch("https://example.com/"), "p") == "ok"
        session_cls.return_value.close.assert_not_called()

    session_cls.return_value.close.assert_called_once_with()
