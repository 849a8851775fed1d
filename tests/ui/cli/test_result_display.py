"""Tests for result display functionality."""

from __future__ import annotations

from io import StringIO

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from bcscout.features.artist import ArtistPage, Link
from bcscout.features.search import Result
from bcscout.ui.cli.display import ResultDisplay


@pytest.fixture
def results() -> list[Result]:
    return [
        Result(
            name="Turbo Inferno",
            location="Oslo, Norway",
            url="https://turboinferno.bandcamp.com",
            genre=" metal",
            tags=("heavy metal", ""),
            art="",
            score=0,
        ),
        Result(
            name="[weird] name",
            location="",
            url="https://weird.bandcamp.com",
            genre="",
            tags=("",),
            art="",
            score=7,
        ),
    ]


def _display() -> tuple[ResultDisplay, StringIO]:
    buffer = StringIO()
    display = ResultDisplay()
    display.console = Console(file=buffer, width=200)
    return display, buffer


def test_show_results_table(results: list[Result]) -> None:
    display, buffer = _display()

    display.show_results(results)

    output = buffer.getvalue()
    assert "Turbo Inferno" in output
    assert "[weird] name" in output
    assert "heavy metal" in output


def test_show_results_empty() -> None:
    display, buffer = _display()

    display.show_results([])

    assert "No matching artists found." in buffer.getvalue()


def test_show_artist_uses_console(mocker: MockerFixture) -> None:
    """Every section of the profile is printed."""

    mock_console = mocker.patch("rich.console.Console")
    mock_instance = mock_console.return_value

    display = ResultDisplay()
    display.console = mock_instance

    display.show_artist(ArtistPage(bio="bio", links=[Link(uri="u", text="t")], embed="e"))

    assert mock_instance.print.call_count >= 6


def test_show_artist_empty_profile() -> None:
    display, buffer = _display()

    display.show_artist(ArtistPage())

    assert buffer.getvalue().count("(none)") == 3
