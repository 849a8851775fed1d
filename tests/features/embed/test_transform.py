"""Tests for embedded player URL rewriting."""

from __future__ import annotations

from bcscout.features.embed import EMBED_PREFIX, parse_embed_attributes, transform_embed

SMALL_PLAYER = (
    "http://bandcamp.com/EmbeddedPlayer/album=905056075/size=small/bgcol=ffffff/"
    "linkcol=0687f5/transparent=true/"
)


def test_parse_embed_attributes() -> None:
    assert parse_embed_attributes(SMALL_PLAYER) == {
        "album": "905056075",
        "size": "small",
        "bgcol": "ffffff",
        "linkcol": "0687f5",
        "transparent": "true",
    }


def test_parse_drops_segments_without_single_equals() -> None:
    url = "http://bandcamp.com/EmbeddedPlayer/album=1/broken/a=b=c/=x/"
    assert parse_embed_attributes(url) == {"album": "1", "": "x"}


def test_transform_without_updates_keeps_attributes() -> None:
    rewritten = transform_embed("http://bandcamp.com/EmbeddedPlayer/album=X/size=small/", {})

    assert rewritten.startswith(EMBED_PREFIX)
    assert parse_embed_attributes(rewritten) == {"album": "X", "size": "small"}


def test_transform_updates_existing_attribute() -> None:
    rewritten = transform_embed("http://bandcamp.com/EmbeddedPlayer/album=X/size=small/", {"size": "large"})

    assert "size=large/" in rewritten
    assert "album=X/" in rewritten
    assert "size=small" not in rewritten


def test_transform_adds_missing_attribute() -> None:
    rewritten = transform_embed(SMALL_PLAYER, {"artwork": "small"})

    attrs = parse_embed_attributes(rewritten)
    assert attrs["artwork"] == "small"
    assert attrs["album"] == "905056075"
    assert len(attrs) == 6


def test_transform_serialization_layout() -> None:
    """The prefix is followed by a separator before the attribute segments."""

    rewritten = transform_embed(SMALL_PLAYER, {"size": "large", "tracklist": "false"})

    assert rewritten == (
        "http://bandcamp.com/EmbeddedPlayer//album=905056075/size=large/bgcol=ffffff/"
        "linkcol=0687f5/transparent=true/tracklist=false/"
    )
    assert rewritten.count(EMBED_PREFIX) == 1


def test_transform_normalises_foreign_host() -> None:
    rewritten = transform_embed("https://bandcamp.com/EmbeddedPlayer/v=2/album=1/", {})

    assert rewritten == f"{EMBED_PREFIX}/v=2/album=1/"


def test_transform_of_empty_url() -> None:
    assert transform_embed("", {"size": "large"}) == f"{EMBED_PREFIX}/size=large/"
