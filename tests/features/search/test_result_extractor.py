"""Tests for converting search-result markup into drafts."""

from __future__ import annotations

from bcscout.features.search import ResultDraft, extract_result
from bcscout.features.search.usecases import RESULT_SELECTOR, split_tags
from bcscout.platform.markup import parse_document


def _result_nodes(html: str):
    return parse_document(html).find_all(RESULT_SELECTOR)


def test_extract_result_reads_every_field(search_page: str) -> None:
    """A fully populated node should fill every field of the draft."""

    draft = extract_result(_result_nodes(search_page)[0], 0)

    assert draft == ResultDraft(
        name="Turbo Inferno",
        location="Oslo, Norway",
        url="https://turboinferno.bandcamp.com",
        genre=" metal",
        tags=("heavy metal", "thrash", "speed metal"),
        art="https://f4.bcbits.com/img/0001_0.jpg",
        position=0,
    )


def test_result_selector_only_matches_band_items(search_page: str) -> None:
    """Album hits in the same list must not be treated as artist results."""

    names = [extract_result(node, i).name for i, node in enumerate(_result_nodes(search_page))]
    assert names == [
        "Turbo Inferno",
        "Turbo",
        "TURBO INFERNO",
        "Completely Different Band",
        "",
    ]


def test_extract_result_missing_subnodes_degrade_to_empty(search_page: str) -> None:
    """A node without any sub-nodes yields empty fields and a single empty tag."""

    draft = extract_result(_result_nodes(search_page)[4], 4)

    assert draft.name == ""
    assert draft.location == ""
    assert draft.url == ""
    assert draft.genre == ""
    assert draft.art == ""
    assert draft.tags == ("",)
    assert draft.position == 4


def test_genre_without_label_is_left_untouched(search_page: str) -> None:
    """Only a literal ``genre:`` prefix is removed."""

    draft = extract_result(_result_nodes(search_page)[2], 2)
    assert draft.genre == "electronic"
    assert draft.tags == ("",)


def test_label_must_be_a_true_prefix() -> None:
    html = """
    <div id="pgBd"><div class="search"><div class="leftcol"><div><ul>
      <li class="band">
        <div class="genre">metal genre: doom</div>
        <div class="tags">heavy, tags: loud</div>
      </li>
    </ul></div></div></div></div>
    """
    draft = extract_result(_result_nodes(html)[0], 0)

    assert draft.genre == "metal genre: doom"
    assert draft.tags == ("heavy", "tags: loud")


def test_split_tags_keeps_empty_elements() -> None:
    assert split_tags(" a, ,b,,") == ("a", "", "b", "", "")
    assert split_tags("") == ("",)


def test_art_uses_first_image_in_art_container() -> None:
    html = """
    <div id="pgBd"><div class="search"><div class="leftcol"><div><ul>
      <li class="band">
        <img src="outside.jpg">
        <div class="artcont"><div class="art"><img><img src="second.jpg"></div></div>
      </li>
    </ul></div></div></div></div>
    """
    draft = extract_result(_result_nodes(html)[0], 0)

    # The first image has no src, so the default applies.
    assert draft.art == ""
