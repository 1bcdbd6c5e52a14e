"""Anchor extraction and ordering tests."""

from __future__ import annotations

import types

from wikilookup.engine.anchors import extract_link_candidates, prioritize_candidates
from wikilookup.engine.types import LinkCandidate

from .conftest import make_candidate


def test_extracts_article_links_with_boundaries(engine_config):
    html = (
        '<p>Rome is the capital of <a href="/wiki/Italy" title="Italy">Italy</a>. '
        'It surrounds <a href="/wiki/Vatican_City" title="Vatican City">Vatican City</a>, '
        'a <a href="/wiki/City-state">city-state</a>.</p>'
    )

    candidates = list(extract_link_candidates(html, engine_config))

    assert candidates == [
        LinkCandidate(left=" ", text="Italy", right=".", target="Italy"),
        LinkCandidate(left=" ", text="Vatican City", right=",", target="Vatican City"),
        LinkCandidate(left=" ", text="city-state", right=".", target="City-state"),
    ]


def test_extraction_is_lazy(engine_config):
    result = extract_link_candidates(' <a href="/wiki/Italy">Italy</a>.', engine_config)

    assert isinstance(result, types.GeneratorType)
    assert next(result).target == "Italy"


def test_fragments_without_article_anchors_yield_nothing(engine_config):
    html = (
        '<p>Plain text only.</p>'
        ' <a href="https://example.com/page">Example</a> '
        ' <a href="/w/index.php?title=Rome&action=edit">edit</a> '
        ' <a href="/wiki/File:Colosseum.jpg">picture</a> '
        ' <a href="/wiki/Help:IPA/Italian">IPA</a> '
    )

    assert list(extract_link_candidates(html, engine_config)) == []
    assert list(extract_link_candidates("", engine_config)) == []


def test_empty_text_or_target_is_dropped(engine_config):
    html = (
        ' <a href="/wiki/">Nothing</a> '
        ' <a href="/wiki/Rome"></a> '
        ' <a href="/wiki/Rome"><img src="x.png"/></a> '
        ' <a href="/wiki/Italy">Italy</a>.'
    )

    candidates = list(extract_link_candidates(html, engine_config))

    assert [candidate.text for candidate in candidates] == ["Italy"]


def test_target_is_percent_decoded_and_underscores_become_spaces(engine_config):
    html = ' <a href="/wiki/Caf%C3%A9_society">café society</a>.'

    (candidate,) = extract_link_candidates(html, engine_config)

    assert candidate.target == "Café society"


def test_visible_text_drops_inner_markup_and_entities(engine_config):
    html = ' <a href="/wiki/Tom_and_Jerry"><i>Tom</i> &amp; Jerry</a>,'

    (candidate,) = extract_link_candidates(html, engine_config)

    assert candidate.text == "Tom & Jerry"
    assert candidate.key == " Tom & Jerry,"


def test_adjacent_anchors_share_a_boundary(engine_config):
    html = '(<a href="/wiki/Latin">Latin</a> <a href="/wiki/Italian_language">Italian</a>)'

    candidates = list(extract_link_candidates(html, engine_config))

    assert [(c.left, c.text, c.right) for c in candidates] == [
        ("(", "Latin", " "),
        (" ", "Italian", ")"),
    ]


def test_excluded_namespaces_are_configurable(engine_config):
    engine_config.raw["excluded_namespaces"] = []
    html = ' <a href="/wiki/Help:IPA">IPA</a> '

    (candidate,) = extract_link_candidates(html, engine_config)

    assert candidate.target == "Help:IPA"


def test_titles_with_colons_outside_namespaces_are_kept(engine_config):
    html = ' <a href="/wiki/Star_Wars:_Episode_IV">A New Hope</a>.'

    (candidate,) = extract_link_candidates(html, engine_config)

    assert candidate.target == "Star Wars: Episode IV"


def test_prioritize_orders_longest_key_first_and_last_target_wins():
    candidates = [
        make_candidate("Rome", right="."),
        make_candidate("Roman Empire"),
        make_candidate("Italy", right="."),
        make_candidate("Rome", "Rome (city)", right="."),
    ]

    ordered = prioritize_candidates(candidates)

    assert [candidate.key for candidate in ordered] == [" Roman Empire ", " Italy.", " Rome."]
    assert ordered[-1].target == "Rome (city)"


def test_prioritize_keeps_first_seen_order_on_ties():
    candidates = [make_candidate("Cd"), make_candidate("Ab"), make_candidate("Ef")]

    ordered = prioritize_candidates(candidates)

    assert [candidate.text for candidate in ordered] == ["Cd", "Ab", "Ef"]


def test_prioritize_is_idempotent_and_deterministic():
    candidates = [
        make_candidate("Po", right=","),
        make_candidate("Tiber River"),
        make_candidate("Lazio", left="("),
        make_candidate("Po", "Po River", right=","),
    ]

    first = prioritize_candidates(candidates)

    assert prioritize_candidates(first) == first
    assert prioritize_candidates(candidates) == first
