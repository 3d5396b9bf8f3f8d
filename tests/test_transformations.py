from __future__ import annotations

import pytest

from wordsapi import UnknownAttribute
from wordsapi.transformations import (
    DETAILS,
    TRANSFORMATIONS,
    Flat,
    GroupBy,
    flatten,
    group_by,
    transform,
    transform_full,
)

SINGLE_SEGMENT = [
    verb
    for verb, rule in TRANSFORMATIONS.items()
    if isinstance(rule, Flat) and "." not in rule.path
]


@pytest.mark.parametrize("verb", SINGLE_SEGMENT)
def test_missing_single_segment_is_empty_list(verb):
    assert transform({"word": "effect"}, verb) == []


def test_present_single_segment_is_returned():
    assert transform({"synonyms": ["outcome", "result"]}, "synonyms") == [
        "outcome",
        "result",
    ]


def test_missing_multi_segment_returns_partial_object():
    by_pos = {"noun": "ˈɪnˌsʌlt", "verb": "ˌɪnˈsʌlt"}
    assert transform({"pronunciation": by_pos}, "pronunciation") == by_pos


def test_missing_first_of_multi_segment_returns_whole_object():
    data = {"word": "effect"}
    assert transform(data, "rhymes") == data


def test_multi_segment_present():
    assert transform({"syllables": {"count": 2, "list": ["ef", "fect"]}}, "syllables") == [
        "ef",
        "fect",
    ]


def test_null_counts_as_missing():
    assert flatten({"synonyms": None}, "synonyms") == []
    assert flatten({"rhymes": {"all": None}}, "rhymes.all") == {"all": None}


def test_flatten_through_non_mapping():
    assert flatten({"syllables": ["ef"]}, "syllables.list") == ["ef"]


def test_group_by_first_seen_order():
    data = {
        "definitions": [
            {"partOfSpeech": "noun", "definition": "first noun"},
            {"partOfSpeech": "verb", "definition": "only verb"},
            {"partOfSpeech": "noun", "definition": "second noun"},
        ]
    }
    grouped = transform(data, "definitions")

    assert list(grouped) == ["noun", "verb"]
    assert grouped["noun"] == [
        {"definition": "first noun"},
        {"definition": "second noun"},
    ]
    assert grouped["verb"] == [{"definition": "only verb"}]


def test_group_by_falls_back_to_results():
    data = {"results": [{"partOfSpeech": "noun", "definition": "a result", "synonyms": []}]}
    assert transform(data, "definitions") == {"noun": [{"definition": "a result"}]}


def test_group_by_missing_source():
    assert group_by({}, ("definitions",), "partOfSpeech", "definition") == {}


def test_unknown_attribute_raises():
    with pytest.raises(UnknownAttribute) as info:
        transform({}, "colour")

    assert info.value.attribute == "colour"
    assert str(info.value) == "Unknown attribute: colour"


def test_rule_table_is_closed():
    assert {type(rule) for rule in TRANSFORMATIONS.values()} == {Flat, GroupBy}
    assert len(TRANSFORMATIONS) == 21


def test_transform_full():
    data = {
        "results": [
            {"partOfSpeech": "noun", "definition": "a result", "synonyms": ["outcome", "consequence"]},
            {"partOfSpeech": "verb", "definition": "produce", "synonyms": ["bring about"], "typeOf": ["make"]},
            {"partOfSpeech": "noun", "definition": "an impression", "examples": ["for effect"]},
        ],
        "syllables": {"list": ["ef", "fect"]},
        "pronunciation": {"all": "ɪˈfɛkt"},
    }
    result = transform_full(data)

    assert result["syllables"] == ["ef", "fect"]
    assert result["pronunciation"] == "ɪˈfɛkt"
    assert result["synonyms"] == ["outcome", "consequence", "bring about"]
    assert result["typeOf"] == ["make"]
    assert result["examples"] == ["for effect"]
    assert result["antonyms"] == []

    definitions = result["definitions"]
    assert list(definitions) == ["noun", "verb"]
    assert [entry["definition"] for entry in definitions["noun"]] == [
        "a result",
        "an impression",
    ]

    # Details are per definition, not cumulative
    first = definitions["noun"][0]["details"]
    assert first["synonyms"] == ["outcome", "consequence"]
    assert first["examples"] == []
    assert set(first) == set(DETAILS)
    assert definitions["noun"][1]["details"]["synonyms"] == []


def test_transform_full_without_results():
    result = transform_full({"syllables": {"list": ["a"]}})

    assert result["definitions"] == {}
    assert all(result[verb] == [] for verb in DETAILS)
    assert result["pronunciation"] == {"syllables": {"list": ["a"]}}


def test_missing_part_of_speech_is_bucketed_under_none():
    result = transform_full({"results": [{"definition": "x", "synonyms": ["y"]}]})

    assert result["synonyms"] == ["y"]
    assert result["definitions"][None][0]["definition"] == "x"
    assert transform({"definitions": [{"definition": "x"}]}, "definitions") == {
        None: [{"definition": "x"}]
    }
