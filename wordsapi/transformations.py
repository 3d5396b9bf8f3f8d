# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2023 sardonicism-04
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from .exceptions import UnknownAttribute


class Flat(NamedTuple):
    """Extract the value found at a dotted key path"""

    path: str


class GroupBy(NamedTuple):
    """Bucket the items of a list by one field, projecting another"""

    sources: tuple[str, ...]
    group_field: str
    value_field: str


Rule = Flat | GroupBy

# Only obtainable from the full-detail endpoint
HIDDEN_VERBS = ("syllables", "pronunciation")

# Relations WordsAPI attaches to every individual definition
DETAILS = (
    "examples",
    "synonyms",
    "antonyms",
    "typeOf",
    "hasTypes",
    "partOf",
    "hasParts",
    "instanceOf",
    "hasInstances",
    "similarTo",
    "substanceOf",
    "hasSubstances",
    "inCategory",
    "hasCategories",
    "inRegion",
    "regionOf",
)

# Every attribute a full-detail response carries
FULL_DETAIL_VERBS = frozenset((*HIDDEN_VERBS, *DETAILS, "definitions"))

TRANSFORMATIONS: dict[str, Rule] = {
    **{verb: Flat(verb) for verb in DETAILS},
    "frequency": Flat("frequency"),
    "syllables": Flat("syllables.list"),
    "pronunciation": Flat("pronunciation.all"),
    "rhymes": Flat("rhymes.all"),
    # The per-attribute endpoint names the list `definitions`,
    # the full-detail payload names it `results`
    "definitions": GroupBy(("definitions", "results"), "partOfSpeech", "definition"),
}


def _missing(data: Any, key: str) -> bool:
    return not isinstance(data, Mapping) or data.get(key) is None


def flatten(data: Any, path: str) -> Any:
    """
    Follow a dotted key path through `data`

    If a single-segment path is missing, an empty list is returned. If a
    multi-segment path stops partway through, the partial object reached so
    far is returned instead. WordsAPI relies on this for `pronunciation`,
    which is indexed by part of speech when there's no `all` entry.

    :param data: The decoded response (or a single definition of it)
    :type data: ``Any``

    :param path: The dotted path to extract, e.g. ``"syllables.list"``
    :type path: ``str``
    """
    keys = path.split(".")
    current = data
    for key in keys:
        if _missing(current, key):
            return current if len(keys) > 1 else []
        current = current[key]
    return current


def group_by(
    data: Any, sources: tuple[str, ...], group_field: str, value_field: str
) -> dict[str, list[dict[str, Any]]]:
    items = next(
        (data[key] for key in sources if not _missing(data, key)),
        None,
    )
    result: dict[str, list[dict[str, Any]]] = {}
    if items is None:
        return result

    for item in items:
        result.setdefault(item.get(group_field), []).append(
            {value_field: item.get(value_field)}
        )
    return result


def transform(data: Any, verb: str) -> Any:
    try:
        rule = TRANSFORMATIONS[verb]
    except KeyError:
        raise UnknownAttribute(verb) from None

    match rule:
        case Flat(path):
            return flatten(data, path)
        case GroupBy(sources, group_field, value_field):
            return group_by(data, sources, group_field, value_field)


def transform_full(data: Any) -> dict[str, Any]:
    """
    Reshape a full-detail response into a mapping of every attribute

    Detail relations are accumulated across all definitions, in definition
    order. Each entry under ``definitions`` only carries the details of its
    own definition.
    """
    result: dict[str, Any] = {verb: transform(data, verb) for verb in HIDDEN_VERBS}
    result.update((verb, []) for verb in DETAILS)
    definitions: dict[str, list[dict[str, Any]]] = {}

    for definition in data.get("results") or []:
        partials = {verb: transform(definition, verb) for verb in DETAILS}
        for verb, values in partials.items():
            result[verb].extend(values)

        definitions.setdefault(definition.get("partOfSpeech"), []).append(
            {"definition": definition.get("definition"), "details": partials}
        )

    result["definitions"] = definitions
    return result
