# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2023 sardonicism-04
from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Optional

from .transformations import FULL_DETAIL_VERBS

if TYPE_CHECKING:
    from .service import WordService

log = logging.getLogger(__name__)


class Word:
    """
    Retrieves all sorts of information regarding an English word

    Every attribute is requested at most once, results are cached for the
    lifetime of the instance. Failed lookups return ``None`` and are not
    cached, so calling the accessor again retries the request.

    :param word: The word to query
    :type word: ``str``

    :param service: The service used to make requests
    :type service: ``WordService``

    :param prefetch_details: Whether to fetch every detail of the word up
        front, in a single request. Requires a running event loop
    :type prefetch_details: ``bool``
    """

    __slots__ = ("word", "service", "prefetch_details", "_cache", "_locks", "_prefetch")

    def __init__(self, word: str, service: WordService, prefetch_details: bool = False):
        self.word = word
        self.service = service
        self.prefetch_details = prefetch_details
        self._cache: dict[str, Any] = {}
        self._locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)
        self._prefetch: Optional[asyncio.Task[Any]] = None

        if self.prefetch_details:
            self._prefetch = asyncio.create_task(
                self._resolve("definitions", True)
            )

    def __repr__(self):
        return "<{0.__class__.__name__} word={0.word!r} cached={1}>".format(
            self, len(self._cache)
        )

    @property
    def cache(self) -> MappingProxyType[str, Any]:
        return MappingProxyType(self._cache)

    async def wait_until_ready(self) -> None:
        """
        Wait for the prefetch started by the constructor, if any, to finish

        The prefetch is only waited on once. If it raised, the error is
        re-raised to the first caller and later calls fetch on demand.
        """
        task = self._prefetch
        if task is None:
            return

        await asyncio.wait((task,))
        if self._prefetch is task:
            self._prefetch = None
            task.result()

    async def definitions(self, fetch_details: Optional[bool] = None):
        """
        Fetch the meanings of the word, grouped by part of speech

        :param fetch_details: Whether to also fetch the details of each
            definition. Overrides `prefetch_details` for this call only
        :type fetch_details: ``Optional[bool]``

        :returns: A dict of definitions indexed by part of speech
            (noun, verb, etc.), or ``None`` if the word isn't found
        """
        return await self._make("definitions", fetch_details)

    async def sentences(self):
        """Example sentences using the word"""
        return await self._make("examples")

    async def synonyms(self):
        return await self._make("synonyms")

    async def antonyms(self):
        return await self._make("antonyms")

    async def generic_words(self):
        """
        Words that are more generic than this one (hypernyms)

        E.g. car is a generic word for hatchback.
        """
        return await self._make("typeOf")

    async def specific_words(self):
        """
        Words that are more specific than this one (hyponyms)

        E.g. violet, lavender and mauve are specific words for purple.
        """
        return await self._make("hasTypes")

    async def is_part_of(self):
        """
        The larger wholes this word belongs to (holonyms)

        E.g. eye is part of a face.
        """
        return await self._make("partOf")

    async def parts(self):
        """
        Words that are part of this word (meronyms)

        E.g. a face has eyes, a chin and eyebrows.
        """
        return await self._make("hasParts")

    async def known_as(self):
        """Words this word is an example of, e.g. Thatcher is a stateswoman"""
        return await self._make("instanceOf")

    async def instances(self):
        """Concrete instances of this word, e.g. Isabella for queen"""
        return await self._make("hasInstances")

    async def similar_words(self):
        """Words that are similar to, but not synonyms of, this word"""
        return await self._make("similarTo")

    async def substance_of(self):
        return await self._make("substanceOf")

    async def substances(self):
        return await self._make("hasSubstances")

    async def category(self):
        return await self._make("inCategory")

    async def sub_categories(self):
        return await self._make("hasCategories")

    async def region(self):
        """Regions the word is typically used in, e.g. France for bastille"""
        return await self._make("inRegion")

    async def region_of(self):
        """Words typically used in the region this word refers to"""
        return await self._make("regionOf")

    async def syllables(self):
        return await self._make("syllables")

    async def pronunciation(self):
        """
        The IPA pronunciation of the word

        A plain string is returned when the word is pronounced the same
        regardless of its part of speech, otherwise a dict indexed by
        part of speech.
        """
        return await self._make("pronunciation")

    async def rhymes(self):
        return await self._make("rhymes")

    async def frequency(self):
        """The zipf score, per-million usage and diversity of the word"""
        return await self._make("frequency")

    async def _make(self, verb: str, fetch_details: Optional[bool] = None):
        await self.wait_until_ready()
        if fetch_details is None:
            fetch_details = self.prefetch_details

        # rhymes and frequency aren't part of a full-detail response
        return await self._resolve(
            verb, bool(fetch_details) and verb in FULL_DETAIL_VERBS
        )

    async def _resolve(self, verb: str, fetch_details: bool):
        # Concurrent callers for the same attribute share a single request
        async with self._locks[verb]:
            if verb in self._cache:
                return self._cache[verb]

            data = await self.service.fetch(self.word, verb, fetch_details)
            if data is None:
                return None

            for key, value in data.items():
                self._cache.setdefault(key, value)

            log.debug(f"Cached {len(data)} attribute(s) for {self.word!r}")
            return self._cache[verb]
