# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2023 sardonicism-04
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import quote

from aiohttp import ClientError, ClientSession, ClientTimeout
from yarl import URL

from .exceptions import SearchNotImplemented, UnknownAttribute
from .tools import format_exception
from .transformations import HIDDEN_VERBS, TRANSFORMATIONS, transform, transform_full
from .word import Word

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .types.config import WordsApiConfig

BASE = URL("https://wordsapiv1.p.mashape.com/words/")

log = logging.getLogger(__name__)


class WordService:
    """
    Wrapper for the WordsAPI (https://www.wordsapi.com)

    :param api_key: The API key sent with every request
    :type api_key: ``str``

    :param timeout: The total request timeout, in seconds
    :type timeout: ``float``

    :param session: The session to make requests with. If not provided,
        one is created on the first request and closed by :meth:`close`
    :type session: ``Optional[ClientSession]``

    :param base_url: The words endpoint, ending with a slash
    :type base_url: ``str | URL``

    :param ssl: Whether to verify TLS certificates. Verification is
        disabled by default
    :type ssl: ``bool``
    """

    __slots__ = ("api_key", "timeout", "base_url", "ssl", "_session", "_owns_session")

    def __init__(
        self,
        api_key: str,
        timeout: float = 5,
        *,
        session: Optional[ClientSession] = None,
        base_url: str | URL = BASE,
        ssl: bool = False,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = URL(base_url)
        self.ssl = ssl
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_config(
        cls, config: WordsApiConfig, *, session: Optional[ClientSession] = None
    ) -> WordService:
        return cls(
            config["api_key"],
            config.get("timeout", 5),
            session=session,
            base_url=config.get("base_url", BASE),
            ssl=config.get("ssl", False),
        )

    def __repr__(self):
        return "<{0.__class__.__name__} base_url={1!r} timeout={0.timeout!r}>".format(
            self, str(self.base_url)
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()

    @property
    def session(self) -> ClientSession:
        if self._session is None:
            self._session = ClientSession()
        return self._session

    async def close(self):
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def word(self, word: str, prefetch_details: bool = False) -> Word:
        """Create a word bound to this service"""
        return Word(word, self, prefetch_details)

    def search(self, options: Mapping[str, Any], page: int = 1, limit: int = 100):
        raise SearchNotImplemented()

    def _url_for(self, word: str, verb: Optional[str] = None) -> URL:
        # The word is a single path segment, so slashes must be escaped too
        url = self.base_url.with_path(
            self.base_url.raw_path.rstrip("/") + "/" + quote(word, safe=""),
            encoded=True,
        )
        if verb is not None:
            url = url / verb
        return url

    async def fetch(
        self, word: str, verb: str, prefetch_all: bool = False
    ) -> Optional[dict[str, Any]]:
        """
        Fetch information about a word

        :param word: The word to look up
        :type word: ``str``

        :param verb: The attribute to fetch, e.g. ``"synonyms"``
        :type verb: ``str``

        :param prefetch_all: Whether to ignore `verb` and fetch every detail
        :type prefetch_all: ``bool``

        :returns: A mapping of attribute names to their values, or ``None``
            if the word wasn't found or the request failed
        :rtype: ``Optional[dict[str, Any]]``

        :raises UnknownAttribute: If `verb` is not a known attribute
        """
        if verb not in TRANSFORMATIONS:
            raise UnknownAttribute(verb)

        full_request = prefetch_all or verb in HIDDEN_VERBS
        url = self._url_for(word, None if full_request else verb)
        headers = {"X-Mashape-Key": self.api_key, "Accept": "application/json"}

        log.debug(f"Requesting {url}")
        try:
            async with self.session.get(
                url,
                headers=headers,
                timeout=ClientTimeout(total=self.timeout),
                ssl=self.ssl,
            ) as resp:
                if resp.status != 200:
                    log.info(f"Lookup of {word!r} failed ({resp.status})")
                    return None

                try:
                    _data = await resp.json(content_type=None)
                except ValueError as e:
                    log.warning(
                        f"Response for {word!r} is not valid JSON\n" + format_exception(e)
                    )
                    return None

        except (ClientError, asyncio.TimeoutError) as e:
            log.warning(f"Request to {url} failed\n" + format_exception(e))
            return None

        if _data is None:
            log.info(f"Lookup of {word!r} returned an empty body")
            return None

        if full_request:
            return transform_full(_data)
        return {verb: transform(_data, verb)}
