"""
Online dictionary oracle backed by the Free Dictionary API.

  GET https://api.dictionaryapi.dev/api/v2/entries/<language>/<word>

  - 200 -> the word has at least one entry: real
  - 404 -> "No Definitions Found": not a real word
  - anything else, or a transport error -> DictionaryUnavailable

Answers are memoized per (language, word) for the lifetime of the object so a
player re-typing a word doesn't cost another round trip.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple
from urllib.parse import quote

import requests

from ..engine.validation import DEFAULT_LANGUAGE
from ..errors import DictionaryUnavailable
from .base import BaseDictionary, register

logger = logging.getLogger(__name__)

API_URL = "https://api.dictionaryapi.dev/api/v2/entries/{language}/{word}"
DEFAULT_TIMEOUT = 5.0


@register
class RemoteDictionary(BaseDictionary):
    id = "remote"
    name = "Free Dictionary API"

    def __init__(self, language: str = DEFAULT_LANGUAGE, *, url: str = API_URL,
                 timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None):
        super().__init__(language=language)
        self.url = url
        self.timeout = float(timeout)
        self.session = session or requests.Session()
        self._cache: Dict[Tuple[str, str], bool] = {}

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        key = (language, word)
        if key in self._cache:
            return self._cache[key]

        url = self.url.format(language=quote(language), word=quote(word))
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise DictionaryUnavailable(f"dictionary lookup failed for {word!r}: {e}") from e

        if r.status_code == 200:
            found = True
        elif r.status_code == 404:
            found = False
        else:
            raise DictionaryUnavailable(
                f"dictionary lookup for {word!r} returned HTTP {r.status_code}")

        logger.debug("Remote lookup %s/%s -> %s", language, word, found)
        self._cache[key] = found
        return found
