"""LLM token counting for raw CSV and Markdown text."""

import logging
from typing import Protocol

log = logging.getLogger(__name__)


class Encoding(Protocol):
    def encode_ordinary(self, text: str) -> list[int]: ...


class TokenEstimator:
    """Counts tokens with a byte-pair encoding.

    Special-token text such as ``<|endoftext|>`` is counted as ordinary
    text, so any user input can be measured.
    """

    def __init__(self, encoding: Encoding, name: str = ""):
        self._encoding = encoding
        self.name = name or getattr(encoding, "name", "")

    @classmethod
    def from_encoding_name(cls, name: str) -> "TokenEstimator":
        """Load a tiktoken vocabulary, e.g. ``cl100k_base``."""
        import tiktoken

        log.info("Loading tokenizer encoding: %s", name)
        return cls(tiktoken.get_encoding(name), name=name)

    def count(self, text: str | None) -> int:
        if not text:
            return 0
        return len(self._encoding.encode_ordinary(text))
