import logging
from collections.abc import Iterable

from csvscope.errors import RejectedInputError

log = logging.getLogger(__name__)


class RequestValidator:
    """Refuses request bodies before they reach the engine.

    Blank bodies are always rejected; so is any body containing one of the
    configured disallowed substrings.
    """

    def __init__(self, disallowed_substrings: Iterable[str] = ()):
        self.disallowed_substrings = tuple(s for s in disallowed_substrings if s)

    def decode(self, body: bytes) -> str:
        """Request body as text; bodies that are not UTF-8 are rejected."""
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as exc:
            log.warning("Rejected CSV body that is not UTF-8: %s", exc)
            raise RejectedInputError("CSV data must be UTF-8 encoded text") from exc

    def check(self, data: str | None) -> None:
        if data is None or not data.strip():
            raise RejectedInputError("CSV data cannot be empty")
        for term in self.disallowed_substrings:
            if term in data:
                log.warning("Rejected CSV containing disallowed content: %r", term)
                raise RejectedInputError(f"CSV data containing '{term}' is not allowed")
