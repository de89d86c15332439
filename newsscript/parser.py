"""Best-effort extraction of a JSON story array from model text."""

import json
import re
import typing as t
from dataclasses import dataclass

from .errors import ParseError

# greedy: first "[" through last "]"
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a single parse attempt.

    Exactly one of ``records`` and ``error`` is set.
    """

    raw: str
    records: list[t.Any] | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether a JSON array was decoded."""
        return self.error is None

    def unwrap(self) -> list[t.Any]:
        """Return the decoded records or raise.

        :return: Decoded records.
        :raises ParseError: If the parse failed.
        """
        if self.records is None:
            raise ParseError(self.raw, self.error or "")
        return self.records


def extract_array(text: str) -> str | None:
    """Find the first bracketed span in text.

    :param text: Raw model output.
    :return: The span from the first ``[`` to the last ``]``, or None.
    """
    match = _ARRAY_RE.search(text or "")
    return match.group(0) if match else None


def parse_stories(text: str) -> ParseResult:
    """Decode the story array embedded in model output.

    No field validation happens here and malformed JSON is not repaired.

    :param text: Raw model output.
    :return: Parse result with either records or an error reason.
    """
    span = extract_array(text)
    if span is None:
        return ParseResult(raw=text, error="no JSON array found")
    try:
        value = json.loads(span)
    except (ValueError, RecursionError) as exc:
        return ParseResult(raw=text, error=f"invalid JSON: {exc}")
    return ParseResult(raw=text, records=value)
