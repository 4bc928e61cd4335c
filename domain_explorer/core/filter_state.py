from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, Tuple

EXTENSION_ALL = "all"
EXTENSION_COM_BR = "com.br"
EXTENSION_OTHERS = "others"
EXTENSION_CHOICES = (EXTENSION_ALL, EXTENSION_COM_BR, EXTENSION_OTHERS)

DIGITS_ALL = "all"
DIGITS_YES = "yes"
DIGITS_NO = "no"
DIGIT_CHOICES = (DIGITS_ALL, DIGITS_YES, DIGITS_NO)

DEFAULT_MIN_LENGTH = 2
DEFAULT_MAX_LENGTH = 26


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user filters over the domain corpus.

    Fields:

    - min_length / max_length: inclusive bounds on the domain length.
      min_length > max_length is allowed and simply matches nothing.
    - extension: "all", "com.br" (suffix .com.br) or "others" (anything else)
    - has_numbers: "all", "yes" (must contain a digit) or "no" (must not)
    - starts_with: prefix typed by the user, empty means no constraint
    - first_letter: prefix picked from the letter grid, applied on top of starts_with
    - search_term: literal substring, only used when there are no semantic keywords
    - semantic_keywords: substrings produced by the semantic search; any match wins

    Instances are immutable: callers build a new state with dataclasses.replace()
    so equality can be used to detect filter changes.
    """

    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH

    extension: str = EXTENSION_ALL
    has_numbers: str = DIGITS_ALL

    starts_with: str = ""
    first_letter: str = ""

    search_term: str = ""
    semantic_keywords: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["semantic_keywords"] = list(self.semantic_keywords)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> FilterState:
        data = data or {}
        extension = data.get("extension", EXTENSION_ALL)
        has_numbers = data.get("has_numbers", DIGITS_ALL)
        return cls(
            min_length=_as_int(data.get("min_length"), DEFAULT_MIN_LENGTH),
            max_length=_as_int(data.get("max_length"), DEFAULT_MAX_LENGTH),
            extension=extension if extension in EXTENSION_CHOICES else EXTENSION_ALL,
            has_numbers=has_numbers if has_numbers in DIGIT_CHOICES else DIGITS_ALL,
            starts_with=str(data.get("starts_with") or ""),
            first_letter=str(data.get("first_letter") or ""),
            search_term=str(data.get("search_term") or ""),
            semantic_keywords=_as_keywords(data.get("semantic_keywords")),
        )

    @property
    def text_terms(self) -> Tuple[str, ...]:
        """The substrings the text-match step will look for (keywords take priority)."""
        if self.semantic_keywords:
            return self.semantic_keywords
        if self.search_term:
            return (self.search_term,)
        return ()


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_keywords(value: Iterable[Any] | None) -> Tuple[str, ...]:
    if not value or isinstance(value, str):
        return ()
    return tuple(str(k) for k in value if k is not None and str(k) != "")
