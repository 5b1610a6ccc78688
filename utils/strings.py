"""String helpers: case conversion, needle matching and small transforms."""

from __future__ import annotations

import re
import secrets
import string
import unicodedata
from typing import Iterable, List, Union

Needles = Union[str, Iterable[str]]

_SEPARATORS = re.compile(r"[\s_-]+")
_RANDOM_ALPHABET = string.ascii_letters + string.digits


def _kind(char: str) -> str:
    if char.isupper():
        return "upper"
    if char.islower():
        return "lower"
    if char.isdigit():
        return "digit"
    return "other"


def _split_case(chunk: str) -> List[str]:
    parts: List[str] = []
    start = 0
    kinds = [_kind(char) for char in chunk]
    for index in range(1, len(chunk)):
        prev, cur = kinds[index - 1], kinds[index]
        nxt = kinds[index + 1] if index + 1 < len(chunk) else None
        if (
            (cur == "upper" and prev in ("lower", "digit"))
            # Last capital of an acronym starts the next word: HTTPServer.
            or (cur == "upper" and prev == "upper" and nxt == "lower")
            or (cur == "digit" and prev in ("upper", "lower"))
            or (cur in ("upper", "lower") and prev == "digit")
        ):
            parts.append(chunk[start:index])
            start = index
    parts.append(chunk[start:])
    return parts


def words(value: str) -> List[str]:
    """Split ``value`` on whitespace, ``_``, ``-`` and case or digit transitions.

    Other characters (accented letters, punctuation) stay inside their word.
    """

    result: List[str] = []
    for chunk in _SEPARATORS.split(value):
        if chunk:
            result.extend(_split_case(chunk))
    return result


def snake(value: str, delimiter: str = "_") -> str:
    return delimiter.join(word.lower() for word in words(value))


def kebab(value: str) -> str:
    return snake(value, "-")


def studly(value: str) -> str:
    return "".join(word.capitalize() for word in words(value))


def camel(value: str) -> str:
    parts = words(value)
    if not parts:
        return ""
    return parts[0].lower() + "".join(word.capitalize() for word in parts[1:])


def _needles(needles: Needles) -> List[str]:
    if isinstance(needles, str):
        return [needles]
    return list(needles)


def starts_with(haystack: str, needles: Needles) -> bool:
    return any(needle and haystack.startswith(needle) for needle in _needles(needles))


def ends_with(haystack: str, needles: Needles) -> bool:
    return any(needle and haystack.endswith(needle) for needle in _needles(needles))


def contains(haystack: str, needles: Needles) -> bool:
    return any(needle and needle in haystack for needle in _needles(needles))


def limit(value: str, limit: int = 100, end: str = "...") -> str:
    if len(value) <= limit:
        return value
    return value[:limit] + end


def random(length: int = 16) -> str:
    """Return a random alphanumeric string from a cryptographically secure source."""

    return "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(length))


def slug(value: str, separator: str = "-") -> str:
    """Build a URL-safe slug, transliterating accented characters to ASCII."""

    ascii_value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    ascii_value = re.sub(r"[^a-z0-9\s-]", "", ascii_value.lower())
    ascii_value = re.sub(r"[\s-]+", separator, ascii_value)
    return ascii_value.strip(separator)


def replace_first(search: str, replace: str, subject: str) -> str:
    if search == "":
        return subject
    return subject.replace(search, replace, 1)


def before(subject: str, search: str) -> str:
    if search == "":
        return subject
    head, found, _ = subject.partition(search)
    return head if found else subject


def after(subject: str, search: str) -> str:
    if search == "":
        return subject
    _, found, tail = subject.partition(search)
    return tail if found else subject


__all__ = [
    "after",
    "before",
    "camel",
    "contains",
    "ends_with",
    "kebab",
    "limit",
    "random",
    "replace_first",
    "slug",
    "snake",
    "starts_with",
    "studly",
    "words",
]
