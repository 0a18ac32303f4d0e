"""Composable text predicates used by rule tables."""

import re
from collections.abc import Callable

Predicate = Callable[[str], bool]


def has(*terms: str) -> Predicate:
    return lambda text: any(term in text for term in terms)


def has_all(*terms: str) -> Predicate:
    return lambda text: all(term in text for term in terms)


def has_word(*terms: str) -> Predicate:
    patterns = [re.compile(rf"\b{re.escape(term)}(?:e?s)?\b") for term in terms]
    return lambda text: any(pattern.search(text) for pattern in patterns)


def equals(expected: str) -> Predicate:
    return lambda text: text == expected


def starts_with(prefix: str) -> Predicate:
    return lambda text: text.startswith(prefix)


def both(first: Predicate, second: Predicate) -> Predicate:
    return lambda text: first(text) and second(text)


def either(first: Predicate, second: Predicate) -> Predicate:
    return lambda text: first(text) or second(text)


def without(predicate: Predicate, *terms: str) -> Predicate:
    return lambda text: predicate(text) and not any(term in text for term in terms)
