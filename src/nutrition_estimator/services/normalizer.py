"""Query normalization and special-category detection."""

import re
from functools import lru_cache

from nutrition_estimator.domain.foods import SpecialCategory
from nutrition_estimator.tables.beverages import (
    LIQUID_KEYWORDS,
    ZERO_CALORIE_BEVERAGES,
    ZERO_CALORIE_EXCLUSIONS,
    ZERO_CALORIE_QUALIFIERS,
)
from nutrition_estimator.tables.candy import CANDY_EXCLUSIONS, CANDY_TERMS
from nutrition_estimator.tables.synonyms import (
    COOKING_METHODS,
    FOOD_SYNONYMS,
    PREPARATION_FORMS,
    REGIONAL_ALIASES,
    SINGULAR_TO_PLURAL,
)

_MAX_REWRITES = 4


@lru_cache(maxsize=1024)
def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![a-z0-9]){re.escape(term)}(?:e?s)?(?![a-z0-9])")


def contains_term(text: str, term: str) -> bool:
    """Whole-word match of a term (or its plural) inside lowercase text."""
    return _term_pattern(term).search(text) is not None


def clean_text(raw: str) -> str:
    """Lowercase, trim and collapse internal whitespace."""
    return " ".join(raw.lower().split())


def normalize(raw: str) -> str:
    """Rewrite an ingredient into the phrasing the food database indexes.

    Rewrites are applied until the query stops changing, so the result is
    stable under repeated normalization.
    """
    query = clean_text(raw)
    for _ in range(_MAX_REWRITES):
        rewritten = _rewrite(query)
        if rewritten == query:
            break
        query = rewritten
    return query


def _rewrite(query: str) -> str:
    if query in SINGULAR_TO_PLURAL:
        return SINGULAR_TO_PLURAL[query]
    if query in FOOD_SYNONYMS:
        return FOOD_SYNONYMS[query]
    if query in REGIONAL_ALIASES:
        return REGIONAL_ALIASES[query]
    return _reorder_preparation(query)


def _reorder_preparation(query: str) -> str:
    """Move cooking-method and preparation tokens behind the core phrase."""
    core = query
    cooking = _first_token(core, COOKING_METHODS)
    if cooking:
        core = _strip_token(core, cooking)
    preparation = _first_token(core, PREPARATION_FORMS)
    if preparation:
        core = _strip_token(core, preparation)
    if not cooking and not preparation:
        return query
    return " ".join(part for part in (core, preparation, cooking) if part)


def _first_token(text: str, tokens: tuple[str, ...]) -> str | None:
    for token in tokens:
        if re.search(rf"\b{token}\b", text):
            return token
    return None


def _strip_token(text: str, token: str) -> str:
    return " ".join(re.sub(rf"\b{token}\b", " ", text, count=1).split())


def is_zero_calorie_beverage(raw: str) -> bool:
    """Plain waters, unsweetened tea/coffee and diet sodas; exclusions win."""
    text = clean_text(raw)
    screened = text
    for qualifier in ZERO_CALORIE_QUALIFIERS:
        screened = screened.replace(qualifier, " ")
    if any(contains_term(screened, excluded) for excluded in ZERO_CALORIE_EXCLUSIONS):
        return False
    return any(contains_term(text, term) for term in ZERO_CALORIE_BEVERAGES)


def is_liquid(raw: str) -> bool:
    text = clean_text(raw)
    return any(contains_term(text, keyword) for keyword in LIQUID_KEYWORDS)


def is_candy(raw: str) -> bool:
    text = clean_text(raw)
    if is_liquid(text) or any(term in text for term in CANDY_EXCLUSIONS):
        return False
    return any(contains_term(text, term) for term in CANDY_TERMS)


def classify_special(raw: str) -> SpecialCategory:
    """Detect ingredients that skip or short-circuit the database search."""
    if is_zero_calorie_beverage(raw):
        return SpecialCategory.ZERO_CALORIE_BEVERAGE
    if is_candy(raw):
        return SpecialCategory.CANDY
    return SpecialCategory.NONE
