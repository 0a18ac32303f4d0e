"""Candidate scoring and selection."""

import logging

from nutrition_estimator.domain.errors import CandidateImplausible, NoCandidateFound
from nutrition_estimator.domain.foods import FoodCandidate, SourceKind
from nutrition_estimator.domain.nutrition import CanonicalNutrients
from nutrition_estimator.services.normalizer import clean_text, contains_term, is_liquid
from nutrition_estimator.services.nutrients import extract_nutrients, has_energy
from nutrition_estimator.tables.ranking import (
    BASIC_TERM_BONUS,
    BASIC_TERMS,
    BEVERAGE_FAMILIES,
    COMPLEX_TERM_PENALTY,
    COMPLEX_TERMS,
    COMPOSITE_PENALTIES,
    CONTAINS_BONUS,
    ENERGY_BONUS,
    EQUALS_BONUS,
    PREFIX_BONUS,
    VEGETABLE_FAMILIES,
    FoodFamily,
)

_SOURCE_BONUS = {
    SourceKind.CURATED: 150,
    SourceKind.SURVEY: 120,
    SourceKind.BRANDED: 30,
}

MAX_CALORIES_PER_100G = 900

_logger = logging.getLogger(__name__)


def families_for(query: str) -> list[FoodFamily]:
    """Families whose triggers appear in the query."""
    text = clean_text(query)
    families = BEVERAGE_FAMILIES if is_liquid(text) else VEGETABLE_FAMILIES
    return [
        family
        for family in families
        if any(contains_term(text, trigger) for trigger in family.triggers)
    ]


def score_candidate(
    query: str, candidate: FoodCandidate, families: list[FoodFamily] | None = None
) -> int:
    """Score one candidate against a query; higher is a better match."""
    text = clean_text(query)
    description = clean_text(candidate.description)
    if families is None:
        families = families_for(text)

    score = 0
    for terms, penalty in COMPOSITE_PENALTIES:
        if any(term in description for term in terms):
            score += penalty
    score += BASIC_TERM_BONUS * sum(
        1 for term in BASIC_TERMS if contains_term(description, term)
    )
    score += COMPLEX_TERM_PENALTY * sum(
        1 for term in COMPLEX_TERMS if term in description
    )

    if text and text in description:
        score += CONTAINS_BONUS
    if description == text:
        score += EQUALS_BONUS
    if description.startswith(f"{text},"):
        score += PREFIX_BONUS

    score += _SOURCE_BONUS.get(candidate.source_kind, 0)
    if has_energy(candidate.raw_nutrients):
        score += ENERGY_BONUS

    for family in families:
        score += family.score(description)
    return score


def rank_candidates(
    query: str, candidates: list[FoodCandidate]
) -> list[FoodCandidate]:
    """Order candidates best-first.

    Synthetic enhanced candidates stay in front. Candidates without energy
    that are not curated are dropped unless nothing else is left, and only
    positive scores survive.
    """
    pinned = [c for c in candidates if c.source_kind is SourceKind.ENHANCED]
    others = [c for c in candidates if c.source_kind is not SourceKind.ENHANCED]

    usable = [c for c in others if c.is_curated or has_energy(c.raw_nutrients)]
    if not usable:
        usable = others

    families = families_for(query)
    scored = [(score_candidate(query, c, families), c) for c in usable]
    positive = [(score, c) for score, c in scored if score > 0]
    positive.sort(key=lambda pair: pair[0], reverse=True)
    return pinned + [c for _, c in positive]


def select_candidate(
    query: str, candidates: list[FoodCandidate]
) -> tuple[FoodCandidate, CanonicalNutrients]:
    """Pick the best-ranked candidate with plausible calories."""
    ranked = rank_candidates(query, candidates)
    if not ranked:
        raise NoCandidateFound(f"No usable candidates for {query!r}")
    for candidate in ranked:
        nutrients = extract_nutrients(candidate.raw_nutrients)
        if 0 <= nutrients.calories <= MAX_CALORIES_PER_100G:
            return candidate, nutrients
        _logger.debug(
            "Skipping implausible candidate: %s (%s kcal)",
            candidate.description,
            nutrients.calories,
        )
    raise CandidateImplausible(f"No plausible candidates for {query!r}")
