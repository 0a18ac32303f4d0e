"""Free-text measurement parsing and gram conversion."""

import math
import re

from nutrition_estimator.domain.estimates import MeasurementSpec
from nutrition_estimator.domain.foods import FoodCandidate
from nutrition_estimator.services.candy import candy_portion, is_candy_candidate
from nutrition_estimator.services.normalizer import clean_text, contains_term, is_liquid
from nutrition_estimator.tables.beverages import (
    DEFAULT_LIQUID_SERVING,
    DEFAULT_LIQUID_TERMS,
    STANDARD_LIQUID_SERVINGS,
    LiquidServing,
)
from nutrition_estimator.tables.units import (
    BEVERAGE_SERVING_UNITS,
    DEFAULT_ITEM_GRAMS,
    FRACTION_WORDS,
    ITEM_GRAMS,
    LETTUCE_CUP_GRAMS,
    MASS_UNITS,
    UNICODE_FRACTIONS,
    UNIT_GRAMS,
    UNIT_VARIATIONS,
    UNIVERSAL_DEFAULT_GRAMS,
    VOLUME_ML,
    WORD_NUMBERS,
)

_FRACTION_UNIT = re.compile(r"^(\d+)\s*/\s*(\d+)\s+(.+)$")
_BARE_FRACTION = re.compile(r"^(\d+)\s*/\s*(\d+)$")
_MIXED_NUMBER = re.compile(r"^(\d+)\s+(?:and\s+)?(\d+)\s*/\s*(\d+)\s*(.*)$")
_WRAPPED = re.compile(r"^\((.*)\)$")
_PARENTHETICAL = re.compile(r"\(.*?\)")
_APPROXIMATE = re.compile(r"^(?:about|approximately|approx\.?|around|roughly|~)\s*")
_DECIMAL_UNIT = re.compile(r"^(\d*\.?\d+)\s*(.*)$")
_OVERSIZED_NUMBER = re.compile(r"\d{7,}")
_LEADING_NUMBERS = re.compile(r"^[\d\s./]+")
_ARTICLE = re.compile(r"^an?\b")

_BARE_FRACTION_UNIT = "medium"
_EMPTY_UNIT = "piece"
_SERVING_SIZE_UNITS = frozenset({"", "g", "grm", "gram", "grams", "ml", "mlt"})
_MAX_QUANTITY = 10_000

_SORTED_FRACTION_WORDS = sorted(FRACTION_WORDS.items(), key=lambda kv: -len(kv[0]))
_SORTED_LIQUID_KEYS = sorted(STANDARD_LIQUID_SERVINGS, key=len, reverse=True)


def normalize_measurement_text(text: str) -> str:
    """Turn fraction glyphs and spelled-out numbers into numeric tokens."""
    normalized = text.lower()
    for glyph, fraction in UNICODE_FRACTIONS.items():
        normalized = normalized.replace(glyph, f" {fraction} ")
    normalized = clean_text(normalized)
    for phrase, fraction in _SORTED_FRACTION_WORDS:
        normalized = re.sub(rf"\b{phrase}\b", fraction, normalized)
    for word, number in WORD_NUMBERS.items():
        normalized = re.sub(rf"\b{word}\b", number, normalized)
    normalized = _ARTICLE.sub("1", normalized)
    return clean_text(normalized)


def _fraction(numerator: str, denominator: str) -> float:
    if int(denominator) == 0:
        return 1.0
    return int(numerator) / int(denominator)


def extract_quantity(text: str) -> tuple[float, str]:
    """Split normalized text into a quantity and the remaining unit text.

    Parenthetical asides are dropped unless they are the whole phrase.
    Numbers too long or too large to be a real portion count as 1.
    """
    text = _APPROXIMATE.sub("", text.strip())
    if match := _WRAPPED.match(text):
        return extract_quantity(match[1])
    text = clean_text(_PARENTHETICAL.sub(" ", text))
    if _OVERSIZED_NUMBER.search(text):
        return 1.0, clean_text(_LEADING_NUMBERS.sub("", text)) or _EMPTY_UNIT

    if match := _FRACTION_UNIT.match(text):
        quantity, unit = _fraction(match[1], match[2]), match[3]
    elif match := _BARE_FRACTION.match(text):
        quantity, unit = _fraction(match[1], match[2]), _BARE_FRACTION_UNIT
    elif match := _MIXED_NUMBER.match(text):
        quantity = int(match[1]) + _fraction(match[2], match[3])
        unit = match[4] or _BARE_FRACTION_UNIT
    elif match := _DECIMAL_UNIT.match(text):
        quantity, unit = float(match[1]), match[2] or _EMPTY_UNIT
    else:
        quantity, unit = 1.0, text or _EMPTY_UNIT
    unit = unit.strip(" .,")
    if not math.isfinite(quantity) or not 0 < quantity <= _MAX_QUANTITY:
        quantity = 1.0
    return quantity, unit or _EMPTY_UNIT


def resolve_unit(unit_text: str) -> str | None:
    """Map unit text to a canonical unit: whole text, first word, then phrase."""
    text = clean_text(unit_text).strip(" .,")
    if not text:
        return None
    words = text.split()
    for candidate in (text, words[0]):
        if candidate in UNIT_GRAMS:
            return candidate
        for canonical, variations in UNIT_VARIATIONS.items():
            if candidate in variations:
                return canonical
    if len(words) > 1:
        for canonical, variations in UNIT_VARIATIONS.items():
            if any(len(v) > 2 and contains_term(text, v) for v in variations):
                return canonical
    return None


def liquid_serving(name: str) -> LiquidServing | None:
    """Reference serving for a beverage: exact, partial, then generic drinks."""
    text = clean_text(name)
    if text in STANDARD_LIQUID_SERVINGS:
        return STANDARD_LIQUID_SERVINGS[text]
    for key in _SORTED_LIQUID_KEYS:
        if contains_term(text, key):
            return STANDARD_LIQUID_SERVINGS[key]
    if any(contains_term(text, term) for term in DEFAULT_LIQUID_TERMS):
        return DEFAULT_LIQUID_SERVING
    return None


def _description_key(description: str) -> str:
    return clean_text(re.sub(r"[^\w\s&]", " ", description.lower()))


def _item_override(
    description: str, unit_text: str, canonical: str | None
) -> float | None:
    for key, servings in ITEM_GRAMS.items():
        if not contains_term(description, key):
            continue
        for pattern, grams in servings.items():
            if pattern == canonical or contains_term(unit_text, pattern):
                return float(grams)
    return None


def _declared_serving(candidate: FoodCandidate) -> float | None:
    unit = (candidate.serving_size_unit or "").strip().lower()
    size = candidate.serving_size
    if size and size > 0 and unit in _SERVING_SIZE_UNITS:
        return float(size)
    return None


def _spec(
    quantity: float, unit: str, grams_each: float, note: str | None = None
) -> MeasurementSpec:
    return MeasurementSpec(
        quantity=quantity,
        unit=unit,
        grams=round(quantity * grams_each, 1),
        reference_serving=note,
    )


def parse_measurement(  # noqa: PLR0911
    text: str, candidate: FoodCandidate
) -> MeasurementSpec:
    """Convert a measurement phrase to grams for the chosen candidate."""
    quantity, unit_text = extract_quantity(normalize_measurement_text(text))
    canonical = resolve_unit(unit_text)
    description = _description_key(candidate.description)

    if canonical not in MASS_UNITS and is_candy_candidate(candidate):
        portion = candy_portion(description, unit_text)
        if portion is not None:
            return _spec(quantity, portion.name, portion.grams_each)

    item_grams = _item_override(description, unit_text, canonical)
    if item_grams is not None:
        return _spec(quantity, canonical or unit_text, item_grams)

    for token, millilitres in VOLUME_ML:
        if token in unit_text:
            return _spec(quantity, token, millilitres)

    if is_liquid(description) and any(
        contains_term(unit_text, term) for term in BEVERAGE_SERVING_UNITS
    ):
        serving = liquid_serving(description)
        if serving is not None:
            return _spec(quantity, unit_text, serving.millilitres, serving.label)

    if canonical is not None:
        grams_each = UNIT_GRAMS[canonical]
        if canonical == "cup" and "lettuce" in description:
            grams_each = LETTUCE_CUP_GRAMS
        return _spec(quantity, canonical, grams_each)

    declared = _declared_serving(candidate)
    if declared is not None:
        return _spec(quantity, unit_text, declared)
    for key, grams in DEFAULT_ITEM_GRAMS:
        if key in description:
            return _spec(quantity, unit_text, grams)
    return _spec(quantity, unit_text, UNIVERSAL_DEFAULT_GRAMS)
