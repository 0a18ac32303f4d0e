"""Portion realism checks against reference serving sizes."""

from nutrition_estimator.domain.estimates import MeasurementSpec, PortionAssessment
from nutrition_estimator.services.normalizer import clean_text, contains_term, is_liquid
from nutrition_estimator.tables.portions import (
    PORTION_LIMIT_EXCLUSIONS,
    PORTION_LIMITS,
    REFERENCE_AMOUNTS,
    REFERENCE_DEVIATION,
    SMART_SERVINGS,
    SOLID_ONLY_LIMITS,
    SOLID_PHRASES,
    PortionLimit,
)


def _excluded(text: str, key: str) -> bool:
    return any(dish in text for dish in PORTION_LIMIT_EXCLUSIONS.get(key, ()))


def _portion_limit(text: str) -> tuple[str, PortionLimit] | None:
    screened = text
    for phrase in SOLID_PHRASES:
        screened = screened.replace(phrase, " ")
    liquid = is_liquid(screened)
    for key, limit in PORTION_LIMITS:
        if not contains_term(text, key):
            continue
        if liquid and key in SOLID_ONLY_LIMITS:
            continue
        if _excluded(text, key):
            continue
        return key, limit
    return None


def _smart_serving_name(text: str, measurement_text: str) -> str | None:
    measurement = clean_text(measurement_text)
    for key, servings in SMART_SERVINGS.items():
        if key not in text:
            continue
        for term, serving in servings.items():
            if term in measurement:
                return serving.name
    return None


def assess_portion(
    ingredient: str,
    description: str,
    spec: MeasurementSpec,
    calories_per_100g: float,
    measurement_text: str = "",
) -> PortionAssessment:
    """Flag portions far above the typical serving or off the reference amount."""
    text = clean_text(f"{ingredient} {description}")
    grams = spec.grams

    matched = _portion_limit(text)
    if matched is not None:
        _, limit = matched
        if grams >= limit.warn:
            typical_calories = round(limit.typical * calories_per_100g / 100)
            serving_name = (
                _smart_serving_name(text, measurement_text) or limit.serving_label
            )
            if grams >= limit.extreme:
                warning = f"⚠️ Very large portion ({grams:g}g)"
                suggestion = (
                    f"Consider a typical serving of {limit.typical:g}g "
                    f"({typical_calories} cal) instead"
                )
            else:
                warning = f"⚠️ Large portion ({grams:g}g)"
                suggestion = (
                    f"Typical serving is {limit.typical:g}g ({typical_calories} cal)"
                )
            return PortionAssessment(
                is_realistic=False,
                warning=warning,
                suggestion=suggestion,
                recommended_serving_grams=limit.typical,
                serving_name=serving_name,
            )

    name = clean_text(ingredient)
    for key, reference in REFERENCE_AMOUNTS:
        if not contains_term(name, key) or _excluded(name, key):
            continue
        deviation = abs(grams - reference.grams) / reference.grams
        if deviation <= REFERENCE_DEVIATION:
            break
        direction = "smaller" if grams < reference.grams else "larger"
        return PortionAssessment(
            is_realistic=False,
            warning=(
                f"Your portion ({grams:g}g) is much {direction} than "
                f"FDA standard ({reference.grams:g}g)"
            ),
            suggestion=f"FDA recommendation: 1 {reference.unit} ({reference.grams:g}g)",
            recommended_serving_grams=reference.grams,
            serving_name=f"FDA RACC: 1 {reference.unit} ({reference.grams:g}g)",
        )

    return PortionAssessment(is_realistic=True)
