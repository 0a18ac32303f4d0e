"""Confectionery profiles: lookup, synthetic candidates and serving sizes."""

from dataclasses import dataclass

from nutrition_estimator.domain.foods import FoodCandidate, SourceKind
from nutrition_estimator.domain.nutrition import NutrientRow
from nutrition_estimator.services.normalizer import clean_text, contains_term, is_candy
from nutrition_estimator.tables.candy import (
    BRAND_PROFILES,
    BRAND_SERVINGS,
    CANDY_PROFILES,
    CATEGORY_KEYWORDS,
    GENERIC_CANDY_GRAMS,
    CandyProfile,
)

_PROFILES_BY_NAME = {profile.name: profile for profile in CANDY_PROFILES}

# (profile attribute, nutrient id, nutrient name, unit)
_NUTRIENT_LAYOUT = (
    ("calories", 1008, "Energy", "KCAL"),
    ("protein", 1003, "Protein", "G"),
    ("fat", 1004, "Total lipid (fat)", "G"),
    ("carbs", 1005, "Carbohydrate, by difference", "G"),
    ("sugar", 2000, "Total Sugars", "G"),
    ("fiber", 1079, "Fiber, total dietary", "G"),
    ("calcium", 1087, "Calcium, Ca", "MG"),
    ("iron", 1089, "Iron, Fe", "MG"),
    ("magnesium", 1090, "Magnesium, Mg", "MG"),
    ("phosphorus", 1091, "Phosphorus, P", "MG"),
    ("potassium", 1092, "Potassium, K", "MG"),
    ("sodium", 1093, "Sodium, Na", "MG"),
    ("zinc", 1095, "Zinc, Zn", "MG"),
    ("vitamin_a", 1106, "Vitamin A, RAE", "UG"),
    ("vitamin_c", 1162, "Vitamin C, total ascorbic acid", "MG"),
    ("vitamin_d", 1114, "Vitamin D (D2 + D3)", "UG"),
    ("vitamin_e", 1109, "Vitamin E (alpha-tocopherol)", "MG"),
    ("folate", 1177, "Folate, total", "UG"),
    ("vitamin_b12", 1178, "Vitamin B-12", "UG"),
)

_OPTIONAL_LAYOUT = (
    ("caffeine", 1057, "Caffeine", "MG"),
    ("theobromine", 1058, "Theobromine", "MG"),
)


@dataclass(frozen=True)
class CandyPortion:
    """Serving resolved for a confectionery measurement."""

    name: str
    grams_each: float


def _matched_brand(text: str) -> str | None:
    for brand in BRAND_PROFILES:
        if contains_term(text, brand):
            return brand
    return None


def find_profile(query: str) -> CandyProfile | None:
    """Find the candy profile for a query: name, brand, then category words."""
    text = clean_text(query)
    for profile in CANDY_PROFILES:
        if profile.name.lower() == text:
            return profile
    for profile in CANDY_PROFILES:
        name = profile.name.lower()
        if contains_term(text, name) or contains_term(name, text):
            return profile
    brand = _matched_brand(text)
    if brand:
        return _PROFILES_BY_NAME[BRAND_PROFILES[brand]]
    for category, keywords in CATEGORY_KEYWORDS:
        if any(contains_term(text, keyword) for keyword in keywords):
            return next(p for p in CANDY_PROFILES if p.category == category)
    return None


def candy_candidate(query: str) -> FoodCandidate | None:
    """Synthesize a candidate for a confectionery query, if a profile fits."""
    if not is_candy(query):
        return None
    profile = find_profile(query)
    if profile is None:
        return None
    brand = _matched_brand(clean_text(query))
    label = brand.title() if brand else profile.name
    rows = [
        NutrientRow(nutrient_id, name, unit, float(getattr(profile, attribute)))
        for attribute, nutrient_id, name, unit in _NUTRIENT_LAYOUT
    ]
    rows.extend(
        NutrientRow(nutrient_id, name, unit, float(getattr(profile, attribute)))
        for attribute, nutrient_id, name, unit in _OPTIONAL_LAYOUT
        if getattr(profile, attribute)
    )
    return FoodCandidate(
        external_id=None,
        description=f"{label} (Enhanced with detailed nutrition)",
        source_kind=SourceKind.ENHANCED,
        category=f"Candy - {profile.category}",
        raw_nutrients=tuple(rows),
        data_type=SourceKind.ENHANCED.value,
    )


def is_candy_candidate(candidate: FoodCandidate) -> bool:
    if (candidate.category or "").startswith("Candy - "):
        return True
    return is_candy(candidate.description)


def candy_portion(description: str, unit_text: str) -> CandyPortion | None:
    """Resolve a candy serving: brand table, profile servings, then defaults."""
    text = clean_text(description)
    unit = clean_text(unit_text) or "piece"
    for item, servings in BRAND_SERVINGS.items():
        if item not in text:
            continue
        for serving, grams in servings.items():
            if serving in unit:
                return CandyPortion(serving, grams)
    profile = find_profile(text)
    if profile is None:
        for serving, grams in GENERIC_CANDY_GRAMS.items():
            if serving in unit:
                return CandyPortion(serving, grams)
        return None
    for name, grams in profile.servings:
        if _serving_matches(name, unit):
            return CandyPortion(name, grams)
    name, grams = profile.default_serving
    return CandyPortion(name, grams)


def _serving_matches(serving_name: str, unit: str) -> bool:
    for shared in ("piece", "small", "oz"):
        if shared in unit and shared in serving_name:
            return True
    return any(contains_term(serving_name, word) for word in unit.split())
