"""Normalize heterogeneous nutrient rows into a canonical per-100g record."""

from collections.abc import Iterable

from nutrition_estimator.domain.nutrition import CanonicalNutrients, NutrientRow

# FoodData Central nutrient ids; these win over name matching.
NUTRIENT_IDS = {
    1008: "calories",
    2047: "calories",
    2048: "calories",
    1003: "protein",
    1005: "carbs",
    1004: "fat",
    1079: "fiber",
    2000: "sugar",
    1093: "sodium",
    1089: "iron",
    1087: "calcium",
    1095: "zinc",
    1090: "magnesium",
    1162: "vitamin_c",
    1110: "vitamin_d",
    1114: "vitamin_d",
    1178: "vitamin_b12",
    1177: "folate",
    1106: "vitamin_a",
    1107: "vitamin_a",
    1109: "vitamin_e",
    1092: "potassium",
    1091: "phosphorus",
}

# (field, any of these substrings, none of these substrings), first match wins.
NUTRIENT_NAMES = (
    ("calories", ("energy", "calorie"), ()),
    ("protein", ("protein",), ()),
    ("carbs", ("carbohydrate",), ("fiber",)),
    ("fat", ("total lipid", "fat"), ("fatty acid",)),
    ("fiber", ("fiber",), ()),
    ("sugar", ("sugar",), ("added", "alcohol")),
    ("sodium", ("sodium",), ()),
    ("iron", ("iron",), ()),
    ("calcium", ("calcium",), ()),
    ("zinc", ("zinc",), ()),
    ("magnesium", ("magnesium",), ()),
    ("vitamin_c", ("vitamin c", "ascorbic"), ()),
    ("vitamin_d", ("vitamin d",), ()),
    ("vitamin_b12", ("vitamin b-12", "cobalamin"), ()),
    ("folate", ("folate",), ()),
    ("vitamin_a", ("vitamin a",), ()),
    ("vitamin_e", ("vitamin e",), ()),
    ("potassium", ("potassium",), ()),
    ("phosphorus", ("phosphorus",), ()),
)

# Reported as separate sub-form rows that add up.
SUMMED_FIELDS = frozenset({"vitamin_a", "vitamin_d"})

SODIUM_MILLIGRAM_THRESHOLD = 100


def resolve_field(row: NutrientRow) -> tuple[str | None, bool]:
    """Return the canonical field for a row and whether it was resolved by id."""
    if row.nutrient_id is not None and row.nutrient_id in NUTRIENT_IDS:
        return NUTRIENT_IDS[row.nutrient_id], True
    name = (row.name or "").lower()
    if not name:
        return None, False
    for field, includes, excludes in NUTRIENT_NAMES:
        if any(term in name for term in includes) and not any(
            term in name for term in excludes
        ):
            return field, False
    return None, False


def sodium_grams(value: float, unit: str | None) -> float:
    """Convert a sodium amount to grams.

    The declared unit wins; without one, values above 100 are taken to be
    milligrams.
    """
    normalized = (unit or "").strip().lower()
    if normalized == "mg":
        return value / 1000
    if normalized in {"ug", "µg", "mcg"}:
        return value / 1_000_000
    if normalized == "g":
        return value
    if value > SODIUM_MILLIGRAM_THRESHOLD:
        return value / 1000
    return value


def extract_nutrients(rows: Iterable[NutrientRow]) -> CanonicalNutrients:
    """Build a canonical nutrient record; unresolved rows are ignored."""
    values: dict[str, float] = {}
    by_id: set[str] = set()
    for row in rows:
        field, from_id = resolve_field(row)
        if field is None:
            continue
        unit = (row.unit or "").strip().lower()
        if field == "calories" and unit == "kj":
            continue
        if field in SUMMED_FIELDS:
            if unit == "iu":
                continue
            values[field] = values.get(field, 0.0) + row.value
            continue
        if not from_id and field in by_id:
            continue
        amount = sodium_grams(row.value, row.unit) if field == "sodium" else row.value
        values[field] = amount
        if from_id:
            by_id.add(field)
    return CanonicalNutrients(**values)


def has_energy(rows: Iterable[NutrientRow]) -> bool:
    """Whether any row reports a positive calorie value."""
    for row in rows:
        field, _ = resolve_field(row)
        if field != "calories" or (row.unit or "").strip().lower() == "kj":
            continue
        if row.value > 0:
            return True
    return False
