"""Tests for nutrient extraction."""

from nutrition_estimator.domain.nutrition import NutrientRow
from nutrition_estimator.services.nutrients import (
    extract_nutrients,
    has_energy,
    sodium_grams,
)


def test_extract_nutrients_resolves_ids_and_defaults_to_zero() -> None:
    nutrients = extract_nutrients(
        [
            NutrientRow(1008, "Energy", "KCAL", 165),
            NutrientRow(1003, "Protein", "G", 31),
            NutrientRow(1004, "Total lipid (fat)", "G", 3.6),
            NutrientRow(9999, "Something unknown", "G", 5),
        ]
    )

    assert nutrients.calories == 165
    assert nutrients.protein == 31
    assert nutrients.fat == 3.6
    assert nutrients.carbs == 0
    assert nutrients.vitamin_c == 0


def test_extract_nutrients_falls_back_to_names() -> None:
    nutrients = extract_nutrients(
        [
            NutrientRow(None, "Carbohydrate, by difference", "G", 20),
            NutrientRow(None, "Fiber, total dietary", "G", 3),
            NutrientRow(None, "Vitamin C, total ascorbic acid", "MG", 12),
        ]
    )

    assert nutrients.carbs == 20
    assert nutrients.fiber == 3
    assert nutrients.vitamin_c == 12


def test_id_rows_win_over_name_rows() -> None:
    nutrients = extract_nutrients(
        [
            NutrientRow(1004, "Total lipid (fat)", "G", 10),
            NutrientRow(None, "Fatty acids, total saturated", "G", 2),
            NutrientRow(None, "Fat, other", "G", 99),
        ]
    )

    assert nutrients.fat == 10


def test_vitamin_a_and_d_rows_are_summed() -> None:
    nutrients = extract_nutrients(
        [
            NutrientRow(1110, "Vitamin D (D2 + D3), International Units", "IU", 40),
            NutrientRow(1114, "Vitamin D (D2 + D3)", "UG", 1.0),
            NutrientRow(None, "Vitamin D3 (cholecalciferol)", "UG", 0.5),
            NutrientRow(1106, "Vitamin A, RAE", "UG", 30),
            NutrientRow(1107, "Carotene, beta", "UG", 12),
        ]
    )

    assert nutrients.vitamin_d == 1.5
    assert nutrients.vitamin_a == 42


def test_kilojoule_energy_rows_are_ignored() -> None:
    nutrients = extract_nutrients(
        [
            NutrientRow(1062, "Energy", "kJ", 690),
            NutrientRow(1008, "Energy", "KCAL", 165),
        ]
    )

    assert nutrients.calories == 165
    assert not has_energy([NutrientRow(1062, "Energy", "kJ", 690)])


def test_sodium_prefers_declared_unit() -> None:
    assert sodium_grams(50, "MG") == 0.05
    assert sodium_grams(0.4, "g") == 0.4
    assert sodium_grams(250, None) == 0.25
    assert sodium_grams(0.4, None) == 0.4


def test_has_energy_requires_positive_calories() -> None:
    assert has_energy([NutrientRow(1008, "Energy", "KCAL", 52)])
    assert not has_energy([NutrientRow(1008, "Energy", "KCAL", 0)])
    assert not has_energy([NutrientRow(1003, "Protein", "G", 5)])
