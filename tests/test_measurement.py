"""Tests for measurement parsing."""

import pytest

from nutrition_estimator.domain.foods import FoodCandidate, SourceKind
from nutrition_estimator.services.candy import candy_candidate
from nutrition_estimator.services.measurement import (
    extract_quantity,
    liquid_serving,
    normalize_measurement_text,
    parse_measurement,
    resolve_unit,
)
from nutrition_estimator.tables.units import UNIT_GRAMS


def _candidate(description: str, **kwargs: object) -> FoodCandidate:
    return FoodCandidate(
        external_id=1,
        description=description,
        source_kind=SourceKind.CURATED,
        category=None,
        raw_nutrients=(),
        **kwargs,
    )


RICE = _candidate("Rice, white, cooked")


def test_normalize_measurement_text_handles_words_and_glyphs() -> None:
    assert normalize_measurement_text("½ cup") == "1/2 cup"
    assert normalize_measurement_text("Three quarters cup") == "3/4 cup"
    assert normalize_measurement_text("two slices") == "2 slices"
    assert normalize_measurement_text("a handful") == "1 handful"


def test_extract_quantity_forms() -> None:
    assert extract_quantity("3/4 cup") == (0.75, "cup")
    assert extract_quantity("1/2") == (0.5, "medium")
    assert extract_quantity("1 and 1/2 cups") == (1.5, "cups")
    assert extract_quantity("2 slices (50g)") == (2.0, "slices")
    assert extract_quantity("2.5 oz") == (2.5, "oz")
    assert extract_quantity("3") == (3.0, "piece")
    assert extract_quantity("handful") == (1.0, "handful")


def test_extract_quantity_parentheticals_and_approximations() -> None:
    assert extract_quantity("(about 2 cups)") == (2.0, "cups")
    assert extract_quantity("1/2 (4 oz)") == (0.5, "medium")
    assert extract_quantity("1 (6 oz) can") == (1.0, "can")
    assert extract_quantity("~3 slices") == (3.0, "slices")


def test_extract_quantity_rejects_oversized_numbers() -> None:
    assert extract_quantity("9" * 400 + " g") == (1.0, "g")
    assert extract_quantity("1/" + "9" * 5000 + " cup") == (1.0, "cup")
    assert extract_quantity("50000 cups") == (1.0, "cups")
    assert extract_quantity("0 cups") == (1.0, "cups")


def test_resolve_unit_variations() -> None:
    assert resolve_unit("tbsp") == "tablespoon"
    assert resolve_unit("Tablespoons") == "tablespoon"
    assert resolve_unit("lbs") == "pound"
    assert resolve_unit("large cups") == "cup"
    assert resolve_unit("slice") == "slice"
    assert resolve_unit("medium") is None


@pytest.mark.parametrize("unit", ["gram", "ounce", "cup", "tablespoon", "slice", "pat"])
@pytest.mark.parametrize("quantity", [1, 2, 3.5])
def test_known_units_scale_by_gram_factor(unit: str, quantity: float) -> None:
    spec = parse_measurement(f"{quantity} {unit}", RICE)

    assert spec.grams == pytest.approx(round(quantity * UNIT_GRAMS[unit], 1))


def test_fraction_glyph_word_and_decimal_agree() -> None:
    grams = {
        parse_measurement(text, RICE).grams
        for text in ("1/2 cup", "½ cup", "0.5 cup", ".5 cup", "half cup")
    }

    assert grams == {120.0}


def test_ounces_of_chicken() -> None:
    spec = parse_measurement("6 oz", _candidate("Chicken breast"))

    assert spec.unit == "ounce"
    assert spec.grams == 170.1
    assert spec.label == "6 ounce (~170.1g)"


def test_item_override_beats_generic_table() -> None:
    eggs = parse_measurement("2 large eggs", _candidate("Egg, whole, raw, fresh"))
    sushi = parse_measurement("1 roll", _candidate("Sushi, california roll"))

    assert eggs.grams == 100
    assert sushi.grams == 180


def test_lettuce_cup_is_lighter() -> None:
    spec = parse_measurement("1 cup", _candidate("Lettuce, iceberg, raw"))

    assert spec.grams == 47


def test_named_defaults_and_universal_default() -> None:
    apple = parse_measurement("1 medium", _candidate("Apples, raw, with skin"))
    unknown = parse_measurement("1 serving", _candidate("Quinoa, cooked"))

    assert apple.grams == 180
    assert unknown.grams == 100


def test_declared_serving_size_is_used_when_unit_unknown() -> None:
    candidate = _candidate("Granola", serving_size=55, serving_size_unit="g")

    assert parse_measurement("1 serving", candidate).grams == 55


def test_beverage_reference_serving() -> None:
    soda = parse_measurement("1 can", _candidate("Cola soda"))
    perrier = parse_measurement("1 bottle", _candidate("Perrier"))
    wine = parse_measurement("1 glass", _candidate("Wine, table, red"))

    assert soda.grams == 360
    assert soda.reference_serving == "FDA Carbonated Beverages: 12 fl oz standard"
    assert perrier.grams == 330
    assert wine.grams == 150


def test_fluid_ounces_convert_by_volume() -> None:
    spec = parse_measurement("8 fl oz", _candidate("Orange juice"))

    assert spec.grams == pytest.approx(236.6, abs=0.1)


def test_candy_servings() -> None:
    snickers = candy_candidate("snickers")
    assert snickers is not None

    bar = parse_measurement("1 bar", snickers)
    fun_size = parse_measurement("2 fun size", snickers)
    grams = parse_measurement("100g", snickers)

    assert bar.grams == 52
    assert fun_size.grams == 34
    assert grams.grams == 100


def test_liquid_serving_lookup() -> None:
    assert liquid_serving("whole milk").millilitres == 240
    assert liquid_serving("diet pepsi").millilitres == 360
    assert liquid_serving("lemon water").category == "Water"
    assert liquid_serving("granola") is None


def test_wrapped_and_glyph_parentheticals_parse() -> None:
    wrapped = parse_measurement("(about 2 cups)", RICE)
    half = parse_measurement("½ (4 oz)", RICE)

    assert wrapped.quantity == 2
    assert wrapped.grams == 480
    assert half.quantity == 0.5


def test_absurd_quantities_fall_back_to_one_unit() -> None:
    spec = parse_measurement("9" * 400 + " g", RICE)

    assert spec.quantity == 1
    assert spec.grams == 1
