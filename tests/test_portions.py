"""Tests for portion realism checks."""

from nutrition_estimator.domain.estimates import MeasurementSpec
from nutrition_estimator.services.portions import assess_portion

CHIPS = "Snacks, potato chips, plain, salted"


def _spec(grams: float) -> MeasurementSpec:
    return MeasurementSpec(quantity=grams, unit="gram", grams=grams)


def test_large_chip_portion_is_flagged() -> None:
    portion = assess_portion("potato chips", CHIPS, _spec(150), 536, "150g")

    assert not portion.is_realistic
    assert portion.warning == "⚠️ Large portion (150g)"
    assert portion.suggestion == "Typical serving is 28g (150 cal)"
    assert portion.recommended_serving_grams == 28
    assert portion.serving_name == "1 oz (28g)"


def test_very_large_portion_uses_stronger_warning() -> None:
    portion = assess_portion("potato chips", CHIPS, _spec(250), 536, "250g")

    assert portion.warning == "⚠️ Very large portion (250g)"
    assert portion.suggestion == "Consider a typical serving of 28g (150 cal) instead"


def test_smart_serving_name_follows_measurement() -> None:
    portion = assess_portion(
        "potato chips", CHIPS, _spec(150), 536, "1 family size bag"
    )

    assert portion.serving_name == "family size sharing portion"


def test_typical_chip_portion_is_realistic() -> None:
    portion = assess_portion("potato chips", CHIPS, _spec(25), 536, "25g")

    assert portion.is_realistic
    assert portion.warning is None


def test_reference_amount_deviation() -> None:
    portion = assess_portion(
        "snickers", "Snickers (Enhanced with detailed nutrition)", _spec(120), 535
    )

    assert not portion.is_realistic
    assert portion.warning == (
        "Your portion (120g) is much larger than FDA standard (52g)"
    )
    assert portion.suggestion == "FDA recommendation: 1 bar (52g)"
    assert portion.serving_name == "FDA RACC: 1 bar (52g)"


def test_reference_amount_within_tolerance() -> None:
    portion = assess_portion(
        "snickers", "Snickers (Enhanced with detailed nutrition)", _spec(52), 535
    )

    assert portion.is_realistic


def test_foods_without_reference_are_realistic() -> None:
    assert assess_portion("quinoa", "Quinoa, cooked", _spec(500), 120).is_realistic


def test_words_that_only_contain_a_snack_key_are_not_flagged() -> None:
    doughnuts = assess_portion(
        "doughnuts", "Doughnuts, cake-type, plain", _spec(100), 421, "2 pieces"
    )
    coconut = assess_portion("coconuts", "Coconut meat, raw", _spec(80), 354, "1 cup")
    fish = assess_portion("fish and chips", "Fish and chips", _spec(350), 200)

    assert doughnuts.is_realistic
    assert coconut.is_realistic
    assert fish.is_realistic


def test_chocolate_drinks_skip_the_candy_limit() -> None:
    portion = assess_portion(
        "chocolate milk",
        "Milk, chocolate, fluid, commercial, reduced fat",
        _spec(240),
        62,
        "1 cup",
    )

    assert portion.is_realistic
    assert portion.warning is None


def test_solid_sweets_and_nuts_are_still_flagged() -> None:
    bar = assess_portion("milk chocolate", "Candies, milk chocolate", _spec(250), 535)
    peanuts = assess_portion("peanuts", "Peanuts, dry-roasted", _spec(150), 585)

    assert bar.warning == "⚠️ Very large portion (250g)"
    assert bar.recommended_serving_grams == 40
    assert peanuts.warning == "⚠️ Very large portion (150g)"
    assert peanuts.recommended_serving_grams == 28
