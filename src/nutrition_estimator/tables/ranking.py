"""Food-family ranking rules as ordered (predicate, score delta) pairs."""

from dataclasses import dataclass

from nutrition_estimator.tables.predicates import (
    Predicate,
    both,
    equals,
    has,
    has_all,
    has_word,
    starts_with,
    without,
)


@dataclass(frozen=True)
class RankingRule:
    """Adds ``delta`` to a candidate whose description satisfies ``predicate``."""

    predicate: Predicate
    delta: int


@dataclass(frozen=True)
class FoodFamily:
    """Rules applied when the query mentions one of the family triggers."""

    name: str
    triggers: tuple[str, ...]
    rules: tuple[RankingRule, ...]

    def score(self, description: str) -> int:
        return sum(rule.delta for rule in self.rules if rule.predicate(description))


VEGETABLE_FAMILIES = (
    FoodFamily(
        "broccoli",
        ("broccoli",),
        (
            RankingRule(equals("broccoli, raw"), 500),
            RankingRule(both(starts_with("broccoli,"), has("raw")), 400),
            RankingRule(has("beef and broccoli", "tofu"), -800),
            RankingRule(has("chinese", "raab"), -200),
        ),
    ),
    FoodFamily(
        "carrot",
        ("carrot",),
        (
            RankingRule(has("carrots, raw", "carrots, mature, raw"), 500),
            RankingRule(has_all("carrot", "raw"), 400),
            RankingRule(has("muffin", "cake", "salad"), -800),
            RankingRule(has_all("baby", "raw"), 300),
        ),
    ),
    FoodFamily(
        "tomato",
        ("tomato",),
        (
            RankingRule(has("tomato, roma", "tomatoes, red, ripe"), 500),
            RankingRule(has_all("tomato", "raw"), 400),
            RankingRule(has("paste", "sauce", "puree"), -300),
            RankingRule(has("canned", "processed"), -200),
            RankingRule(has("taco", "filling"), -800),
        ),
    ),
    FoodFamily(
        "lettuce",
        ("lettuce",),
        (
            RankingRule(has_all("lettuce", "raw"), 500),
            RankingRule(has("romaine", "iceberg"), 400),
            RankingRule(has_all("salad", "mixed"), -300),
        ),
    ),
)

# Applied only when the query is a drink; sweetened variants lose to plain ones.
BEVERAGE_FAMILIES = (
    FoodFamily(
        "milk",
        ("milk",),
        (
            RankingRule(
                has("milk, whole", "milk, reduced fat, 2%", "milk, lowfat, 1%"), 600
            ),
            RankingRule(has("milk, nonfat", "milk, skim"), 550),
            RankingRule(without(has("milk"), "chocolate", "strawberry"), 500),
            RankingRule(has("chocolate milk", "flavored"), -200),
            RankingRule(has("condensed", "evaporated"), -400),
            RankingRule(has("buttermilk", "goat"), -100),
        ),
    ),
    FoodFamily(
        "water",
        ("water",),
        (
            RankingRule(equals("water, tap"), 800),
            RankingRule(equals("water, bottled, generic"), 750),
            RankingRule(has("water, municipal", "water, well"), 700),
            RankingRule(has_all("water", "carbonated"), 600),
            RankingRule(
                without(has("water"), "tuna", "fish", "coconut", "flavored"), 600
            ),
            RankingRule(has("tuna", "fish", "canned"), -1000),
            RankingRule(has("coconut water"), -200),
            RankingRule(has("vitamin water", "flavored"), -400),
        ),
    ),
    FoodFamily(
        "sparkling water",
        (
            "sparkling",
            "carbonated",
            "pellegrino",
            "perrier",
            "lacroix",
            "la croix",
            "bubly",
            "seltzer",
        ),
        (
            RankingRule(has_all("water", "carbonated"), 800),
            RankingRule(has("seltzer", "sparkling"), 700),
            RankingRule(has("mineral water"), 650),
            RankingRule(has("club soda"), 600),
            RankingRule(has("sugar", "sweetened", "cola"), -500),
            RankingRule(has("fruit juice", "flavored soda"), -400),
        ),
    ),
    FoodFamily(
        "juice",
        ("juice",),
        (
            RankingRule(has("juice, orange", "orange juice"), 600),
            RankingRule(has("juice, apple", "apple juice"), 600),
            RankingRule(has_all("juice", "100%"), 500),
            RankingRule(without(has("juice"), "cocktail", "drink"), 400),
            RankingRule(has("cocktail", "punch", "drink"), -300),
            RankingRule(has("concentrate"), -400),
        ),
    ),
    FoodFamily(
        "soda",
        ("soda", "cola", "pepsi", "coke"),
        (
            RankingRule(has("cola", "carbonated"), 500),
            RankingRule(has("diet", "zero"), 300),
            RankingRule(has("energy drink", "sports"), -200),
        ),
    ),
    FoodFamily(
        "coffee",
        ("coffee",),
        (
            RankingRule(has("coffee, brewed", "coffee, black"), 600),
            RankingRule(without(has("coffee"), "with cream", "latte"), 500),
            RankingRule(has("espresso"), 400),
            RankingRule(has("cappuccino", "latte", "mocha"), -200),
            RankingRule(has("frappuccino", "iced coffee drink"), -400),
        ),
    ),
    FoodFamily(
        "tea",
        ("tea",),
        (
            RankingRule(has("tea, brewed", "tea, black", "tea, green"), 600),
            RankingRule(without(has_word("tea"), "iced", "sweetened"), 500),
            RankingRule(has("herbal tea", "chamomile"), 400),
            RankingRule(has_all("iced tea", "sweetened"), -200),
            RankingRule(has("bubble tea", "chai latte"), -300),
        ),
    ),
    FoodFamily(
        "beer and wine",
        ("beer", "wine"),
        (
            RankingRule(has("beer, regular", "wine, table"), 500),
            RankingRule(has("light beer", "wine, dessert"), 300),
            RankingRule(has("craft beer", "wine, fortified"), -100),
        ),
    ),
    FoodFamily(
        "smoothie",
        ("smoothie", "protein shake"),
        (
            RankingRule(has_all("smoothie", "fruit"), 500),
            RankingRule(has_all("protein", "powder"), 400),
            RankingRule(has("meal replacement"), 300),
        ),
    ),
)

# Each group applies at most once.
COMPOSITE_PENALTIES = (
    ((" and ", ", "), -200),
    (("with ", "mixed"), -150),
    (("salad", "dish", "recipe"), -300),
)
BASIC_TERMS = ("raw", "fresh", "plain", "unsweetened", "unflavored")
BASIC_TERM_BONUS = 200
COMPLEX_TERMS = ("stir fry", "casserole", "prepared", "seasoned", "breaded", "battered")
COMPLEX_TERM_PENALTY = -100

CONTAINS_BONUS = 100
EQUALS_BONUS = 300
PREFIX_BONUS = 250
ENERGY_BONUS = 100
