"""Unit, number-word and item-specific gram conversion tables."""

from types import MappingProxyType

WORD_NUMBERS = MappingProxyType(
    {
        "one": "1",
        "two": "2",
        "three": "3",
        "four": "4",
        "five": "5",
        "six": "6",
        "seven": "7",
        "eight": "8",
        "nine": "9",
        "ten": "10",
    }
)

FRACTION_WORDS = MappingProxyType(
    {
        "three quarters": "3/4",
        "two thirds": "2/3",
        "one quarter": "1/4",
        "one third": "1/3",
        "one half": "1/2",
        "a quarter": "1/4",
        "a third": "1/3",
        "a half": "1/2",
        "quarter": "1/4",
        "third": "1/3",
        "half": "1/2",
    }
)

UNICODE_FRACTIONS = MappingProxyType(
    {
        "½": "1/2",
        "¼": "1/4",
        "¾": "3/4",
        "⅓": "1/3",
        "⅔": "2/3",
        "⅛": "1/8",
    }
)

# Canonical unit -> accepted spellings.
UNIT_VARIATIONS = MappingProxyType(
    {
        "cup": ("cup", "cups", "c"),
        "tablespoon": ("tablespoon", "tablespoons", "tbsp", "tbs"),
        "teaspoon": ("teaspoon", "teaspoons", "tsp", "ts"),
        "gram": ("gram", "grams", "g", "gr"),
        "kilogram": ("kilogram", "kilograms", "kg"),
        "ounce": ("ounce", "ounces", "oz"),
        "pound": ("pound", "pounds", "lb", "lbs"),
        "milliliter": ("milliliter", "milliliters", "millilitre", "ml"),
        "liter": ("liter", "liters", "litre", "l"),
        "piece": ("piece", "pieces", "unit", "units", "item", "items"),
        "slice": ("slice", "slices"),
        "bowl": ("bowl", "bowls"),
        "plate": ("plate", "plates"),
        "pinch": ("pinch", "pinches", "dash", "sprinkle"),
        "handful": ("handful", "handfuls"),
        "scoop": ("scoop", "scoops"),
        "splash": ("splash", "splashes"),
        "dollop": ("dollop", "dollops"),
        "wedge": ("wedge", "wedges"),
        "sprig": ("sprig", "sprigs"),
        "leaf": ("leaf", "leaves"),
        "clove": ("clove", "cloves"),
        "stick": ("stick", "sticks"),
        "pat": ("pat", "pats"),
    }
)

UNIT_GRAMS = MappingProxyType(
    {
        "gram": 1.0,
        "kilogram": 1000.0,
        "ounce": 28.35,
        "pound": 453.6,
        "cup": 240.0,
        "tablespoon": 15.0,
        "teaspoon": 5.0,
        "milliliter": 1.0,
        "liter": 1000.0,
        "scoop": 30.0,
        "pinch": 0.5,
        "splash": 5.0,
        "dollop": 15.0,
        "handful": 40.0,
        "slice": 25.0,
        "piece": 50.0,
        "bowl": 200.0,
        "plate": 300.0,
        "wedge": 15.0,
        "sprig": 1.0,
        "leaf": 0.5,
        "clove": 3.0,
        "stick": 113.0,
        "pat": 5.0,
    }
)

MASS_UNITS = frozenset({"gram", "kilogram", "ounce", "pound"})

# Beverage volume units, matched by substring against the unit text.
VOLUME_ML = (
    ("fl oz", 29.57),
    ("fluid ounce", 29.57),
    ("quart", 946.0),
    ("pint", 473.0),
    ("gallon", 3785.0),
)

BEVERAGE_SERVING_UNITS = ("glass", "serving", "standard", "cup", "bottle", "can")

# Food key (substring of the candidate description) -> unit pattern -> grams.
# Keys are checked in order, so more specific keys come first.
ITEM_GRAMS = MappingProxyType(
    {
        "egg": MappingProxyType(
            {"extra large": 56, "whole": 50, "large": 50, "medium": 44, "small": 38}
        ),
        "grape": MappingProxyType({"grape": 5, "bunch": 100}),
        "falafel": MappingProxyType({"piece": 17, "ball": 17}),
        "pierogi": MappingProxyType({"piece": 28, "dumpling": 28}),
        "gyoza": MappingProxyType({"piece": 15, "dumpling": 15}),
        "baklava": MappingProxyType({"piece": 60, "square": 60}),
        "sushi": MappingProxyType({"piece": 30, "roll": 180}),
        "taco": MappingProxyType({"piece": 85, "taco": 85}),
        "plantain": MappingProxyType(
            {"medium": 179, "large": 218, "small": 148, "piece": 179, "slice": 20}
        ),
        "patty": MappingProxyType({"patty": 142, "piece": 142, "jamaican": 142}),
        "roti": MappingProxyType({"piece": 85, "roti": 85}),
        "festival": MappingProxyType({"piece": 65, "festival": 65}),
        "cassava": MappingProxyType({"medium": 400, "cup": 103, "serving": 150}),
        "breadfruit": MappingProxyType({"medium": 350, "cup": 220, "slice": 60}),
        "ice cream bar": MappingProxyType({"bar": 60, "piece": 60}),
        "ice cream": MappingProxyType({"cup": 66, "scoop": 66, "tablespoon": 15}),
        "haagen dazs": MappingProxyType({"bar": 88, "piece": 88}),
        "klondike": MappingProxyType({"bar": 91, "piece": 91}),
        "good humor": MappingProxyType({"bar": 78, "piece": 78}),
        "creamsicle": MappingProxyType({"bar": 78, "piece": 78}),
        "ben jerry": MappingProxyType({"bar": 71, "piece": 71, "slice": 71}),
        "popsicle": MappingProxyType({"piece": 50, "popsicle": 50, "pop": 50}),
    }
)

# Named defaults used when nothing else resolves the unit.
DEFAULT_ITEM_GRAMS = (
    ("haagen", 88),
    ("klondike", 91),
    ("good humor", 78),
    ("creamsicle", 78),
    ("ben jerry", 71),
    ("ice cream bar", 60),
    ("apple", 180),
    ("banana", 120),
)

LETTUCE_CUP_GRAMS = 47
UNIVERSAL_DEFAULT_GRAMS = 100
