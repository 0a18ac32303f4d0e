"""Confectionery nutrition profiles, vocabulary and serving sizes."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class CandyProfile:
    """Per-100g nutrition for a kind of candy, with its named servings."""

    name: str
    category: str
    calories: float
    protein: float
    fat: float
    carbs: float
    sugar: float
    fiber: float
    calcium: float
    iron: float
    magnesium: float
    phosphorus: float
    potassium: float
    sodium: float
    zinc: float
    servings: tuple[tuple[str, float], ...]
    vitamin_a: float = 0.0
    vitamin_c: float = 0.0
    vitamin_d: float = 0.0
    vitamin_e: float = 0.0
    vitamin_b12: float = 0.0
    folate: float = 0.0
    caffeine: float = 0.0
    theobromine: float = 0.0

    @property
    def default_serving(self) -> tuple[str, float]:
        """The plain "1 piece" style serving, second in each list."""
        return self.servings[1] if len(self.servings) > 1 else self.servings[0]


_OZ = ("1 oz", 28.35)

CANDY_PROFILES = (
    CandyProfile(
        name="Hard Candy",
        category="hard",
        calories=394, protein=0, fat=0.2, carbs=98, sugar=63, fiber=0,
        calcium=3, iron=0.3, magnesium=3, phosphorus=3, potassium=5,
        sodium=38, zinc=0.01,
        servings=(("1 piece, small", 3), ("1 piece", 6), _OZ),
    ),
    CandyProfile(
        name="Chocolate Candy",
        category="chocolate",
        calories=535, protein=7.65, fat=29.66, carbs=59.4, sugar=51.5,
        fiber=3.4, calcium=50, iron=2.3, magnesium=63, phosphorus=130,
        potassium=372, sodium=24, zinc=1.0,
        vitamin_a=15, vitamin_e=0.4, vitamin_b12=0.25, folate=8,
        caffeine=20, theobromine=205,
        servings=(("1 piece", 10), ("1 small bar", 25), _OZ),
    ),
    CandyProfile(
        name="Gummy Candy",
        category="gummy",
        calories=396, protein=0, fat=0, carbs=98.9, sugar=58.97, fiber=0.1,
        calcium=2, iron=0.1, magnesium=1, phosphorus=2, potassium=3,
        sodium=20, zinc=0.01,
        servings=(("1 piece", 2), ("10 pieces", 20), _OZ),
    ),
    CandyProfile(
        name="Lollipop",
        category="lollipop",
        calories=394, protein=0, fat=0.2, carbs=98, sugar=62.9, fiber=0,
        calcium=3, iron=0.3, magnesium=3, phosphorus=3, potassium=5,
        sodium=38, zinc=0.01,
        servings=(("1 small lollipop", 6), ("1 large lollipop", 12), _OZ),
    ),
    CandyProfile(
        name="Caramel Candy",
        category="caramel",
        calories=382, protein=4.6, fat=8.1, carbs=76.2, sugar=65.5, fiber=0.3,
        calcium=118, iron=1.4, magnesium=22, phosphorus=74, potassium=192,
        sodium=211, zinc=0.64,
        vitamin_a=28, vitamin_c=0.4, vitamin_d=0.7, vitamin_e=0.26, folate=4,
        servings=(("1 piece", 8), ("5 pieces", 40), _OZ),
    ),
    CandyProfile(
        name="Jelly Beans",
        category="gummy",
        calories=375, protein=0, fat=0.1, carbs=93.8, sugar=78.3, fiber=0,
        calcium=1, iron=0.2, magnesium=1, phosphorus=1, potassium=2,
        sodium=16, zinc=0.01,
        servings=(("1 bean", 1), ("10 beans", 10), ("1 small handful", 14), _OZ),
    ),
    CandyProfile(
        name="Taffy",
        category="caramel",
        calories=395, protein=1.2, fat=2.0, carbs=92.8, sugar=68.2, fiber=0,
        calcium=14, iron=0.5, magnesium=2, phosphorus=12, potassium=15,
        sodium=57, zinc=0.05,
        vitamin_a=2, vitamin_e=0.05, folate=1,
        servings=(("1 piece", 5), ("1 large piece", 10), _OZ),
    ),
    CandyProfile(
        name="Mint Candy",
        category="hard",
        calories=390, protein=0, fat=0.9, carbs=96.8, sugar=96.2, fiber=0,
        calcium=5, iron=0.4, magnesium=4, phosphorus=4, potassium=6,
        sodium=12, zinc=0.02,
        vitamin_c=0.5,
        servings=(("1 mint", 2), ("5 mints", 10), _OZ),
    ),
    CandyProfile(
        name="Fudge",
        category="chocolate",
        calories=411, protein=2.9, fat=10.5, carbs=81.4, sugar=74.2, fiber=1.2,
        calcium=54, iron=1.8, magnesium=30, phosphorus=66, potassium=162,
        sodium=95, zinc=0.58,
        vitamin_a=22, vitamin_c=0.2, vitamin_d=0.4, vitamin_e=0.32, folate=6,
        caffeine=12, theobromine=95,
        servings=(("1 small piece", 17), ("1 piece", 25), _OZ),
    ),
    CandyProfile(
        name="Marshmallow",
        category="general",
        calories=318, protein=1.8, fat=0.2, carbs=80.5, sugar=57.6, fiber=0.1,
        calcium=3, iron=0.2, magnesium=2, phosphorus=6, potassium=5,
        sodium=80, zinc=0.04,
        folate=2,
        servings=(
            ("1 regular marshmallow", 7),
            ("1 large marshmallow", 15),
            ("10 mini marshmallows", 10),
            _OZ,
        ),
    ),
)

CANDY_TERMS = (
    "candy",
    "candies",
    "chocolate",
    "gummy",
    "lollipop",
    "sucker",
    "hard candy",
    "soft candy",
    "taffy",
    "caramel",
    "caramels",
    "fudge",
    "gumdrops",
    "jelly beans",
    "jelly bean",
    "mint candy",
    "mint",
    "mints",
    "drops",
    "sweets",
    "marshmallow",
    "marshmallows",
    "bonbon",
    "bonbons",
    "skittles",
    "m&m",
    "m&ms",
    "snickers",
    "kit kat",
    "kitkat",
    "reeses",
    "reese",
    "hershey",
    "twizzler",
    "twizzlers",
    "jolly rancher",
    "starburst",
    "nerds",
    "sour patch",
    "swedish fish",
    "haribo",
    "lifesaver",
    "tootsie",
    "milky way",
    "three musketeers",
    "butterfinger",
    "crunch bar",
    "almond joy",
    "mounds",
    "york peppermint",
    "licorice",
    "gummi",
    "gummies",
    "fruit snacks",
    "rock candy",
    "peppermint",
    "wintergreen",
    "cinnamon candy",
    "chocolate bar",
    "candy bar",
    "fun size",
    "bite size",
)

# Desserts and dishes that mention a candy word but are not confectionery.
CANDY_EXCLUSIONS = (
    "cake",
    "cookie",
    "ice cream",
    "pudding",
    "muffin",
    "brownie",
    "mousse",
    "pancake",
    "croissant",
    "donut",
    "doughnut",
    "cereal",
    "leaves",
    "sauce",
)

# Brand -> profile name, for brands whose names carry no candy keyword.
BRAND_PROFILES = MappingProxyType(
    {
        "snickers": "Chocolate Candy",
        "kit kat": "Chocolate Candy",
        "kitkat": "Chocolate Candy",
        "reeses": "Chocolate Candy",
        "reese": "Chocolate Candy",
        "hershey": "Chocolate Candy",
        "m&m": "Chocolate Candy",
        "milky way": "Chocolate Candy",
        "three musketeers": "Chocolate Candy",
        "butterfinger": "Chocolate Candy",
        "crunch bar": "Chocolate Candy",
        "almond joy": "Chocolate Candy",
        "mounds": "Chocolate Candy",
        "york peppermint": "Mint Candy",
        "skittles": "Gummy Candy",
        "starburst": "Taffy",
        "haribo": "Gummy Candy",
        "sour patch": "Gummy Candy",
        "swedish fish": "Gummy Candy",
        "fruit snacks": "Gummy Candy",
        "twizzler": "Gummy Candy",
        "licorice": "Gummy Candy",
        "jolly rancher": "Hard Candy",
        "lifesaver": "Hard Candy",
        "nerds": "Hard Candy",
        "rock candy": "Hard Candy",
        "tootsie": "Caramel Candy",
    }
)

# Keyword groups checked in order once exact and partial name matches fail.
CATEGORY_KEYWORDS = (
    ("chocolate", ("chocolate", "cocoa", "fudge")),
    ("gummy", ("gummy", "bears", "worms", "jelly bean", "gummies")),
    ("lollipop", ("lollipop", "sucker", "pop")),
    ("caramel", ("caramel", "taffy", "toffee")),
    ("hard", ("hard", "mint", "drops")),
    ("general", ("marshmallow",)),
)

# Brand or item -> serving word -> grams per serving.
BRAND_SERVINGS = MappingProxyType(
    {
        "snickers": MappingProxyType(
            {"fun size": 17, "king size": 113, "bar": 52, "piece": 52}
        ),
        "kit kat": MappingProxyType({"fun size": 15, "bar": 42, "finger": 10}),
        "kitkat": MappingProxyType({"fun size": 15, "bar": 42, "finger": 10}),
        "reese": MappingProxyType(
            {"fun size": 17, "king size": 79, "cup": 21, "piece": 21}
        ),
        "hershey": MappingProxyType(
            {
                "fun size": 11,
                "miniature": 8,
                "kiss": 4,
                "bar": 43,
                "stick": 11,
                "package": 70,
            }
        ),
        "twizzler": MappingProxyType({"piece": 11, "stick": 11, "package": 70}),
        "licorice": MappingProxyType({"piece": 11, "stick": 11}),
        "skittles": MappingProxyType({"fun size": 15, "package": 61, "piece": 1}),
        "m&m": MappingProxyType({"fun size": 17, "package": 47, "piece": 1}),
        "jelly bean": MappingProxyType({"bean": 1, "piece": 1}),
        "marshmallow": MappingProxyType({"mini": 1, "large": 15, "piece": 7}),
        "lollipop": MappingProxyType(
            {"small": 8, "large": 25, "piece": 12, "pop": 12, "sucker": 12}
        ),
        "caramel": MappingProxyType({"piece": 8, "square": 7}),
        "gummy": MappingProxyType({"package": 50, "piece": 3, "bear": 3, "worm": 2}),
        "hard candy": MappingProxyType({"small": 3, "piece": 6, "mint": 2, "drop": 4}),
        "chocolate": MappingProxyType(
            {
                "fun size": 17,
                "king size": 75,
                "square": 5,
                "mini": 7,
                "bar": 40,
                "piece": 10,
            }
        ),
    }
)

GENERIC_CANDY_GRAMS = MappingProxyType(
    {
        "fun size": 15,
        "bite size": 8,
        "package": 50,
        "small": 3,
        "large": 12,
        "mini": 2,
        "bar": 40,
        "piece": 6,
    }
)
