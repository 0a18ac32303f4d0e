"""Reference portion sizes used to flag unrealistic servings."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class PortionLimit:
    """Gram thresholds for one food family."""

    typical: float
    warn: float
    extreme: float
    serving_label: str


@dataclass(frozen=True)
class ReferenceAmount:
    """Regulatory reference amount customarily consumed."""

    unit: str
    grams: float
    category: str


@dataclass(frozen=True)
class SmartServing:
    """Realistic named serving for a food and measurement term."""

    grams: float
    name: str


# Whole-word keys checked in order against "<ingredient> <description>";
# specific keys first.
PORTION_LIMITS = (
    ("potato chips", PortionLimit(28, 100, 200, "1 oz (28g)")),
    ("tortilla chips", PortionLimit(28, 100, 200, "1 oz (28g)")),
    ("chips", PortionLimit(28, 100, 200, "1 oz (28g)")),
    ("crackers", PortionLimit(30, 60, 120, "6 crackers (30g)")),
    ("candy", PortionLimit(40, 100, 200, "1.4 oz (40g)")),
    ("chocolate", PortionLimit(40, 100, 200, "1.4 oz (40g)")),
    ("ice cream", PortionLimit(65, 200, 400, "1/2 cup (65g)")),
    ("cookies", PortionLimit(30, 100, 200, "2 cookies (30g)")),
    ("nuts", PortionLimit(28, 60, 120, "1 oz (28g)")),
    ("peanuts", PortionLimit(28, 60, 120, "1 oz (28g)")),
    ("almonds", PortionLimit(28, 60, 120, "1 oz (28g)")),
    ("cashews", PortionLimit(28, 60, 120, "1 oz (28g)")),
)

# Dishes that only name a snack family; a key is skipped when one is present.
PORTION_LIMIT_EXCLUSIONS = MappingProxyType(
    {
        "potato chips": ("fish and chips",),
        "chips": ("fish and chips", "chocolate chips"),
    }
)

# Sweets keys that describe a drink rather than a bar when the text is liquid.
SOLID_ONLY_LIMITS = frozenset({"candy", "chocolate"})
# Solid foods whose names carry a liquid keyword.
SOLID_PHRASES = ("milk chocolate",)

# Specific keys first; the first whole-word key in the ingredient wins.
REFERENCE_AMOUNTS = (
    ("snickers bar", ReferenceAmount("bar", 52, "candy bar")),
    ("snickers", ReferenceAmount("bar", 52, "candy bar")),
    ("ice cream bar", ReferenceAmount("bar", 60, "ice cream bar")),
    ("ice cream", ReferenceAmount("cup", 66, "ice cream")),
    ("popsicle", ReferenceAmount("piece", 50, "popsicle")),
    ("kit kat", ReferenceAmount("bar", 42, "candy bar")),
    ("reeses", ReferenceAmount("cup", 21, "candy")),
    ("hershey", ReferenceAmount("bar", 43, "candy bar")),
    ("potato chips", ReferenceAmount("oz", 28, "snack")),
    ("chips", ReferenceAmount("oz", 28, "snack")),
)

# Deviation from the reference amount above which a portion is flagged.
REFERENCE_DEVIATION = 0.5

SMART_SERVINGS = MappingProxyType(
    {
        "potato chips": MappingProxyType(
            {
                "serving": SmartServing(28, "1 oz serving (about 15 chips)"),
                "small bag": SmartServing(28, "1 oz individual bag"),
                "large handful": SmartServing(28, "large handful"),
                "handful": SmartServing(15, "small handful"),
                "family size": SmartServing(150, "family size sharing portion"),
            }
        ),
        "tortilla chips": MappingProxyType(
            {
                "serving": SmartServing(28, "1 oz serving (about 12 chips)"),
                "small bag": SmartServing(28, "1 oz bag"),
                "handful": SmartServing(20, "handful (6-8 chips)"),
            }
        ),
        "crackers": MappingProxyType(
            {
                "serving": SmartServing(16, "4-6 crackers"),
                "handful": SmartServing(12, "small handful"),
            }
        ),
        "chicken breast": MappingProxyType(
            {
                "serving": SmartServing(113, "4 oz serving"),
                "piece": SmartServing(113, "1 medium breast"),
                "large": SmartServing(170, "6 oz large breast"),
            }
        ),
        "ground beef": MappingProxyType(
            {
                "serving": SmartServing(113, "4 oz serving"),
                "patty": SmartServing(113, "1/4 lb burger patty"),
            }
        ),
    }
)
