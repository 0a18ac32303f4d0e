"""Beverage vocabularies and reference servings."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class LiquidServing:
    """Regulatory reference serving for a beverage, in millilitres."""

    millilitres: int
    category: str
    description: str

    @property
    def label(self) -> str:
        """Human-readable reference serving note."""
        return f"FDA {self.category}: {self.description}"


_CUP = "8 fl oz (1 cup) standard"
_CAN = "12 fl oz standard"

STANDARD_LIQUID_SERVINGS = MappingProxyType(
    {
        "soda": LiquidServing(360, "Carbonated Beverages", _CAN),
        "cola": LiquidServing(360, "Carbonated Beverages", _CAN),
        "pepsi": LiquidServing(360, "Carbonated Beverages", _CAN),
        "coke": LiquidServing(360, "Carbonated Beverages", _CAN),
        "sprite": LiquidServing(360, "Carbonated Beverages", _CAN),
        "ginger ale": LiquidServing(360, "Carbonated Beverages", _CAN),
        "energy drink": LiquidServing(360, "Energy Beverages", _CAN),
        "sports drink": LiquidServing(360, "Sports Beverages", _CAN),
        "gatorade": LiquidServing(360, "Sports Beverages", _CAN),
        "powerade": LiquidServing(360, "Sports Beverages", _CAN),
        "milk": LiquidServing(240, "Milk and Milk Products", _CUP),
        "whole milk": LiquidServing(240, "Milk and Milk Products", _CUP),
        "skim milk": LiquidServing(240, "Milk and Milk Products", _CUP),
        "almond milk": LiquidServing(240, "Alternative Milks", _CUP),
        "soy milk": LiquidServing(240, "Alternative Milks", _CUP),
        "oat milk": LiquidServing(240, "Alternative Milks", _CUP),
        "rice milk": LiquidServing(240, "Alternative Milks", _CUP),
        "coconut milk": LiquidServing(240, "Alternative Milks", _CUP),
        "orange juice": LiquidServing(240, "Fruit Juices", _CUP),
        "apple juice": LiquidServing(240, "Fruit Juices", _CUP),
        "grape juice": LiquidServing(240, "Fruit Juices", _CUP),
        "cranberry juice": LiquidServing(240, "Fruit Juices", _CUP),
        "pineapple juice": LiquidServing(240, "Fruit Juices", _CUP),
        "tomato juice": LiquidServing(240, "Vegetable Juices", _CUP),
        "peanut punch": LiquidServing(240, "Traditional Beverages", _CUP),
        "sorrel": LiquidServing(240, "Traditional Beverages", _CUP),
        "ginger beer": LiquidServing(360, "Carbonated Beverages", _CAN),
        "rum punch": LiquidServing(120, "Alcoholic Mixed Drinks", "4 fl oz standard"),
        "mauby": LiquidServing(240, "Traditional Beverages", _CUP),
        "sea moss": LiquidServing(240, "Traditional Beverages", _CUP),
        "coconut water": LiquidServing(240, "Natural Beverages", _CUP),
        "sparkling water": LiquidServing(240, "Water", _CUP),
        "carbonated water": LiquidServing(240, "Water", _CUP),
        "seltzer": LiquidServing(240, "Water", _CUP),
        "club soda": LiquidServing(240, "Water", _CUP),
        "mineral water": LiquidServing(240, "Water", _CUP),
        "san pellegrino": LiquidServing(330, "Water", "11 fl oz bottle standard"),
        "pellegrino": LiquidServing(330, "Water", "11 fl oz bottle standard"),
        "perrier": LiquidServing(330, "Water", "11 fl oz bottle standard"),
        "la croix": LiquidServing(360, "Water", "12 fl oz can standard"),
        "lacroix": LiquidServing(360, "Water", "12 fl oz can standard"),
        "bubly": LiquidServing(360, "Water", "12 fl oz can standard"),
        "coffee": LiquidServing(240, "Hot Beverages", _CUP),
        "tea": LiquidServing(240, "Hot Beverages", _CUP),
        "water": LiquidServing(240, "Water", _CUP),
        "beer": LiquidServing(360, "Alcoholic Beverages", _CAN),
        "wine": LiquidServing(150, "Alcoholic Beverages", "5 fl oz standard"),
        "smoothie": LiquidServing(240, "Blended Beverages", _CUP),
        "milkshake": LiquidServing(240, "Dairy Beverages", _CUP),
    }
)

DEFAULT_LIQUID_SERVING = LiquidServing(
    240, "General Beverages", "8 fl oz (1 cup) default liquid serving"
)
DEFAULT_LIQUID_TERMS = ("water", "juice", "soda", "coffee", "tea", "milk")
WATER_SERVING_LABEL = "FDA Water: 8 fl oz (1 cup) standard"

LIQUID_KEYWORDS = (
    "milk",
    "water",
    "juice",
    "coffee",
    "tea",
    "soda",
    "cola",
    "pepsi",
    "coke",
    "beer",
    "wine",
    "smoothie",
    "shake",
    "milkshake",
    "drink",
    "beverage",
    "liquid",
    "latte",
    "cappuccino",
    "espresso",
    "mocha",
    "frappuccino",
    "sprite",
    "fanta",
    "mountain dew",
    "gatorade",
    "powerade",
    "energy drink",
    "sports drink",
    "protein shake",
    "iced tea",
    "hot chocolate",
    "cocoa",
    "lemonade",
    "punch",
    "sparkling water",
    "carbonated water",
    "seltzer",
    "club soda",
    "perrier",
    "san pellegrino",
    "pellegrino",
    "la croix",
    "lacroix",
    "bubly",
    "schweppes",
    "canada dry",
    "tonic water",
    "mineral water",
)

ZERO_CALORIE_BEVERAGES = (
    "water",
    "sparkling water",
    "carbonated water",
    "seltzer",
    "club soda",
    "mineral water",
    "spring water",
    "tap water",
    "bottled water",
    "san pellegrino",
    "pellegrino",
    "perrier",
    "la croix",
    "lacroix",
    "bubly",
    "schweppes sparkling",
    "canada dry seltzer",
    "black coffee",
    "plain tea",
    "green tea",
    "herbal tea",
    "diet soda",
    "diet coke",
    "coke zero",
    "pepsi max",
    "diet pepsi",
    "diet sprite",
    "smartwater",
    "smart water",
)

# Checked before the allow-list; a hit here always wins.
ZERO_CALORIE_EXCLUSIONS = (
    "vitamin water",
    "vitaminwater",
    "flavored water",
    "enhanced water",
    "coconut water",
    "sports drink",
    "energy drink",
    "water chestnut",
    "in water",
    "water ice",
    "tonic",
    "sweet",
    "sweetened",
    "sugar",
    "honey",
    "syrup",
    "latte",
    "cream",
    "creamer",
    "milk",
)

# Removed before the exclusion check so they cannot trip a sweetener word.
ZERO_CALORIE_QUALIFIERS = ("sugar free", "sugar-free", "no sugar", "zero sugar")
