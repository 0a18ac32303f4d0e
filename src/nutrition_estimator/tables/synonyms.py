"""Query rewriting tables for the nutrition database search."""

from types import MappingProxyType

# Singular vegetables the database indexes in plural form.
SINGULAR_TO_PLURAL = MappingProxyType(
    {
        "carrot": "carrots",
        "tomato": "tomatoes",
        "potato": "potatoes",
        "onion": "onions",
        "pepper": "peppers",
        "mushroom": "mushrooms",
        "cucumber": "cucumbers",
        "celery": "celery",
        "lettuce": "lettuce",
        "spinach": "spinach",
        "broccoli": "broccoli",
    }
)

FOOD_SYNONYMS = MappingProxyType(
    {
        # corn
        "corn on the cob": "corn sweet yellow ear",
        "corn on cob": "corn sweet yellow ear",
        "can of corn": "corn sweet yellow canned",
        "frozen corn": "corn sweet kernel frozen",
        "fresh corn": "corn sweet yellow kernel",
        "corn kernels": "corn sweet yellow kernel",
        # chicken preparations
        "grilled chicken breast": "chicken breast grilled",
        "fried chicken breast": "chicken breast fried",
        "baked chicken breast": "chicken breast baked",
        "roasted chicken breast": "chicken breast roasted",
        # common dishes
        "pasta with marinara": "pasta cooked marinara sauce",
        "beef stew": "beef stew cooked",
        "baked potato": "potato baked",
        "raw potato": "potato raw",
        "mashed potatoes": "potato mashed",
        "french fries": "potato french fried",
        "scrambled eggs": "egg scrambled",
        "boiled eggs": "egg hard boiled",
        "fried eggs": "egg fried",
        # international
        "sushi roll": "sushi california roll",
        "pad thai": "pad thai noodles chicken",
        "tikka masala": "chicken tikka masala",
        "biryani": "rice pilaf biryani",
        "ramen noodles": "soup ramen noodles",
        "tacos": "taco beef",
        "enchiladas": "enchilada beef",
        "gyoza": "dumpling pork gyoza",
        "pierogi": "dumpling potato pierogi",
        "falafel": "chickpea falafel",
        "baklava": "pastry baklava honey",
        # beverages
        "san pellegrino sparkling water": "water carbonated mineral",
        "san pellegrino water": "water carbonated mineral",
        "pellegrino sparkling water": "water carbonated mineral",
        "pellegrino water": "water carbonated mineral",
        "perrier sparkling water": "water carbonated mineral",
        "perrier water": "water carbonated mineral",
        "la croix sparkling water": "water carbonated flavored",
        "lacroix sparkling water": "water carbonated flavored",
        "bubly sparkling water": "water carbonated flavored",
        "sparkling water": "water carbonated",
        "carbonated water": "water carbonated",
        "seltzer water": "water carbonated",
        "club soda": "water carbonated sodium",
        "tonic water": "water tonic quinine",
        "mineral water": "water mineral",
        "spring water": "water spring",
    }
)

# Caribbean dishes and drinks, kept apart from the general synonyms so the
# regional vocabulary can grow independently. Looked up after FOOD_SYNONYMS.
REGIONAL_ALIASES = MappingProxyType(
    {
        "jerk chicken": "chicken breast jerk seasoned",
        "rice and beans": "rice kidney beans cooked",
        "plantains": "plantain cooked",
        "fried plantains": "plantain fried sweet",
        "sweet plantains": "plantain sweet fried",
        "green plantains": "plantain green boiled",
        "curry goat": "goat meat stewed caribbean curry",
        "curry chicken": "chicken curry caribbean",
        "oxtail": "beef oxtail braised",
        "ackee and saltfish": "ackee canned saltfish",
        "callaloo": "callaloo cooked",
        "roti": "tortilla flour wheat caribbean",
        "doubles": "bread bara chickpea curry",
        "patties": "pastry meat jamaican",
        "beef patty": "pastry beef jamaican",
        "chicken patty": "pastry chicken jamaican",
        "festival": "cornbread fried sweet caribbean",
        "johnny cakes": "cornbread fried caribbean bread",
        "bammy": "cassava bread fried caribbean",
        "cassava": "cassava root boiled",
        "yuca": "cassava root boiled",
        "breadfruit": "breadfruit boiled",
        "saltfish": "cod salt dried",
        "conch": "conch meat cooked",
        "escovitch fish": "fish fried pickled",
        "brown stew chicken": "chicken stewed brown sauce",
        "peas and rice": "rice pigeon peas coconut",
        "macaroni pie": "macaroni cheese baked caribbean",
        "peanut punch": "peanut milk beverage caribbean",
        "sorrel": "hibiscus drink spiced caribbean",
        "sorrel drink": "hibiscus drink spiced caribbean",
        "ginger beer": "ginger ale jamaican spiced",
        "rum punch": "fruit punch rum caribbean",
        "mauby": "bark drink caribbean traditional",
        "sea moss": "seaweed drink nutritious caribbean",
        "irish moss": "seaweed drink nutritious caribbean",
    }
)

# Order matters: the first token found wins.
COOKING_METHODS = (
    "grilled",
    "fried",
    "baked",
    "roasted",
    "boiled",
    "steamed",
    "raw",
    "fresh",
    "cooked",
)

PREPARATION_FORMS = ("canned", "frozen", "dried", "fresh", "pickled", "smoked")
