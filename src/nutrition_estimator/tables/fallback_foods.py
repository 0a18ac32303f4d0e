"""Static per-100g nutrition tables for the fallback estimator."""

from types import MappingProxyType

from nutrition_estimator.domain.nutrition import MacroProfile
from nutrition_estimator.tables.predicates import both, either, has, has_word


def _m(calories: float, protein: float, carbs: float, fat: float) -> MacroProfile:
    return MacroProfile(
        calories=calories, protein_g=protein, fat_g=fat, carbs_g=carbs
    )


# Beverages and common packaged staples; micronutrients are not derived.
LIQUID_FOODS = MappingProxyType(
    {
        # water varieties
        "water": _m(0, 0, 0, 0),
        "drinking water": _m(0, 0, 0, 0),
        "tap water": _m(0, 0, 0, 0),
        "bottled water": _m(0, 0, 0, 0),
        "sparkling water": _m(0, 0, 0, 0),
        "mineral water": _m(0, 0, 0, 0),
        "seltzer water": _m(0, 0, 0, 0),
        # tea varieties
        "tea": _m(1, 0, 0.3, 0),
        "black tea": _m(1, 0, 0.3, 0),
        "green tea": _m(1, 0, 0.3, 0),
        "white tea": _m(1, 0, 0.3, 0),
        "herbal tea": _m(1, 0, 0.3, 0),
        "iced tea": _m(1, 0, 0.3, 0),
        # coffee varieties
        "coffee": _m(1, 0.1, 0, 0),
        "black coffee": _m(1, 0.1, 0, 0),
        "espresso": _m(1, 0.1, 0, 0),
        "americano": _m(1, 0.1, 0, 0),
        "cold brew": _m(1, 0.1, 0, 0),
        # alcoholic beverages
        "beer": _m(43, 0.5, 3.6, 0),
        "light beer": _m(29, 0.2, 1.9, 0),
        # milk varieties
        "milk": _m(42, 3.4, 5.0, 1.0),
        "whole milk": _m(61, 3.2, 4.8, 3.3),
        "2% milk": _m(50, 3.3, 4.9, 2.0),
        "1% milk": _m(42, 3.4, 5.0, 1.0),
        "skim milk": _m(34, 3.4, 5.0, 0.2),
        "nonfat milk": _m(34, 3.4, 5.0, 0.2),
        "wine": _m(83, 0.1, 2.6, 0),
        "red wine": _m(85, 0.1, 2.6, 0),
        "white wine": _m(82, 0.1, 2.6, 0),
        "champagne": _m(80, 0.2, 1.2, 0),
        "vodka": _m(231, 0, 0, 0),
        "whiskey": _m(250, 0, 0, 0),
        "rum": _m(231, 0, 0, 0),
        "gin": _m(231, 0, 0, 0),
        "tequila": _m(231, 0, 0, 0),
        "brandy": _m(231, 0, 0, 0),
        # soft drinks and juices
        "lemonade": _m(40, 0, 10.6, 0),
        "lemon juice": _m(22, 0.4, 6.9, 0.2),
        "lime juice fresh": _m(25, 0.4, 8.4, 0.1),
        "orange juice": _m(45, 0.7, 10.4, 0.2),
        "apple juice": _m(46, 0.1, 11.3, 0.1),
        "grape juice": _m(60, 0.4, 14.8, 0.2),
        "cranberry juice": _m(46, 0.4, 12.2, 0.1),
        "tomato juice": _m(17, 0.8, 4.2, 0.1),
        "coconut water fresh": _m(19, 0.7, 3.7, 0.2),
        # tropical and exotic fruit juices
        "pineapple juice": _m(53, 0.5, 12.9, 0.1),
        "mango juice": _m(54, 0.4, 13.7, 0.2),
        "guava juice": _m(56, 0.3, 14.8, 0.1),
        "papaya juice": _m(43, 0.5, 11.0, 0.1),
        "passion fruit fresh juice": _m(51, 1.4, 11.2, 0.4),
        "pomegranate juice": _m(54, 0.2, 13.7, 0.3),
        "kiwi juice": _m(61, 1.1, 14.7, 0.5),
        "dragon fruit juice": _m(60, 1.2, 13.0, 0.4),
        # berry juices
        "blueberry juice": _m(57, 0.7, 14.5, 0.3),
        "strawberry juice": _m(33, 0.7, 7.9, 0.3),
        "raspberry juice": _m(53, 1.2, 12.0, 0.7),
        "blackberry juice": _m(43, 1.4, 9.6, 0.5),
        "acai juice": _m(70, 1.0, 4.0, 5.0),
        "goji juice": _m(349, 14.3, 77.1, 0.4),
        # green and vegetable juices
        "green juice": _m(23, 2.2, 4.8, 0.4),
        "celery juice": _m(14, 0.7, 3.0, 0.2),
        "kale juice": _m(49, 4.3, 9.0, 0.9),
        "spinach juice": _m(23, 2.9, 3.6, 0.4),
        "cucumber juice": _m(16, 0.7, 4.0, 0.1),
        "wheatgrass juice": _m(15, 2.2, 3.4, 0.1),
        "carrot juice": _m(40, 0.9, 9.3, 0.1),
        "beet juice": _m(58, 2.1, 13.0, 0.2),
        # milk shakes and blended drinks
        "vanilla milkshake": _m(112, 3.8, 16.0, 4.3),
        "chocolate milkshake": _m(119, 3.2, 18.6, 4.1),
        "strawberry milkshake": _m(108, 3.5, 17.2, 3.8),
        "banana milkshake": _m(105, 3.9, 16.8, 3.2),
        "oreo milkshake": _m(142, 3.1, 22.4, 5.2),
        "peanut butter milkshake": _m(156, 5.8, 15.2, 8.9),
        "caramel milkshake": _m(125, 3.4, 19.8, 4.6),
        "mint chocolate chip milkshake": _m(134, 3.6, 20.1, 5.1),
        # smoothies and protein shakes
        "protein shake": _m(103, 20.1, 3.4, 1.2),
        "berry smoothie": _m(65, 1.8, 15.2, 0.6),
        "green smoothie": _m(42, 2.1, 9.8, 0.4),
        "mango smoothie": _m(71, 1.2, 17.6, 0.3),
        "banana smoothie": _m(89, 1.1, 22.8, 0.3),
        # sorbet and frozen treats
        "lemon sorbet": _m(134, 0.2, 34.1, 0.2),
        "orange sorbet": _m(138, 0.6, 35.2, 0.1),
        "strawberry sorbet": _m(130, 0.4, 33.8, 0.1),
        "mango sorbet": _m(142, 0.3, 36.4, 0.2),
        "raspberry sorbet": _m(132, 0.7, 33.1, 0.3),
        "coconut sorbet": _m(159, 1.8, 25.4, 6.2),
        "lime sorbet": _m(128, 0.1, 33.2, 0.1),
        "watermelon sorbet": _m(118, 0.6, 30.2, 0.2),
        # yogurt drinks and kefir
        "plain yogurt drink": _m(59, 3.5, 4.7, 3.3),
        "strawberry yogurt drink": _m(79, 2.9, 13.1, 1.5),
        "vanilla yogurt drink": _m(77, 3.1, 12.8, 1.7),
        "blueberry yogurt drink": _m(81, 2.8, 14.2, 1.6),
        "peach yogurt drink": _m(76, 2.7, 13.4, 1.4),
        "greek yogurt drink": _m(97, 10.0, 3.6, 5.0),
        "kefir": _m(66, 3.8, 4.8, 3.5),
        "lassi": _m(89, 2.4, 17.2, 1.5),
        "ayran": _m(38, 1.7, 2.9, 2.3),
        # breakfast cereals
        "cheerios": _m(367, 10.6, 73.3, 6.7),
        "cornflakes": _m(357, 7.5, 84.1, 0.9),
        "frosted flakes": _m(375, 4.5, 91.0, 0.5),
        "rice krispies": _m(382, 6.0, 87.0, 1.0),
        "froot loops": _m(385, 7.0, 87.0, 2.5),
        "lucky charms": _m(375, 6.3, 83.8, 3.8),
        "cinnamon toast crunch": _m(420, 6.7, 80.0, 10.0),
        "honey nut cheerios": _m(379, 9.1, 78.8, 4.5),
        "cocoa puffs": _m(387, 5.3, 86.7, 4.0),
        "trix": _m(387, 4.0, 93.3, 1.3),
        # healthier cereals
        "oatmeal": _m(389, 16.9, 66.3, 6.9),
        "granola": _m(471, 13.0, 64.0, 20.0),
        "muesli": _m(362, 9.7, 72.2, 5.9),
        "bran flakes": _m(321, 10.7, 67.9, 1.8),
        "shredded wheat": _m(336, 11.4, 75.9, 1.8),
        "raisin bran": _m(321, 7.5, 80.5, 1.8),
        "special k": _m(378, 13.0, 78.0, 1.5),
        "all bran": _m(333, 14.0, 80.0, 3.3),
        "fiber one": _m(267, 13.3, 86.7, 3.3),
        "wheaties": _m(352, 10.6, 78.8, 2.4),
        # hot cereals
        "cream of wheat": _m(371, 10.7, 76.1, 1.1),
        "grits": _m(371, 8.9, 79.6, 1.2),
        "quinoa cereal": _m(368, 14.1, 64.2, 6.1),
        "steel cut oats": _m(379, 13.2, 67.7, 6.5),
        # sandwiches and composite meals
        "chicken sandwich": _m(250, 15.2, 25.8, 10.4),
        "chicken parm sandwich": _m(285, 18.5, 28.2, 12.8),
        "chicken parmesan sandwich": _m(285, 18.5, 28.2, 12.8),
        "grilled chicken sandwich": _m(235, 17.8, 24.1, 8.2),
        "fried chicken sandwich": _m(310, 16.4, 26.5, 16.8),
        "buffalo chicken sandwich": _m(268, 16.2, 25.4, 11.9),
        # deli sandwiches
        "turkey sandwich": _m(220, 12.8, 28.5, 6.4),
        "ham sandwich": _m(245, 14.2, 27.8, 8.9),
        "roast beef sandwich": _m(258, 16.4, 26.2, 10.1),
        "tuna sandwich": _m(275, 15.8, 24.6, 12.8),
        "club sandwich": _m(295, 18.2, 28.4, 13.5),
        "blt sandwich": _m(320, 12.4, 26.8, 18.6),
        # italian sandwiches
        "italian sub": _m(315, 16.8, 32.4, 14.2),
        "meatball sub": _m(345, 19.2, 35.8, 16.4),
        # peanut butter sandwiches
        "peanut butter sandwich": _m(325, 13.8, 32.4, 16.2),
        "pb sandwich": _m(325, 13.8, 32.4, 16.2),
        "peanut butter and jelly": _m(342, 12.4, 38.6, 15.8),
        "pbj sandwich": _m(342, 12.4, 38.6, 15.8),
        "pb&j": _m(342, 12.4, 38.6, 15.8),
        # olives and olive products
        "olive": _m(115, 0.8, 6.0, 10.7),
        "olives": _m(115, 0.8, 6.0, 10.7),
        "green olives": _m(115, 0.8, 6.0, 10.7),
        "black olives": _m(115, 0.8, 6.0, 10.7),
        "kalamata olives": _m(115, 0.8, 6.0, 10.7),
        "philly cheesesteak": _m(298, 17.5, 24.8, 14.8),
        "chicken parmigiana sub": _m(320, 20.1, 30.2, 15.6),
        # burgers
        "hamburger": _m(295, 17.2, 22.9, 15.5),
        "cheeseburger": _m(315, 18.8, 23.2, 17.9),
        "bacon cheeseburger": _m(345, 20.4, 23.5, 21.2),
        "turkey burger": _m(265, 16.8, 22.4, 12.8),
        "veggie burger": _m(195, 8.4, 28.5, 6.2),
        # specialty sandwiches
        "reuben sandwich": _m(335, 18.6, 28.4, 17.8),
        "french dip": _m(285, 19.2, 26.8, 12.4),
        "monte cristo": _m(385, 21.4, 32.6, 20.8),
        "cuban sandwich": _m(308, 18.8, 28.5, 14.2),
        "pastrami sandwich": _m(298, 17.6, 26.4, 14.1),
        # breakfast sandwiches
        "egg sandwich": _m(285, 14.2, 28.6, 13.4),
        "bacon egg sandwich": _m(325, 16.8, 28.2, 17.5),
        "sausage egg sandwich": _m(342, 17.4, 28.8, 19.6),
        "breakfast sandwich": _m(310, 15.8, 28.4, 16.2),
        # bread varieties
        "white bread": _m(265, 9.0, 49.0, 3.2),
        "whole wheat bread": _m(247, 13.0, 41.0, 4.2),
        "whole grain bread": _m(259, 12.8, 43.3, 4.1),
        "multigrain bread": _m(265, 11.2, 45.1, 4.8),
        "sourdough bread": _m(289, 11.5, 56.8, 2.1),
        "rye bread": _m(259, 8.5, 48.3, 3.7),
        "pumpernickel bread": _m(250, 8.1, 47.7, 3.1),
        "italian bread": _m(271, 9.2, 50.6, 3.8),
        "french bread": _m(289, 9.8, 58.5, 2.3),
        "ciabatta bread": _m(271, 9.2, 50.6, 3.8),
        "focaccia bread": _m(294, 8.2, 51.1, 6.9),
        "pita bread": _m(275, 9.1, 55.7, 1.2),
        "naan bread": _m(310, 8.7, 45.9, 9.9),
        "bagel": _m(257, 10.1, 50.9, 1.7),
        "english muffin": _m(227, 8.0, 44.8, 2.0),
        "croissant": _m(406, 8.2, 45.8, 21.0),
        "dinner roll": _m(296, 8.9, 54.3, 5.0),
        "hamburger bun": _m(294, 8.7, 54.8, 4.6),
        "hot dog bun": _m(300, 9.2, 56.2, 4.1),
        # specialty breads
        "brioche": _m(329, 9.7, 56.0, 7.4),
        "challah": _m(320, 9.5, 55.2, 6.8),
        "cornbread": _m(307, 7.0, 51.0, 9.3),
        "banana bread": _m(326, 4.3, 56.3, 10.5),
        "zucchini bread": _m(271, 4.2, 47.8, 7.9),
        "garlic bread": _m(350, 8.5, 48.2, 14.2),
        "texas toast": _m(310, 8.8, 49.5, 8.9),
        # international breads
        "tortilla": _m(304, 8.2, 48.9, 8.1),
        "flour tortilla": _m(304, 8.2, 48.9, 8.1),
        "corn tortilla": _m(218, 5.7, 44.9, 2.9),
        "lavash": _m(275, 9.1, 55.7, 1.2),
        "flatbread": _m(275, 9.1, 55.7, 1.2),
        # pasta varieties
        "pasta": _m(371, 13.0, 74.7, 1.5),
        "spaghetti": _m(371, 13.0, 74.7, 1.5),
        "penne": _m(371, 13.0, 74.7, 1.5),
        "rigatoni": _m(371, 13.0, 74.7, 1.5),
        "fusilli": _m(371, 13.0, 74.7, 1.5),
        "farfalle": _m(371, 13.0, 74.7, 1.5),
        "linguine": _m(371, 13.0, 74.7, 1.5),
        "fettuccine": _m(371, 13.0, 74.7, 1.5),
        "angel hair pasta": _m(371, 13.0, 74.7, 1.5),
        "rotini": _m(371, 13.0, 74.7, 1.5),
        "shells pasta": _m(371, 13.0, 74.7, 1.5),
        "bow tie pasta": _m(371, 13.0, 74.7, 1.5),
        "macaroni": _m(371, 13.0, 74.7, 1.5),
        "elbows pasta": _m(371, 13.0, 74.7, 1.5),
        "orzo": _m(371, 13.0, 74.7, 1.5),
        "ziti": _m(371, 13.0, 74.7, 1.5),
        "lasagna noodles": _m(371, 13.0, 74.7, 1.5),
        # whole grain pasta
        "whole wheat pasta": _m(348, 14.6, 71.5, 2.5),
        "whole wheat spaghetti": _m(348, 14.6, 71.5, 2.5),
        "whole grain pasta": _m(348, 14.6, 71.5, 2.5),
        # specialty pasta
        "gluten free pasta": _m(357, 7.0, 78.0, 2.0),
        "rice pasta": _m(364, 7.2, 80.0, 1.4),
        "quinoa pasta": _m(357, 14.0, 71.6, 2.8),
        "lentil pasta": _m(336, 25.0, 52.0, 2.0),
        "chickpea pasta": _m(337, 20.9, 57.6, 4.2),
        # cooked pasta
        "cooked pasta": _m(131, 5.0, 25.0, 1.1),
        "cooked spaghetti": _m(131, 5.0, 25.0, 1.1),
        "cooked penne": _m(131, 5.0, 25.0, 1.1),
        "cooked whole wheat pasta": _m(124, 5.3, 23.0, 1.4),
        # asian noodles
        "ramen noodles": _m(436, 9.4, 58.0, 18.0),
        "udon noodles": _m(270, 8.0, 52.0, 2.0),
        "soba noodles": _m(274, 11.0, 56.0, 1.9),
        "rice noodles": _m(364, 5.9, 83.0, 0.6),
        "lo mein noodles": _m(384, 14.0, 71.0, 4.4),
        "pad thai noodles": _m(192, 4.6, 42.2, 0.6),
        # sodas and carbonated drinks
        "soda": _m(41, 0, 10.6, 0),
        "cola": _m(41, 0, 10.6, 0),
        "pepsi": _m(41, 0, 10.6, 0),
        "coca cola": _m(41, 0, 10.6, 0),
        "sprite": _m(38, 0, 10, 0),
        "ginger ale": _m(34, 0, 8.8, 0),
        "root beer": _m(41, 0, 10.6, 0),
        "diet soda": _m(0, 0, 0, 0),
        "diet coke": _m(0, 0, 0, 0),
        "diet pepsi": _m(0, 0, 0, 0),
        # energy and sports drinks
        "energy drink": _m(45, 0, 11, 0),
        "red bull": _m(45, 0, 11, 0),
        "monster": _m(50, 0, 13, 0),
        "gatorade": _m(25, 0, 6, 0),
        "powerade": _m(25, 0, 6, 0),
        # milk and alternatives
        "almond milk": _m(17, 0.6, 1.5, 1.1),
        "soy milk": _m(33, 2.9, 1.8, 1.8),
        "oat milk": _m(47, 1.0, 7.0, 1.5),
        "coconut milk thick": _m(230, 2.3, 5.5, 23.8),
        "rice milk": _m(47, 0.3, 9.2, 1.0),
        # caribbean and jamaican beverages
        "peanut punch": _m(185, 8.2, 18.5, 9.8),
        "sorrel": _m(45, 0.4, 11.2, 0.1),
        "sorrel drink": _m(45, 0.4, 11.2, 0.1),
        "jamaican sorrel": _m(45, 0.4, 11.2, 0.1),
        "ginger beer": _m(38, 0.1, 9.5, 0),
        "jamaican ginger beer": _m(38, 0.1, 9.5, 0),
        "rum punch": _m(168, 0.2, 24.8, 0.1),
        "caribbean punch": _m(156, 0.3, 22.4, 0.2),
        "mauby": _m(42, 0.1, 10.8, 0),
        "sea moss": _m(49, 1.5, 12.3, 0.6),
        "sea moss drink": _m(49, 1.5, 12.3, 0.6),
        "irish moss": _m(49, 1.5, 12.3, 0.6),
        "coconut water": _m(19, 0.7, 3.7, 0.2),
        "coconut milk drink": _m(45, 0.4, 6.3, 4.6),
        "tamarind drink": _m(239, 2.8, 62.5, 0.6),
        "soursop juice": _m(66, 1.0, 16.8, 0.3),
        "june plum juice": _m(46, 0.9, 11.2, 0.3),
        "guinep juice": _m(58, 1.3, 13.7, 0.1),
        "passion fruit concentrate": _m(97, 2.2, 23.4, 0.7),
        # fruit juices
        "fruit punch": _m(45, 0, 11.5, 0),
        "lime juice": _m(25, 0.4, 8.4, 0.2),
        # other beverages
        "kombucha": _m(30, 0, 7, 0),
        "smoothie": _m(66, 1.8, 16, 0.2),
        "milkshake": _m(112, 3.2, 17.9, 3.2),
        "hot chocolate": _m(77, 3.2, 13.4, 2.3),
        "iced coffee": _m(5, 0.3, 1.0, 0.0),
        # salad varieties
        "salad": _m(15, 1.4, 2.9, 0.2),
        "garden salad": _m(15, 1.4, 2.9, 0.2),
        "mixed greens": _m(15, 1.4, 2.9, 0.2),
        "caesar salad": _m(158, 7.2, 8.4, 12.6),
        "cesar salad": _m(158, 7.2, 8.4, 12.6),
        "greek salad": _m(107, 3.8, 7.2, 7.8),
        "cobb salad": _m(235, 18.5, 6.8, 15.2),
        "chef salad": _m(143, 12.4, 5.2, 8.6),
        "spinach salad": _m(23, 2.9, 3.6, 0.4),
        "kale salad": _m(35, 2.9, 6.7, 0.9),
        "arugula salad": _m(25, 2.6, 3.7, 0.7),
        "lettuce salad": _m(15, 1.4, 2.9, 0.2),
        "iceberg salad": _m(14, 0.9, 3.0, 0.1),
        "romaine salad": _m(17, 1.2, 3.3, 0.3),
        "mixed salad": _m(15, 1.4, 2.9, 0.2),
        "house salad": _m(15, 1.4, 2.9, 0.2),
        "side salad": _m(15, 1.4, 2.9, 0.2),
        # specialty salads
        "waldorf salad": _m(145, 2.8, 14.2, 9.6),
        "potato salad": _m(143, 2.6, 17.8, 7.2),
        "pasta salad": _m(192, 4.8, 32.4, 5.2),
        "chicken salad": _m(201, 15.8, 3.2, 14.6),
        "tuna salad": _m(158, 13.4, 2.8, 10.2),
        "egg salad": _m(183, 10.5, 1.8, 14.8),
        "coleslaw": _m(147, 1.2, 12.2, 10.8),
        "fruit salad": _m(50, 0.6, 12.8, 0.2),
        "quinoa salad": _m(172, 6.8, 28.4, 3.8),
        "bean salad": _m(89, 4.2, 16.8, 1.2),
        "caprese salad": _m(166, 9.8, 5.2, 12.4),
        "nicoise salad": _m(145, 8.6, 7.4, 9.8),
        # salad synonyms and variations
        "green salad": _m(15, 1.4, 2.9, 0.2),
        "leafy greens": _m(15, 1.4, 2.9, 0.2),
        "fresh salad": _m(15, 1.4, 2.9, 0.2),
        "dinner salad": _m(15, 1.4, 2.9, 0.2),
        "lunch salad": _m(143, 12.4, 5.2, 8.6),
        "vegetable salad": _m(25, 2.1, 4.8, 0.3),
        "mixed vegetable salad": _m(25, 2.1, 4.8, 0.3),
        "chopped salad": _m(35, 3.2, 5.8, 0.8),
        "mediterranean salad": _m(107, 3.8, 7.2, 7.8),
        "italian salad": _m(107, 3.8, 7.2, 7.8),
        "antipasto salad": _m(145, 8.6, 7.4, 9.8),
        # stone fruits
        "nectarine": _m(44, 1.1, 10.6, 0.3),
        "nectarines": _m(44, 1.1, 10.6, 0.3),
        "fresh nectarine": _m(44, 1.1, 10.6, 0.3),
        "raw nectarine": _m(44, 1.1, 10.6, 0.3),
        # protein bars and nutrition bars
        "protein bar": _m(413, 25.0, 45.0, 8.5),
        "nutrition bar": _m(413, 25.0, 45.0, 8.5),
        "energy bar": _m(413, 25.0, 45.0, 8.5),
        "protein energy bar": _m(413, 25.0, 45.0, 8.5),
        "whey protein bar": _m(413, 25.0, 45.0, 8.5),
    }
)

# Curated averages keyed by exact lowercase name.
CURATED_FOODS = MappingProxyType(
    {
        # fruits
        "apple": _m(52, 0.3, 14, 0.2),
        "banana": _m(89, 1.1, 23, 0.3),
        "orange": _m(47, 0.9, 12, 0.1),
        "grape": _m(62, 0.6, 16, 0.2),
        "cherry": _m(63, 1.1, 16, 0.2),
        "cantaloupe": _m(34, 0.8, 8, 0.2),
        "watermelon": _m(30, 0.6, 8, 0.2),
        "honeydew": _m(36, 0.5, 9, 0.1),
        # proteins
        "chicken": _m(165, 31, 0, 3.6),
        "beef": _m(250, 26, 0, 15),
        "salmon": _m(208, 20, 0, 12),
        "egg": _m(155, 13, 1.1, 11),
        # grains & starches
        "rice": _m(130, 2.7, 28, 0.3),
        "white rice": _m(130, 2.7, 28, 0.3),
        "brown rice": _m(123, 2.6, 23, 0.9),
        "jasmine rice": _m(130, 2.7, 28, 0.3),
        "basmati rice": _m(130, 2.7, 28, 0.3),
        "wild rice": _m(101, 4.0, 21.3, 0.3),
        "cooked rice": _m(130, 2.7, 28, 0.3),
        "bread": _m(265, 9, 49, 3.2),
        "white bread": _m(266, 8.9, 49, 3.6),
        "whole wheat bread": _m(247, 13.4, 41, 4.2),
        "sourdough bread": _m(289, 11.7, 56.3, 2.1),
        "rye bread": _m(259, 8.5, 48.3, 3.3),
        "pita bread": _m(275, 9.1, 55.7, 1.2),
        "naan": _m(310, 8.7, 54.3, 7.4),
        "bagel": _m(277, 11, 55.8, 1.4),
        "pasta": _m(131, 5, 25, 1.1),
        "spaghetti": _m(131, 5, 25, 1.1),
        "penne": _m(131, 5, 25, 1.1),
        "macaroni": _m(131, 5, 25, 1.1),
        "linguine": _m(131, 5, 25, 1.1),
        "fettuccine": _m(131, 5, 25, 1.1),
        "whole wheat pasta": _m(124, 5.3, 26.5, 0.5),
        "cooked pasta": _m(131, 5, 25, 1.1),
        "oats": _m(68, 2.4, 12, 1.4),
        "oatmeal": _m(68, 2.4, 12, 1.4),
        "rolled oats": _m(389, 16.9, 66.3, 6.9),
        "steel cut oats": _m(379, 14.7, 67.7, 6.5),
        "quinoa": _m(120, 4.4, 22, 1.9),
        "barley": _m(123, 2.3, 28.2, 0.4),
        "bulgur": _m(83, 3.1, 18.6, 0.2),
        # breakfast cereals
        "cereal": _m(379, 8.0, 84, 1.5),
        "cheerios": _m(378, 11, 74, 6.5),
        "cornflakes": _m(357, 7.5, 84, 0.4),
        "corn flakes": _m(357, 7.5, 84, 0.4),
        "rice krispies": _m(386, 4.0, 87, 1.0),
        "frosted flakes": _m(375, 4.5, 88, 0.5),
        "lucky charms": _m(386, 6.0, 80, 4.0),
        "fruit loops": _m(384, 4.0, 87, 3.0),
        "froot loops": _m(384, 4.0, 87, 3.0),
        "granola": _m(471, 13.3, 57.8, 20.7),
        "muesli": _m(362, 9.7, 66.2, 6.0),
        "bran flakes": _m(321, 10.6, 76.0, 1.8),
        "wheat flakes": _m(340, 11.0, 73.0, 2.2),
        "shredded wheat": _m(340, 11.0, 73.0, 2.2),
        "raisin bran": _m(316, 7.5, 75.4, 2.0),
        "cocoa puffs": _m(400, 4.0, 87, 4.0),
        "honey nut cheerios": _m(367, 7.4, 78.9, 4.2),
        "special k": _m(374, 17.0, 74.0, 1.5),
        "cinnamon toast crunch": _m(420, 4.2, 76.0, 12.0),
        "captain crunch": _m(420, 4.2, 76.0, 12.0),
        "trix": _m(393, 4.5, 85.7, 3.6),
        "cocoa krispies": _m(389, 4.2, 87.0, 2.4),
        "honey bunches of oats": _m(400, 6.7, 80.0, 6.7),
        # additional starches & snacks
        "crackers": _m(489, 8.8, 63.3, 22.3),
        "saltine crackers": _m(421, 7.0, 71.0, 12.0),
        "graham crackers": _m(423, 6.1, 77.5, 9.9),
        "pretzels": _m(380, 10.0, 79.0, 3.0),
        "tortilla chips": _m(489, 7.2, 61.9, 23.3),
        "potato chips": _m(536, 7.0, 53.0, 32.0),
        "tortilla": _m(218, 5.7, 43.6, 2.9),
        "flour tortilla": _m(304, 8.2, 50.4, 7.3),
        "corn tortilla": _m(218, 5.7, 43.6, 2.9),
        "wrap": _m(304, 8.2, 50.4, 7.3),
        # vegetables
        "broccoli": _m(34, 2.8, 7, 0.4),
        "carrot": _m(41, 0.9, 10, 0.2),
        "spinach": _m(23, 2.9, 3.6, 0.4),
        "corn": _m(86, 3.3, 19, 1.4),
        "sweet corn": _m(86, 3.3, 19, 1.4),
        "corn on cob": _m(86, 3.3, 19, 1.4),
        "corn on the cob": _m(86, 3.3, 19, 1.4),
        "potato": _m(77, 2, 17, 0.1),
        "baked potato": _m(93, 2.5, 21, 0.1),
        # processed foods
        "hotdog": _m(290, 10, 2, 26),
        "hot dog": _m(290, 10, 2, 26),
        "sausage": _m(290, 10, 2, 26),
        "french fries": _m(365, 4, 63, 17),
        "fries": _m(365, 4, 63, 17),
        "pizza": _m(266, 11, 33, 10),
        "hamburger": _m(540, 25, 40, 31),
        "cheeseburger": _m(540, 25, 40, 31),
        # chicken & poultry
        "chicken meat": _m(250, 23, 0, 15),
        "chicken breast": _m(165, 31, 0, 3.6),
        "grilled chicken breast": _m(165, 31, 0, 3.6),
        "baked chicken breast": _m(165, 31, 0, 3.6),
        "roasted chicken breast": _m(165, 31, 0, 3.6),
        "chicken thigh": _m(250, 23, 0, 15.5),
        "chicken drumstick": _m(250, 23, 0, 15.5),
        "chicken wing": _m(290, 27, 0, 19.5),
        "ground chicken": _m(143, 26, 0, 3.6),
        "chicken tenders": _m(165, 31, 0, 3.6),
        "rotisserie chicken": _m(190, 29, 0, 7.4),
        "fried chicken": _m(320, 25, 8, 20),
        # turkey
        "turkey meat": _m(189, 29, 0, 7.4),
        "turkey breast": _m(135, 30, 0, 1),
        "ground turkey": _m(200, 27, 0, 8),
        # beef
        "beef meat": _m(250, 26, 0, 15),
        "ground beef": _m(254, 26, 0, 15),
        "lean ground beef": _m(213, 26, 0, 11),
        "sirloin steak": _m(271, 27, 0, 17),
        "ribeye steak": _m(291, 25, 0, 21),
        "filet mignon": _m(227, 25, 0, 13),
        "new york strip": _m(271, 27, 0, 17),
        "chuck roast": _m(293, 22, 0, 23),
        "brisket": _m(338, 21, 0, 28),
        # pork
        "pork meat": _m(242, 27, 0, 14),
        "pork chop": _m(231, 25, 0, 14),
        "pork tenderloin": _m(143, 26, 0, 3.5),
        "bacon strips": _m(541, 37, 1.4, 42),
        "ham slices": _m(145, 21, 1.5, 5.5),
        "ground pork meat": _m(297, 25, 0, 21),
        # fish & seafood
        "salmon fish": _m(208, 25, 0, 12),
        "tuna": _m(144, 30, 0, 1),
        "cod": _m(105, 23, 0, 0.9),
        "tilapia": _m(128, 26, 0, 2.7),
        "shrimp": _m(85, 20, 0, 0.3),
        "crab": _m(97, 20, 0, 1.8),
        "lobster": _m(89, 19, 0, 0.9),
        "mahi mahi": _m(109, 23, 0, 0.9),
        "halibut": _m(111, 23, 0, 2.3),
        "sea bass": _m(125, 23, 0, 2.6),
        "snapper": _m(128, 26, 0, 1.7),
        "tuna steak": _m(144, 30, 0, 1),
        "salmon fillet": _m(208, 25, 0, 12),
        # caribbean foods
        "plantains": _m(122, 1.3, 32, 0.4),
        "fried plantains": _m(148, 1.1, 38, 0.1),
        "jerk chicken": _m(190, 29, 2, 7),
        "rice and beans": _m(205, 8, 38, 3),
        "beef patty": _m(350, 15, 30, 20),
        "chicken patty": _m(320, 16, 28, 18),
        "roti": _m(230, 6, 45, 4),
        "festival": _m(180, 3, 35, 4),
        "johnny cakes": _m(165, 3, 32, 3),
        "cassava": _m(160, 1.4, 38, 0.3),
        "breadfruit": _m(103, 1.1, 27, 0.2),
        "breakfruit": _m(103, 1.1, 27, 0.2),
        "callaloo": _m(22, 2.1, 3.7, 0.3),
        "curry goat": _m(250, 22, 5, 16),
        "oxtail": _m(330, 19, 0, 28),
        "saltfish": _m(290, 62, 0, 2.4),
        "ackee": _m(151, 2.9, 0.8, 15),
        # additional caribbean fruits
        "mango": _m(60, 0.8, 15, 0.4),
        "papaya": _m(43, 0.5, 11, 0.3),
        "guava": _m(68, 2.6, 14.3, 1.0),
        "soursop": _m(66, 1.0, 16.8, 0.3),
        "star fruit": _m(31, 1.0, 6.7, 0.3),
        "passion fruit": _m(97, 2.2, 23.4, 0.7),
        "sugar apple": _m(94, 2.1, 23.6, 0.3),
        "sweetsop": _m(94, 2.1, 23.6, 0.3),
        "custard apple": _m(94, 2.1, 23.6, 0.3),
        "coconut meat": _m(354, 3.3, 15.2, 33.5),
        "june plum": _m(46, 0.9, 11.2, 0.3),
        "golden apple": _m(46, 0.9, 11.2, 0.3),
        "otaheite apple": _m(25, 0.6, 5.7, 0.3),
        "mountain apple": _m(25, 0.6, 5.7, 0.3),
        "carambola": _m(31, 1.0, 6.7, 0.3),
        "avocado": _m(160, 2.0, 8.5, 14.7),
        "lime": _m(30, 0.7, 10.5, 0.2),
        "scotch bonnet pepper": _m(40, 1.9, 8.8, 0.4),
        "plantain": _m(122, 1.3, 32, 0.4),
        # caribbean fruit variations and alternative names
        "plumrose": _m(25, 0.6, 5.7, 0.3),
        "starapple": _m(67, 1.5, 15.3, 0.7),
        "star apple": _m(67, 1.5, 15.3, 0.7),
        "timbrine": _m(46, 0.9, 11.2, 0.3),
        "golden plum": _m(46, 0.9, 11.2, 0.3),
        "hog plum": _m(46, 0.9, 11.2, 0.3),
        "jew plum": _m(46, 0.9, 11.2, 0.3),
        "coolie plum": _m(46, 0.9, 11.2, 0.3),
        "pommecythere": _m(46, 0.9, 11.2, 0.3),
        "rose apple": _m(25, 0.6, 5.7, 0.3),
        "wax apple": _m(25, 0.6, 5.7, 0.3),
        "water apple": _m(25, 0.6, 5.7, 0.3),
        "mammee apple": _m(51, 0.5, 12.5, 0.5),
        "mamey": _m(124, 1.4, 32.1, 0.5),
        "sapodilla": _m(83, 0.4, 20, 1.1),
        "naseberry": _m(83, 0.4, 20, 1.1),
        "guinep": _m(58, 1.3, 13.7, 0.1),
        "spanish lime": _m(58, 1.3, 13.7, 0.1),
        "ackee fruit": _m(151, 2.9, 0.8, 15),
        "breadnut": _m(191, 7.4, 38.4, 2.3),
        # additional caribbean fruit variations
        "tambrine": _m(46, 0.9, 11.2, 0.3),
        "jackfruit": _m(95, 1.7, 23.2, 0.6),
        "jack fruit": _m(95, 1.7, 23.2, 0.6),
        "caimito": _m(67, 1.5, 15.3, 0.7),
        "milk fruit": _m(67, 1.5, 15.3, 0.7),
        # daily staples
        "eggs": _m(155, 13.0, 1.1, 11.0),
        "omelette": _m(154, 11.0, 0.6, 11.9),
        "yogurt": _m(59, 10.0, 3.6, 0.4),
        "yoghurt": _m(59, 10.0, 3.6, 0.4),
        "greek yogurt": _m(100, 17.3, 3.9, 0.4),
        "soup": _m(38, 1.9, 5.4, 1.2),
        "chips": _m(536, 7.0, 53.0, 35.0),
        # dairy and cheese varieties
        "cheese": _m(113, 7.0, 1.0, 9.0),
        "cheddar cheese": _m(403, 25.0, 1.3, 33.1),
        "mozzarella": _m(300, 22.2, 2.2, 22.4),
        "swiss cheese": _m(380, 27.0, 5.4, 27.8),
        "cream cheese": _m(342, 6.2, 4.1, 34.4),
        "butter": _m(717, 0.9, 0.1, 81.0),
        "margarine": _m(719, 0.2, 0.9, 80.7),
        # condiments and spreads
        "mayo": _m(680, 1.0, 0.6, 75.0),
        "mustard": _m(66, 4.1, 8.3, 4.2),
        "ranch dressing": _m(320, 0.4, 5.9, 33.8),
        "honey": _m(304, 0.3, 82.4, 0.0),
        "jelly": _m(278, 0.1, 73.6, 0.1),
        "peanut butter": _m(588, 25.8, 20.0, 50.4),
        "almond butter": _m(614, 21.2, 18.8, 55.5),
        # nuts and seeds
        "nuts": _m(607, 20.3, 21.7, 54.1),
        "almonds": _m(579, 21.2, 21.6, 49.9),
        "walnuts": _m(654, 15.2, 13.7, 65.2),
        "cashews": _m(553, 18.2, 30.2, 43.9),
        "peanuts": _m(567, 25.8, 16.1, 49.2),
        # additional proteins
        "steak meat": _m(271, 25.4, 0.0, 18.4),
        "fish fillet": _m(206, 22.0, 0.0, 12.4),
        # common vegetables
        "lettuce": _m(15, 1.4, 2.9, 0.2),
        "kale": _m(35, 2.9, 4.4, 1.5),
        "cauliflower": _m(25, 1.9, 5.0, 0.3),
        "carrots": _m(41, 0.9, 9.6, 0.2),
        "celery": _m(16, 0.7, 3.5, 0.2),
        "onion": _m(40, 1.1, 9.3, 0.1),
        # breakfast foods and pancakes
        "pancake": _m(227, 6.2, 28.8, 9.0),
        "pancakes": _m(227, 6.2, 28.8, 9.0),
        "buttermilk pancake": _m(227, 6.2, 28.8, 9.0),
        "buttermilk pancakes": _m(227, 6.2, 28.8, 9.0),
        "blueberry pancake": _m(253, 6.7, 33.1, 10.5),
        "blueberry pancakes": _m(253, 6.7, 33.1, 10.5),
        "chocolate chip pancake": _m(250, 6.0, 32.0, 11.0),
        "chocolate chip pancakes": _m(250, 6.0, 32.0, 11.0),
        "whole wheat pancake": _m(200, 8.1, 25.0, 7.9),
        "whole wheat pancakes": _m(200, 8.1, 25.0, 7.9),
        "waffle": _m(291, 7.9, 33.4, 14.7),
        "waffles": _m(291, 7.9, 33.4, 14.7),
        "belgian waffle": _m(291, 7.9, 33.4, 14.7),
        "belgian waffles": _m(291, 7.9, 33.4, 14.7),
        "french toast": _m(166, 5.9, 16.3, 7.7),
        # candy and confectionery
        "twizzlers": _m(327, 3.7, 79.6, 0.9),
        "twizzler": _m(327, 3.7, 79.6, 0.9),
        "red licorice": _m(327, 3.7, 79.6, 0.9),
        "strawberry twizzlers": _m(327, 3.7, 79.6, 0.9),
        "licorice": _m(327, 3.7, 79.6, 0.9),
        "licorice candy": _m(327, 3.7, 79.6, 0.9),
        "candy": _m(380, 0, 100, 0),
        "gummy bears": _m(318, 6.9, 77.2, 0.2),
        "gummy candy": _m(318, 6.9, 77.2, 0.2),
        "hard candy": _m(394, 0, 97.2, 1.0),
        "lollipop": _m(392, 0, 98, 0),
        "chocolate candy": _m(535, 4.2, 59.2, 31.3),
        # desserts and sweet treats
        "brownie": _m(466, 6.1, 63.3, 20.7),
        "brownies": _m(466, 6.1, 63.3, 20.7),
        "chocolate brownie": _m(466, 6.1, 63.3, 20.7),
        "cake": _m(257, 2.9, 46.4, 7.7),
        "chocolate cake": _m(371, 4.9, 50.7, 16.9),
        "vanilla cake": _m(257, 2.9, 46.4, 7.7),
        "birthday cake": _m(257, 2.9, 46.4, 7.7),
        "cupcake": _m(305, 3.6, 48.3, 11.1),
        "muffin": _m(377, 6.6, 55.1, 15.8),
        "chocolate muffin": _m(377, 6.6, 55.1, 15.8),
        "blueberry muffin": _m(313, 5.7, 54.6, 8.5),
        "cookie": _m(502, 5.9, 64, 24),
        "chocolate chip cookie": _m(488, 5.9, 68.4, 22.9),
        "sugar cookie": _m(473, 6.1, 71.6, 18.6),
        "oatmeal cookie": _m(457, 6.1, 68.4, 18.8),
        "pie": _m(237, 2.6, 34.4, 10.7),
        "apple pie": _m(237, 2.6, 34.4, 10.7),
        "pumpkin pie": _m(229, 4.5, 30.4, 10.4),
        "cheesecake": _m(321, 5.5, 25.9, 22.9),
        "ice cream": _m(207, 3.5, 24, 11),
        "vanilla ice cream": _m(207, 3.5, 24, 11),
        "chocolate ice cream": _m(216, 3.8, 28.2, 11),
        "strawberry ice cream": _m(192, 3.2, 24.4, 9.8),
        "donut": _m(452, 4.9, 51, 25),
        "doughnut": _m(452, 4.9, 51, 25),
        "glazed donut": _m(269, 4.1, 31.8, 14.2),
        "chocolate donut": _m(452, 4.9, 51, 25),
        "pudding": _m(158, 2.8, 22.7, 6.8),
        "chocolate pudding": _m(158, 2.8, 22.7, 6.8),
        "vanilla pudding": _m(111, 2.5, 17.6, 2.8),
        "tiramisu": _m(240, 4.0, 21.0, 16.0),
        "creme brulee": _m(323, 6.1, 21.4, 24.3),
        "panna cotta": _m(240, 4.5, 20.0, 16.0),
        "mousse": _m(168, 6.1, 16.0, 9.3),
        "chocolate mousse": _m(168, 6.1, 16.0, 9.3),
        "eclair": _m(262, 6.0, 24.3, 15.9),
        "profiterole": _m(262, 6.0, 24.3, 15.9),
        "cannoli": _m(380, 8.2, 27.1, 27.1),
        "baklava": _m(307, 4.4, 32.0, 18.3),
        "fudge": _m(411, 2.2, 84.2, 8.6),
        "tart": _m(256, 2.5, 39.2, 10.7),
        "fruit tart": _m(256, 2.5, 39.2, 10.7),
        "macaron": _m(390, 8.5, 45.0, 20.0),
        "macaroon": _m(181, 2.0, 17.8, 12.0),
        "strudel": _m(274, 4.0, 29.0, 16.0),
        "danish": _m(374, 6.6, 45.9, 18.8),
        "croissant": _m(406, 8.2, 45.8, 21.0),
        "pain au chocolat": _m(414, 7.8, 44.6, 23.2),
        # olives and olive products
        "olive": _m(115, 0.8, 6.0, 10.7),
        "olives": _m(115, 0.8, 6.0, 10.7),
        "green olives": _m(115, 0.8, 6.0, 10.7),
        "black olives": _m(115, 0.8, 6.0, 10.7),
        "kalamata olives": _m(115, 0.8, 6.0, 10.7),
        # peanut butter sandwiches
        "peanut butter sandwich": _m(325, 13.8, 32.4, 16.2),
        "pb sandwich": _m(325, 13.8, 32.4, 16.2),
        "peanut butter and jelly": _m(342, 12.4, 38.6, 15.8),
        "pbj sandwich": _m(342, 12.4, 38.6, 15.8),
        "pb&j": _m(342, 12.4, 38.6, 15.8),
    }
)

# Coarse keyword patterns for the last-resort estimate, checked in order.
GENERIC_PATTERNS = (
    (has("patty", "pie", "turnover"), _m(285, 12.5, 25, 16)),
    (has("sandwich", "burger", "wrap"), _m(245, 15, 22, 11)),
    (has("burrito", "taco", "quesadilla"), _m(215, 12, 24, 9)),
    (has("curry", "masala", "stew"), _m(185, 18, 8, 9)),
    (both(has("fried"), has("chicken", "fish")), _m(280, 20, 12, 17)),
    (has("bar", "protein"), _m(413, 25, 45, 8.5)),
    (
        either(
            has("fruit"),
            has_word(
                "apple", "banana", "orange", "peach", "pear", "plum", "nectarine"
            ),
        ),
        _m(44, 1.1, 10.6, 0.3),
    ),
    (has("berry", "berries"), _m(44, 1.1, 10.6, 0.3)),
    (
        either(
            has("vegetable"),
            has_word("broccoli", "carrot", "spinach", "lettuce", "tomato"),
        ),
        _m(25, 2.5, 5, 0.2),
    ),
    (
        either(has("meat"), has_word("chicken", "beef", "pork", "fish", "turkey")),
        _m(250, 25, 0, 15),
    ),
    (
        either(has("grain"), has_word("rice", "bread", "pasta", "cereal", "oats")),
        _m(350, 10, 70, 2),
    ),
)
GENERIC_DEFAULT = _m(150, 5, 20, 3)
