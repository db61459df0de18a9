"""
Curated allergen keyword data.

Keys of ALLERGEN_KEYWORDS are the canonical lowercase allergen names used by
signup forms and user profiles. Each list is ordered: the detector checks
keywords in the order declared here and stops at the first hit.

SAFE_COMPOUNDS lists phrases that contain an allergen keyword without being
that allergen (nut butters are not dairy, nutmeg is a spice). Every suppressed
keyword must appear inside its compound phrase.
"""

from __future__ import annotations

from typing import Dict, List

ALLERGEN_KEYWORDS: Dict[str, List[str]] = {
    # Major allergens (top 8 + sesame)
    "milk": [
        # Direct dairy
        "milk", "dairy", "cream", "cheese", "butter", "yogurt", "yoghurt",
        # Dairy proteins and components
        "whey", "casein", "lactose", "curd", "ghee", "buttermilk",
        "lactoglobulin", "lactalbumin", "lactate",
        # Cheese varieties
        "paneer", "cottage cheese", "ricotta", "mozzarella", "cheddar",
        "parmesan", "gouda", "brie", "feta", "swiss cheese", "provolone",
        "cream cheese", "mascarpone", "blue cheese", "goat cheese",
        "gruyere", "monterey jack", "colby", "muenster", "havarti",
        "camembert", "gorgonzola", "romano", "asiago", "fontina",
        # Dairy products
        "ice cream", "icecream", "frozen yogurt", "custard", "pudding",
        "condensed milk", "evaporated milk", "sour cream", "half and half",
        "heavy cream", "whipping cream", "clotted cream", "crème",
        "milk chocolate", "white chocolate",
        # Processed forms
        "milk powder", "dried milk", "powdered milk", "milk solids",
        "whey protein", "whey powder", "whey concentrate", "whey isolate",
        "butter cream", "clarified butter", "butter oil",
        # Regional dairy
        "queso", "fromage", "käse", "formaggio", "lassi", "raita",
        "khoya", "mawa", "rabri", "malai", "dahi",
    ],
    "eggs": [
        "egg", "eggs", "egg white", "egg yolk", "whole egg",
        "scrambled egg", "fried egg", "boiled egg", "poached egg",
        "hard boiled", "soft boiled", "omelet", "omelette", "frittata",
        "quiche", "deviled egg", "egg salad",
        "albumin", "ovalbumin", "ovomucoid", "ovotransferrin", "lysozyme",
        "egg protein", "egg powder", "dried egg", "egg solids",
        "mayonnaise", "mayo", "meringue", "eggnog", "hollandaise",
        "béarnaise", "aioli", "custard", "zabaglione", "sabayon",
        # Substitutes may contain traces
        "egg substitute", "egg replacer",
    ],
    "peanuts": [
        "peanut", "peanuts", "groundnut", "groundnuts", "goober", "goober pea",
        "peanut butter", "peanut oil", "peanut flour", "peanut protein",
        "arachis oil", "arachis hypogaea", "ground nut", "monkey nut",
        "beer nut", "mandelonas", "nut meat",
    ],
    "tree nuts": [
        "almond", "almonds", "cashew", "cashews", "walnut", "walnuts",
        "pecan", "pecans", "pistachio", "pistachios", "macadamia",
        "hazelnut", "hazelnuts", "filbert",
        "pine nut", "pine nuts", "pignoli", "pignolia", "pinon",
        "brazil nut", "brazil nuts", "chestnut", "chestnuts",
        "beechnut", "butternut", "chinquapin", "ginkgo nut", "hickory nut",
        "shea nut", "coconut",
        "almond butter", "almond milk", "almond flour", "almond paste",
        "cashew butter", "cashew milk", "walnut oil", "hazelnut spread",
        "praline", "marzipan", "nougat", "gianduja", "frangipane",
        "nut butter", "nut milk", "nut oil", "nut flour",
        "tree nut", "mixed nuts", "cocktail nuts",
    ],
    "fish": [
        "fish", "salmon", "tuna", "cod", "haddock", "halibut", "pollock",
        "bass", "sea bass", "seabass", "flounder", "sole", "trout",
        "anchovy", "anchovies", "sardine", "sardines", "mackerel",
        "tilapia", "catfish", "perch", "pike", "herring",
        "swordfish", "mahi mahi", "mahi-mahi", "grouper", "snapper",
        "barramundi", "branzino", "turbot", "monkfish", "rockfish",
        "arctic char", "walleye", "crappie", "bluegill",
        "fish sauce", "fish oil", "fish stock", "dashi", "bonito",
        "fish roe", "caviar", "tobiko", "masago", "ikura",
        "surimi", "imitation crab", "fish paste", "fish cake",
        "sashimi", "sushi", "ceviche", "gravlax", "lox", "smoked salmon",
        "fish fillet", "fish steak", "fish and chips",
    ],
    "shellfish": [
        # Crustaceans
        "shrimp", "shrimps", "prawn", "prawns", "crab", "crabmeat",
        "lobster", "crayfish", "crawfish", "langoustine", "langostino",
        "krill",
        # Mollusks
        "clam", "clams", "mussel", "mussels", "oyster", "oysters",
        "scallop", "scallops", "squid", "calamari", "octopus",
        "cuttlefish", "conch", "whelk", "periwinkle", "limpet",
        "snail", "escargot", "abalone", "sea urchin", "uni",
        "shellfish", "seafood", "crustacean", "mollusk", "mollusc",
        "shrimp paste", "oyster sauce", "clam chowder",
    ],
    "wheat": [
        "wheat", "wheat flour", "wheat germ", "wheat bran", "wheat starch",
        "whole wheat", "wholewheat", "whole grain wheat",
        "durum", "semolina", "spelt", "kamut", "farina", "farro",
        "einkorn", "emmer", "triticale", "bulgur", "cracked wheat",
        # Bread
        "bread", "white bread", "wheat bread", "whole wheat bread",
        "pita", "pita bread", "naan", "roti", "chapati", "paratha",
        "bagel", "baguette", "ciabatta", "focaccia", "brioche",
        "croissant", "english muffin", "tortilla", "wrap",
        "bun", "roll", "biscuit", "scone",
        # Pasta
        "pasta", "noodle", "noodles", "spaghetti", "macaroni",
        "fettuccine", "linguine", "penne", "rigatoni", "fusilli",
        "lasagna", "ravioli", "tortellini", "gnocchi",
        "ramen", "udon", "soba", "lo mein",
        # Baked goods
        "cake", "cookie", "cookies", "cracker", "crackers",
        "muffin", "donut", "doughnut", "pastry", "pie crust",
        "brownie", "waffle", "pancake",
        "seitan", "couscous", "orzo", "matzo", "matzah",
        "graham", "pretzels", "breadcrumbs", "croutons",
        "wheat protein", "vital wheat gluten",
    ],
    "soy": [
        "soy", "soya", "soybean", "soybeans", "soy bean", "soy beans",
        "tofu", "edamame", "tempeh", "miso", "natto",
        "soy sauce", "soysauce", "tamari", "shoyu", "teriyaki",
        "soy milk", "soymilk", "soy yogurt", "soy cheese",
        "soy ice cream", "soy creamer",
        "soy protein", "soy protein isolate", "soy flour", "soy lecithin",
        "textured vegetable protein", "tvp", "textured soy protein",
        "hydrolyzed soy protein", "soy oil", "soybean oil",
        "yuba", "bean curd", "fermented soy", "soy paste",
    ],
    "sesame": [
        "sesame", "sesame seed", "sesame seeds", "tahini", "tahina",
        "sesame oil", "sesame paste", "sesamol", "sesamum",
        "benne", "benne seed", "gingelly", "gingelly oil",
        "til", "til oil", "simsim", "gomasio", "halva", "halvah",
    ],
    # Additional common allergens
    "gluten": [
        "gluten", "wheat gluten", "vital wheat gluten",
        "wheat flour", "wheat", "barley", "rye", "malt", "malt extract",
        "malted barley", "beer", "ale", "lager", "stout",
        "bread", "pasta", "seitan", "spelt", "kamut", "triticale",
        "farina", "semolina", "durum", "bulgur", "couscous",
    ],
    "mustard": [
        "mustard", "mustard seed", "mustard seeds", "mustard powder",
        "dijon", "dijon mustard", "yellow mustard", "brown mustard",
        "whole grain mustard", "mustard oil", "mustard greens",
    ],
    "corn": [
        "corn", "maize", "cornmeal", "cornstarch", "corn starch",
        "corn flour", "cornflour", "corn syrup", "high fructose corn syrup",
        "hfcs", "corn oil", "corn sugar", "dextrose", "maltodextrin",
        "hominy", "polenta", "grits", "popcorn", "corn tortilla",
        "masa", "masa harina", "corn chips", "corn flakes",
    ],
    # Legumes
    "chickpeas": [
        "chickpea", "chickpeas", "garbanzo", "garbanzos", "garbanzo bean",
        "garbanzo beans", "chana", "channa", "chole",
        "hummus", "houmous", "humus", "falafel", "falafels",
        "besan", "gram flour", "chickpea flour",
    ],
    "lentils": [
        "lentil", "lentils", "lentil soup", "dal", "dhal", "daal",
        "red lentil", "green lentil", "brown lentil", "black lentil",
        "yellow lentil", "masoor", "moong", "moong dal", "urad",
        "toor dal", "chana dal", "lentil flour",
    ],
    "peas": [
        "pea", "peas", "green pea", "green peas", "garden pea",
        "split pea", "split peas", "snow pea", "snap pea",
        "sugar snap", "sugar snap pea", "pea protein", "pea flour",
        "marrowfat pea", "black-eyed pea", "field pea",
    ],
    "beans": [
        "bean", "beans", "kidney bean", "black bean", "pinto bean",
        "navy bean", "white bean", "lima bean", "butter bean",
        "cannellini", "great northern", "fava bean", "broad bean",
        "adzuki", "adzuki bean", "mung bean", "mung beans",
        "refried beans", "baked beans", "green bean", "string bean",
        "wax bean", "haricot", "flageolet", "borlotti",
    ],
    # Seafood, narrower than shellfish
    "crustaceans": [
        "crustacean", "crab", "crabmeat", "lobster", "crawfish",
        "crayfish", "shrimp", "shrimps", "prawn", "prawns",
        "langoustine", "langostino", "krill", "barnacle",
    ],
    "mollusks": [
        "mollusk", "mollusc", "clam", "clams", "oyster", "oysters",
        "mussel", "mussels", "scallop", "scallops", "squid",
        "calamari", "octopus", "cuttlefish", "snail", "escargot",
        "abalone", "conch", "whelk", "periwinkle", "sea urchin", "uni",
    ],
    # Fruits
    "banana": [
        "banana", "bananas", "plantain", "plantains",
        "banana bread", "banana chip",
    ],
    "avocado": ["avocado", "avocados", "guacamole", "avo", "avocado oil"],
    "kiwi": ["kiwi", "kiwifruit", "kiwi fruit", "chinese gooseberry"],
    "strawberry": ["strawberry", "strawberries", "strawberry jam"],
    # Vegetables
    "tomato": [
        "tomato", "tomatoes", "tomato sauce", "marinara", "marinara sauce",
        "salsa", "ketchup", "catsup", "tomato paste", "tomato puree",
        "roma tomato", "cherry tomato", "grape tomato",
        "sun dried tomato", "sundried tomato", "tomato juice",
    ],
    "potato": [
        "potato", "potatoes", "french fries", "french fry", "fries",
        "mashed potato", "baked potato", "roasted potato",
        "hash brown", "hashbrown", "tater tot", "potato chip",
        "chips", "crisps", "potato salad", "potato flour",
        "potato starch", "sweet potato", "yam",
    ],
    "garlic": [
        "garlic", "garlic powder", "garlic salt", "garlic oil",
        "aioli", "garlic bread", "roasted garlic", "garlic clove",
    ],
    "onion": [
        "onion", "onions", "scallion", "scallions", "green onion",
        "spring onion", "shallot", "shallots", "leek", "leeks",
        "chive", "chives", "onion powder", "red onion", "white onion",
        "yellow onion", "sweet onion", "vidalia", "caramelized onion",
        "onion ring", "pearl onion", "cipollini",
    ],
    # Grains
    "oats": [
        "oat", "oats", "oatmeal", "oat flour", "oat milk", "oat bran",
        "rolled oats", "steel cut oats", "oat cereal", "granola",
        "muesli", "porridge", "oat groats", "oat flakes",
    ],
    "rice": [
        "rice", "brown rice", "white rice", "wild rice", "basmati",
        "basmati rice", "jasmine rice", "rice flour", "rice milk",
        "rice paper", "rice noodle", "rice noodles", "rice cake",
        "rice cakes", "risotto", "sushi rice", "sticky rice",
        "arborio", "rice vinegar", "rice bran", "rice cereal",
        "puffed rice", "rice crispy", "rice krispies",
    ],
    "barley": [
        "barley", "barley malt", "malt", "malted barley", "malt extract",
        "malt syrup", "pearl barley", "barley flour", "barley grass",
    ],
    "rye": ["rye", "rye bread", "rye flour", "pumpernickel", "rye whiskey"],
    "quinoa": ["quinoa", "quinoa flour", "quinoa flakes"],
    "buckwheat": [
        "buckwheat", "buckwheat flour", "soba", "soba noodle",
        "soba noodles", "kasha",
    ],
    # Other
    "gelatin": [
        "gelatin", "gelatine", "jello", "jell-o", "marshmallow",
        "marshmallows", "gummy", "gummies", "gummy bear",
        "gelatin capsule", "gel cap", "aspic",
    ],
    "cocoa": [
        "cocoa", "cacao", "chocolate", "dark chocolate", "milk chocolate",
        "white chocolate", "hot chocolate", "cocoa powder", "cacao powder",
        "chocolate chip", "chocolate bar", "cocoa butter", "cacao nibs",
    ],
    "red meat": [
        "beef", "pork", "lamb", "veal", "venison", "bison", "buffalo",
        "red meat", "steak", "hamburger", "burger", "bacon", "ham",
        "sausage", "salami", "pepperoni", "prosciutto", "pancetta",
        "alpha-gal", "alpha gal", "mammalian meat", "mutton",
        "ground beef", "beef patty", "pork chop", "lamb chop",
        "beef jerky", "pastrami", "corned beef", "roast beef",
    ],
    "lupin": [
        "lupin", "lupine", "lupin flour", "lupin bean", "lupini bean",
        "lupini beans", "lupin protein",
    ],
}

# Plant-based drinks that are not dairy; only the dairy "milk" keyword is
# suppressed, the nut/soy/oat keywords still fire for their own allergen.
PLANT_MILK_PHRASES: List[str] = [
    "soy milk",
    "soymilk",
    "soya milk",
    "almond milk",
    "oat milk",
    "rice milk",
    "coconut milk",
    "cashew milk",
    "hazelnut milk",
    "hemp milk",
    "pea milk",
]

SAFE_COMPOUNDS: Dict[str, List[str]] = {
    # Nut and fruit butters are not dairy
    "peanut butter": ["butter"],
    "almond butter": ["butter"],
    "cashew butter": ["butter"],
    "sunflower butter": ["butter"],
    "apple butter": ["butter"],
    "fruit butter": ["butter"],
    # Vegetable fats
    "cocoa butter": ["butter"],
    "cacao butter": ["butter"],
    "shea butter": ["butter"],
    # Legumes
    "butter bean": ["butter"],
    "butter beans": ["butter"],
    # Spice, not a nut
    "nutmeg": ["nut"],
    # Squash, not dairy or a tree nut
    "butternut squash": ["butter", "nut", "butternut"],
    "butternut": ["butter", "nut"],
    # Aquatic vegetable
    "water chestnut": ["chestnut", "nut"],
    "water chestnuts": ["chestnut", "chestnuts", "nut", "nuts"],
}
SAFE_COMPOUNDS.update({phrase: ["milk"] for phrase in PLANT_MILK_PHRASES})
