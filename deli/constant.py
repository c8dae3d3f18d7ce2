"""Editable static menu, pricing and recipe configuration."""

from __future__ import annotations

BREAD_CATALOG: dict[str, str] = {
    "white": "White",
    "wheat": "Wheat",
    "rye": "Rye",
    "wrap": "Wrap",
}

MEAT_CATALOG: dict[str, str] = {
    "steak": "Steak",
    "ham": "Ham",
    "salami": "Salami",
    "roast_beef": "Roast Beef",
    "chicken": "Chicken",
    "bacon": "Bacon",
}

CHEESE_CATALOG: dict[str, str] = {
    "american": "American",
    "provolone": "Provolone",
    "cheddar": "Cheddar",
    "swiss": "Swiss",
}

REGULAR_TOPPING_CATALOG: dict[str, str] = {
    "lettuce": "Lettuce",
    "peppers": "Peppers",
    "onions": "Onions",
    "tomatoes": "Tomatoes",
    "jalapenos": "Jalapeños",
    "cucumbers": "Cucumbers",
    "pickles": "Pickles",
    "guacamole": "Guacamole",
    "mushrooms": "Mushrooms",
}

SAUCE_CATALOG: dict[str, str] = {
    "mayo": "Mayo",
    "mustard": "Mustard",
    "ketchup": "Ketchup",
    "ranch": "Ranch",
    "thousand_islands": "Thousand Islands",
    "vinaigrette": "Vinaigrette",
}

SIDE_CATALOG: dict[str, str] = {
    "au_jus": "Au Jus",
    "sauce": "Sauce",
}

# Prices are kept as strings so deli.data can build exact Decimals from them.
SANDWICH_SIZE_TABLE: dict[str, dict[str, str | int]] = {
    "small": {
        "inches": 4,
        "base": "5.50",
        "meat": "1.00",
        "cheese": "0.75",
        "extra_meat": "0.50",
        "extra_cheese": "0.30",
        "side": "0.50",
    },
    "medium": {
        "inches": 8,
        "base": "7.00",
        "meat": "2.00",
        "cheese": "1.50",
        "extra_meat": "1.00",
        "extra_cheese": "0.60",
        "side": "0.75",
    },
    "large": {
        "inches": 12,
        "base": "8.50",
        "meat": "3.00",
        "cheese": "2.25",
        "extra_meat": "1.50",
        "extra_cheese": "0.90",
        "side": "1.00",
    },
}

DRINK_SIZE_TABLE: dict[str, dict[str, str]] = {
    "small": {"display_name": "Small", "price": "2.00"},
    "medium": {"display_name": "Medium", "price": "2.50"},
    "large": {"display_name": "Large", "price": "3.00"},
}

CHIPS_PRICE = "1.50"

SIGNATURE_META_BY_ID: dict[str, dict[str, str]] = {
    "blt": {
        "display_name": "BLT",
        "description": "Classic Bacon, Lettuce, and Tomato on toasted white bread with mayo",
    },
    "philly_cheesesteak": {
        "display_name": "Philly Cheesesteak",
        "description": "Steak and provolone with grilled peppers and onions on a wrap",
    },
    "italian": {
        "display_name": "Italian Sub",
        "description": "Ham and salami with provolone, lettuce, tomatoes, onions, and vinaigrette",
    },
    "club": {
        "display_name": "Club Sandwich",
        "description": "Ham, chicken, and bacon with swiss, lettuce, tomatoes, and mayo on toasted white",
    },
}

# Topping entries are (category, kind) pairs applied in listed order.
SIGNATURE_RECIPES: dict[str, dict[str, str | bool | list[tuple[str, str]]]] = {
    "blt": {
        "bread": "white",
        "toasted": True,
        "toppings": [
            ("meat", "bacon"),
            ("regular", "lettuce"),
            ("regular", "tomatoes"),
            ("sauce", "mayo"),
        ],
    },
    "philly_cheesesteak": {
        "bread": "wrap",
        "toasted": False,
        "toppings": [
            ("meat", "steak"),
            ("cheese", "provolone"),
            ("regular", "peppers"),
            ("regular", "onions"),
        ],
    },
    "italian": {
        "bread": "wheat",
        "toasted": False,
        "toppings": [
            ("meat", "ham"),
            ("meat", "salami"),
            ("cheese", "provolone"),
            ("regular", "lettuce"),
            ("regular", "tomatoes"),
            ("regular", "onions"),
            ("sauce", "vinaigrette"),
        ],
    },
    "club": {
        "bread": "white",
        "toasted": True,
        "toppings": [
            ("meat", "ham"),
            ("meat", "chicken"),
            ("meat", "bacon"),
            ("cheese", "swiss"),
            ("regular", "lettuce"),
            ("regular", "tomatoes"),
            ("sauce", "mayo"),
        ],
    },
}

# Display order for the detailed receipt partition.
TOPPING_SECTION_LABELS: dict[str, str] = {
    "meat": "Meats",
    "cheese": "Cheese",
    "regular": "Toppings",
    "sauce": "Sauces",
    "side": "Sides",
}
