"""Signature sandwich recipes expanded into regular sandwiches."""

from __future__ import annotations

from deli.data import SIGNATURE_RECIPES, SignatureRecipe
from deli.models import Sandwich, SandwichSize, SignatureSandwichType, Topping, ToppingCategory


def recipe_for(signature: SignatureSandwichType) -> SignatureRecipe:
    return SIGNATURE_RECIPES[signature.value]


def build_signature_sandwich(signature: SignatureSandwichType, size: SandwichSize) -> Sandwich:
    """
    Build a sandwich from a signature recipe.

    The bread, toasted flag and preset toppings come from the recipe table; the
    returned sandwich accepts further `add_topping` calls like any other.
    """
    recipe = recipe_for(signature)
    sandwich = Sandwich(size=size, bread=recipe.bread, signature=signature)
    sandwich.set_toasted(recipe.toasted)
    for category, kind in recipe.toppings:
        sandwich.add_topping(Topping(kind, ToppingCategory(category)))
    return sandwich
