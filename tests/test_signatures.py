"""
Unit tests for signature sandwich expansion.
"""

from decimal import Decimal

import pytest

from deli.models import SandwichSize, SignatureSandwichType, Topping
from deli.signatures import build_signature_sandwich

EXPECTED_RECIPES = {
    SignatureSandwichType.BLT: (
        "white",
        True,
        [Topping.meat("bacon"), Topping.regular("lettuce"), Topping.regular("tomatoes"), Topping.sauce("mayo")],
    ),
    SignatureSandwichType.PHILLY_CHEESESTEAK: (
        "wrap",
        False,
        [Topping.meat("steak"), Topping.cheese("provolone"), Topping.regular("peppers"), Topping.regular("onions")],
    ),
    SignatureSandwichType.ITALIAN: (
        "wheat",
        False,
        [
            Topping.meat("ham"),
            Topping.meat("salami"),
            Topping.cheese("provolone"),
            Topping.regular("lettuce"),
            Topping.regular("tomatoes"),
            Topping.regular("onions"),
            Topping.sauce("vinaigrette"),
        ],
    ),
    SignatureSandwichType.CLUB: (
        "white",
        True,
        [
            Topping.meat("ham"),
            Topping.meat("chicken"),
            Topping.meat("bacon"),
            Topping.cheese("swiss"),
            Topping.regular("lettuce"),
            Topping.regular("tomatoes"),
            Topping.sauce("mayo"),
        ],
    ),
}


class TestBuildSignatureSandwich:
    """Tests for expanding signature recipes."""

    @pytest.mark.parametrize("signature", list(SignatureSandwichType))
    @pytest.mark.parametrize("size", list(SandwichSize))
    def test_recipe_expansion(self, signature, size):
        """Test bread, toasted flag and toppings match the recipe for every size."""
        bread, toasted, toppings = EXPECTED_RECIPES[signature]
        sandwich = build_signature_sandwich(signature, size)
        assert sandwich.size == size
        assert sandwich.bread == bread
        assert sandwich.toasted is toasted
        assert list(sandwich.toppings) == toppings
        assert sandwich.signature == signature

    def test_no_preset_is_extra(self):
        """Test preset toppings are never extra portions."""
        for signature in SignatureSandwichType:
            sandwich = build_signature_sandwich(signature, SandwichSize.MEDIUM)
            assert not any(topping.extra for topping in sandwich.toppings)

    def test_club_price(self):
        """Test a medium club is priced from its preset toppings."""
        sandwich = build_signature_sandwich(SignatureSandwichType.CLUB, SandwichSize.MEDIUM)
        assert sandwich.price() == Decimal("7.00") + Decimal("6.00") + Decimal("1.50")

    def test_open_to_customization(self):
        """Test more toppings can be appended after the preset ones."""
        sandwich = build_signature_sandwich(SignatureSandwichType.BLT, SandwichSize.SMALL)
        sandwich.add_topping(Topping.cheese("cheddar", extra=True))
        assert sandwich.toppings[-1] == Topping.cheese("cheddar", extra=True)
        assert len(sandwich.toppings) == 5
        assert sandwich.price() == Decimal("5.50") + Decimal("1.00") + Decimal("0.75") + Decimal("0.30")

    def test_description(self):
        """Test the description leads with the signature display name."""
        sandwich = build_signature_sandwich(SignatureSandwichType.ITALIAN, SandwichSize.LARGE)
        assert sandwich.description() == (
            'Italian Sub Signature - 12" Wheat Sandwich - Toppings: '
            "Ham, Salami, Provolone, Lettuce, Tomatoes, Onions, Vinaigrette"
        )

    def test_builds_are_independent(self):
        """Test two builds of the same signature do not share toppings."""
        first = build_signature_sandwich(SignatureSandwichType.BLT, SandwichSize.SMALL)
        second = build_signature_sandwich(SignatureSandwichType.BLT, SandwichSize.SMALL)
        first.add_topping(Topping.sauce("ranch"))
        assert len(second.toppings) == 4
