"""Static pricing tables and menu option data."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from deli.constant import (
    BREAD_CATALOG,
    CHEESE_CATALOG,
    CHIPS_PRICE as _CHIPS_PRICE_RAW,
    DRINK_SIZE_TABLE,
    MEAT_CATALOG,
    REGULAR_TOPPING_CATALOG,
    SANDWICH_SIZE_TABLE,
    SAUCE_CATALOG,
    SIDE_CATALOG,
    SIGNATURE_META_BY_ID as _SIGNATURE_META_RAW,
    SIGNATURE_RECIPES as _SIGNATURE_RECIPES_RAW,
)


@dataclass(frozen=True)
class MenuOption:
    """A selectable menu row shown by the UI."""

    option_id: str
    label: str


@dataclass(frozen=True)
class SandwichPricing:
    """Price constants for one sandwich size."""

    inches: int
    base: Decimal
    meat: Decimal
    cheese: Decimal
    extra_meat: Decimal
    extra_cheese: Decimal
    side: Decimal

    @property
    def label(self) -> str:
        return f'{self.inches}"'


@dataclass(frozen=True)
class DrinkPricing:
    """Display name and flat price for one drink size."""

    display_name: str
    price: Decimal


@dataclass(frozen=True)
class SignatureMeta:
    """Menu text for a signature sandwich."""

    display_name: str
    description: str


@dataclass(frozen=True)
class SignatureRecipe:
    """Fixed bread, toasted flag and ordered (category, kind) toppings."""

    bread: str
    toasted: bool
    toppings: tuple[tuple[str, str], ...]


CATALOG_BY_CATEGORY: dict[str, dict[str, str]] = {
    "meat": MEAT_CATALOG,
    "cheese": CHEESE_CATALOG,
    "regular": REGULAR_TOPPING_CATALOG,
    "sauce": SAUCE_CATALOG,
    "side": SIDE_CATALOG,
}

SANDWICH_PRICING: dict[str, SandwichPricing] = {
    size_id: SandwichPricing(
        inches=int(raw["inches"]),
        base=Decimal(str(raw["base"])),
        meat=Decimal(str(raw["meat"])),
        cheese=Decimal(str(raw["cheese"])),
        extra_meat=Decimal(str(raw["extra_meat"])),
        extra_cheese=Decimal(str(raw["extra_cheese"])),
        side=Decimal(str(raw["side"])),
    )
    for size_id, raw in SANDWICH_SIZE_TABLE.items()
}

DRINK_PRICING: dict[str, DrinkPricing] = {
    size_id: DrinkPricing(display_name=raw["display_name"], price=Decimal(raw["price"]))
    for size_id, raw in DRINK_SIZE_TABLE.items()
}

CHIPS_PRICE = Decimal(_CHIPS_PRICE_RAW)

SIGNATURE_META_BY_ID: dict[str, SignatureMeta] = {
    signature_id: SignatureMeta(display_name=meta["display_name"], description=meta["description"])
    for signature_id, meta in _SIGNATURE_META_RAW.items()
}

SIGNATURE_RECIPES: dict[str, SignatureRecipe] = {
    signature_id: SignatureRecipe(
        bread=str(recipe["bread"]),
        toasted=bool(recipe["toasted"]),
        toppings=tuple(tuple(pair) for pair in recipe["toppings"]),  # type: ignore[union-attr]
    )
    for signature_id, recipe in _SIGNATURE_RECIPES_RAW.items()
}


def format_money(amount: Decimal) -> str:
    """Format an amount as dollars with two decimal places."""
    return f"${amount:.2f}"


def sandwich_pricing(size_id: str) -> SandwichPricing:
    return SANDWICH_PRICING[size_id]


def drink_pricing(size_id: str) -> DrinkPricing:
    return DRINK_PRICING[size_id]


def display_name_for_bread(bread_id: str) -> str:
    """Get display name for a bread id."""
    return BREAD_CATALOG.get(bread_id, bread_id)


def display_name_for_kind(category: str, kind: str) -> str:
    """Get display name for an ingredient id within its topping category."""
    return CATALOG_BY_CATEGORY.get(category, {}).get(kind, kind)


def is_known_kind(category: str, kind: str) -> bool:
    return kind in CATALOG_BY_CATEGORY.get(category, {})


def bread_options() -> list[MenuOption]:
    return [MenuOption(bread_id, name) for bread_id, name in BREAD_CATALOG.items()]


def topping_options(category: str) -> list[MenuOption]:
    """Return the menu rows for one topping category, in catalog order."""
    return [MenuOption(kind, name) for kind, name in CATALOG_BY_CATEGORY[category].items()]


def sandwich_size_options() -> list[MenuOption]:
    return [
        MenuOption(size_id, f"{pricing.label} - {format_money(pricing.base)}")
        for size_id, pricing in SANDWICH_PRICING.items()
    ]


def drink_size_options() -> list[MenuOption]:
    return [
        MenuOption(size_id, f"{pricing.display_name} - {format_money(pricing.price)}")
        for size_id, pricing in DRINK_PRICING.items()
    ]


def signature_options() -> list[MenuOption]:
    """Signature rows carry the display name and the menu description."""
    return [
        MenuOption(signature_id, f"{meta.display_name}\n   {meta.description}")
        for signature_id, meta in SIGNATURE_META_BY_ID.items()
    ]
