"""Domain models for the deli point of sale."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from deli.constant import BREAD_CATALOG, TOPPING_SECTION_LABELS
from deli.data import (
    CHIPS_PRICE,
    SIGNATURE_META_BY_ID,
    display_name_for_bread,
    display_name_for_kind,
    drink_pricing,
    format_money,
    is_known_kind,
    sandwich_pricing,
)

ZERO = Decimal("0.00")
ORDER_RULE = "=" * 50


class ToppingCategory(str, Enum):
    """Topping categories in receipt display order."""

    MEAT = "meat"
    CHEESE = "cheese"
    REGULAR = "regular"
    SAUCE = "sauce"
    SIDE = "side"


PREMIUM_CATEGORIES = frozenset({ToppingCategory.MEAT, ToppingCategory.CHEESE})


class SandwichSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class DrinkSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class SignatureSandwichType(str, Enum):
    BLT = "blt"
    PHILLY_CHEESESTEAK = "philly_cheesesteak"
    ITALIAN = "italian"
    CLUB = "club"

    @property
    def display_name(self) -> str:
        return SIGNATURE_META_BY_ID[self.value].display_name


@dataclass(frozen=True)
class Topping:
    """One topping portion: an ingredient id tagged with its category."""

    kind: str
    category: ToppingCategory
    extra: bool = False

    def __post_init__(self) -> None:
        if not is_known_kind(self.category.value, self.kind):
            raise ValueError(f"Unknown {self.category.value} kind: {self.kind!r}")
        if self.extra and self.category not in PREMIUM_CATEGORIES:
            raise ValueError(f"Only meat and cheese can be extra, got {self.category.value}")

    @classmethod
    def meat(cls, kind: str, extra: bool = False) -> Topping:
        return cls(kind, ToppingCategory.MEAT, extra)

    @classmethod
    def cheese(cls, kind: str, extra: bool = False) -> Topping:
        return cls(kind, ToppingCategory.CHEESE, extra)

    @classmethod
    def regular(cls, kind: str) -> Topping:
        return cls(kind, ToppingCategory.REGULAR)

    @classmethod
    def sauce(cls, kind: str) -> Topping:
        return cls(kind, ToppingCategory.SAUCE)

    @classmethod
    def side(cls, kind: str) -> Topping:
        return cls(kind, ToppingCategory.SIDE)

    @property
    def name(self) -> str:
        return display_name_for_kind(self.category.value, self.kind)

    def price(self, size: SandwichSize) -> Decimal:
        """Price of this portion on a sandwich of the given size."""
        pricing = sandwich_pricing(size.value)
        match self.category:
            case ToppingCategory.MEAT:
                return pricing.meat + (pricing.extra_meat if self.extra else ZERO)
            case ToppingCategory.CHEESE:
                return pricing.cheese + (pricing.extra_cheese if self.extra else ZERO)
            case ToppingCategory.REGULAR | ToppingCategory.SAUCE | ToppingCategory.SIDE:
                return ZERO
        raise ValueError(f"Unhandled topping category: {self.category!r}")

    def display_name(self) -> str:
        if self.extra:
            return f"Extra {self.name}"
        return self.name


@dataclass
class Sandwich:
    """A sandwich line item; `signature` is set when built from a preset recipe."""

    size: SandwichSize
    bread: str
    toasted: bool = False
    signature: SignatureSandwichType | None = None
    _toppings: list[Topping] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.bread not in BREAD_CATALOG:
            raise ValueError(f"Unknown bread: {self.bread!r}")

    @property
    def toppings(self) -> tuple[Topping, ...]:
        return tuple(self._toppings)

    def add_topping(self, topping: Topping) -> None:
        self._toppings.append(topping)

    def set_toasted(self, toasted: bool) -> None:
        self.toasted = toasted

    def price(self) -> Decimal:
        total = sandwich_pricing(self.size.value).base
        for topping in self._toppings:
            total += topping.price(self.size)
        return total

    def _header(self) -> str:
        pricing = sandwich_pricing(self.size.value)
        header = f"{pricing.label} {display_name_for_bread(self.bread)} Sandwich"
        if self.toasted:
            header += " (Toasted)"
        return header

    def description(self) -> str:
        """One-line summary with toppings in insertion order."""
        text = self._header()
        if self.signature is not None:
            text = f"{self.signature.display_name} Signature - {text}"
        if self._toppings:
            text += " - Toppings: " + ", ".join(topping.display_name() for topping in self._toppings)
        return text

    def detailed_description(self) -> str:
        """Receipt-grade rendering with toppings grouped by category."""
        lines = [
            self._header(),
            f"  Base Price: {format_money(sandwich_pricing(self.size.value).base)}",
        ]

        sections: dict[ToppingCategory, list[Topping]] = {category: [] for category in ToppingCategory}
        for topping in self._toppings:
            sections[topping.category].append(topping)

        for category, toppings in sections.items():
            if not toppings:
                continue
            match category:
                case ToppingCategory.MEAT | ToppingCategory.CHEESE | ToppingCategory.SIDE:
                    labels = [self._priced_label(topping) for topping in toppings]
                case _:
                    labels = [topping.name for topping in toppings]
            lines.append(f"  {TOPPING_SECTION_LABELS[category.value]}: {', '.join(labels)}")

        lines.append(f"  Total: {format_money(self.price())}")
        return "\n".join(lines)

    def _priced_label(self, topping: Topping) -> str:
        label = topping.display_name()
        amount = topping.price(self.size)
        if amount > 0:
            label += f" (+{format_money(amount)})"
        return label


@dataclass
class Drink:
    size: DrinkSize
    flavor: str

    def price(self) -> Decimal:
        return drink_pricing(self.size.value).price

    def description(self) -> str:
        pricing = drink_pricing(self.size.value)
        return f"{pricing.display_name} {self.flavor} - {format_money(self.price())}"


@dataclass
class Chips:
    chip_type: str

    def price(self) -> Decimal:
        return CHIPS_PRICE

    def description(self) -> str:
        return f"{self.chip_type} Chips - {format_money(self.price())}"


Product = Sandwich | Drink | Chips


@dataclass
class Order:
    """Products for one ordering session, in the order they were added."""

    _products: list[Product] = field(default_factory=list, init=False, repr=False)

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def product_count(self) -> int:
        return len(self._products)

    def add_product(self, product: Product) -> None:
        self._products.append(product)

    def is_empty(self) -> bool:
        return not self._products

    def has_sandwiches(self) -> bool:
        return any(isinstance(product, Sandwich) for product in self._products)

    def total_price(self) -> Decimal:
        return sum((product.price() for product in self._products), ZERO)

    def is_valid(self) -> bool:
        """Checkout rule: non-empty, and either a sandwich or at least one drink or chips."""
        if self.is_empty():
            return False
        if self.has_sandwiches():
            return True
        return any(isinstance(product, (Drink, Chips)) for product in self._products)

    def validation_message(self) -> str | None:
        if self.is_empty():
            return "Your order is empty. Please add items first."
        if not self.is_valid():
            return "Invalid order: If you don't order a sandwich, you must order chips or a drink."
        return None

    def render(self) -> str:
        lines = ["Order Summary:", ORDER_RULE]
        for number, product in enumerate(self._products, start=1):
            match product:
                case Sandwich():
                    text = product.detailed_description()
                case Drink() | Chips():
                    text = product.description()
            lines.append(f"{number}. {text}")
            lines.append("")
        lines.append(ORDER_RULE)
        lines.append(f"Total: {format_money(self.total_price())}")
        return "\n".join(lines) + "\n"
