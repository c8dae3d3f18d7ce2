"""
Tests for order pane and menu rendering.
"""

from deli.models import Chips, Drink, DrinkSize, Order, Sandwich, SandwichSize, SignatureSandwichType
from deli.rendering import format_menu, format_order_lines, product_badge


class TestProductBadge:
    """Tests for product type tags."""

    def test_badges(self):
        """Test each product type gets its own tag."""
        assert product_badge(Sandwich(size=SandwichSize.SMALL, bread="white")) == "S"
        assert (
            product_badge(Sandwich(size=SandwichSize.SMALL, bread="white", signature=SignatureSandwichType.CLUB))
            == "★"
        )
        assert product_badge(Drink(size=DrinkSize.SMALL, flavor="Coke")) == "D"
        assert product_badge(Chips(chip_type="Lays")) == "C"


class TestFormatOrderLines:
    """Tests for the order pane."""

    def test_no_order(self):
        """Test the placeholder before an order is started."""
        assert format_order_lines(None).plain == "(no active order)"

    def test_empty_order(self):
        """Test the placeholder for an empty order."""
        assert format_order_lines(Order()).plain == "(no items yet)"

    def test_numbered_rows_and_total(self):
        """Test products are numbered and followed by the total."""
        order = Order()
        order.add_product(Sandwich(size=SandwichSize.MEDIUM, bread="rye"))
        order.add_product(Chips(chip_type="Lays"))
        assert format_order_lines(order).plain == (
            '1. S 8" Rye Sandwich  $7.00\n2. C Lays Chips - $1.50\n\nTotal: $8.50'
        )


class TestFormatMenu:
    """Tests for numbered menus."""

    def test_with_zero_row(self):
        """Test options are numbered from 1 with the zero row last."""
        assert format_menu(["New Order", "Order History"], "Exit").plain == (
            "  1) New Order\n  2) Order History\n  0) Exit"
        )

    def test_cursor(self):
        """Test the cursor row gets a pointer."""
        assert format_menu(["Yes", "No"], None, cursor=1).plain == "  1) Yes\n➤ 2) No"

    def test_only_zero_row(self):
        """Test a menu with no options still shows the zero row."""
        assert format_menu([], "Back").plain == "  0) Back"
