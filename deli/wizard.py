"""Step machine behind the sandwich builder screen."""

from __future__ import annotations

from deli.data import (
    MenuOption,
    bread_options,
    display_name_for_kind,
    sandwich_size_options,
    topping_options,
)
from deli.models import Sandwich, SandwichSize, Topping, ToppingCategory

BREAD = "bread"
SIZE = "size"
MEAT = "meat"
MEAT_EXTRA = "meat_extra"
CHEESE = "cheese"
CHEESE_EXTRA = "cheese_extra"
REGULAR = "regular"
SAUCE = "sauce"
SIDE = "side"
TOASTED = "toasted"
DONE = "done"
CANCELLED = "cancelled"

CUSTOM_STEPS = (BREAD, SIZE, MEAT, CHEESE, REGULAR, SAUCE, SIDE, TOASTED)
CUSTOMIZE_STEPS = (MEAT, CHEESE, REGULAR, SAUCE, SIDE)

YES_NO_OPTIONS = [MenuOption("yes", "Yes"), MenuOption("no", "No")]

_TOPPING_STEPS: dict[str, ToppingCategory] = {
    MEAT: ToppingCategory.MEAT,
    CHEESE: ToppingCategory.CHEESE,
    REGULAR: ToppingCategory.REGULAR,
    SAUCE: ToppingCategory.SAUCE,
    SIDE: ToppingCategory.SIDE,
}
_EXTRA_STEP_FOR: dict[str, str] = {MEAT: MEAT_EXTRA, CHEESE: CHEESE_EXTRA}
_BASE_STEP_FOR: dict[str, str] = {MEAT_EXTRA: MEAT, CHEESE_EXTRA: CHEESE}

_PROMPTS: dict[str, str] = {
    BREAD: "Select your bread:",
    SIZE: "Select sandwich size:",
    MEAT: "Select meats (0 when done):",
    CHEESE: "Select cheese (0 when done):",
    REGULAR: "Select regular toppings (0 when done):",
    SAUCE: "Select sauces (0 when done):",
    SIDE: "Select sides, served separately (0 when done):",
    TOASTED: "Would you like the sandwich toasted?",
}

_ZERO_LABELS: dict[str, str] = {
    BREAD: "Cancel",
    SIZE: "Cancel",
    MEAT: "Done adding meats",
    CHEESE: "Done adding cheese",
    REGULAR: "Done adding toppings",
    SAUCE: "Done adding sauces",
    SIDE: "Done adding sides",
}


class SandwichWizard:
    """
    Walks a customer through building a sandwich one numbered pick at a time.

    A fresh wizard starts at bread selection. Passing an existing sandwich (for
    example an expanded signature) starts at meats and only appends toppings.
    Picks outside the listed range are rejected with a False return and leave
    the wizard where it was.
    """

    def __init__(self, sandwich: Sandwich | None = None) -> None:
        self.sandwich = sandwich
        self.steps = CUSTOM_STEPS if sandwich is None else CUSTOMIZE_STEPS
        self.step = self.steps[0]
        self.last_message = ""
        self._bread: str | None = None
        self._pending_kind: str | None = None

    @property
    def finished(self) -> bool:
        return self.step == DONE

    @property
    def cancelled(self) -> bool:
        return self.step == CANCELLED

    def prompt(self) -> str:
        if self.step in _BASE_STEP_FOR:
            category = _TOPPING_STEPS[_BASE_STEP_FOR[self.step]]
            return f"Extra {display_name_for_kind(category.value, self._pending_kind or '')}?"
        return _PROMPTS.get(self.step, "")

    def options(self) -> list[MenuOption]:
        if self.step == BREAD:
            return bread_options()
        if self.step == SIZE:
            return sandwich_size_options()
        if self.step in _TOPPING_STEPS:
            return topping_options(_TOPPING_STEPS[self.step].value)
        if self.step in _BASE_STEP_FOR or self.step == TOASTED:
            return YES_NO_OPTIONS
        return []

    def zero_label(self) -> str | None:
        """Label for the 0 key on the current step, None when 0 is not accepted."""
        return _ZERO_LABELS.get(self.step)

    def is_yes_no(self) -> bool:
        return self.step in _BASE_STEP_FOR or self.step == TOASTED

    def choose(self, number: int) -> bool:
        """Apply the numbered pick for the current step."""
        if self.finished or self.cancelled:
            return False

        if number == 0:
            if self.step in (BREAD, SIZE):
                self.step = CANCELLED
                return True
            if self.step in _TOPPING_STEPS:
                self._advance()
                return True
            return False

        options = self.options()
        if not 1 <= number <= len(options):
            return False
        option = options[number - 1]

        if self.step == BREAD:
            self._bread = option.option_id
            self._advance()
        elif self.step == SIZE:
            if self._bread is None:
                raise RuntimeError("Size picked before bread")
            self.sandwich = Sandwich(size=SandwichSize(option.option_id), bread=self._bread)
            self._advance()
        elif self.step in _EXTRA_STEP_FOR:
            self._pending_kind = option.option_id
            self.step = _EXTRA_STEP_FOR[self.step]
        elif self.step in _BASE_STEP_FOR:
            base_step = _BASE_STEP_FOR[self.step]
            if self._pending_kind is None:
                raise RuntimeError("Extra prompt without a pending topping")
            self._add(Topping(self._pending_kind, _TOPPING_STEPS[base_step], option.option_id == "yes"))
            self._pending_kind = None
            self.step = base_step
        elif self.step in _TOPPING_STEPS:
            self._add(Topping(option.option_id, _TOPPING_STEPS[self.step]))
        elif self.step == TOASTED:
            self._require_sandwich().set_toasted(option.option_id == "yes")
            self._advance()
        return True

    def _add(self, topping: Topping) -> None:
        self._require_sandwich().add_topping(topping)
        self.last_message = f"✓ {topping.display_name()} added!"

    def _require_sandwich(self) -> Sandwich:
        if self.sandwich is None:
            raise RuntimeError(f"No sandwich to update at step {self.step!r}")
        return self.sandwich

    def _advance(self) -> None:
        idx = self.steps.index(self.step)
        self.step = self.steps[idx + 1] if idx + 1 < len(self.steps) else DONE
