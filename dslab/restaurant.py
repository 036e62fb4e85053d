"""Ordering and billing at a small restaurant counter."""

from __future__ import annotations

import argparse
import enum
import sys
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterator, Optional, Sequence, TextIO, Tuple

RULE = "-" * 58
CENT = Decimal("0.01")
THANK_YOU = "THANK YOU FOR FOR CHOOSING OUR RESTAURANT\n\n\n"
PAYMENT_PROMPT = (
    "Select your payment method:1--> Cash Payment     2--> Credit Card Payment\n"
)


class MenuItem(enum.Enum):
    """A dish or set on the menu, with its number, price and contents."""

    LUNCH_DINNER = (
        1,
        "Lunch/Dinner Set",
        "200.00",
        ("1 Chicken curry", "1 Fried rice", "1 drink(medium)"),
        "Lunch/Dinner Set.",
    )
    BREAKFAST = (
        2,
        "Breakfast Set",
        "100.00",
        ("1 breakfast", "1 drink(medium)"),
        "Breakfast Set.",
    )
    KID = (
        3,
        "Kid Set",
        "150.00",
        ("1 burger/chicken fry", "1 drink(small)", "1 French fries(small)"),
        "Kiddies Set.",
    )
    PROMOTION = (4, "Promotion", "100.00", ("Burger/Chicken",), "Promotion.")
    DRINK = (5, "Drink", "30.00", ("Medium size",), "to order Drink.")
    FRENCH_FRIES = (6, "French Fries", "80.00", ("Medium size",), "French Fries.")
    DESSERT = (7, "Dessert", "100.00", ("Ice cream/pie/cake",), "Dessert.")

    def __init__(
        self,
        number: int,
        label: str,
        price: str,
        details: Tuple[str, ...],
        selection: str,
    ) -> None:
        self.number = number
        self.label = label
        self.price = Decimal(price)
        self.details = details
        self.selection = selection

    @classmethod
    def from_number(cls, number: int) -> "MenuItem":
        """Return the item listed under ``number`` on the menu."""
        for item in cls:
            if item.number == number:
                return item
        raise ValueError(f"no menu item numbered {number}")


class DiningOption(enum.Enum):
    """Where the meal is eaten."""

    DINE_IN = 1
    TAKE_AWAY = 2


class PaymentMethod(enum.Enum):
    """How the bill is paid."""

    CASH = 1
    CREDIT_CARD = 2


# Government tax of 5%, a service charge for dining in or taking away,
# and an extra 3% for card payments.
_RATES: Dict[Tuple[DiningOption, PaymentMethod], Decimal] = {
    (DiningOption.DINE_IN, PaymentMethod.CASH): Decimal("1.15"),
    (DiningOption.DINE_IN, PaymentMethod.CREDIT_CARD): Decimal("1.18"),
    (DiningOption.TAKE_AWAY, PaymentMethod.CASH): Decimal("1.10"),
    (DiningOption.TAKE_AWAY, PaymentMethod.CREDIT_CARD): Decimal("1.13"),
}


def surcharge_rate(dining: DiningOption, payment: PaymentMethod) -> Decimal:
    """Return the factor the subtotal is multiplied by, taxes and charges included."""
    return _RATES[DiningOption(dining), PaymentMethod(payment)]


class Order:
    """The quantities ordered of each menu item."""

    def __init__(self) -> None:
        self.quantities: Dict[MenuItem, int] = {}

    def set_quantity(self, item: MenuItem, quantity: int) -> None:
        """Set how many of ``item`` are ordered, replacing any earlier quantity."""
        if quantity < 0:
            raise ValueError("quantity cannot be negative")
        item = MenuItem(item)
        if quantity == 0:
            self.quantities.pop(item, None)
        else:
            self.quantities[item] = quantity

    def subtotal(self) -> Decimal:
        """Return the price of everything ordered, before taxes and charges."""
        return sum(
            (item.price * quantity for item, quantity in self.quantities.items()),
            Decimal("0.00"),
        )

    def total(self, dining: DiningOption, payment: PaymentMethod) -> Decimal:
        """Return the amount to pay, rounded to the nearest cent."""
        amount = self.subtotal() * surcharge_rate(dining, payment)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_menu() -> str:
    """Return the menu board as printed at the counter."""
    lines = [
        "      PLEASE SELECT AN ITEM FROM THE MENU GIVEN BELOW     ",
        RULE,
        "No.     Items               Price         Detail",
        RULE,
    ]
    for item in MenuItem:
        first, *rest = item.details
        lines.append(f"{item.number:<8}{item.label:<20}{'TK' + str(item.price):<14}{first}")
        lines.extend(" " * 42 + detail for detail in rest)
        lines.append("")
    lines.extend(["8       Display Total ", "", "9       Exit...", "", ""])
    return "\n".join(lines)


class _EndOfInput(Exception):
    pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Take one order from ``stdin`` and print the bill to ``stdout``."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)

    def say(text: str) -> None:
        stdout.write(text)

    def clear() -> None:
        if stdout.isatty():
            say("\033[2J\033[H")

    def ask(prompt: str) -> int:
        say(prompt)
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        return int(token)

    def checkout(order: Order) -> None:
        try:
            dining = DiningOption(
                ask("Do you want to dine in or take away?\n1) Dine In 2) Take Away\n")
            )
        except ValueError:
            clear()
            say("\n\nInvalid Error!\n")
            return
        clear()
        try:
            payment = PaymentMethod(ask(PAYMENT_PROMPT))
        except ValueError:
            clear()
            say("\nInvalid Error")
            return
        lead = "\n" if dining is DiningOption.DINE_IN else ""
        say(f"{lead}The Total is taka {order.total(dining, payment):.2f}\n\n")
        say(THANK_YOU)

    order = Order()
    try:
        while True:
            try:
                choice = ask(
                    format_menu() + "\n\nPlease Select Your Option from the Menu : "
                )
            except ValueError:
                say("Invalid Error!\n")
                return
            if choice == 8:
                checkout(order)
                return
            if choice == 9:
                return
            try:
                item = MenuItem.from_number(choice)
            except ValueError:
                say("Invalid Error!\n")
                return
            say(f"You have selected {item.selection}")
            try:
                order.set_quantity(item, ask("\nPlease Enter your Quantity :"))
            except ValueError:
                say("\nInvalid Error!\n")
                return
            try:
                more = ask("Do you want to add-on?(1-Yes, 2-No)")
            except ValueError:
                more = 2
            if more == 1:
                clear()
                continue
            checkout(order)
            return
    except _EndOfInput:
        return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Greet the customer and take an order on standard input and output."""
    parser = argparse.ArgumentParser(description="Take a restaurant order.")
    parser.add_argument(
        "--delay",
        type=float,
        default=3.0,
        help="seconds to pause on the welcome screen",
    )
    args = parser.parse_args(argv)
    out = sys.stdout
    out.write(f"{RULE}\n")
    out.write("          *     Welcome to FRIENDS Restaurant     *       \n")
    out.write(f"{RULE}\n")
    out.write("\n\n\n\n loading........\n\n\n\n\n\n")
    out.flush()
    if args.delay > 0:
        time.sleep(args.delay)
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())