"""An interactive menu for exercising a linked list."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Dict, Iterator, Optional, Sequence, TextIO

from dslab.doubly_linked_list import DoublyLinkedList
from dslab.linked_list import SinglyLinkedList

MENU = (
    "0. STOP",
    "1. insert at last",
    "2. insert at begining",
    "3. insert at Any position",
    "4. Search the item",
    "5. Size of the list",
    "6. Is the the list Empty? ",
    "7. Find the number of that Position",
    "8. Return position of the specified element in the list",
    "9. delete from first",
    "10. delete from last",
    "11. delete from at any position",
    "12. Reverse the list",
    "13. Sort in Ascending Order",
    "Enter your Option",
)


class _EndOfInput(Exception):
    pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_shell(lst: Any, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Read menu choices from ``stdin`` and apply them to ``lst``.

    Positions typed by the user count from 1, except for insertion, where 0
    means the front and the list length means the end.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)

    def say(text: str = "", end: str = "\n") -> None:
        stdout.write(text + end)

    def ask(prompt: str, end: str = "") -> int:
        say(prompt, end)
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        return int(token)

    def flag(value: bool) -> None:
        say("1" if value else "0")

    def insert_at() -> None:
        position = ask("Enter the position :", "\n")
        value = ask("Enter ele: ")
        try:
            lst.insert(position, value)
        except IndexError:
            say("Invalid Input")

    def get_at() -> None:
        position = ask("Enter the position", "\n")
        if 1 <= position <= len(lst):
            say(str(lst[position - 1]))
        else:
            say("invalid position")

    def position_of() -> None:
        value = ask("Enter ele: ")
        try:
            say(str(lst.index(value) + 1))
        except ValueError:
            say("0")

    def pop(method: Callable[[], Any]) -> None:
        try:
            method()
        except IndexError:
            say("list is empty")

    def remove_at() -> None:
        position = ask("Enter the position :", "\n")
        if 1 <= position <= len(lst):
            lst.remove_at(position - 1)
        else:
            say("invalid position")

    actions: Dict[int, Callable[[], None]] = {
        1: lambda: lst.append(ask("Enter ele: ")),
        2: lambda: lst.prepend(ask("Enter ele: ")),
        3: insert_at,
        4: lambda: flag(ask("Enter ele: ") in lst),
        5: lambda: say(str(len(lst))),
        6: lambda: flag(len(lst) == 0),
        7: get_at,
        8: position_of,
        9: lambda: pop(lst.pop_front),
        10: lambda: pop(lst.pop_back),
        11: remove_at,
        12: lst.reverse,
        13: lst.sort,
    }

    while True:
        try:
            choice = ask("\n".join(MENU), "\n")
            if choice == 0:
                say("Exit")
                return
            action = actions.get(choice)
            if action is None:
                say(" Invalid ")
            else:
                action()
        except ValueError:
            say(" Invalid ")
        except _EndOfInput:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the list menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Exercise a linked list from a menu.")
    parser.add_argument(
        "--doubly", action="store_true", help="use a doubly linked list"
    )
    args = parser.parse_args(argv)
    lst = DoublyLinkedList() if args.doubly else SinglyLinkedList()
    run_shell(lst)
    return 0


if __name__ == "__main__":
    sys.exit(main())