"""
formatting.py

PURPOSE: English list formatting for failure messages and hints.
DEPENDENCIES: None (pure Python)
"""


def comma_list(items: list[str], conjunction: str) -> str:
    """
    Join items into an English list.

    Examples:
        [] -> ""
        ["a"] -> "a"
        ["a", "b"] -> "a and b"
        ["a", "b", "c"] -> "a, b, and c"
    """
    match len(items):
        case 0:
            return ""
        case 1:
            return items[0]
        case 2:
            return f"{items[0]} {conjunction} {items[1]}"
        case _:
            return f"{items[0]}, {_serial_tail(items[1:], conjunction)}"


def _serial_tail(items: list[str], conjunction: str) -> str:
    if len(items) == 1:
        return f"{conjunction} {items[0]}"
    return f"{items[0]}, {_serial_tail(items[1:], conjunction)}"


def and_list(items: list[str]) -> str:
    return comma_list(items, "and")


def or_list(items: list[str]) -> str:
    return comma_list(items, "or")
