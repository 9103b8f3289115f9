"""
Helper Functions

Contains formatting utilities used by the terminal view and the logger.
"""


def escape_key(key: str) -> str:
    """Printable form of a typed key, e.g. '\\n' for Enter."""
    return repr(key)[1:-1]


def ordinal(number: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 10 <= number % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(number % 10, 'th')
    return f"{number}{suffix}"


def pluralize_guesses(count: int) -> str:
    return "guess" if count == 1 else "guesses"


def format_elapsed(seconds: float) -> str:
    return f"{seconds:.2f}"
