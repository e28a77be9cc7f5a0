"""
Amount Formatter

Turns an ingredient amount into display text like "45ml", "7잎" or ".5개".
"""

from decimal import Decimal

from partymix.models.common import Unit
from partymix.models.recipe import Ingredient

# Unit -> suffix appended after the number
UNIT_SUFFIXES = {
    Unit.ML: "ml",
    Unit.LEAF: "잎",
    Unit.PIECE: "개",
    Unit.G: "g",
}

RANGE_SUFFIX = UNIT_SUFFIXES[Unit.ML]


def format_number(value: float) -> str:
    """
    Render a number the way a JavaScript number prints.

    Whole values have no trailing ".0"; other values use the shortest
    round-trip digits, in plain notation for exponents -7 < e < 21 and
    as "1e-7" / "1.5e+21" outside that.
    """
    value = float(value)
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() is the shortest round-trip form; Decimal splits it into digits/exponent
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits

    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    e = n - 1
    return f"{sign}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def format_amount(ingredient: Ingredient) -> str:
    """
    Display text for an ingredient's amount.

    A range always wins over the point amount. Fractional piece counts keep
    their historical shorthand: the first "0." becomes ".", so half a lime
    reads ".5개".
    """
    if ingredient.range:
        low, high = ingredient.range
        return f"{format_number(low)}-{format_number(high)}{RANGE_SUFFIX}"

    number = format_number(ingredient.amount)

    if ingredient.unit == Unit.PIECE and not float(ingredient.amount).is_integer():
        number = number.replace("0.", ".", 1)

    return f"{number}{UNIT_SUFFIXES.get(ingredient.unit, '')}"


def format_ingredient_line(ingredient: Ingredient) -> str:
    """`name: amount`, plus the note in parentheses when there is one."""
    line = f"{ingredient.name}: {format_amount(ingredient)}"
    if ingredient.note:
        line += f" ({ingredient.note})"
    return line
