"""Number grammars built on the combinator core.

- integer(): -?[0-9]+ as int
- float_literal(): the matched float text, as written
- float_number(): float_literal() converted to float
- locale_float(): float syntax using a locale's CLDR number symbols (Babel)

Float syntax (ASCII):
    [+-]? ( digits ( "." digits )? | "." digits ) ( [eE] [+-]? digits )?

Python 3.13+. locale_float() requires Babel.
"""

from functools import lru_cache

from combparse.core.babel_compat import get_babel_numbers, get_unknown_locale_error, require_babel
from combparse.locale_utils import get_babel_locale
from combparse.parser import Parser, choice
from combparse.primitives import char, digit, literal, one_of

__all__ = [
    "float_literal",
    "float_number",
    "integer",
    "locale_float",
]


def _digits() -> Parser[str]:
    return digit().many1().into_string()


def integer() -> Parser[int]:
    """Parse an optionally negative decimal integer.

    Example:
        >>> integer().parse("-42;")
        (-42, ';')
    """
    return char("-").maybe().and_(_digits()).into_string().map(int).named("integer")


def float_literal() -> Parser[str]:
    """Parse float syntax, returning the matched text.

    A bare integer is accepted; the exponent needs at least one digit, or the
    exponent marker is left unconsumed.

    Example:
        >>> float_literal().parse("1.5e-3x")
        ('1.5e-3', 'x')
        >>> float_literal().parse("2e")
        ('2', 'e')
    """
    sign = one_of("+-").maybe()
    fraction = char(".").and_(_digits())
    mantissa = _digits().then_maybe(fraction) | fraction
    exponent = one_of("eE").and_(sign).and_(_digits())
    return sign.and_(mantissa).then_maybe(exponent).into_string().named("float_literal")


def float_number() -> Parser[float]:
    """Parse float syntax into a float.

    Example:
        >>> float_number().parse(".25")
        (0.25, '')
    """
    return float_literal().map(float).named("float")


@lru_cache(maxsize=64)
def locale_float(locale_code: str, *, grouping: bool = False) -> Parser[float]:
    """Float grammar using a locale's decimal, sign, and exponent symbols.

    The matched text is rewritten to Python float syntax before conversion,
    so "-1,5" parses to -1.5 under de_DE. The ASCII hyphen is accepted as a
    minus sign alongside the locale's own symbol, and the lower-case form of
    the exponent symbol ("e" for CLDR "E") alongside the symbol itself.

    Parsers are immutable, so results are cached per (locale, grouping).

    Args:
        locale_code: BCP-47 or POSIX locale code ("de-DE", "de_DE")
        grouping: Accept the locale group separator between integer digits

    Returns:
        Parser producing a float

    Raises:
        BabelImportError: If Babel is not installed
        ValueError: If the locale is unknown

    Example:
        >>> locale_float("de-DE").parse("3,25")
        (3.25, '')
        >>> locale_float("en-US", grouping=True).parse("1,234.5")
        (1234.5, '')
    """
    require_babel("locale_float")
    numbers = get_babel_numbers()
    try:
        locale = get_babel_locale(locale_code)
    except (get_unknown_locale_error(), ValueError) as e:
        msg = f"Unknown locale for locale_float(): {locale_code!r}"
        raise ValueError(msg) from e

    decimal_symbol = numbers.get_decimal_symbol(locale)
    plus_symbol = numbers.get_plus_sign_symbol(locale)
    minus_symbol = numbers.get_minus_sign_symbol(locale)
    exponent_symbol = numbers.get_exponential_symbol(locale)

    minus = (literal(minus_symbol) | char("-")).map(lambda _: "-")
    plus = literal(plus_symbol).map(lambda _: "+")
    sign = (minus | plus).maybe()

    if grouping:
        group = literal(numbers.get_group_symbol(locale))
        whole = _digits().sep_by1(group).into_string()
    else:
        whole = _digits()

    fraction = literal(decimal_symbol).then_right(_digits()).map(lambda text: "." + text)
    mantissa = whole.then_maybe(fraction) | fraction
    markers = dict.fromkeys((exponent_symbol, exponent_symbol.lower()))
    exponent_marker = choice(*map(literal, markers)).map(lambda _: "e")
    exponent = exponent_marker.and_(sign).and_(_digits())

    return (
        sign.and_(mantissa)
        .then_maybe(exponent)
        .into_string()
        .map(float)
        .named(f"locale_float({locale_code})")
    )
