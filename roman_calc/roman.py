"""
Conversion functions for roman numbers
"""

from collections import namedtuple


SYMBOLS = (
    ('M', 1000), ('D', 500), ('C', 100), ('L', 50), ('X', 10), ('V', 5), ('I', 1)
)

MIN_VALUE = 1
MAX_VALUE = 3999
MAX_REPEATS = 3


Place = namedtuple('Place', 'symbol unit prefixes')


def _build_places(symbols):
    """Derives the four decimal places (thousands to ones) from the symbol table.

    Each place lists its prefix forms in the order they must be tried: the
    9-pair, then the 5-symbol, then the 4-pair.

    >>> _build_places(SYMBOLS)[3]
    Place(symbol='I', unit=1, prefixes=(('IX', 9), ('V', 5), ('IV', 4)))
    """
    places = [Place(symbols[0][0], symbols[0][1], ())]
    for i in range(2, len(symbols), 2):
        unit_symbol, unit = symbols[i]
        mid_symbol = symbols[i-1][0]
        hi_symbol = symbols[i-2][0]
        places.append(Place(unit_symbol, unit, (
            (unit_symbol + hi_symbol, 9 * unit),
            (mid_symbol, 5 * unit),
            (unit_symbol + mid_symbol, 4 * unit),
        )))
    return tuple(places)


PLACES = _build_places(SYMBOLS)


def _place_pattern(place):
    if not place.prefixes:
        return r'%s{0,%i}' % (place.symbol, MAX_REPEATS)
    (nine, _), (mid, _), (four, _) = place.prefixes
    return r'(?:%s|%s|%s?%s{0,%i})' % (nine, four, mid, place.symbol, MAX_REPEATS)


# Matches the empty string, callers have to anchor it
ROMAN_PATTERN = ''.join(_place_pattern(p) for p in PLACES)
ROMAN_PATTERN_SIMPLE = r'[%s]+' % ''.join(s for s, v in SYMBOLS)


class RomanNumeralError(ValueError):
    pass


class InvalidRange(RomanNumeralError):
    pass


class InternalConversionError(RomanNumeralError):
    pass


class InvalidNumeral(RomanNumeralError):
    pass


class EmptyInput(InvalidNumeral):
    pass


class MalformedNumeral(InvalidNumeral):
    pass


class TooManyRepeats(InvalidNumeral):
    pass


def _encode_place(remainder, place, fragments):
    for fragment, value in place.prefixes:
        if remainder >= value:
            fragments.append(fragment)
            remainder -= value
            break
    while remainder >= place.unit:
        fragments.append(place.symbol)
        remainder -= place.unit
    return remainder


def decimal_to_roman(i):
    """Converts an integer between 1 and 3999 to a roman number.

    >>> decimal_to_roman(1994)
    'MCMXCIV'
    """
    if type(i) is bool or not isinstance(i, int):
        raise InvalidRange('%r is not an integer' % (i,))
    if not MIN_VALUE <= i <= MAX_VALUE:
        raise InvalidRange('the number is not between %i and %i' % (MIN_VALUE, MAX_VALUE))
    fragments = []
    remainder = i
    for place in PLACES:
        remainder = _encode_place(remainder, place, fragments)
    if remainder != 0:
        raise InternalConversionError('%i left over after converting %i' % (remainder, i))
    return ''.join(fragments)


def _decode_place(s, i, place):
    """Reads the group of `place` starting at index `i` of `s`.

    Returns a 2-tuple `(value, new_index)`.
    """
    r = 0
    pair = None
    for fragment, value in place.prefixes:
        if s.startswith(fragment, i):
            r += value
            i += len(fragment)
            if len(fragment) == 2:
                pair = fragment
            break
    j = i
    while s[j:j+1] == place.symbol:
        j += 1
    n = j - i
    if n and pair:
        raise MalformedNumeral(
            '"%s" is not a valid roman number: "%s" can\'t be followed by "%s"' %
            (s, pair, place.symbol)
        )
    if n > MAX_REPEATS:
        raise TooManyRepeats(
            '"%s" is not a valid roman number: "%s" is repeated %i times' %
            (s, place.symbol, n)
        )
    return r + n * place.unit, j


def roman_to_decimal(s):
    """Converts a roman number to an integer.

    Only well-formed (canonical, uppercase) numbers are accepted.

    >>> roman_to_decimal('MMXXIV')
    2024
    """
    if not isinstance(s, str):
        raise MalformedNumeral('%r is not a string' % (s,))
    if not s:
        raise EmptyInput('an empty string is not a valid roman number')
    r = 0
    i = 0
    for place in PLACES:
        value, i = _decode_place(s, i, place)
        r += value
    if i != len(s):
        raise MalformedNumeral(
            '"%s" is not a valid roman number: unexpected "%s" at position %i' %
            (s, s[i], i)
        )
    return r


def is_roman(s):
    """Returns `True` if `s` is a well-formed roman number, `False` otherwise.

    >>> is_roman('XIV'), is_roman('XIIII'), is_roman('')
    (True, False, False)
    """
    try:
        roman_to_decimal(s)
    except InvalidNumeral:
        return False
    return True
