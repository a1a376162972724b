"""
Arithmetic on roman numbers.
"""

from operator import add, sub

from .roman import decimal_to_roman, roman_to_decimal


OPERATORS = {'+': add, '-': sub}


class UnknownOperator(ValueError):
    pass


def calculate(a, operator, b):
    """Applies `operator` ('+' or '-') to two roman numbers.

    The result must also be representable, so `calculate('I', '-', 'I')` raises
    `InvalidRange`.

    >>> calculate('XIV', '+', 'XXVIII')
    'XLII'
    """
    try:
        f = OPERATORS[operator]
    except KeyError:
        raise UnknownOperator('unknown operator %r, expected one of: %s' % (
            operator, ' '.join(sorted(OPERATORS))
        ))
    return decimal_to_roman(f(roman_to_decimal(a), roman_to_decimal(b)))


def add_roman(a, b):
    return calculate(a, '+', b)


def subtract_roman(a, b):
    return calculate(a, '-', b)
