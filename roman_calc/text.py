"""
Functions to spot and produce roman numbers inside running text.
"""

import re

from .roman import (
    MAX_VALUE, MIN_VALUE, ROMAN_PATTERN, ROMAN_PATTERN_SIMPLE,
    decimal_to_roman, roman_to_decimal,
)


# The lookahead keeps the pattern from matching empty words
numeral_re = re.compile(r'\b(?=[MDCLXVI])%s\b' % ROMAN_PATTERN)
numeral_candidate_re = re.compile(r'\b%s\b' % ROMAN_PATTERN_SIMPLE)
number_re = re.compile(r'\b[0-9]+\b')


def find_numerals(text, min_length=1):
    """Yields a 2-tuple `(match, value)` for every roman number found in `text`.

    Words made of roman symbols that aren't well-formed are skipped.

    >>> [(m.group(0), v) for m, v in find_numerals('Livre IIII, titre XIV')]
    [('XIV', 14)]
    """
    for m in numeral_candidate_re.finditer(text):
        if len(m.group(0)) < min_length or not numeral_re.fullmatch(m.group(0)):
            continue
        yield m, roman_to_decimal(m.group(0))


def romanize(text):
    """Replaces the decimal numbers of `text` with roman numbers.

    Numbers that can't be written in roman numerals are left as they are.

    >>> romanize('an 2, chapitre 12 sur 4000')
    'an II, chapitre XII sur 4000'
    """
    def repl(m):
        digits = m.group(0).lstrip('0')
        if len(digits) > len(str(MAX_VALUE)):
            return m.group(0)
        i = int(digits or '0')
        if not MIN_VALUE <= i <= MAX_VALUE:
            return m.group(0)
        return decimal_to_roman(i)

    return number_re.sub(repl, text)
