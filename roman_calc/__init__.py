from .calc import UnknownOperator, add_roman, calculate, subtract_roman
from .roman import (
    EmptyInput, InternalConversionError, InvalidNumeral, InvalidRange,
    MalformedNumeral, RomanNumeralError, TooManyRepeats, ROMAN_PATTERN,
    ROMAN_PATTERN_SIMPLE, SYMBOLS, decimal_to_roman, is_roman, roman_to_decimal,
)
from .text import find_numerals, romanize
