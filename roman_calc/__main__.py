"""
Command line interface: converts, checks and adds up roman numbers.
"""

from argparse import ArgumentParser
import sys

from .calc import OPERATORS, UnknownOperator, calculate
from .roman import (
    MAX_VALUE, MIN_VALUE, EmptyInput, InvalidNumeral, InvalidRange, MalformedNumeral,
    TooManyRepeats, decimal_to_roman, roman_to_decimal,
)


EXIT_CODES = (
    (InvalidRange, 3),
    (EmptyInput, 4),
    (MalformedNumeral, 5),
    (TooManyRepeats, 6),
    (UnknownOperator, 7),
)


def fail(e):
    print('!>', e, file=sys.stderr)
    for cls, code in EXIT_CODES:
        if isinstance(e, cls):
            raise SystemExit(code)
    raise SystemExit(1)


def parse_integer(s):
    digits = s.strip().lstrip('+-').lstrip('0')
    if digits.isdecimal() and len(digits) > len(str(MAX_VALUE)):
        raise InvalidRange('a %i-digit number is not between %i and %i' % (
            len(digits), MIN_VALUE, MAX_VALUE
        ))
    try:
        return int(s)
    except ValueError:
        raise InvalidRange('%r is not an integer' % s)


def to_roman(args):
    for s in args.integers:
        print(decimal_to_roman(parse_integer(s)))


def to_decimal(args):
    for s in args.numerals:
        print(roman_to_decimal(s))


def check(args):
    n_invalid = 0
    for s in args.numerals:
        try:
            roman_to_decimal(s)
        except InvalidNumeral as e:
            print(s, 'invalid:', e)
            n_invalid += 1
        else:
            print(s, 'valid')
    if n_invalid:
        raise SystemExit(1)


def calc(args):
    print(calculate(args.a, args.operator, args.b))


def main(argv=None):
    p = ArgumentParser(prog='roman-calc')
    subparsers = p.add_subparsers(dest='command')
    subparsers.required = True

    sp = subparsers.add_parser('to-roman', help="convert integers (1 to 3999) to roman numbers")
    sp.add_argument('integers', metavar='INTEGER', nargs='+')
    sp.set_defaults(func=to_roman)

    sp = subparsers.add_parser('to-decimal', help="convert roman numbers to integers")
    sp.add_argument('numerals', metavar='NUMERAL', nargs='+')
    sp.set_defaults(func=to_decimal)

    sp = subparsers.add_parser('check', help="tell whether roman numbers are well-formed")
    sp.add_argument('numerals', metavar='NUMERAL', nargs='+')
    sp.set_defaults(func=check)

    sp = subparsers.add_parser('calc', help="add or subtract two roman numbers")
    sp.add_argument('a', metavar='NUMERAL')
    sp.add_argument('operator', metavar='OPERATOR',
                    help="one of: %s" % ' '.join(sorted(OPERATORS)))
    sp.add_argument('b', metavar='NUMERAL')
    sp.set_defaults(func=calc)

    args = p.parse_args(argv)
    try:
        args.func(args)
    except ValueError as e:
        fail(e)


if __name__ == '__main__':
    main()
