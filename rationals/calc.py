"""Rational calculator

Script for applying one operation to one or two rational numbers given as
numerator/denominator pairs and printing the canonical result.

    $ rational-calc add 1 2 1 3
    5/6
    $ rational-calc neg 4 -6
    2/3

"""

import logging

import plac

import rationals
from rationals import Rational

BINARY = {
    'add': lambda a, b: a + b,
    'sub': lambda a, b: a - b,
    'mul': lambda a, b: a * b,
    'div': lambda a, b: a / b,
    'cmp': lambda a, b: (a > b) - (a < b),
}

UNARY = {
    'neg': lambda a: -a,
}


@plac.annotations(
        op=('operation to apply', 'positional', None, str, sorted([*BINARY, *UNARY])),
        n1=('numerator of the left operand', 'positional', None, int),
        d1=('denominator of the left operand', 'positional', None, int),
        n2=('numerator of the right operand', 'positional', None, int),
        d2=('denominator of the right operand', 'positional', None, int),
        verbose=('log debug messages', 'flag', 'v'),
)
def main(op, n1, d1, n2=None, d2=None, verbose=False):
    """Apply `op` to `n1/d1` and `n2/d2`

    Args:
        op (str): one of add, sub, mul, div, cmp, neg
        n1 (int): numerator of the left operand
        d1 (int): denominator of the left operand
        n2 (int): numerator of the right operand
        d2 (int): denominator of the right operand
        verbose (bool): log at debug level

    Returns:
        out (str): the printed result

    `neg` only looks at the left operand. `cmp` prints -1, 0 or 1.

    >>> op = 'add'
    >>> n1, d1 = 1, 2
    >>> n2, d2 = 1, 3

    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    a = Rational(n1, d1)
    if op in UNARY:
        result = UNARY[op](a)
    else:
        if n2 is None or d2 is None:
            raise SystemExit(f'{op} needs a right operand')
        b = Rational(n2, d2)
        logging.debug(f'{op} {a} {b}')
        result = BINARY[op](a, b)

    out = str(result)
    print(out)
    return out


def run():
    rationals.register()
    plac.call(main)


if __name__ == '__main__':
    run()
