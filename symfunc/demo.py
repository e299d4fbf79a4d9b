#!/usr/bin/env python3
r"""@package symfunc.demo

Demonstration of the expression system.

Two example functions are built, printed together with their derivatives and
evaluated (together with their derivatives) at a configurable point.

Usage:

    python -m symfunc.demo [-v] [-t] [CONFIG_FILE ...]

    -v, --verbose   log at INFO level (e.g. which settings are used)
    -t, --tree      also print the expression trees

Config files given on the command line replace the default `config.cfg`
and `config.mine.cfg` of the project root.
"""

import logging
import sys

from .config import load_config
from .exprs import (
    ConstantExpression, DifferenceExpression, ProductExpression,
    DivisionExpression, PowerExpression, SqrtExpression, AbsExpression,
    LogExpression, SumExpression, CosExpression, TanExpression,
    NumberFormat, X,
)
from .utils import pop_flag


__all__ = [
    "expression1",
    "expression2",
    "report",
    "main",
]


logger = logging.getLogger(__name__)


def expression1():
    r"""Return \f$ 2\cos^3(x) - |(-3) \tan(\sqrt{x})| \f$."""
    return DifferenceExpression(
        ProductExpression(
            ConstantExpression(2),
            PowerExpression(CosExpression(X), 3),
        ),
        AbsExpression(
            ProductExpression(
                ConstantExpression(-3),
                TanExpression(SqrtExpression(X)),
            )
        ),
    )


def expression2():
    r"""Return \f$ 2x / \ln^2((x+3)^3) \f$."""
    return DivisionExpression(
        ProductExpression(ConstantExpression(2), X),
        PowerExpression(
            LogExpression(
                PowerExpression(SumExpression(X, ConstantExpression(3)), 3)
            ),
            2,
        ),
    )


def report(label, expr, point, fmt=None, value_format='%f'):
    r"""Return the four report lines for an expression.

    These are the expression, its derivative, and the values of both at
    `point`. Evaluation errors are not caught.
    """
    deriv = expr.diff()
    ev = expr.evaluator()
    dev = deriv.evaluator()
    p = "%g" % point
    return [
        "%s(x) = %s" % (label, expr.render(fmt)),
        "%s'(x) = %s" % (label, deriv.render(fmt)),
        "%s(%s) = %s" % (label, p, value_format % ev(point)),
        "%s'(%s) = %s" % (label, p, value_format % dev(point)),
    ]


def main(args=None):
    r"""Run the demo and return the exit code."""
    args = list(sys.argv[1:] if args is None else args)
    verbose = pop_flag(args, '-v', '--verbose')
    show_tree = pop_flag(args, '-t', '--tree')
    logging.basicConfig(format="%(levelname)s: %(message)s")
    if verbose:
        logging.getLogger().setLevel(logging.INFO)
    config = load_config(args if args else None)
    fmt = NumberFormat.from_config(config)
    point = config.getfloat('demo', 'point')
    value_format = config.get('demo', 'value_format')
    logger.info("Number format: %r", fmt)
    logger.info("Evaluation point: %r", point)
    examples = [("f1", expression1()), ("f2", expression2())]
    for label, expr in examples:
        print()
        if show_tree:
            expr.print_tree(root_name=label)
        for line in report(label, expr, point, fmt=fmt,
                           value_format=value_format):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
