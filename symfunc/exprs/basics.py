r"""@package symfunc.exprs.basics

Collection of basic numexpr.NumericExpression subclasses.

These are the leaves (constants and the variable itself) and the arithmetic
and elementary function nodes. The trigonometric functions live in trig.py.
"""

import math
import numbers

import numpy as np
import sympy as sp

from .common import _zero_function
from .evaluators import TrivialEvaluator
from .numexpr import NumericExpression, DomainError


__all__ = [
    "ConstantExpression",
    "IdentityExpression",
    "SumExpression",
    "DifferenceExpression",
    "ProductExpression",
    "DivisionExpression",
    "PowerExpression",
    "SqrtExpression",
    "AbsExpression",
    "LogExpression",
    "X",
    "ZERO",
    "ONE",
]


def _real(value, what):
    r"""Ensure a parameter is a real number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError("%s must be a real number, got %r." % (what, value))
    return value


class ConstantExpression(NumericExpression):
    r"""Represent an expression that is a constant.

    Represents an expression of the form \f$ f(x) = c = \mathrm{const} \f$.

    The value of the constant can be accessed through the `c` property.
    """

    def __init__(self, value=0, name='const'):
        r"""Init function.

        Args:
            value:  The constant value.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(ConstantExpression, self).__init__(name=name)
        self._c = _real(value, "Constant value")

    @property
    def c(self):
        r"""The constant value this expression represents."""
        return self._c

    def _expr_str(self, fmt):
        return fmt.format(self._c)

    @property
    def nice_name(self):
        return "%s (%r)" % (self.name, self._c)

    def is_zero_expression(self):
        return self._c == 0

    def _evaluator(self):
        c = float(self._c)
        if c == 0:
            return _zero_function
        return lambda x: c

    def _diff(self):
        return ConstantExpression(0)

    def _to_sympy(self, x):
        return sp.sympify(self._c)


class IdentityExpression(NumericExpression):
    r"""Identity expression with an optional multiplication factor.

    Represents an expression of the form \f$ f(x) = a x \f$.

    To multiply another expression use the ProductExpression instead.
    """
    def __init__(self, a=1.0, name='Id'):
        r"""Init function.

        Args:
            a:      Factor to multiply the argument with.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(IdentityExpression, self).__init__(name=name)
        self._a = _real(a, "Coefficient")

    @property
    def a(self):
        r"""Factor to multiply the argument with."""
        return self._a

    def _expr_str(self, fmt):
        if self._a == 1:
            return "x"
        return "%s*x" % fmt.format(self._a)

    @property
    def nice_name(self):
        if self._a != 1:
            return "%r * %s" % (self._a, self.name)
        return self.name

    def is_zero_expression(self):
        return self._a == 0

    def _evaluator(self):
        a = float(self._a)
        if a == 0:
            return _zero_function
        return lambda x: a * x

    def _diff(self):
        return ConstantExpression(self._a)

    def _to_sympy(self, x):
        if self._a == 1:
            return x
        return sp.sympify(self._a) * x


class SumExpression(NumericExpression):
    r"""Sum of any number of expressions.

    Represents an expression of the form \f$ f(x) = \sum_i g_i(x) \f$.
    The empty sum is zero.
    """
    def __init__(self, *terms, name='add'):
        r"""Init function.

        Args:
            *terms: The expressions to add.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(SumExpression, self).__init__(*terms, name=name)

    @property
    def terms(self):
        r"""The summands."""
        return self.children

    def _expr_str(self, fmt):
        s = "+".join(t._expr_str(fmt) for t in self.terms)
        return ("(%s)" % s).replace("+-", "-")

    def _evaluator(self):
        evs = [t.evaluator() for t in self.terms]
        def f(x):
            result = 0.0
            for e in evs:
                result += e(x)
            return result
        return TrivialEvaluator(self, f, evs)

    def _diff(self):
        return SumExpression(*[t.diff() for t in self.terms])

    def _to_sympy(self, x):
        return sp.Add(*[t._to_sympy(x) for t in self.terms])


class DifferenceExpression(NumericExpression):
    r"""First expression minus all following ones.

    Represents an expression of the form
    \f$ f(x) = g_0(x) - g_1(x) - \ldots - g_n(x) \f$.
    """
    def __init__(self, *terms, name='sub'):
        r"""Init function.

        Args:
            *terms: The minuend followed by the subtrahends. At least one
                    expression is required.
            name:   Name of the expression (e.g. for print_tree()).
        """
        if not terms:
            raise ValueError("Difference needs at least one term.")
        super(DifferenceExpression, self).__init__(*terms, name=name)

    @property
    def terms(self):
        r"""The minuend followed by the subtrahends."""
        return self.children

    def _expr_str(self, fmt):
        return "(%s)" % "-".join(t._expr_str(fmt) for t in self.terms)

    def _evaluator(self):
        evs = [t.evaluator() for t in self.terms]
        first, rest = evs[0], evs[1:]
        def f(x):
            result = first(x)
            for e in rest:
                result -= e(x)
            return result
        return TrivialEvaluator(self, f, evs)

    def _diff(self):
        return DifferenceExpression(*[t.diff() for t in self.terms])

    def _to_sympy(self, x):
        first, rest = self.terms[0], self.terms[1:]
        return first._to_sympy(x) - sp.Add(*[t._to_sympy(x) for t in rest])


class ProductExpression(NumericExpression):
    r"""Multiply any number of expressions.

    Represents an expression of the form \f$ f(x) = \prod_i g_i(x) \f$.
    The empty product is one.
    """
    def __init__(self, *factors, name='mult'):
        r"""Init function.

        Args:
            *factors: The expressions to multiply.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(ProductExpression, self).__init__(*factors, name=name)

    @property
    def factors(self):
        r"""The factors of the product."""
        return self.children

    def _expr_str(self, fmt):
        return "(%s)" % "*".join(t._expr_str(fmt) for t in self.factors)

    def _evaluator(self):
        evs = [t.evaluator() for t in self.factors]
        def f(x):
            result = 1.0
            for e in evs:
                result *= e(x)
            return result
        return TrivialEvaluator(self, f, evs)

    def _diff(self):
        r"""Product rule for any number of factors.

        The i'th term is the product with the i'th factor replaced by its
        derivative. Terms where this derivative is the zero constant are
        dropped.
        """
        factors = self.factors
        terms = []
        for i, factor in enumerate(factors):
            d = factor.diff()
            if isinstance(d, ConstantExpression) and d.is_zero_expression():
                continue
            terms.append(ProductExpression(*[
                d if j == i else g.copy() for j, g in enumerate(factors)
            ]))
        return SumExpression(*terms)

    def _to_sympy(self, x):
        return sp.Mul(*[t._to_sympy(x) for t in self.factors])


class DivisionExpression(NumericExpression):
    r"""Divide one expression by another.

    Represents an expression of the form \f$ f(x) = g(x)/h(x) \f$.

    Evaluation raises a `ZeroDivisionError` where \f$ h(x) = 0 \f$.
    """
    def __init__(self, numerator, denominator, name='divide'):
        r"""Init function.

        Args:
            numerator:   Expression to divide.
            denominator: Expression to divide by.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(DivisionExpression, self).__init__(numerator, denominator,
                                                 name=name)

    @property
    def numerator(self):
        r"""The numerator expression."""
        return self.children[0]

    @property
    def denominator(self):
        r"""The denominator expression."""
        return self.children[1]

    def _expr_str(self, fmt):
        return "(%s / %s)" % (self.numerator._expr_str(fmt),
                              self.denominator._expr_str(fmt))

    def _evaluator(self):
        num = self.numerator.evaluator()
        den = self.denominator.evaluator()
        def f(x):
            nx = num(x)
            dx = den(x)
            if dx == 0:
                raise ZeroDivisionError("Division by zero")
            return nx / dx
        return TrivialEvaluator(self, f, [num, den])

    def _diff(self):
        r"""Quotient rule \f$ (N' D - N D') / D^2 \f$."""
        num, den = self.numerator, self.denominator
        return DivisionExpression(
            DifferenceExpression(
                ProductExpression(num.diff(), den.copy()),
                ProductExpression(num.copy(), den.diff()),
            ),
            PowerExpression(den.copy(), 2),
        )

    def _to_sympy(self, x):
        return self.numerator._to_sympy(x) / self.denominator._to_sympy(x)


class _UnaryExpression(NumericExpression):
    r"""Base class for functions applied to a single sub-expression.

    The sub-expression is available as the `e` property.
    """
    def __init__(self, expr, name=None):
        super(_UnaryExpression, self).__init__(expr, name=name)

    @property
    def e(self):
        r"""The expression the function is applied to."""
        return self.children[0]


class PowerExpression(_UnaryExpression):
    r"""Expression raised to a constant real power.

    Represents an expression of the form \f$ f(x) = g(x)^p \f$.

    Real power semantics are used. Negative bases with non-integer exponents
    result in `nan` and zero raised to a negative power in `inf`.
    """
    def __init__(self, base, exponent, name='pow'):
        r"""Init function.

        Args:
            base:     Expression to raise to the power.
            exponent: Real number to use as exponent.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(PowerExpression, self).__init__(base, name=name)
        self._p = _real(exponent, "Exponent")

    @property
    def exponent(self):
        r"""The (constant) exponent."""
        return self._p

    @property
    def nice_name(self):
        return "%s (^%r)" % (self.name, self._p)

    def _expr_str(self, fmt):
        return "(%s^%s)" % (self.e._expr_str(fmt), fmt.format(self._p))

    def _evaluator(self):
        base = self.e.evaluator()
        p = float(self._p)
        def f(x):
            with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
                return np.power(base(x), p)
        return TrivialEvaluator(self, f, [base])

    def _diff(self):
        r"""Power rule \f$ p g^{p-1} g' \f$ for a constant exponent."""
        p = self._p
        return ProductExpression(
            ConstantExpression(p),
            PowerExpression(self.e.copy(), p - 1),
            self.e.diff(),
        )

    def _to_sympy(self, x):
        return sp.Pow(self.e._to_sympy(x), sp.sympify(self._p))


class SqrtExpression(_UnaryExpression):
    r"""Square root of an expression.

    Represents \f$ f(x) = \sqrt{g(x)} \f$. Negative values of \f$ g \f$
    result in `nan`.
    """
    def __init__(self, expr, name='sqrt'):
        super(SqrtExpression, self).__init__(expr, name=name)

    def _expr_str(self, fmt):
        return "sqrt(%s)" % self.e._expr_str(fmt)

    def _evaluator(self):
        e = self.e.evaluator()
        def f(x):
            with np.errstate(invalid='ignore'):
                return np.sqrt(e(x))
        return TrivialEvaluator(self, f, [e])

    def _diff(self):
        return ProductExpression(
            ConstantExpression(0.5),
            PowerExpression(self.e.copy(), -0.5),
            self.e.diff(),
        )

    def _to_sympy(self, x):
        return sp.sqrt(self.e._to_sympy(x))


class AbsExpression(_UnaryExpression):
    r"""Absolute value of an expression.

    The derivative \f$ g/|g| \cdot g' \f$ cannot be evaluated where
    \f$ g(x) = 0 \f$.
    """
    def __init__(self, expr, name='abs'):
        super(AbsExpression, self).__init__(expr, name=name)

    def _expr_str(self, fmt):
        return "|%s|" % self.e._expr_str(fmt)

    def _evaluator(self):
        e = self.e.evaluator()
        return TrivialEvaluator(self, lambda x: abs(e(x)), [e])

    def _diff(self):
        return ProductExpression(
            DivisionExpression(self.e.copy(), AbsExpression(self.e.copy())),
            self.e.diff(),
        )

    def _to_sympy(self, x):
        return sp.Abs(self.e._to_sympy(x))


class LogExpression(_UnaryExpression):
    r"""Natural logarithm of an expression.

    Evaluation raises a numexpr.DomainError where \f$ g(x) \leq 0 \f$.
    """
    def __init__(self, expr, name='ln'):
        super(LogExpression, self).__init__(expr, name=name)

    def _expr_str(self, fmt):
        return "ln(%s)" % self.e._expr_str(fmt)

    def _evaluator(self):
        e = self.e.evaluator()
        def f(x):
            v = e(x)
            if v <= 0:
                raise DomainError("Logarithm of non-positive number")
            return math.log(v)
        return TrivialEvaluator(self, f, [e])

    def _diff(self):
        return DivisionExpression(self.e.diff(), self.e.copy())

    def _to_sympy(self, x):
        return sp.log(self.e._to_sympy(x))


## The variable `x` itself.
X = IdentityExpression()

## The zero constant.
ZERO = ConstantExpression(0)

## The constant one.
ONE = ConstantExpression(1)
