r"""@package symfunc.exprs.trig

Trigonometric functions of an expression.


@b Examples

```
    # f(x) = sin(2x), f'(x) = 2 cos(2x)
    f = SinExpression(IdentityExpression(2))
    print(f.diff())                 # (cos(2*x)*2)
    ev = f.evaluator()
    ev(0.25), ev.diff(0.25)
```
"""

import numpy as np
import sympy as sp

from .basics import _UnaryExpression, ConstantExpression
from .basics import PowerExpression, ProductExpression
from .evaluators import TrivialEvaluator


__all__ = [
    "SinExpression",
    "CosExpression",
    "TanExpression",
]


class _TrigExpression(_UnaryExpression):
    r"""Base class for trigonometric functions of an expression.

    Sub classes set the `func` attribute to the numpy function to evaluate
    and the `sympy_func` attribute to the SymPy equivalent. The name of the
    numpy function is used when rendering the expression.
    """
    func = None
    sympy_func = None

    def _expr_str(self, fmt):
        return "%s(%s)" % (self.func.__name__, self.e._expr_str(fmt))

    def _evaluator(self):
        e = self.e.evaluator()
        func = self.func
        def f(x):
            with np.errstate(invalid='ignore'):
                return func(e(x))
        return TrivialEvaluator(self, f, [e])

    def _to_sympy(self, x):
        return type(self).sympy_func(self.e._to_sympy(x))


class SinExpression(_TrigExpression):
    r"""Sine of an expression, \f$ f(x) = \sin(g(x)) \f$."""
    func = np.sin
    sympy_func = sp.sin

    def __init__(self, expr, name='sin'):
        super(SinExpression, self).__init__(expr, name=name)

    def _diff(self):
        return ProductExpression(CosExpression(self.e.copy()), self.e.diff())


class CosExpression(_TrigExpression):
    r"""Cosine of an expression, \f$ f(x) = \cos(g(x)) \f$."""
    func = np.cos
    sympy_func = sp.cos

    def __init__(self, expr, name='cos'):
        super(CosExpression, self).__init__(expr, name=name)

    def _diff(self):
        return ProductExpression(
            ConstantExpression(-1),
            SinExpression(self.e.copy()),
            self.e.diff(),
        )


class TanExpression(_TrigExpression):
    r"""Tangent of an expression, \f$ f(x) = \tan(g(x)) \f$.

    The derivative is represented as \f$ \cos^{-2}(g(x)) g'(x) \f$.
    """
    func = np.tan
    sympy_func = sp.tan

    def __init__(self, expr, name='tan'):
        super(TanExpression, self).__init__(expr, name=name)

    def _diff(self):
        return ProductExpression(
            PowerExpression(CosExpression(self.e.copy()), -2),
            self.e.diff(),
        )
