r"""@package symfunc.exprs.evaluators

Evaluator objects created by numexpr.NumericExpression.evaluator().

An evaluator is a callable snapshot of an expression tree. The closures of
all sub-expressions are created once, so that evaluating at many points does
not walk the expression objects again.
"""

from .common import _zero_function, is_zero_function


__all__ = [
    "TrivialEvaluator",
]


class _Evaluator(object):
    r"""Base class for all evaluator classes.

    Users of the expression system who don't need to implement their own new
    expression don't need to deal with how evaluators are implemented at all.

    Evaluators are expected to be callable, which should evaluate the
    expression and return a numeric value. They also have a `diff(x, n=1)`
    function evaluating the n'th derivative at the point `x`. Furthermore, a
    function `function(n=0)` returns a callable for the n'th derivative.
    """
    def __init__(self, expr, sub_evaluators=None):
        r"""Base class init for evaluators.

        @param expr
            The expression object for which this evaluator is created.
        @param sub_evaluators
            List of further evaluators required to evaluate this one.
        """
        ## The expression this evaluator was created for.
        self.expr = expr
        self._sub_evaluators = [] if sub_evaluators is None else sub_evaluators
        ## Evaluators of the derivative trees, created on demand.
        self._deriv_evaluators = {}

    @property
    def sub_evaluators(self):
        r"""Evaluators of the sub-expressions."""
        return list(self._sub_evaluators)

    def is_zero_function(self, n=0):
        r"""Return whether the n'th derivative of this evaluator is identically zero."""
        # pylint: disable=unused-argument
        return False

    def derivative_evaluator(self, n=1):
        r"""Evaluator of the n'th symbolic derivative of the expression.

        The derivative tree is built once per order and kept on this
        evaluator.
        """
        if n == 0:
            return self
        try:
            return self._deriv_evaluators[n]
        except KeyError:
            pass
        ev = self.expr.diff(n).evaluator()
        self._deriv_evaluators[n] = ev
        return ev

    def diff(self, x, n=1):
        r"""Evaluate the n'th derivative of the expression at a point x."""
        return self.derivative_evaluator(n)(x)

    def function(self, n=0):
        r"""Return a callable for the n'th derivative."""
        ev = self.derivative_evaluator(n)
        return lambda x: ev(x)


class TrivialEvaluator(_Evaluator):
    r"""Evaluator wrapping a single callable.

    Expressions return a plain function of `x` from their `_evaluator()`
    implementation, which is wrapped here. The function should accept and
    return floats.
    """
    def __init__(self, expr, f, sub_evaluators=None):
        r"""Create an evaluator for a given function.

        @param expr
            The expression object for which this evaluator is created.
        @param f
            Callable representing the function to evaluate.
        @param sub_evaluators
            List of further evaluators required to evaluate this one.
        """
        super(TrivialEvaluator, self).__init__(expr, sub_evaluators=sub_evaluators)
        if not callable(f):
            raise TypeError("`f` argument must be callable.")
        self._f = f

    def is_zero_function(self, n=0):
        if n == 0:
            return is_zero_function(self._f)
        if self.is_zero_function(0):
            return True
        return self.derivative_evaluator(n).is_zero_function()

    def __call__(self, x):
        r"""Evaluate the expression at a point x."""
        return float(self._f(float(x)))

    def function(self, n=0):
        r"""Return a callable for the n'th derivative."""
        if self.is_zero_function(0):
            return _zero_function
        return super(TrivialEvaluator, self).function(n)
