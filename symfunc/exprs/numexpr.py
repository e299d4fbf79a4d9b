r"""@package symfunc.exprs.numexpr

Base of the NumericExpression system.

A numeric expression is a node of an expression tree representing a real
function of one variable `x`. Each node knows how to

    * evaluate itself (through an *evaluator*, see evaluators.py),
    * build its symbolic derivative as a new expression tree, and
    * render itself as a string using a supplied number formatter.

Composite expressions own their sub-expressions (their *children*) and
implement all three operations in terms of the children's ones. Expressions
are immutable once constructed. In particular, diff() never modifies an
expression but always builds a new tree.

As a simple example, let's build \f$ f(x) = 2 \cos^3(x) \f$ and print its
derivative:

~~~.py
f = ProductExpression(2, PowerExpression(CosExpression(X), 3))
print(f.diff())         # ((2*(3*(cos(x)^2)*(-1*sin(x)*1))))
print(f.evaluate(.1))
ev = f.evaluator()
print(ev.diff(.1))      # value of f'(0.1)
~~~

No simplification of any kind is performed, so derivatives of larger
expressions quickly become lengthy.
"""

from abc import ABCMeta, abstractmethod
import copy
import numbers

import sympy as sp

from .evaluators import TrivialEvaluator
from .formatting import ensure_formatter


__all__ = [
    "NumericExpression",
    "DomainError",
    "isclose",
]


class DomainError(ValueError):
    r"""Raised when a function is evaluated outside its domain.

    For example, the natural logarithm of a non-positive number.
    """
    pass


def isclose(a, b, rel_tol=None, abs_tol=None):
    r"""Test if two numbers agree within an absolute/relative tolerance.

    The default relative tolerance is `1e-9` and the absolute one `0.0`.
    """
    if rel_tol is None:
        rel_tol = 1e-9
    if abs_tol is None:
        abs_tol = 0.0
    return abs(a-b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)


def _symbol(x):
    r"""Return the SymPy symbol to use for the variable."""
    if x is None:
        return sp.Symbol('x', real=True)
    if isinstance(x, str):
        return sp.Symbol(x, real=True)
    return x


class NumericExpression(object, metaclass=ABCMeta):
    """Parent class for numeric expressions.

    The expression objects are evaluated through 'evaluators' created by
    evaluator(). The evaluate() method is a shortcut for one-off evaluations.

    The methods a child has to override are:
        * _expr_str() returning the rendered string of the expression
        * _evaluator() creating a callable evaluating the expression
        * _diff() returning the first derivative as a new expression
        * _to_sympy() returning the equivalent SymPy expression
    """

    def __init__(self, *children, name=None):
        r"""Base class init for numeric expressions.

        The `children` sub expressions given here are stored in this object
        in the given order. They are used when traversing through a complete
        expression hierarchy in e.g. print_tree() or traverse_tree().

        Args:
            children: Sub-expressions this expression is composed of. Numbers
                are converted to ConstantExpression objects.
            name: (string, optional)
                Name for the expression. By default, the current class name
                is used as name.
        """
        self.__children = tuple(self.__ensure_expr(e) for e in children)
        self.__name = name if name else self.__class__.__name__

    @property
    def children(self):
        r"""Tuple of the sub-expressions of this expression."""
        return self.__children

    @property
    def name(self):
        r"""Name given to this instance of the expression."""
        return self.__name

    @property
    def nice_name(self):
        r"""More descriptive name, which may be overridden by sub classes."""
        return self.__name

    def traverse_tree(self, include_root=False, skip_zeros=False, parents=None):
        r"""Generator that walks through a complete expression tree.

        In each iteration, the returned values represent the current node's
        parents (as a list from root to immediate parent), its index within
        its parent's children, and the node itself.

        Args:
            include_root: Whether to include the root as first item. Default
                is `False`.
            skip_zeros: Whether to skip zero sub expressions. Default is
                `False`.
            parents: Optional list of parents of the root. Normally only used
                internally for the recursion.

        @b Examples
        \code
            for parents, idx, expr in root_expr.traverse_tree():
                print("-"*len(parents), idx)
        \endcode

        """
        if parents is None:
            parents = []
        if include_root:
            yield parents, None, self
        parents = parents + [self]
        for idx, expr in enumerate(self.__children):
            if not (skip_zeros and expr.is_zero_expression()):
                yield parents, idx, expr
            for node in expr.traverse_tree(include_root=False,
                                           skip_zeros=skip_zeros,
                                           parents=parents):
                yield node

    def tree_lines(self, root_name='root', nice_names=True, skip_zeros=False):
        r"""Return the lines printed by print_tree() as a list."""
        def _line(expr, name, parents=()):
            n = expr.nice_name if nice_names else expr.name
            return "%s%s [%s] <%s>" % (
                ". " * len(parents), name, n, type(expr).__name__
            )
        lines = [_line(self, root_name)]
        for parents, idx, expr in self.traverse_tree(skip_zeros=skip_zeros):
            lines.append(_line(expr, idx, parents))
        return lines

    def print_tree(self, root_name='root', nice_names=True, skip_zeros=False):
        r"""Print the whole expression tree.

        Each expression's index within its parent will be shown as well as
        its actual name and the class name.

        Args:
            root_name: Key name to print for the root expression.
            nice_names: Whether to use the nice more descriptive name (when
                implemented) or the usually shorter abstract names.
            skip_zeros: Whether to skip zero sub expressions.
        """
        for line in self.tree_lines(root_name=root_name, nice_names=nice_names,
                                    skip_zeros=skip_zeros):
            print(line)

    def __repr__(self):
        r"""Return a string representing the whole expression tree."""
        return "<%s%s>" % (self.__class__.__name__, self.render(repr))

    def __str__(self):
        return self.render()

    def render(self, fmt=None):
        r"""Return the expression as a human readable string.

        Args:
            fmt: Formatter used for all numbers in the expression. This can
                be any object with a `format(value)` method (e.g. a
                formatting.NumberFormat or a string like ``"{:.2f}"``) or a
                callable. Default is a formatting.NumberFormat with default
                settings.
        """
        return self._expr_str(ensure_formatter(fmt))

    @abstractmethod
    def _expr_str(self, fmt):
        """String representing the expression.

        The `fmt` argument is a formatter with a `format(value)` method. Use
        it for every number printed. Sub-expressions should be rendered using
        their `_expr_str` method with the same formatter.
        """
        pass

    def evaluator(self):
        r"""Create an evaluator for the expression.

        The returned object is callable and also provides derivatives of any
        order via `diff(x, n)`.
        """
        e = self._evaluator()
        if callable(e) and not hasattr(e, 'diff'):
            e = TrivialEvaluator(self, e)
        return e

    def evaluate(self, x):
        r"""Evaluate the expression at a point `x`.

        Raises `ZeroDivisionError` or DomainError if the expression (or any
        sub-expression) is undefined at `x`.
        """
        return self.evaluator()(x)

    @abstractmethod
    def _evaluator(self):
        r"""Child classes need to implement this and create their evaluator here."""
        pass

    def diff(self, n=1):
        r"""Return the n'th derivative as a new expression tree.

        This expression is not modified and the result does not share any
        sub-expression with it.
        """
        if n < 0:
            raise ValueError("Derivative order must be non-negative.")
        expr = self
        for _ in range(n):
            expr = expr._diff()
        return expr

    @abstractmethod
    def _diff(self):
        r"""Return the first derivative of this expression.

        Implementations must not reuse this expression or any of its
        sub-expressions in the result. Use copy() where a sub-expression
        appears in the derivative.
        """
        pass

    def copy(self):
        r"""Return an independent copy of the whole expression tree."""
        return copy.deepcopy(self)

    def to_sympy(self, x=None):
        r"""Convert the expression to a SymPy expression.

        Args:
            x: Symbol (or name of the symbol) to use for the variable.
                Default is a real symbol named ``x``.
        """
        return self._to_sympy(_symbol(x))

    @abstractmethod
    def _to_sympy(self, x):
        r"""Return the SymPy expression in terms of the symbol `x`."""
        pass

    def is_zero_expression(self):
        r"""Return whether this expression is zero and constant.

        Child classes should override this if they can determine whether
        they're zero. By default, all expressions will deny being zero.
        """
        return False

    def __add__(self, other):
        from .basics import SumExpression
        return SumExpression(self, other)

    def __radd__(self, other):
        from .basics import SumExpression
        return SumExpression(other, self)

    def __sub__(self, other):
        from .basics import DifferenceExpression
        return DifferenceExpression(self, other)

    def __rsub__(self, other):
        from .basics import DifferenceExpression
        return DifferenceExpression(other, self)

    def __mul__(self, other):
        from .basics import ProductExpression
        return ProductExpression(self, other)

    def __rmul__(self, other):
        from .basics import ProductExpression
        return ProductExpression(other, self)

    def __truediv__(self, other):
        from .basics import DivisionExpression
        return DivisionExpression(self, other)

    def __rtruediv__(self, other):
        from .basics import DivisionExpression
        return DivisionExpression(other, self)

    def __pow__(self, exponent):
        from .basics import PowerExpression
        if not isinstance(exponent, numbers.Real):
            return NotImplemented
        return PowerExpression(self, exponent)

    def __neg__(self):
        from .basics import ProductExpression
        return ProductExpression(-1, self)

    @staticmethod
    def __ensure_expr(expr):
        """Ensure an object is an expression, converting it if necessary.

        If `expr` is a real number, it is converted to a `ConstantExpression`.
        """
        if isinstance(expr, NumericExpression):
            return expr
        if isinstance(expr, numbers.Real):
            from .basics import ConstantExpression
            return ConstantExpression(expr)
        raise TypeError("Expected an expression or a real number, got %r."
                        % (expr,))
