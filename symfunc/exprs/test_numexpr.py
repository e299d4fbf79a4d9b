#!/usr/bin/env python3

import unittest
import math

import numpy as np
import sympy as sp

from testutils import ExprTestCase
from .numexpr import NumericExpression, isclose
from .basics import ConstantExpression, IdentityExpression, X, ZERO, ONE
from .basics import SumExpression, DifferenceExpression, ProductExpression
from .basics import DivisionExpression, PowerExpression, LogExpression
from .trig import SinExpression


class _TestExpr1(NumericExpression):
    def __init__(self, a=1, **kw):
        super(_TestExpr1, self).__init__(**kw)
        self.a = a
    def _expr_str(self, fmt): return "%s*x^2" % fmt.format(self.a)
    def _evaluator(self):
        a = self.a
        return lambda x: a*x**2
    def _diff(self): return IdentityExpression(2*self.a)
    def _to_sympy(self, x): return self.a*x**2


class TestIsclose(ExprTestCase):
    def test_float(self):
        self.assertTrue(isclose(1e7+1, 1e7+1, rel_tol=0, abs_tol=0))
        self.assertTrue(isclose(1e7+1, 1e7, rel_tol=1e-6))
        self.assertFalse(isclose(1e7+1, 1e7, rel_tol=1e-8))
        self.assertTrue(isclose(1e7+1, 1e7, rel_tol=0, abs_tol=2.0))
        self.assertFalse(isclose(1e7+1, 1e7, rel_tol=0, abs_tol=0.5))


class TestNumexpr(ExprTestCase):
    def test_custom_expression(self):
        expr = SumExpression(_TestExpr1(a=3), X)
        self.assertEqual(expr.render(), "(3*x^2+x)")
        self.assertEqual(repr(expr), "<SumExpression(3*x^2+x)>")
        self.assertAlmostEqual(expr.evaluate(2), 14.0)
        self.assertEqual(expr.diff().render(), "(6*x+1)")

    def test_name(self):
        self.assertEqual(_TestExpr1().name, "_TestExpr1")
        self.assertEqual(_TestExpr1(name="foo").name, "foo")
        self.assertEqual(SumExpression().name, "add")
        self.assertEqual(ConstantExpression(2).nice_name, "const (2)")

    def test_children_immutable(self):
        expr = SumExpression(X, 1)
        self.assertIsInstance(expr.children, tuple)
        with self.assertRaises(AttributeError):
            expr.children = ()
        with self.assertRaises(AttributeError):
            ConstantExpression(1).c = 2

    def test_child_conversion(self):
        expr = ProductExpression(2, X)
        self.assertIsType(expr.children[0], ConstantExpression)
        self.assertEqual(expr.children[0].c, 2)
        with self.assertRaises(TypeError):
            SumExpression(X, None)
        with self.assertRaises(TypeError):
            ProductExpression("x")

    def test_diff_order(self):
        expr = PowerExpression(X, 4)
        self.assertIs(expr.diff(0), expr)
        with self.assertRaises(ValueError):
            expr.diff(-1)
        self.assertAlmostEqual(expr.diff(3).evaluate(0.5), 24*0.5)

    def test_copy(self):
        expr = SumExpression(X, SinExpression(X))
        cp = expr.copy()
        self.assertIsType(cp, SumExpression)
        self.assertIsNot(cp, expr)
        self.assertIsNot(cp.children[1], expr.children[1])
        self.assertEqual(cp.render(), expr.render())

    def test_traverse_tree(self):
        expr = SumExpression(ZERO, ProductExpression(2, X))
        nodes = list(expr.traverse_tree(include_root=True))
        self.assertEqual(len(nodes), 5)
        parents, idx, node = nodes[0]
        self.assertEqual(parents, [])
        self.assertIsNone(idx)
        self.assertIs(node, expr)
        parents, idx, node = nodes[-1]
        self.assertEqual(idx, 1)
        self.assertIs(node, X)
        self.assertEqual(len(parents), 2)
        nodes = list(expr.traverse_tree(skip_zeros=True))
        self.assertEqual(len(nodes), 3)

    def test_tree_lines(self):
        expr = DivisionExpression(X, PowerExpression(X, 2))
        self.assertEqual(expr.tree_lines(), [
            "root [divide] <DivisionExpression>",
            ". 0 [Id] <IdentityExpression>",
            ". 1 [pow (^2)] <PowerExpression>",
            ". . 0 [Id] <IdentityExpression>",
        ])
        self.assertEqual(expr.tree_lines(nice_names=False)[2],
                         ". 1 [pow] <PowerExpression>")

    def test_operators(self):
        self.assertIsType(X + 1, SumExpression)
        self.assertEqual((X + 1).render(), "(x+1)")
        self.assertEqual((1 + X).render(), "(1+x)")
        self.assertEqual((X - 2).render(), "(x-2)")
        self.assertEqual((2 - X).render(), "(2-x)")
        self.assertEqual((2 * X).render(), "(2*x)")
        self.assertEqual((X * 2).render(), "(x*2)")
        self.assertEqual((X / 2).render(), "(x / 2)")
        self.assertEqual((1 / X).render(), "(1 / x)")
        self.assertEqual((X ** 3).render(), "(x^3)")
        self.assertEqual((-X).render(), "(-1*x)")
        with self.assertRaises(TypeError):
            X ** X  # pylint: disable=pointless-statement
        f = 2 * SinExpression(X) ** 2 - LogExpression(X + 1)
        self.assertIsType(f, DifferenceExpression)
        for x in np.linspace(0, 2, 5):
            self.assertAlmostEqual(f.evaluate(x),
                                   2*math.sin(x)**2 - math.log(x+1))

    def test_shared_leaves(self):
        self.assertEqual(X.render(), "x")
        self.assertTrue(ZERO.is_zero_expression())
        self.assertFalse(ONE.is_zero_expression())
        self.assertEqual(ONE.evaluate(7), 1.0)

    def test_to_sympy(self):
        x = sp.Symbol('x', real=True)
        self.assertEqual(SumExpression(X, 3).to_sympy(), x + 3)
        self.assertEqual(ProductExpression(2, X).to_sympy('x'), 2*x)
        self.assertEqual(DifferenceExpression(X, 1, X**2).to_sympy(x),
                         x - 1 - x**2)
        self.assertEqual(SumExpression().to_sympy(x), 0)
        self.assertEqual(ProductExpression().to_sympy(x), 1)
        y = sp.Symbol('y')
        self.assertEqual(LogExpression(X).to_sympy(y), sp.log(y))


if __name__ == '__main__':
    unittest.main()
