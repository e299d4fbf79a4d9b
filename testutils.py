r"""@package testutils

Utilities to add more features to `unittest` classes.

This module provides a custom subclass of `unittest.TestCase`, namely
ExprTestCase, which obeys the global configuration settings in TestSettings
and adds assertions for comparing expressions with reference functions. The
settings can be configured by the script invoking the test run.
"""

import sys
import time
import unittest


__all__ = [
    "ExprTestCase",
    "TestSettings",
]


class ExprTestCase(unittest.TestCase):
    """Tweaked baseclass for unit tests of the expression system.

    By deriving from this class, you:
        * Get timed individual tests (needs `verbosity=2`) if
          TestSettings.timing is true.
        * Can compare lists of values and expressions against plain Python
          reference functions.
    """
    def setUp(self):
        self.startTime = time.time()

    def tearDown(self):
        if TestSettings.timing:
            duration = time.time() - self.startTime
            print("(%.4f seconds) ... " % (duration), file=sys.stderr, end='')

    def assertIsType(self, obj, cls):
        r"""Assert that an object is exactly of a certain type."""
        self.assertIs(type(obj), cls)

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values."""
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        a, b = list(a), list(b)
        if len(a) != len(b):
            raise self.failureException("Lists have different lengths (%d != %d)" % (len(a), len(b)))
        fails = []
        for i, (ai, bi) in enumerate(zip(a, b)):
            if ai == bi:
                continue
            if delta is not None:
                if not abs(ai-bi) <= delta:
                    fails.append(i)
            else:
                if not round(abs(ai-bi), places) == 0:
                    fails.append(i)
        if fails:
            msg = "%d elements differ.\n" % len(fails)
            maxN = 9
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(["  [{i}] {a} != {b}    (difference: {d})".format(i=i, a=a[i], b=b[i], d=(b[i]-a[i]))
                              for i in fails[:maxN]])
            raise self.failureException(msg)

    def assertMatchesFunction(self, expr, func, points, delta=1e-9, n=0):
        r"""Assert an expression's n'th derivative agrees with `func` at all points."""
        ev = expr.evaluator()
        self.assertListAlmostEqual([ev.diff(x, n) for x in points],
                                   [func(x) for x in points], delta=delta)

    def assertBalanced(self, text):
        r"""Assert that the parentheses in a string are balanced."""
        depth = 0
        for ch in text:
            if ch == '(':
                depth += 1
            elif ch == ')':
                depth -= 1
            if depth < 0:
                raise self.failureException("Unbalanced parentheses: %r" % text)
        if depth:
            raise self.failureException("Unbalanced parentheses: %r" % text)


class TestSettings(object):
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
