r"""@package symfunc.exprs.common

Utils used by multiple modules in symfunc.exprs.
"""


__all__ = [
    "is_zero_function",
]


def _zero_function(x):
    """Constant function 0.

    This is used in the expression system to indicate the zero function, such
    that we know, e.g., that derivatives vanish too.
    """
    # pylint: disable=unused-argument
    return 0.0


def is_zero_function(func):
    r"""Check whether a given function is the zero function.

    This checks the identity of the given function with a particular zero
    function. This can be useful if expressions/evaluators actually
    use/return this _zero_function() function object when they know this is
    correct.
    """
    return func is _zero_function
