r"""@package symfunc.utils

General utilities for simplifying certain tasks in Python.
"""


__all__ = [
    "lmap",
    "pop_flag",
]


def lmap(func, *iterables):
    r"""Implementation of `map` that returns a list instead of a generator."""
    return list(map(func, *iterables))


def pop_flag(args, *flags):
    r"""Remove all occurrences of the given flags from `args`.

    @return `True` if any of the flags was present.
    """
    found = False
    for flag in flags:
        while flag in args:
            args.remove(flag)
            found = True
    return found
