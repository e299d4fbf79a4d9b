r"""@package symfunc

Symbolic single-variable functions.

Functions of a real variable `x` are built as expression trees out of the
classes in symfunc.exprs. They can be evaluated numerically, differentiated
symbolically (producing new expression trees) and rendered as fully
parenthesized formulas.

The symfunc.demo module shows a complete usage example.
"""
