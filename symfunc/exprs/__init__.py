r"""@package symfunc.exprs

Expression system for composing real functions of one variable, evaluating
them and computing their derivatives symbolically.

Each expression represents either an elementary function (like a constant,
\f$ a x \f$ or \f$ \sin(g(x)) \f$) or a composite expression of one or more
sub-expressions (like \f$ g(x) + h(x) \f$, where \f$ g, h \f$ are other
numeric expressions). Expressions form a tree which is never modified after
construction.

Every expression can

    * produce an *evaluator* (see numexpr.NumericExpression.evaluator()),
      a callable computing values and derivative values,
    * build its derivative as a new expression tree
      (numexpr.NumericExpression.diff()),
    * render itself as a fully parenthesized string using a number formatter
      (numexpr.NumericExpression.render(), formatting.NumberFormat).
"""

from .numexpr import NumericExpression, DomainError, isclose
from .basics import (
    ConstantExpression,
    IdentityExpression,
    SumExpression,
    DifferenceExpression,
    ProductExpression,
    DivisionExpression,
    PowerExpression,
    SqrtExpression,
    AbsExpression,
    LogExpression,
    X,
    ZERO,
    ONE,
)
from .trig import SinExpression, CosExpression, TanExpression
from .formatting import NumberFormat
