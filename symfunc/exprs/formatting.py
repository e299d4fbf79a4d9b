r"""@package symfunc.exprs.formatting

Numeric formatting used when rendering expressions.

Expressions never decide how numbers look. Their `render()` methods receive
a *formatter*, i.e. any object with a `format(value)` method returning a
string. NumberFormat is the default, producing output similar to a default
locale number format (at most three fraction digits, grouped thousands).

@b Examples

```
    expr = ProductExpression(ConstantExpression(1/3.), X)
    expr.render()                       # '(0.333*x)'
    expr.render(NumberFormat(5))        # '(0.33333*x)'
    expr.render("{:.1e}")               # '(3.3e-01*x)'
```
"""

import math


__all__ = [
    "NumberFormat",
    "ensure_formatter",
]


class NumberFormat(object):
    r"""Format real numbers with a bounded number of fraction digits.

    Values are rounded (round half even) to `max_fraction_digits` decimals.
    Trailing zeros and a trailing decimal point are removed, so that e.g.
    `2.0` is shown as ``2`` and `0.5` as ``0.5``.
    """
    def __init__(self, max_fraction_digits=3, grouping=True,
                 decimal_point='.', thousands_sep=','):
        r"""Init function.

        @param max_fraction_digits
            Maximum number of digits after the decimal point.
        @param grouping
            Whether to separate groups of thousands.
        @param decimal_point
            String to use as decimal point.
        @param thousands_sep
            String separating groups of thousands (if `grouping` is true).
        """
        if max_fraction_digits < 0:
            raise ValueError("Number of fraction digits cannot be negative.")
        self._digits = int(max_fraction_digits)
        self._grouping = bool(grouping)
        self._decimal_point = decimal_point
        self._thousands_sep = thousands_sep

    @classmethod
    def from_config(cls, config, section='format'):
        r"""Create a formatter from a `configparser.ConfigParser` section."""
        return cls(
            max_fraction_digits=config.getint(section, 'max_fraction_digits'),
            grouping=config.getboolean(section, 'grouping'),
            decimal_point=config.get(section, 'decimal_point'),
            thousands_sep=config.get(section, 'thousands_sep'),
        )

    @property
    def max_fraction_digits(self):
        r"""Maximum number of digits after the decimal point."""
        return self._digits

    @property
    def grouping(self):
        r"""Whether thousands are grouped."""
        return self._grouping

    def format(self, value):
        r"""Return the formatted string for a real number."""
        value = float(value)
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        spec = "%s.%df" % ("," if self._grouping else "", self._digits)
        result = format(value, spec)
        if "." in result:
            result = result.rstrip("0").rstrip(".")
        if self._decimal_point != "." or self._thousands_sep != ",":
            result = result.translate({ord(","): self._thousands_sep,
                                       ord("."): self._decimal_point})
        return result

    def __repr__(self):
        return ("NumberFormat(max_fraction_digits=%r, grouping=%r, "
                "decimal_point=%r, thousands_sep=%r)"
                % (self._digits, self._grouping, self._decimal_point,
                   self._thousands_sep))


class _CallableFormat(object):
    r"""Adapter turning a plain callable into a formatter."""
    # pylint: disable=too-few-public-methods
    def __init__(self, func):
        self._func = func

    def format(self, value):
        return self._func(value)


def ensure_formatter(fmt):
    r"""Return an object with a `format(value)` method.

    `None` gives a default NumberFormat. Objects already having a `format`
    method (including format strings like ``"{:.2f}"``) are returned as is.
    Other callables are wrapped.
    """
    if fmt is None:
        return NumberFormat()
    if hasattr(fmt, 'format'):
        return fmt
    if callable(fmt):
        return _CallableFormat(fmt)
    raise TypeError("Formatter must have a `format()` method or be callable.")
