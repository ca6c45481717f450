"""
Exceptions raised by the expression calculator.
"""


class ExpressionCalculatorError(Exception):
    """Base class for errors reported to calculator callers."""


class InvalidExpression(ExpressionCalculatorError):
    """The expression was rejected before any variable was touched."""

    def __init__(self, expression):
        self.expression = expression
        super().__init__(f"The expression '{expression}' is invalid.")


class UndefinedVariable(ExpressionCalculatorError):
    """An expression read a variable that has no value."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"The variable '{name}' is undefined.")


class ExpressionBuildError(RuntimeError):
    """
    Internal invariant violation while building an evaluation tree.

    Never expected for input accepted by the validator.
    """
