"""
Calculator session: validates, parses and evaluates expressions against
a variable store that lives until it is reset.
"""
import logging
from typing import Dict, Optional

from .conf import calculator_settings
from .dsl import Evaluator, Parser, Tokenizer, Validator, VariableStore
from .exceptions import InvalidExpression

logger = logging.getLogger(__name__)


class ExpressionCalculator:
    """
    Evaluates one expression at a time against the session's variables.

    Variables keep their values between calls to ``calculate`` until
    ``reset`` is called.
    """

    def __init__(self, validator: Optional[Validator] = None, integer_bits: Optional[int] = None):
        """
        Args:
            validator: Validator used before parsing; a fresh one by default
            integer_bits: Width for two's complement wraparound. Defaults to
                the ``INTEGER_BITS`` calculator setting.
        """
        self.validator = validator or Validator()
        self.integer_bits = (
            integer_bits if integer_bits is not None else calculator_settings.INTEGER_BITS
        )
        self._store = VariableStore()

    def calculate(self, expression: str) -> int:
        """
        Validate, parse and evaluate an expression, updating the variables.

        Args:
            expression: A single expression such as ``"x += y++ * 2"``

        Returns:
            The value of the expression

        Raises:
            InvalidExpression: The expression was rejected; no variable changed.
            UndefinedVariable: A variable was read before being assigned.
                Assignments evaluated before the failing read are kept.
        """
        if not self.validator.validate(expression):
            raise InvalidExpression(expression)

        tokens = Tokenizer(expression).generate_tokens()
        tree = Parser(tokens).parse()
        result = Evaluator(self._store, self.integer_bits).eval(tree)

        logger.debug("Evaluated %r to %s", expression, result)
        return result

    def get_variables(self) -> Dict[str, int]:
        """Return a copy of the current variables."""
        return self._store.snapshot()

    def get_variables_as_string(self) -> str:
        """Return the variables sorted by name, e.g. ``(a=1,b=2)``."""
        return self._store.as_string()

    def reset(self) -> None:
        self._store.clear()
