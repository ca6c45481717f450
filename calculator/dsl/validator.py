import logging
import re

from .tokenizer import Tokenizer
from .tokens import (
    ASSIGNMENT_OPERATORS,
    Operator,
    is_closing_parenthesis,
    is_opening_parenthesis,
    is_operand,
    is_operator,
    is_unary_operator,
    is_variable,
)

logger = logging.getLogger(__name__)

VALID_CHARACTERS = re.compile(r"[a-zA-Z0-9+\-*=()\s]+", re.ASCII)


class Validator:
    """
    Structural checks run on a raw expression before anything is built.

    The checks run in order and the first failure rejects the expression:
    allowed characters, balanced parentheses, assignment shape, and the
    operand/operator structure.
    """

    def validate(self, expression):
        if not self.has_valid_characters(expression):
            logger.debug("Expression %r has an invalid character", expression)
            return False

        if not self.has_balanced_parentheses(expression):
            logger.debug("Expression %r has unbalanced parentheses", expression)
            return False

        if not self.is_assignment(expression):
            logger.debug("Expression %r is not an assignment", expression)
            return False

        return self.has_valid_structure(expression)

    def has_valid_characters(self, expression):
        return VALID_CHARACTERS.fullmatch(expression) is not None

    def has_balanced_parentheses(self, expression):
        balance = 0
        for token in Tokenizer(expression).generate_tokens():
            if is_opening_parenthesis(token):
                balance += 1
            elif is_closing_parenthesis(token):
                balance -= 1

            if balance < 0:
                return False

        return balance == 0

    def is_assignment(self, expression):
        """A bare ``x++``/``++x``, or a variable followed by ``=`` or ``+=``."""
        if is_unary_operator(expression):
            return True

        tokens = Tokenizer(expression).generate_tokens()
        if len(tokens) < 2 or not is_variable(tokens[0]):
            return False

        return Operator.from_value(tokens[1]) in ASSIGNMENT_OPERATORS

    def has_valid_structure(self, expression):
        if not expression.strip():
            logger.debug("Empty expression is invalid")
            return False

        previous = None
        expecting_operand = True

        for token in Tokenizer(expression).generate_tokens():
            if is_operator(token):
                if expecting_operand:
                    logger.debug("Expected an operand after %r but found %r", previous, token)
                    return False
                expecting_operand = True

            elif is_closing_parenthesis(token):
                if expecting_operand or previous is None or is_opening_parenthesis(previous):
                    logger.debug("Unexpected closing parenthesis after %r", previous)
                    return False

            elif is_operand(token) or is_opening_parenthesis(token):
                if not expecting_operand or (
                    previous is not None
                    and (is_operand(previous) or is_closing_parenthesis(previous))
                ):
                    logger.debug("Unexpected %r after %r", token, previous)
                    return False
                if is_operand(token):
                    expecting_operand = False

            else:
                logger.debug("Invalid token %r", token)
                return False

            previous = token

        if expecting_operand:
            logger.debug("Expression %r ends while expecting an operand", expression)
            return False
        return True
