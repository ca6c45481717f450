import re
from enum import Enum

NUMBER_PATTERN = re.compile(r"[0-9]+")
VARIABLE_PATTERN = re.compile(r"[a-z]")
PRE_INCREMENT_PATTERN = re.compile(r"\+\+[a-z]")
POST_INCREMENT_PATTERN = re.compile(r"[a-z]\+\+")
OPERATOR_PATTERN = re.compile(r"[+\-*=]|\+=")

OPEN_PAREN = "("
CLOSE_PAREN = ")"


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    ASSIGN = "="
    ADD_ASSIGN = "+="
    # Returned for any token that is not one of the symbols above
    UNKNOWN = ""

    @classmethod
    def from_value(cls, value):
        for operator in cls:
            if operator is not cls.UNKNOWN and operator.value == value:
                return operator
        return cls.UNKNOWN

    @property
    def is_arithmetic(self):
        return self in ARITHMETIC_OPERATORS


ARITHMETIC_OPERATORS = frozenset({Operator.ADD, Operator.SUB, Operator.MUL})
ASSIGNMENT_OPERATORS = frozenset({Operator.ASSIGN, Operator.ADD_ASSIGN})


def is_number(token):
    return NUMBER_PATTERN.fullmatch(token) is not None


def is_variable(token):
    return VARIABLE_PATTERN.fullmatch(token) is not None


def is_pre_increment(token):
    return PRE_INCREMENT_PATTERN.fullmatch(token) is not None


def is_post_increment(token):
    return POST_INCREMENT_PATTERN.fullmatch(token) is not None


def is_unary_operator(token):
    return is_pre_increment(token) or is_post_increment(token)


def is_operator(token):
    return OPERATOR_PATTERN.fullmatch(token) is not None


def is_opening_parenthesis(token):
    return token == OPEN_PAREN


def is_closing_parenthesis(token):
    return token == CLOSE_PAREN


def is_operand(token):
    return is_number(token) or is_variable(token) or is_unary_operator(token)
