from dataclasses import dataclass
from typing import Union

from ..exceptions import ExpressionBuildError
from .tokens import Operator


@dataclass(frozen=True)
class NumberNode:
    value: int


@dataclass(frozen=True)
class VarNode:
    name: str


@dataclass(frozen=True)
class BinaryOpNode:
    left: "Node"
    op: Operator
    right: "Node"

    def __post_init__(self):
        if not self.op.is_arithmetic:
            raise ExpressionBuildError(f"Operator {self.op} cannot combine two operands")


@dataclass(frozen=True)
class AssignNode:
    target: VarNode
    value: "Node"

    def __post_init__(self):
        if not isinstance(self.target, VarNode):
            raise ExpressionBuildError(f"Cannot assign to {self.target!r}")


@dataclass(frozen=True)
class PostIncrementNode:
    name: str


Node = Union[NumberNode, VarNode, BinaryOpNode, AssignNode, PostIncrementNode]


def pre_increment(name):
    """``++x`` becomes ``x = 1 + x``."""
    variable = VarNode(name)
    return AssignNode(variable, BinaryOpNode(NumberNode(1), Operator.ADD, variable))


def add_assign(target, value):
    """``x += e`` becomes ``x = x + e``."""
    return AssignNode(target, BinaryOpNode(target, Operator.ADD, value))
