from ..exceptions import ExpressionBuildError
from .ast_nodes import (
    AssignNode,
    BinaryOpNode,
    NumberNode,
    PostIncrementNode,
    VarNode,
    add_assign,
    pre_increment,
)
from .tokens import (
    Operator,
    is_number,
    is_opening_parenthesis,
    is_post_increment,
    is_pre_increment,
    is_variable,
)


class Parser:
    """
    Builds an evaluation tree from an already validated token list.

    ``+`` and ``-`` take everything that follows as their right operand, so
    a chain like ``10 - 2 - 3`` groups as ``10 - (2 - 3)``. ``*`` binds only
    the next atom. A ``(`` starts a nested expression whose ``)`` is left in
    the stream and skipped by the operator step of whoever reads it next.
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.index = 0

    @property
    def at_end(self):
        return self.index >= len(self.tokens)

    def advance(self):
        if self.at_end:
            raise ExpressionBuildError("Unexpected end of expression")
        token = self.tokens[self.index]
        self.index += 1
        return token

    def parse(self):
        return self.expression()

    def expression(self):
        return self.operation(self.atom())

    def atom(self):
        token = self.advance()

        if is_number(token):
            return NumberNode(int(token))

        if is_variable(token):
            return VarNode(token)

        if is_post_increment(token):
            return PostIncrementNode(token[0])

        if is_pre_increment(token):
            return pre_increment(token[2])

        if is_opening_parenthesis(token):
            return self.expression()

        raise ExpressionBuildError(f"Unexpected token: {token}")

    def operation(self, left):
        if self.at_end:
            return left

        op = Operator.from_value(self.advance())

        if op in (Operator.ADD, Operator.SUB):
            return BinaryOpNode(left, op, self.expression())

        if op is Operator.MUL:
            node = BinaryOpNode(left, op, self.atom())
            if not self.at_end:
                return self.operation(node)
            return node

        if op is Operator.ASSIGN:
            return AssignNode(left, self.expression())

        if op is Operator.ADD_ASSIGN:
            return add_assign(left, self.expression())

        # Closing parenthesis (or anything else): skip it
        return left
