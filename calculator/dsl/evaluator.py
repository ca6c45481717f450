import logging

from .ast_nodes import AssignNode, BinaryOpNode, NumberNode, PostIncrementNode, VarNode
from .tokens import Operator

logger = logging.getLogger(__name__)


def wrap_integer(value, bits):
    """Reduce ``value`` to a ``bits``-wide two's complement integer."""
    if bits is None:
        return value
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


class Evaluator:
    def __init__(self, store, integer_bits=None):
        self.store = store
        self.integer_bits = integer_bits

    def _wrap(self, value):
        return wrap_integer(value, self.integer_bits)

    def eval(self, node):
        if isinstance(node, NumberNode):
            return self._wrap(node.value)

        if isinstance(node, VarNode):
            if node.name not in self.store:
                logger.debug("Variable %r is undefined", node.name)
            return self.store.get(node.name)

        if isinstance(node, PostIncrementNode):
            value = self.store.get(node.name)
            self.store.set(node.name, self._wrap(value + 1))
            return value

        if isinstance(node, AssignNode):
            value = self.eval(node.value)
            self.store.set(node.target.name, value)
            return value

        if isinstance(node, BinaryOpNode):
            left = self.eval(node.left)
            right = self.eval(node.right)

            if node.op is Operator.ADD: return self._wrap(left + right)
            if node.op is Operator.SUB: return self._wrap(left - right)
            if node.op is Operator.MUL: return self._wrap(left * right)

            raise ValueError(f"Unsupported operator {node.op}")

        raise TypeError(f"Invalid evaluation node: {node!r}")
