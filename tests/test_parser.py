import pytest

from calculator.dsl import Parser, Tokenizer
from calculator.dsl.ast_nodes import (
    AssignNode,
    BinaryOpNode,
    NumberNode,
    PostIncrementNode,
    VarNode,
)
from calculator.dsl.tokens import Operator
from calculator.exceptions import ExpressionBuildError

ADD, SUB, MUL = Operator.ADD, Operator.SUB, Operator.MUL


def parse(text):
    return Parser(Tokenizer(text).generate_tokens()).parse()


def test_simple_assignment():
    assert parse("x = 1") == AssignNode(VarNode("x"), NumberNode(1))


def test_addition_and_subtraction_group_to_the_right():
    assert parse("x = 10 - 2 - 3") == AssignNode(
        VarNode("x"),
        BinaryOpNode(NumberNode(10), SUB, BinaryOpNode(NumberNode(2), SUB, NumberNode(3))),
    )


def test_multiplication_takes_a_single_atom():
    assert parse("x = 2 * 3 + 4") == AssignNode(
        VarNode("x"),
        BinaryOpNode(BinaryOpNode(NumberNode(2), MUL, NumberNode(3)), ADD, NumberNode(4)),
    )


def test_multiplication_chains_to_the_left():
    assert parse("x = 2 * 3 * 4") == AssignNode(
        VarNode("x"),
        BinaryOpNode(BinaryOpNode(NumberNode(2), MUL, NumberNode(3)), MUL, NumberNode(4)),
    )


def test_multiplication_after_addition_binds_right_operand():
    assert parse("x = 4 + 2 * 3") == AssignNode(
        VarNode("x"),
        BinaryOpNode(NumberNode(4), ADD, BinaryOpNode(NumberNode(2), MUL, NumberNode(3))),
    )


def test_parenthesised_group_is_a_single_operand():
    assert parse("z = (2 + 3) * 2") == AssignNode(
        VarNode("z"),
        BinaryOpNode(BinaryOpNode(NumberNode(2), ADD, NumberNode(3)), MUL, NumberNode(2)),
    )


def test_closing_parenthesis_is_skipped():
    parser = Parser(["1", ")"])
    assert parser.expression() == NumberNode(1)
    assert parser.at_end


def test_pre_increment_is_rewritten_as_assignment():
    x = VarNode("x")
    assert parse("++x") == AssignNode(x, BinaryOpNode(NumberNode(1), ADD, x))


def test_post_increment_keeps_its_own_node():
    assert parse("x++") == PostIncrementNode("x")


def test_compound_assignment_is_rewritten():
    w = VarNode("w")
    x = VarNode("x")
    assert parse("w += ++x + 1") == AssignNode(
        w,
        BinaryOpNode(
            w,
            ADD,
            BinaryOpNode(AssignNode(x, BinaryOpNode(NumberNode(1), ADD, x)), ADD, NumberNode(1)),
        ),
    )


def test_assignment_takes_the_whole_remainder():
    assert parse("w = x++ + 1") == AssignNode(
        VarNode("w"),
        BinaryOpNode(PostIncrementNode("x"), ADD, NumberNode(1)),
    )


def test_assignment_to_non_variable_is_an_internal_error():
    with pytest.raises(ExpressionBuildError):
        Parser(["1", "=", "2"]).parse()


def test_compound_assignment_to_non_variable_is_an_internal_error():
    with pytest.raises(ExpressionBuildError):
        Parser(["1", "+=", "2"]).parse()


def test_missing_operand_is_an_internal_error():
    with pytest.raises(ExpressionBuildError):
        Parser(["x", "="]).parse()


def test_binary_node_rejects_assignment_operator():
    with pytest.raises(ExpressionBuildError):
        BinaryOpNode(NumberNode(1), Operator.ASSIGN, NumberNode(2))


def test_nodes_are_immutable():
    node = NumberNode(1)
    with pytest.raises(AttributeError):
        node.value = 2
