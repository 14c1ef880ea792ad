'''
Grammar and error reporting tests
'''

import math

import regex

from mathexpr import (Evaluator, EmptyInput, UnbalancedParentheses,
                      UnexpectedCharacter, UnknownIdentifier)

from pytest import raises


def test_precedence(evaluator):
    assert evaluator.evaluate('2+3*4') == 14
    assert evaluator.evaluate('(2+3)*4') == 20
    assert evaluator.evaluate('10 - 2 - 3') == 5
    assert evaluator.evaluate('8 / 2 / 2') == 2


def test_power_is_left_to_right_with_products(evaluator):
    assert evaluator.evaluate('2^3^2') == 64
    assert evaluator.evaluate('2 * 3 ^ 2') == 36
    assert evaluator.evaluate('1 + 2 ^ 2') == 5
    assert evaluator.evaluate('2 ^ -1') == 0.5


def test_remainder_keeps_sign_of_dividend(evaluator):
    assert evaluator.evaluate('5 % 3') == 2
    assert evaluator.evaluate('-5.5 % 3') == -2.5
    assert evaluator.evaluate('5.5 % -3') == 2.5


def test_unary(evaluator):
    assert evaluator.evaluate('-2') == -2
    assert evaluator.evaluate('--2') == 2
    assert evaluator.evaluate('-+-2') == 2
    assert evaluator.evaluate('2 * -3') == -6
    assert evaluator.evaluate('+5^+3+1') == 126


def test_whitespace(evaluator):
    assert evaluator.evaluate(' ( 1 + 2 ) * 3 ') == 9
    assert evaluator.evaluate('\t1\n+\n2') == 3


def test_literals(evaluator):
    assert evaluator.evaluate('1.5e3 + .5') == 1500.5
    assert evaluator.evaluate('2E-1') == 0.2


def test_readme_example(evaluator):
    assert evaluator.evaluate('((4 - 2^3 + 1) * -sqrt(3*3+4*4)) / 2') == 7.5


def test_result_is_plain_float(evaluator):
    assert type(evaluator.evaluate('1+1')) is float


def test_numeric_edge_cases_are_not_errors(evaluator):
    assert math.isnan(evaluator.evaluate('0/0'))
    assert evaluator.evaluate('1/0') == math.inf
    assert evaluator.evaluate('-1/0') == -math.inf
    assert math.isnan(evaluator.evaluate('1 % 0'))
    assert evaluator.evaluate('10^400') == math.inf
    assert math.isnan(evaluator.evaluate('(-8)^(1/3)'))


def test_empty(evaluator):
    with raises(EmptyInput, match='The line is empty!'):
        evaluator.evaluate('')


def test_whitespace_only(evaluator):
    with raises(UnexpectedCharacter) as info:
        evaluator.evaluate('   ')
    assert info.value.character is None
    assert info.value.position == 3


def test_unbalanced_group(evaluator):
    with raises(UnbalancedParentheses,
                match=regex.escape("Expected ')' at 4, found end of input")):
        evaluator.evaluate('(1+2')


def test_unbalanced_group_with_junk(evaluator):
    with raises(UnbalancedParentheses) as info:
        evaluator.evaluate('(1 + 2 ;')
    assert info.value.found == ';'
    assert info.value.position == 7


def test_unexpected_character(evaluator):
    with raises(UnexpectedCharacter,
                match=regex.escape("Unexpected character '$' at 2")) as info:
        evaluator.evaluate('1 $ 2')
    assert info.value.character == '$'
    assert info.value.position == 2


def test_trailing_input(evaluator):
    for text, character, position in [('2 3', '3', 2),
                                      ('1)', ')', 1),
                                      ('(1+2))', ')', 5),
                                      ('2(3)', '(', 1),
                                      ('2e', 'e', 1)]:
        with raises(UnexpectedCharacter) as info:
            evaluator.evaluate(text)
        assert info.value.character == character
        assert info.value.position == position


def test_missing_operand(evaluator):
    with raises(UnexpectedCharacter) as info:
        evaluator.evaluate('1 +')
    assert info.value.character is None
    with raises(UnexpectedCharacter) as info:
        evaluator.evaluate('* 2')
    assert info.value.character == '*'
    assert info.value.position == 0


def test_unknown_identifier(evaluator):
    with raises(UnknownIdentifier,
                match=regex.escape("Ident 'foo' at 4 is not defined")) as info:
        evaluator.evaluate('1 + foo')
    assert info.value.name == 'foo'
    assert info.value.position == 4


def test_deep_nesting():
    depth = 50
    assert Evaluator().evaluate('(' * depth + '1' + ')' * depth) == 1


def test_unclosed_argument_list(evaluator):
    for text, found, position in [('max(1 2', None, 7),
                                  ('sqrt(', None, 5),
                                  ('pow(1, 2 ;', ';', 9)]:
        with raises(UnbalancedParentheses) as info:
            evaluator.evaluate(text)
        assert info.value.found == found
        assert info.value.position == position


def test_trailing_comma_in_arguments(evaluator):
    assert evaluator.evaluate('max(1, 2, )') == 2
