'''
Recursive-descent evaluation of one expression.

Lexing, parsing and arithmetic happen in the same pass; nothing is kept once
the value is known. Precedence comes from the three levels:

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/' | '%' | '^') factor)*
    factor     := '+' factor | '-' factor | '(' expression ')'
                | identifier [arguments] | number

Note ^ sits with * and /, so 2^3^2 is (2^3)^2.
'''

import operator

import numpy

from . import builtins
from .builtins import VARIADIC
from .lexer import Cursor
from .util import (ArgumentCountMismatch, UnbalancedParentheses,
                   UnexpectedCharacter, UnknownIdentifier, wrap_user_errors)


class Parser:
    '''
    One evaluation session: a cursor over the input plus the symbol tables of
    the evaluator it runs for.
    '''

    EXPRESSION_OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
    }
    TERM_OPERATORS = {
        '*': operator.__mul__,
        '/': operator.__truediv__,
        # Remainder takes the sign of the dividend
        '%': numpy.fmod,
        '^': numpy.power,
    }

    def __init__(self, text, variables, functions):
        self.cursor = Cursor(text)
        self.variables = variables
        self.functions = functions

    def parse(self):
        '''
        Evaluate the whole input. Anything left over is an error.
        '''
        value = self.parse_expression()
        if not self.cursor.at_end():
            raise UnexpectedCharacter(self.cursor.current(), self.cursor.pos)
        return value

    def parse_expression(self):
        value = self.parse_term()
        while True:
            found = self.cursor.next_operator(self.EXPRESSION_OPERATORS)
            if found is None:
                return value
            value = self.EXPRESSION_OPERATORS[found](value, self.parse_term())

    def parse_term(self):
        value = self.parse_factor()
        while True:
            found = self.cursor.next_operator(self.TERM_OPERATORS)
            if found is None:
                return value
            value = self.TERM_OPERATORS[found](value, self.parse_factor())

    def parse_factor(self):
        cursor = self.cursor
        if cursor.consume_if('+'):
            return self.parse_factor()
        if cursor.consume_if('-'):
            return -self.parse_factor()
        if cursor.consume_if('('):
            value = self.parse_expression()
            self._close()
            return value

        cursor.skip_whitespace()
        start = cursor.pos
        name = cursor.scan_identifier()
        if name is not None:
            return self.resolve(name, start)
        if cursor.starts_number():
            return numpy.float64(cursor.scan_number())
        raise UnexpectedCharacter(cursor.current(), cursor.pos)

    def resolve(self, name, start):
        '''
        Value of identifier name, calling it if it's a function.

        Variables shadow custom functions, which shadow builtin constants,
        which shadow builtin functions.
        '''
        if self.variables and name in self.variables:
            return self.variables[name]
        if self.functions and name in self.functions:
            function = self.functions[name]
            args = self.arguments()
            check_arity(name, function.arity, len(args))
            return _invoke(name, function.callback, args)
        constant = builtins.lookup_constant(name)
        if constant is not None:
            return constant
        function = builtins.lookup_function(name)
        if function is not None:
            args = self.arguments()
            check_arity(name, function.arity, len(args))
            return function.callback(args)
        raise UnknownIdentifier(name, start)

    def arguments(self):
        '''
        Argument list of a call, parenthesized or not.

        Commas are optional between parenthesized arguments, as in
        max(1 2 3). Without parentheses only a single factor is taken, so
        sqrt 100 * 70 means sqrt(100) * 70.
        '''
        cursor = self.cursor
        args = []
        if not cursor.consume_if('('):
            args.append(self.parse_factor())
            return args
        if cursor.consume_if(')'):
            return args
        # Anything that can't start another argument ends the list
        while cursor.starts_operand():
            args.append(self.parse_expression())
            if cursor.ch == ',':
                cursor.advance()
        self._close()
        return args

    def _close(self):
        if not self.cursor.consume_if(')'):
            self.cursor.skip_whitespace()
            raise UnbalancedParentheses(self.cursor.current(),
                                        self.cursor.pos)


def check_arity(name, arity, count):
    '''
    Raise ArgumentCountMismatch unless count arguments suit arity.
    '''
    if arity is VARIADIC:
        if count < 1:
            raise ArgumentCountMismatch(name, None, count)
    elif count != arity:
        raise ArgumentCountMismatch(name, arity, count)


@wrap_user_errors
def _invoke(name, callback, args):
    return numpy.float64(float(callback([float(arg) for arg in args])))
