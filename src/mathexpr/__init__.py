'''
Mathematical expression evaluator.

Evaluates one infix arithmetic expression to a float: +, -, *, /, % and ^,
parentheses, the usual math functions, pi, tau and e, plus whatever
variables and functions you define.

    >>> from mathexpr import Evaluator
    >>> e = Evaluator()
    >>> e.evaluate('((4 - 2^3 + 1) * -sqrt(3*3+4*4)) / 2')
    7.5
    >>> e.add_variable('a', 5)
    >>> e.evaluate('+5^+3+1.1 + a')
    131.1
    >>> e.add_function('work', lambda args: 25 * sum(args))
    >>> e.evaluate('work(1 2 3) + 5')
    155.0
    >>> e.evaluate('sqrt 100 + 5')
    15.0

Beware ^ binds like * and /, left to right: 2^3^2 is 64.

Results can be nan or inf (0/0, 1/0, sqrt(-1)); only malformed input raises,
always a MathExprError.
'''

from .evaluator import Evaluator, evaluate
from .util import (MathExprError, EmptyInput, UnbalancedParentheses,
                   UnexpectedCharacter, UnknownIdentifier,
                   ArgumentCountMismatch, FunctionCallError)


__all__ = ('Evaluator', 'evaluate',
           'MathExprError', 'EmptyInput', 'UnbalancedParentheses',
           'UnexpectedCharacter', 'UnknownIdentifier',
           'ArgumentCountMismatch', 'FunctionCallError')
