import logging

import numpy

from .builtins import Function, VARIADIC
from .parser import Parser
from .util import EmptyInput


logger = logging.getLogger(__name__)


class Evaluator:
    '''
    Evaluates expressions against its own variables and functions.

    Instances share nothing, so each can carry a different set of variables
    and functions. Nothing here locks; synchronize externally if one
    instance is mutated from several threads.
    '''

    # Decimal places to round results to. None leaves them alone.
    DEFAULT_PRECISION = None

    def __init__(self, precision=DEFAULT_PRECISION):
        '''
        Create an evaluator with no variables or functions.

        :param precision: Round every result to this many decimal places,
                          e.g. to print 0.1+0.2 as 0.3. None to not round.
        '''
        self.variables = dict()
        self.functions = dict()
        self.precision = precision

    def add_variable(self, name, value):
        '''
        Define or redefine variable name.

        Variables take precedence over every function and constant.
        '''
        self.variables[name] = numpy.float64(value)
        logger.debug('Set variable %s = %r', name, value)

    def add_variables(self, variables):
        '''
        Define all the variables of a mapping or sequence of pairs.
        '''
        items = variables.items() if hasattr(variables, 'items') else variables
        for name, value in items:
            self.add_variable(name, value)

    def remove_variable(self, name):
        if self.variables.pop(name, None) is not None:
            logger.debug('Removed variable %s', name)

    def add_function(self, name, callback, arity=VARIADIC):
        '''
        Define or redefine function name.

        :param callback: Called with the list of argument values, returns a
                         number.
        :param arity: Exact number of arguments, or None for one or more.
        '''
        if not callable(callback):
            raise TypeError('{} is not callable'.format(repr(callback)))
        if arity is not VARIADIC and (not isinstance(arity, int) or
                                      isinstance(arity, bool) or
                                      arity < 0):
            raise ValueError('Bad arity {} for {}'.format(repr(arity),
                                                          repr(name)))
        self.functions[name] = Function(callback, arity)
        logger.debug('Set function %s (arity %s)', name,
                     'variadic' if arity is VARIADIC else arity)

    def remove_function(self, name):
        if self.functions.pop(name, None) is not None:
            logger.debug('Removed function %s', name)

    def evaluate(self, expression):
        '''
        Evaluate expression and return its value as a float.

        Division by zero, domain errors and overflow give inf or nan. Malformed
        input raises a MathExprError subclass.
        '''
        if not expression:
            raise EmptyInput()
        parser = Parser(expression, self.variables, self.functions)
        with numpy.errstate(all='ignore'):
            result = float(parser.parse())
        result = self._round(result)
        logger.debug('%s = %r', expression, result)
        return result

    def _round(self, n):
        '''
        Round result to precision if set to round.
        '''
        if self.precision is None:
            return n
        return round(n, self.precision)


def evaluate(expression, variables=None, functions=None, precision=None):
    '''
    Evaluate expression once, on a throwaway Evaluator.

    :param variables: Mapping of variable names to values.
    :param functions: Mapping of function names to either a callback taking
                      one or more arguments, or a (callback, arity) pair.
    '''
    evaluator = Evaluator(precision=precision)
    if variables:
        evaluator.add_variables(variables)
    for name, function in (functions or {}).items():
        if callable(function):
            evaluator.add_function(name, function)
        else:
            evaluator.add_function(name, *function)
    return evaluator.evaluate(expression)
