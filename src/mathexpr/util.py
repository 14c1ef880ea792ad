from functools import wraps


class MathExprError(ValueError):
    '''
    Base class of everything that can go wrong evaluating an expression.
    '''


class EmptyInput(MathExprError):
    def __init__(self):
        super().__init__('The line is empty!')


class UnbalancedParentheses(MathExprError):
    def __init__(self, found, position):
        self.found = found
        self.position = position
        super().__init__("Expected ')' at {}, found {}".format(
            position, _describe(found)))


class UnexpectedCharacter(MathExprError):
    def __init__(self, character, position):
        self.character = character
        self.position = position
        super().__init__('Unexpected {} at {}'.format(
            _describe(character), position))


class UnknownIdentifier(MathExprError):
    def __init__(self, name, position):
        self.name = name
        self.position = position
        super().__init__('Ident {} at {} is not defined'.format(
            repr(name), position))


class ArgumentCountMismatch(MathExprError):
    '''
    Function called with the wrong number of arguments.

    ``expected`` is None for variadic functions called with nothing.
    '''
    def __init__(self, function, expected, actual):
        self.function = function
        self.expected = expected
        self.actual = actual
        if expected is None:
            message = 'Expected at least one argument for {}, got {}'
        else:
            message = 'Expected {2} argument(s) for {0}, got {1}'
        super().__init__(message.format(repr(function), actual, expected))


class FunctionCallError(MathExprError):
    def __init__(self, function):
        self.function = function
        super().__init__('Error calling {}'.format(repr(function)))


def _describe(character):
    if character is None:
        return 'end of input'
    return 'character {}'.format(repr(character))


def wrap_user_errors(f):
    '''
    Decorator converting whatever a user-supplied function raises.

    The wrapped function takes the function's name first. Passes through
    MathExprErrors, chains anything else to a FunctionCallError.
    '''
    @wraps(f)
    def wrapper(name, *args, **kwargs):
        try:
            return f(name, *args, **kwargs)
        except MathExprError:
            raise
        except Exception as e:
            raise FunctionCallError(name) from e
    return wrapper
