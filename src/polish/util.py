from functools import wraps


class PolishError(Exception):
    '''
    Malformed expression or failed evaluation.

    str() of it is meant for the user.
    '''
    pass


class InvalidNumberLiteral(PolishError):
    pass


class InvalidSymbol(PolishError):
    pass


class UnbalancedBrackets(PolishError):
    pass


class InvalidRpnExpression(PolishError):
    pass


class DivisionByZero(PolishError):
    pass


class EmptyOrInvalidResult(PolishError):
    pass


class NumericalError(PolishError):
    pass


def wrap_user_errors(fmt, error=PolishError):
    '''
    Decorator that converts unexpected exceptions to the given PolishError.

    fmt is formatted with the wrapped function's arguments. Passes through
    PolishErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except PolishError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
