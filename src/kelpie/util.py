from functools import wraps

import numpy


class KelpieError(Exception):
    pass


class EvaluationError(KelpieError):
    '''
    Expression could not be turned into a number.

    The message, ``args[0]``, is shown to the user verbatim.
    '''


class TokenizeError(EvaluationError):
    pass


class ParseError(EvaluationError):
    pass


class ConversionError(KelpieError):
    pass


def wrap_user_errors(fmt, error=KelpieError):
    '''
    Decorator that converts unexpected exceptions into user errors.

    The message is ``fmt`` formatted with the call's arguments. Passes through
    KelpieErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except KelpieError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def ieee754(f):
    '''
    Decorator that evaluates f with IEEE-754 float semantics.

    Division by zero, overflow and domain errors yield inf or nan, as they
    would in C, instead of warning or raising. Always returns a plain float.
    '''
    @wraps(f)
    def wrapper(*args, **kwargs):
        with numpy.errstate(all='ignore'):
            return float(f(*args, **kwargs))
    return wrapper
