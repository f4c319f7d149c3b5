from functools import wraps


class RPNError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that turns stray exceptions from user input into RPNErrors.

    Passes through RPNErrors. The message is formatted with the wrapped
    call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
