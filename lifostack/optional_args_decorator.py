from functools import wraps


def optional_args_decorator(func):
    """Lets a decorator be applied bare (@deco) or with arguments (@deco(a, b=1))."""
    @wraps(func)
    def wrapped_decorator(*args, **kwargs):
        if len(args) == 1 and not kwargs and callable(args[0]):
            return func(args[0])
        else:
            def real_decorator(decoratee):
                return func(decoratee, *args, **kwargs)

            return real_decorator

    return wrapped_decorator
