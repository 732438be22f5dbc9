import os
from functools import wraps
from threading import local

from lifostack import config
from lifostack.optional_args_decorator import optional_args_decorator
from lifostack.stack import Stack

thread_instance = local()


def get_stack(name: str = config.DEFAULT_STACK_NAME) -> Stack:
    stacks = __get_stacks()
    stack = stacks.get(name)
    if stack is None:
        stack = stacks[name] = Stack()

    return stack


def current(name: str = config.DEFAULT_STACK_NAME):
    return get_stack(name).peek()


def clear_local_stacks():
    stacks = getattr(thread_instance, 'stacks', None)
    if stacks:
        for stack in stacks.values():
            stack.clear()


def frame(item, name: str = config.DEFAULT_STACK_NAME):
    return LocalFrameContext(item, name)


class LocalFrameContext:

    def __init__(self, item, name: str = config.DEFAULT_STACK_NAME):
        self.item = item
        self.name = name

    def __enter__(self):
        get_stack(self.name).push(self.item)
        return self.item

    def __exit__(self, exc_type, exc_val, exc_tb):
        stack = get_stack(self.name)
        if stack.is_empty():
            config.LOG.warning(f'Stack {self.name!r} was reset before frame {self.item!r} exited, nothing to pop')
            return False
        top = stack.pop()
        if top is not self.item:
            config.LOG.warning(f'Unbalanced frame on stack {self.name!r}: expected {self.item!r} on top, popped {top!r}')
        return False


@optional_args_decorator
def local_frame(func, frame_name: str = None, stack_name: str = config.DEFAULT_STACK_NAME):
    @wraps(func)
    def wrapper(*args, **kwargs):
        with frame(frame_name if frame_name else func.__name__, stack_name):
            return func(*args, **kwargs)

    return wrapper


def __get_stacks() -> dict:
    __handle_forked_process()
    stacks = getattr(thread_instance, 'stacks', None)
    if stacks is None:
        stacks = thread_instance.stacks = {}

    return stacks


def __handle_forked_process():
    pid = os.getpid()
    curr_pid = getattr(thread_instance, 'process_pid', None)
    if pid != curr_pid:
        if curr_pid is not None and config.RESET_ON_FORK:
            config.LOG.info(f'Process {pid} forked from {curr_pid}, clearing inherited local stacks')
            clear_local_stacks()
        thread_instance.process_pid = pid
