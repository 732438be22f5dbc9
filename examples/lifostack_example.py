import logging

import lifostack
from lifostack import EmptyStackError, Stack, current, frame, local_frame


@local_frame
def outer_task():
    logging.info(f'running {current()}')
    inner_task()


@local_frame('inner')
def inner_task():
    with frame('step') as step:
        logging.info(f'{step} inside {lifostack.get_stack().copy()!r}')


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    lifostack.init()

    stack = Stack()
    stack.push(1)
    stack.push(2)
    logging.info(f'popped {stack.pop()}, size is now {stack.size()}')

    stack.clear()
    try:
        stack.peek()
    except EmptyStackError as e:
        logging.info(f'expected failure: {e}')

    outer_task()
