import logging
import os

DEFAULT_STACK_NAME = 'default'
RESET_ON_FORK = os.getenv('LIFOSTACK_RESET_ON_FORK', 'true').lower() == 'true'

LOG = logging


def init(logger=None):
    global LOG
    LOG = logger if logger is not None else logging
