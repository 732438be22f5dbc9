from lifostack.config import init
from lifostack.errors import EmptyStackError
from lifostack.local_stack import clear_local_stacks, current, frame, get_stack, local_frame
from lifostack.stack import Stack
