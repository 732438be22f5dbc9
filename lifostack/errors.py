class EmptyStackError(IndexError):
    """Raised when the top of an empty stack is requested."""

    def __init__(self, operation: str):
        super().__init__(f'{operation} from empty stack')
        self.operation = operation
