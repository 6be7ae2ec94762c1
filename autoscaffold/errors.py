class ScaffoldError(Exception):
    """Raised for problems the CLI reports as a one-line error (exit code 1)."""


class OperationCancelled(ScaffoldError):
    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)
