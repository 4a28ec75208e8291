class InvalidPatternError(Exception):
    """
    Exception raised when the name-matching pattern is not a valid regular expression.

    Raised before any traversal begins, so a search never starts with a pattern that
    cannot be compiled.

    Attributes:
        pattern (str): The pattern as supplied by the caller.
        reason (str): The error reported by the regular expression compiler.

    Example:
        >>> error = InvalidPatternError("[unclosed", "unterminated character set at position 0")
        >>> str(error)
        "Invalid regex pattern '[unclosed': unterminated character set at position 0"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the offending pattern and the compiler's reason.

        Args:
            pattern (str): The pattern that failed to compile.
            reason (str): Description of the syntax error.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex pattern '{pattern}': {reason}")


class TraversalAccessError(OSError):
    """
    Exception raised when a filesystem entry cannot be accessed and permission_action is RAISE.

    Wraps the underlying OSError (permission denied, missing entry, I/O error) together with
    the path that was being read when it occurred.

    Attributes:
        path (str): Path of the entry whose metadata or listing could not be read.
        error (BaseException): The original error.

    Example:
        >>> error = TraversalAccessError("/root/secret", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot access /root/secret: [Errno 13] Permission denied'
    """

    def __init__(self, path: str, error: BaseException) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Cannot access {path}: {error}")

    def __str__(self) -> str:
        return str(self.args[0])
