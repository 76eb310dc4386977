"""scantree — recursively find files whose names match a regular expression."""

__version__ = "0.1.0"


class ScantreeError(Exception):
    """User-facing fatal error.

    Raised for invalid arguments, bad patterns, and directories that
    cannot be opened. The message is printed to stderr and the process
    exits with code 1.
    """


class UsageError(ScantreeError):
    """Invalid command-line flags or missing positional arguments."""


class PatternError(ScantreeError):
    """The search expression could not be compiled."""


class DirectoryOpenError(ScantreeError):
    """A directory in the tree could not be opened for listing.

    Attributes:
        path: Directory path as it was passed to the walker.
        reason: Operating system error text.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'cannot open directory "{path}": {reason}')
        self.path = path
        self.reason = reason
