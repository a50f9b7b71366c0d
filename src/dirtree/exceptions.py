from typing import Optional


class IgnoreConfigError(Exception):
    """
    Exception raised when the ignore configuration cannot be loaded or created.

    This covers an unreadable or undecodable ignore file, a failure to write a new
    ignore file on first run, and a first-run prompt that received no answer. The
    tree is never rendered without a valid rule list, so this error is fatal for
    the command-line interface.

    Attributes:
        path (Optional[str]): Path of the ignore file involved, if any.

    Example:
        >>> error = IgnoreConfigError("cannot read ignore file", path=".dirtree.ignore")
        >>> str(error)
        'cannot read ignore file: .dirtree.ignore'
        >>> str(IgnoreConfigError("no answer provided"))
        'no answer provided'
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """
        Initialize the exception with a message and the ignore file path.

        Args:
            message (str): Description of what went wrong.
            path (str, optional): Path of the ignore file involved. Appended to the
                message when given.
        """
        self.path = path
        super().__init__(f"{message}: {path}" if path is not None else message)
