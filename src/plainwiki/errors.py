"""Errors raised by wiki commands.

Every failure is terminal to the current command. The exit code tells the
host editor whether to show the message (206) or stay quiet (0).
"""

SHOW_MESSAGE = 206


class WikiError(Exception):
    """Base class for wiki command failures."""

    exit_code = SHOW_MESSAGE
    default_message = ""

    def __init__(self, message: str | None = None):
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


class MissingDirectoryError(WikiError):
    default_message = "Save this file first."


class WikiDirectoryError(WikiError):
    """The wiki root cannot be listed."""


class CancelledError(WikiError):
    exit_code = 0


class ExportCancelledError(WikiError):
    default_message = "Cancelled Export Wiki as HTML"


class WikiExistsError(WikiError):
    pass


class UnknownFormatError(WikiError):
    pass
