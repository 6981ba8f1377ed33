"""
Errors raised while building, validating and running commands.
"""


class BundleInspectException(Exception):
    """Base class carrying the message shown to the user."""

    def __init__(self, message, *args):
        if args:
            message = message % args
        super().__init__(message)
        self.message = message

    @property
    def cause(self):
        return self.__cause__


class InvalidCommandException(BundleInspectException):
    """The command line is malformed or asks for something contradictory."""


class CommandExecutionException(BundleInspectException):
    """
    Running the command failed.

    Always raised ``from`` the underlying error, which stays reachable through
    ``cause``. ``path`` names the file involved, when there is one.
    """

    def __init__(self, message, *args, path=None):
        super().__init__(message, *args)
        self.path = path
