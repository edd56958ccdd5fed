"""Exception hierarchy used throughout the browser."""


class BrowserError(Exception):
    """Base class for all errors raised by the browser."""


class NetworkError(BrowserError):
    """A network request failed or a response could not be understood."""


class UnexpectedInputError(BrowserError):
    """Input that the browser does not support was encountered."""


class InvalidUIError(BrowserError):
    """The user interface reached an invalid state."""


class OtherError(BrowserError):
    """Any other failure."""