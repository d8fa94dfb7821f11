"""Network and listing errors surfaced to the presentation layer."""


class NetworkError(Exception):
    """Base class for coin feed errors.

    Every error carries a user-facing ``message``. Two errors are equal when
    they are of the same class and carry the same message.
    """

    default_message = "Something went wrong"

    def __init__(self, message=None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __eq__(self, other):
        if not isinstance(other, NetworkError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r})"


class InvalidUrlError(NetworkError):
    """The request URL could not be built."""
    default_message = "The request URL is invalid"


class NoDataError(NetworkError):
    """Transport failure (timeout, connection error)."""
    default_message = "No data received. Check your connection and try again"


class ServerError(NetworkError):
    """Non-2xx status; the message is the raw response body."""
    default_message = "Unknown error"


class DecodingError(NetworkError):
    """2xx response whose body is not a list of coins."""
    default_message = "The coin data could not be read"


class EmptyDataWithFilteredAppliedError(NetworkError):
    """Raised by presentation when active filters leave nothing to show."""
    default_message = "No coins match the selected filters"


class RequestFailedError(NetworkError):
    """The request could not be completed."""
    default_message = "The request failed"
