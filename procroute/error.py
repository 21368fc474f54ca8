"""Exception classes for procroute"""

class RouteParseError(ValueError):
    """Base class for errors raised while parsing a routing table"""

class InvalidIndexLineError(RouteParseError):
    """Exception raised when a record does not open with an index line"""

class MissingContinuationError(RouteParseError):
    """Exception raised when a netmask or router line is not indented"""

class InvalidAddressSyntaxError(RouteParseError):
    """Exception raised when an address token is not a valid IPv6 address"""

    def __init__(self, token):
        super().__init__("Invalid IPv6 address: \"%s\"" % token)
        self.token = token

class TruncatedRecordError(RouteParseError):
    """Exception raised when the table ends part way through a record"""

    def __init__(self, lines_read):
        super().__init__(
            "Table ended after %d of 3 lines of a record" % lines_read
        )
        self.lines_read = lines_read

class ReadFailureError(IOError):
    """Exception raised when reading the routing table fails"""
