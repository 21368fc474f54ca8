from .error import InvalidIndexLineError, MissingContinuationError
from .error import TruncatedRecordError
from .ip6 import IP6Address
from .route import Route6
from .scanner import fetch_line, truncate_at_address_boundary

def starts_with_index(line):
    return line[0] in "0123456789"

def starts_with_continuation(line):
    return line[0] == " "

# (field, leading marker check, error on mismatch) for the three lines of a record
STAGES = (
    ("prefix", starts_with_index, InvalidIndexLineError),
    ("netmask", starts_with_continuation, MissingContinuationError),
    ("router", starts_with_continuation, MissingContinuationError),
)

def read_next_route(stream, strict=False):
    """Read the next route from an IPv6 routing table stream.

    Returns a Route6, or None at end of stream. A table that ends part way
    through a record also returns None, unless strict is set, in which case
    TruncatedRecordError is raised. Malformed lines raise the matching
    RouteParseError subclass and read failures raise ReadFailureError.
    """

    fields = {}
    for lines_read, (field, has_marker, error) in enumerate(STAGES):
        line = fetch_line(stream)
        if line is None:
            if strict and lines_read:
                raise TruncatedRecordError(lines_read)
            return None

        if not has_marker(line):
            raise error("Unexpected %s line: %r" % (field, line))

        token = truncate_at_address_boundary(line)
        fields[field] = IP6Address.from_string(token)

    return Route6(**fields)

class RouteReader(object):
    def __init__(self, input_stream, strict=False):
        self.input_stream = input_stream
        self.strict = strict

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()

    def next(self):
        route = read_next_route(self.input_stream, strict=self.strict)
        if route is None:
            raise StopIteration
        return route

def read_routes(input_stream, strict=False):
    return list(RouteReader(input_stream, strict=strict))
