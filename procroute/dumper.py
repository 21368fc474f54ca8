from .error import RouteParseError, ReadFailureError
from .reader import RouteReader

class RouteDumper(object):
    def __init__(self, path, route_handler, error_handler=None, strict=False):
        self.path = path
        self.route_handler = route_handler
        self.error_handler = error_handler
        self.strict = strict

    def run(self):
        count = 0
        try:
            with open(self.path, encoding="ascii", errors="replace") as input_stream:
                for route in RouteReader(input_stream, strict=self.strict):
                    self.route_handler(route)
                    count += 1
        except (RouteParseError, ReadFailureError, OSError) as e:
            if self.error_handler:
                self.error_handler("Table %s: %s" % (self.path, e))
        return count

    def __str__(self):
        return self.path
