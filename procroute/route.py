from .ip6 import IP6Prefix

class Route6:
    def __init__(self, prefix, netmask, router):
        self.prefix = prefix
        self.netmask = netmask
        self.router = router

    def prefix_length(self):
        length = self.netmask.leading_ones()
        if length is None:
            raise ValueError("Netmask is not contiguous: %s" % self.netmask)
        return length

    def destination(self):
        return IP6Prefix(self.prefix, self.prefix_length())

    def __str__(self):
        if self.netmask.leading_ones() is None:
            return "%s netmask %s via %s" % (self.prefix, self.netmask, self.router)
        return "%s via %s" % (self.destination(), self.router)

    def __repr__(self):
        return "Route6(%r, %r, %r)" % (self.prefix, self.netmask, self.router)

    def __eq__(self, other):
        if not isinstance(other, Route6):
            return NotImplemented
        return self.prefix == other.prefix and \
            self.netmask == other.netmask and \
            self.router == other.router

    def __hash__(self):
        return hash((self.prefix, self.netmask, self.router))
