"""IPv6 address and prefix classes"""

import socket
import struct

from .error import InvalidAddressSyntaxError

ALL_ONES = (1 << 128) - 1

class IP6Address:
    """An IPv6 address held as 16 bytes in network byte order"""

    def __init__(self, address):
        self.address = address

    @classmethod
    def from_string(cls, address_string):
        try:
            address = socket.inet_pton(socket.AF_INET6, address_string)
        except (OSError, ValueError):
            raise InvalidAddressSyntaxError(address_string)

        return cls(address)

    def hex_string(self):
        """Text form using only hex groups and colons

        inet_ntop writes IPv4-mapped and IPv4-compatible addresses in dotted
        form, which the table layout cannot carry, so those are spelled out
        as eight groups instead.
        """

        address_string = str(self)
        if "." not in address_string:
            return address_string
        return ":".join("%x" % group for group in struct.unpack("!8H", self.address))

    def __str__(self):
        address_string = socket.inet_ntop(socket.AF_INET6, self.address)
        return address_string

    def __repr__(self):
        return "IP6Address.from_string(\"%s\")" % self.__str__()

    def __eq__(self, other):
        if not isinstance(other, IP6Address):
            return NotImplemented
        return self.address == other.address

    def __hash__(self):
        return hash(self.address)

    def leading_ones(self):
        """Number of leading one bits, or None if the bits are not contiguous"""

        inverted = ~int.from_bytes(self.address, "big") & ALL_ONES
        if inverted & (inverted + 1):
            return None
        return 128 - inverted.bit_length()

class IP6Prefix:
    """A destination network: an IP6Address and a prefix length"""

    def __init__(self, network, length):
        if not 0 <= length <= 128:
            raise ValueError("Invalid IPv6 prefix length: %d" % length)
        self.network = network
        self.length = length

    @classmethod
    def from_string(cls, string):
        address_string, length_string = string.split("/")
        return cls(IP6Address.from_string(address_string), int(length_string, 10))

    def netmask(self):
        mask = ALL_ONES ^ (ALL_ONES >> self.length)
        return IP6Address(mask.to_bytes(16, "big"))

    def __str__(self):
        return "%s/%d" % (self.network, self.length)

    def __repr__(self):
        return "IP6Prefix.from_string(\"%s\")" % self.__str__()

    def __eq__(self, other):
        if not isinstance(other, IP6Prefix):
            return NotImplemented
        return self.network == other.network and self.length == other.length

    def __hash__(self):
        return hash((self.network, self.length))
