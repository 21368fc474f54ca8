"""Line scanner for procfs routing tables

The IPv6 table lists each route as three aligned lines:

             11111111112222222222333333333344444444445555
    12345678901234567890123456789012345678901234567890123
    nnnn. target:  xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx
          netmask: xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx
          router:  xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx:xxxx
"""

from .error import ReadFailureError

# Large enough for the longest line above plus newline and terminator
PROCFS_LINELEN = 58

# Column where the address starts on every line of a record
ADDR_OFFSET = 15

ADDRESS_CHARACTERS = frozenset("0123456789abcdefABCDEF:")

def fetch_line(stream, capacity=PROCFS_LINELEN):
    """Read one line of at most capacity - 1 characters, or None at end of stream

    Anything past the cap stays in the stream for the next read.
    """

    try:
        line = stream.readline(capacity - 1)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailureError("Reading routing table failed: %s" % e) from e

    if not line:
        return None
    if isinstance(line, bytes):
        line = line.decode("ascii", "replace")
    return line

def truncate_at_address_boundary(line, start_offset=ADDR_OFFSET):
    """Return the address token starting at start_offset"""

    end = start_offset
    while end < len(line) and line[end] in ADDRESS_CHARACTERS:
        end += 1

    return line[start_offset:end]
