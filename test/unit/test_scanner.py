import unittest
from io import StringIO, BytesIO, TextIOWrapper

from procroute.error import ReadFailureError
from procroute.scanner import fetch_line, truncate_at_address_boundary
from procroute.scanner import PROCFS_LINELEN, ADDR_OFFSET

class BrokenStream(object):
    def readline(self, size=-1):  # pylint: disable=unused-argument,no-self-use
        raise OSError("device went away")

class FetchLineTestCase(unittest.TestCase):
    def test_reads_one_line_including_newline(self):
        stream = StringIO("0001. target:  ::1\n      netmask: ::\n")
        self.assertEqual(fetch_line(stream), "0001. target:  ::1\n")
        self.assertEqual(fetch_line(stream), "      netmask: ::\n")

    def test_end_of_stream_returns_none(self):
        self.assertIsNone(fetch_line(StringIO("")))

    def test_line_without_newline(self):
        self.assertEqual(fetch_line(StringIO("      router:  fe80::1")), "      router:  fe80::1")

    def test_overlong_line_is_capped_and_remainder_left_in_stream(self):
        stream = StringIO("x" * 100 + "\n")
        line = fetch_line(stream)
        self.assertEqual(len(line), PROCFS_LINELEN - 1)
        self.assertEqual(stream.read(), "x" * (100 - PROCFS_LINELEN + 1) + "\n")

    def test_custom_capacity(self):
        stream = StringIO("abcdefgh\n")
        self.assertEqual(fetch_line(stream, capacity=4), "abc")
        self.assertEqual(fetch_line(stream, capacity=4), "def")

    def test_binary_stream_is_decoded(self):
        self.assertEqual(fetch_line(BytesIO(b"      router:  ::\n")), "      router:  ::\n")

    def test_read_error_raises_read_failure(self):
        with self.assertRaises(ReadFailureError) as context:
            fetch_line(BrokenStream())

        self.assertTrue("device went away" in str(context.exception))

    def test_undecodable_text_raises_read_failure(self):
        stream = TextIOWrapper(BytesIO(b"      netmask: \xff\xfe::\n"), encoding="utf-8")
        with self.assertRaises(ReadFailureError):
            fetch_line(stream)


class TruncateAtAddressBoundaryTestCase(unittest.TestCase):
    def test_stops_at_newline(self):
        line = "0001. target:  2001:db8::\n"
        self.assertEqual(truncate_at_address_boundary(line), "2001:db8::")

    def test_stops_at_first_non_address_character(self):
        line = "      router:  fe80::1%eth0\n"
        self.assertEqual(truncate_at_address_boundary(line), "fe80::1")

    def test_accepts_upper_case_hex(self):
        line = "      netmask: FFFF:FFFF::\n"
        self.assertEqual(truncate_at_address_boundary(line), "FFFF:FFFF::")

    def test_runs_to_end_of_capped_line(self):
        line = " " * ADDR_OFFSET + "1234:" * 10
        self.assertEqual(truncate_at_address_boundary(line), "1234:" * 10)

    def test_short_line_gives_empty_token(self):
        self.assertEqual(truncate_at_address_boundary("0001.\n"), "")

    def test_custom_offset(self):
        self.assertEqual(truncate_at_address_boundary("ab::1 x", 0), "ab::1")

