from __future__ import annotations

import os
import unittest

from scriptserved.request import decode_spaces, parse_request_path


class TestParseRequestPath(unittest.TestCase):
    def test_plain_get(self) -> None:
        raw = b"GET /index.html HTTP/1.1\r\nHost: localhost\r\n\r\n"
        self.assertEqual(parse_request_path(raw), "/index.html")

    def test_decodes_encoded_spaces(self) -> None:
        raw = b"GET /my%20docs/a%20b.html HTTP/1.1\r\n\r\n"
        self.assertEqual(parse_request_path(raw), "/my docs/a b.html")

    def test_other_escapes_pass_through(self) -> None:
        raw = b"GET /a%2Fb%41?q=%25 HTTP/1.1\r\n\r\n"
        self.assertEqual(parse_request_path(raw), "/a%2Fb%41?q=%25")

    def test_non_get_is_root(self) -> None:
        self.assertEqual(parse_request_path(b"POST /form HTTP/1.1\r\n\r\n"), "/")
        self.assertEqual(parse_request_path(b"HEAD /x HTTP/1.1\r\n\r\n"), "/")
        self.assertEqual(parse_request_path(b"garbage"), "/")
        self.assertEqual(parse_request_path(b""), "/")

    def test_missing_trailing_space_is_root(self) -> None:
        self.assertEqual(parse_request_path(b"GET /index.html"), "/")

    def test_empty_target_is_root(self) -> None:
        self.assertEqual(parse_request_path(b"GET  HTTP/1.1\r\n\r\n"), "/")

    def test_long_target_is_truncated(self) -> None:
        target = "/" + "a" * 400
        raw = f"GET {target} HTTP/1.1\r\n\r\n".encode("ascii")
        path = parse_request_path(raw, max_length=256)
        self.assertEqual(len(path), 255)
        self.assertEqual(path, target[:255])

    def test_truncation_happens_before_decoding(self) -> None:
        raw = b"GET /ab%20cd HTTP/1.1\r\n\r\n"
        self.assertEqual(parse_request_path(raw, max_length=6), "/ab%2")

    def test_utf8_target_round_trips_to_same_bytes(self) -> None:
        raw = "GET /caf\u00e9%20menu.html HTTP/1.1\r\n\r\n".encode("utf-8")
        path = parse_request_path(raw)
        self.assertEqual(os.fsencode(path), "/caf\u00e9 menu.html".encode("utf-8"))

    def test_invalid_utf8_bytes_round_trip(self) -> None:
        raw = b"GET /caf\xe9.html HTTP/1.1\r\n\r\n"
        self.assertEqual(os.fsencode(parse_request_path(raw)), b"/caf\xe9.html")

    def test_decode_spaces_single_pass(self) -> None:
        self.assertEqual(decode_spaces(b"%2020"), b" 20")
        self.assertEqual(decode_spaces(b"%20%20"), b"  ")
        self.assertEqual(decode_spaces(b"%2"), b"%2")
