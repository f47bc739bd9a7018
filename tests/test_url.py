"""
Tests for URL inspection helpers.
"""

import unittest

from web_linkfinder.utils.url import (
    has_scheme,
    is_network_path,
    is_valid_host,
    same_origin,
    url_origin,
)


class TestHasScheme(unittest.TestCase):
    def test_http(self):
        self.assertTrue(has_scheme("http://example.com/"))

    def test_custom_scheme(self):
        self.assertTrue(has_scheme("git+ssh://example.com/repo"))

    def test_relative_path(self):
        self.assertFalse(has_scheme("/login"))
        self.assertFalse(has_scheme("js/app.js"))

    def test_protocol_relative(self):
        self.assertFalse(has_scheme("//cdn.example.com/x.js"))
        self.assertTrue(is_network_path("//cdn.example.com/x.js"))
        self.assertFalse(is_network_path("/x.js"))


class TestIsValidHost(unittest.TestCase):
    def test_valid(self):
        self.assertTrue(is_valid_host("example.com"))
        self.assertTrue(is_valid_host("192.168.100.1"))
        self.assertTrue(is_valid_host("::1"))

    def test_invalid(self):
        self.assertFalse(is_valid_host(""))
        self.assertFalse(is_valid_host("exa mple.com"))
        self.assertFalse(is_valid_host("a<b>.com"))


class TestOrigin(unittest.TestCase):
    def test_default_ports_folded(self):
        self.assertEqual(
            url_origin("http://Example.com:80/a"), ("http", "example.com", None)
        )
        self.assertEqual(
            url_origin("https://example.com:443/"), ("https", "example.com", None)
        )

    def test_explicit_port_kept(self):
        self.assertEqual(
            url_origin("http://example.com:8080/"), ("http", "example.com", 8080)
        )

    def test_bad_port_raises(self):
        with self.assertRaises(ValueError):
            url_origin("http://example.com:99999/")

    def test_same_origin(self):
        self.assertTrue(same_origin("http://example.com/a", "http://example.com/b/c"))
        self.assertFalse(same_origin("https://example.com/a", "http://example.com/"))
        self.assertFalse(same_origin("http://example.com:81/", "http://example.com/"))
        self.assertFalse(same_origin("http://other.com/", "http://example.com/"))
        self.assertFalse(same_origin("http://[::1/", "http://example.com/"))


if __name__ == "__main__":
    unittest.main()
