"""Unit tests for the notice HTML sanitizer."""

from django.test import SimpleTestCase

from notices.services.sanitizer import safe_url, sanitize_message


class TestSanitizeMessage(SimpleTestCase):
    """Tests for sanitize_message."""

    def test_keeps_allowed_markup(self):
        html = sanitize_message("Update <strong>now</strong>, <em>please</em>")
        self.assertEqual(html, "Update <strong>now</strong>, <em>please</em>")

    def test_removes_script_with_content(self):
        html = sanitize_message("Hi<script>alert(1)</script>")
        self.assertEqual(html, "Hi")

    def test_removes_event_handlers(self):
        html = sanitize_message('<span class="hint" onclick="steal()">x</span>')
        self.assertNotIn("onclick", html)
        self.assertIn('class="hint"', html)

    def test_removes_disallowed_tags(self):
        html = sanitize_message('<img src="x" onerror="steal()">text')
        self.assertNotIn("<img", html)
        self.assertIn("text", html)

    def test_drops_javascript_links(self):
        html = sanitize_message('<a href="javascript:alert(1)">go</a>')
        self.assertNotIn("javascript", html)
        self.assertIn(">go</a>", html)

    def test_keeps_https_links(self):
        html = sanitize_message('<a href="https://example.com/docs">docs</a>')
        self.assertIn('href="https://example.com/docs"', html)

    def test_empty_message(self):
        self.assertEqual(sanitize_message(""), "")


class TestSafeUrl(SimpleTestCase):
    """Tests for safe_url."""

    def test_allows_http_https_mailto_and_relative(self):
        for url in (
            "https://example.com/plugins",
            "http://example.com",
            "mailto:admin@example.com",
            "/admin/plugins?page=notices",
            "plugins.php?action=install",
        ):
            with self.subTest(url=url):
                self.assertEqual(safe_url(url), url)

    def test_rejects_script_schemes(self):
        for url in (
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "java\nscript:alert(1)",
            "data:text/html;base64,PHNjcmlwdD4=",
            "vbscript:msgbox",
        ):
            with self.subTest(url=url):
                self.assertEqual(safe_url(url), "")

    def test_empty(self):
        self.assertEqual(safe_url(""), "")
