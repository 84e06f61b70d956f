"""
Tests for HTML sanitization utilities.

Ensures that HTML rendered from user notes is properly sanitized to
prevent XSS while preserving the formatting markdown produces.
"""
import logging

from django.test import TestCase

from tp.apps.common.html_sanitizer import HTMLSanitizer, sanitize_notes_html

logging.disable(logging.CRITICAL)


class HTMLSanitizerTests(TestCase):
    """Test cases for the HTMLSanitizer utility."""

    def test_sanitize_basic_allowed_tags(self):
        """Test that basic allowed tags are preserved."""
        html = '<p>Hello <strong>world</strong> with <em>emphasis</em></p>'
        result = sanitize_notes_html(html)
        self.assertEqual(result, html)

    def test_sanitize_headings(self):
        """Test that heading tags are preserved."""
        html = '<h1>Title</h1><h2>Subtitle</h2><h3>Section</h3>'
        result = sanitize_notes_html(html)
        self.assertEqual(result, html)

    def test_sanitize_lists(self):
        """Test that list tags are preserved."""
        html = '<ul><li>Item 1</li><li>Item 2</li></ul>'
        result = sanitize_notes_html(html)
        self.assertEqual(result, html)

    def test_sanitize_code_blocks(self):
        """Test that code and pre tags are preserved."""
        html = '<pre><code>print(42)</code></pre>'
        result = sanitize_notes_html(html)
        self.assertEqual(result, html)

    def test_sanitize_tables(self):
        """Test that table tags produced by markdown tables are preserved."""
        html = '<table><thead><tr><th>Day</th></tr></thead><tbody><tr><td>Mon</td></tr></tbody></table>'
        result = sanitize_notes_html(html)
        self.assertEqual(result, html)

    def test_sanitize_links_with_allowed_attributes(self):
        """Test that links with href are preserved."""
        html = '<a href="https://example.com">Link</a>'
        result = sanitize_notes_html(html)
        self.assertEqual(result, html)

    def test_sanitize_removes_script_tags(self):
        """Test that script tags are stripped."""
        html = '<p>Safe</p><script>alert(1)</script>'
        result = sanitize_notes_html(html)
        self.assertNotIn('<script', result)
        self.assertIn('<p>Safe</p>', result)

    def test_sanitize_removes_event_handlers(self):
        """Test that event handler attributes are removed."""
        html = '<p onclick="steal()">Click</p>'
        result = sanitize_notes_html(html)
        self.assertEqual(result, '<p>Click</p>')

    def test_sanitize_removes_javascript_links(self):
        """Test that javascript: URLs are removed from links."""
        html = '<a href="javascript:alert(1)">Bad</a>'
        result = sanitize_notes_html(html)
        self.assertNotIn('javascript', result)
        self.assertIn('Bad', result)

    def test_sanitize_removes_images(self):
        """Test that tags outside the whitelist are stripped."""
        html = '<p>Look<img src="x.jpg"></p>'
        result = sanitize_notes_html(html)
        self.assertEqual(result, '<p>Look</p>')

    def test_sanitize_empty_content(self):
        """Test that empty content returns empty string."""
        self.assertEqual(sanitize_notes_html(''), '')
        self.assertEqual(sanitize_notes_html(None), '')

    def test_custom_whitelist(self):
        """Test that a sanitizer can be built with its own whitelist."""
        sanitizer = HTMLSanitizer(allowed_tags=['b'], allowed_attributes={})
        result = sanitizer.sanitize('<p><b>Bold</b></p>')
        self.assertEqual(result, '<b>Bold</b>')

    def test_escape_instead_of_strip(self):
        """Test that disallowed tags are escaped when strip is off."""
        sanitizer = HTMLSanitizer(strip=False)
        result = sanitizer.sanitize('<p>ok</p><span>x</span>')
        self.assertIn('<p>ok</p>', result)
        self.assertIn('&lt;span&gt;', result)
