"""
Tests for status banner HTML

Run with: python3 -m pytest test_components.py -v
"""

import pytest
from stocksync.components import error_box_html, success_box_html


class TestErrorBox:
    
    def test_message_is_escaped(self):
        markup = error_box_html('Unable to read "<img src=x onerror=alert(1)>.xlsx".')
        assert "<img" not in markup
        assert "&lt;img src=x onerror=alert(1)&gt;" in markup
    
    def test_plain_message_kept(self):
        assert "Shopify file is empty." in error_box_html("Shopify file is empty.")


class TestSuccessBox:
    
    def test_message_and_warnings_escaped(self):
        markup = success_box_html("Done <b>", ["No matches <script>"])
        assert "<b>" not in markup
        assert "<script>" not in markup
        assert "No matches &lt;script&gt;" in markup
    
    def test_no_warnings(self):
        assert "warning-note" not in success_box_html("Done", [])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
