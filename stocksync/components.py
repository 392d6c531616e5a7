"""
HTML snippets for the Streamlit status banners.

Messages can carry uploaded file names, so every dynamic value is escaped.
"""

import html
from typing import List


def error_box_html(message: str, title: str = "Error") -> str:
    return f"""
        <div class="error-box">
            <div class="title">{html.escape(title)}</div>
            <div class="message">{html.escape(message)}</div>
        </div>
    """


def success_box_html(message: str, warnings: List[str]) -> str:
    warnings_html = "".join(f'<div class="warning-note">{html.escape(w)}</div>' for w in warnings)
    return f"""
        <div class="success-box">
            <div class="title">Success!</div>
            <div class="message">{html.escape(message)}</div>
            {warnings_html}
        </div>
    """
