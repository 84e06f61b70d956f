from typing import Optional

import markdown

from .html_sanitizer import sanitize_notes_html

MARKDOWN_EXTENSIONS = [ 'extra', 'sane_lists' ]


def render_markdown_html( text : Optional[str] ) -> str:
    """
    Render free-text markup to sanitized HTML.  Pure: the same input
    always yields the same output.  None or blank text renders to ''.
    """
    if text is None or not text.strip():
        return ''
    raw_html = markdown.markdown(
        text,
        extensions = MARKDOWN_EXTENSIONS,
        output_format = 'html',
    )
    return sanitize_notes_html( raw_html )
