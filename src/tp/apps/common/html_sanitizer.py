"""
HTML sanitization utilities for user-generated content.

Provides safe HTML sanitization using Bleach library with configurable
whitelists for tags and attributes.  Used on the HTML produced from the
free-text notes attached to journeys and everything inside them.
"""
import logging
from typing import Dict, List, Optional

import bleach

logger = logging.getLogger(__name__)


class HTMLSanitizer:
    """
    HTML sanitizer with configurable whitelists.

    Uses Bleach library to sanitize HTML content, allowing only specified
    tags and attributes while stripping dangerous content.
    """

    # Tags that markdown rendering of notes can legitimately produce
    DEFAULT_ALLOWED_TAGS = [
        'p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
        'ul', 'ol', 'li', 'dl', 'dt', 'dd',
        'strong', 'em', 'b', 'i', 'code', 'pre',
        'blockquote', 'hr', 'br', 'a', 'abbr',
        'table', 'thead', 'tbody', 'tr', 'th', 'td',
    ]

    DEFAULT_ALLOWED_ATTRIBUTES = {
        'a': ['href', 'title'],
        'abbr': ['title'],
        'th': ['align'],
        'td': ['align'],
    }

    DEFAULT_ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']

    def __init__( self,
                  allowed_tags       : Optional[List[str]]              = None,
                  allowed_attributes : Optional[Dict[str, List[str]]]   = None,
                  allowed_protocols  : Optional[List[str]]              = None,
                  strip              : bool                             = True ):
        """
        Args:
            allowed_tags: List of allowed HTML tags (defaults to DEFAULT_ALLOWED_TAGS)
            allowed_attributes: Dict of tag -> list of allowed attributes
                                (defaults to DEFAULT_ALLOWED_ATTRIBUTES)
            allowed_protocols: List of allowed URL protocols (defaults to DEFAULT_ALLOWED_PROTOCOLS)
            strip: If True, strip disallowed tags; if False, escape them
        """
        self.allowed_tags = allowed_tags or self.DEFAULT_ALLOWED_TAGS
        self.allowed_attributes = allowed_attributes or self.DEFAULT_ALLOWED_ATTRIBUTES
        self.allowed_protocols = allowed_protocols or self.DEFAULT_ALLOWED_PROTOCOLS
        self.strip = strip
        return

    def sanitize( self, html_content: str ) -> str:
        """
        Sanitize HTML content using configured whitelist.

        Returns:
            Sanitized HTML content with only allowed tags/attributes
        """
        if not html_content:
            return ''

        try:
            return bleach.clean(
                html_content,
                tags = self.allowed_tags,
                attributes = self.allowed_attributes,
                protocols = self.allowed_protocols,
                strip = self.strip,
            )
        except Exception as e:
            logger.error( f'Error sanitizing HTML: {e}' )
            # On error, return empty string for safety
            return ''


NOTES_SANITIZER = HTMLSanitizer()


def sanitize_notes_html( html_content: str ) -> str:
    """
    Sanitize HTML rendered from journey notes (details, pros, cons).
    """
    return NOTES_SANITIZER.sanitize( html_content )
