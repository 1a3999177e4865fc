"""Input sanitisation shared by schemas that accept free text"""

import re
import bleach

# Allowed HTML tags for user input
ALLOWED_TAGS = ['b', 'i', 'u', 'em', 'strong', 'p', 'br']

DANGEROUS_PATTERNS = [
    r'<script[^>]*>',
    r'javascript:',
    r'on\w+\s*=',
    r'<iframe',
]


class SafeStringMixin:
    """Mixin for XSS-safe string validation"""
    
    @staticmethod
    def sanitize_html(value: str) -> str:
        """Remove dangerous HTML/JavaScript"""
        if not value:
            return value
        return bleach.clean(value, tags=ALLOWED_TAGS, strip=True)
    
    @staticmethod
    def validate_no_script(value: str) -> str:
        """Block common XSS patterns"""
        if not value:
            return value
        
        for pattern in DANGEROUS_PATTERNS:
            if re.search(pattern, value, re.IGNORECASE):
                raise ValueError("Invalid characters detected")
        
        return value

    @classmethod
    def clean_text(cls, value):
        if value is None:
            return value
        return cls.sanitize_html(cls.validate_no_script(value))


# Largest value an INTEGER primary key column can hold
MAX_ID = 2**63 - 1
MAX_PAGE = 10000
MAX_LIMIT = 100


def validate_pagination(page: int, limit: int) -> tuple[int, int]:
    """Clamp pagination parameters into range"""
    page = max(1, min(page, MAX_PAGE))
    limit = max(1, min(limit, MAX_LIMIT))
    return page, limit
