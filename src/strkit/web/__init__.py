"""
Web helpers subpackage - no external dependencies.

General-purpose replacements for the CMS helpers string handling leans on:
tag stripping, key/slug sanitization, accent removal, email shape checks
and secure random strings.
"""

from strkit.web.tags import strip_all_tags

from strkit.web.keys import (
    sanitize_key,
    sanitize_title,
)

from strkit.web.accents import remove_accents

from strkit.web.email import is_email

from strkit.web.tokens import generate_password

__all__ = [
    # tags
    "strip_all_tags",
    # keys
    "sanitize_key",
    "sanitize_title",
    # accents
    "remove_accents",
    # email
    "is_email",
    # tokens
    "generate_password",
]
