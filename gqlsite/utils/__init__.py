"""App constants and utilities."""

from .constants import (
    APP_NAME,
    CSS_SITE,
    DEFAULT_OUTPUT_DIR,
    FOOTER_TEMPLATE,
    HTML_TEMPLATE,
    NAV_ITEMS,
    SITE_NAME,
)

__all__ = [
    "APP_NAME",
    "SITE_NAME",
    "DEFAULT_OUTPUT_DIR",
    "NAV_ITEMS",
    "CSS_SITE",
    "HTML_TEMPLATE",
    "FOOTER_TEMPLATE",
]
