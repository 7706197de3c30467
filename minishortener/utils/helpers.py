"""Helper utilities for the shortener core.

Functions:
    get_short_url(shortcode, base=SHORT_URL_BASE) -> str
        Get string representation of short URL for a given shortcode
    today() -> date
        Current local calendar date, used for record creation dates
"""

from datetime import date

from minishortener.constants import SHORT_URL_BASE


def get_short_url(shortcode: str, base: str = SHORT_URL_BASE) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base (str): public base URL the shortcode is appended to

    Returns:
        str: short url string representation

    Example:
        >>> get_short_url('abc123')
        'https://short.ly/abc123'
    """
    return f'{base.rstrip("/")}/{shortcode}'


def today() -> date:
    """Return the current local calendar date."""
    return date.today()
