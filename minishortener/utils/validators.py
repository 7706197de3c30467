"""URL validation utility

Functions:
    validate_url(candidate) -> bool
        True if the candidate is a syntactically valid absolute URL.

Example:
    >>> from minishortener.utils import validate_url
    >>> validate_url('https://example.com/article/123')
    True
    >>> validate_url('example.com')
    False
    >>> validate_url('')
    False
"""

from urllib.parse import urlparse


def validate_url(candidate: object) -> bool:
    """Check that a candidate string is an absolute URL

    A candidate is accepted when it carries an explicit scheme and a host
    component. There is no scheme allow-list (`ftp://files.example.org` is as
    valid as `https://example.com`) and no network access is performed.

    Args:
        candidate (object):
            Value to validate. Anything other than a non-empty string is rejected,
            as is whitespace inside the scheme or host. Whitespace in the path,
            query or fragment is allowed (`https://example.com/a b` is valid).

    Returns:
        bool:
            True if `candidate` is a valid absolute URL, False otherwise.
            Never raises: parse failures are reported as False.

    Example:
        >>> validate_url('http://[::1')
        False
        >>> validate_url('http://example.com:99999')
        False
    """
    if not isinstance(candidate, str) or not candidate:
        return False

    try:
        components = urlparse(candidate)
        # .port raises ValueError for out-of-range or non-numeric ports
        components.port
    except ValueError:
        return False

    if not components.scheme or not components.hostname:
        return False

    # Whitespace is only fatal in the scheme or authority; paths and queries get percent-encoded
    return not any(character.isspace() for character in components.scheme + components.netloc)
