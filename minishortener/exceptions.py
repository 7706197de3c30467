"""Exceptions raised by the shortener core.

Classes:
    MiniShortenerError:
        Base class for all application-specific errors.

    RegistryError:
        Base class for rejected registry mutations. The registry is left
        unchanged whenever one of these is raised.

    EmptyInputError, InvalidURLError, CapacityExceededError, ShortcodeExhaustedError:
        The reasons `ShortURLRegistry.add()` may reject a submission.

    ClipboardError:
        Raised by clipboard collaborators when a write fails. Never escapes
        CopyTracker; it is logged and swallowed there.

Example:
    >>> from minishortener.exceptions import CapacityExceededError
    >>> CapacityExceededError.error_code
    'registry:capacity_exceeded'
"""


class MiniShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:minishortener_error'


class RegistryError(MiniShortenerError):
    """Base exception for rejected registry mutations."""

    error_code = 'registry:registry_error'


class EmptyInputError(RegistryError):
    """Raised when the submitted URL is empty or blank."""

    error_code = 'registry:empty_input'


class InvalidURLError(RegistryError):
    """Raised when the submitted string is not a valid absolute URL."""

    error_code = 'registry:invalid_url'


class CapacityExceededError(RegistryError):
    """Raised when the registry already holds its maximum number of records."""

    error_code = 'registry:capacity_exceeded'


class ShortcodeExhaustedError(RegistryError):
    """Raised when no shortcode unique among held records could be minted."""

    error_code = 'registry:shortcode_exhausted'


class ClipboardError(MiniShortenerError):
    """Raised when a clipboard write fails."""

    error_code = 'clipboard:clipboard_error'
