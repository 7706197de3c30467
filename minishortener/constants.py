from enum import StrEnum


# Public base for rendered short URLs (no real redirect happens behind it)
SHORT_URL_BASE = 'https://short.ly'


class Limits:
    """Fixed registry and shortcode limits."""

    CAPACITY = 5  # Maximum number of records a registry holds
    SHORTCODE_LENGTH = 6
    SHORTCODE_ATTEMPTS = 10  # Tries to mint a shortcode not held by another record
    COPIED_INDICATOR_SECONDS = 2.0  # Lifetime of the "copied" marker after a clipboard write


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        LOG_LEVEL = 'LOG_LEVEL'


class Event(StrEnum):
    """Values of the `event` field attached to structured log records."""

    RECORD_ADDED = 'record_added'
    RECORD_REJECTED = 'record_rejected'
    RECORD_REMOVED = 'record_removed'
    RECORD_CLICKED = 'record_clicked'
    COPY_SUCCEEDED = 'copy_succeeded'
    COPY_FAILED = 'copy_failed'
    COPY_INDICATOR_CLEARED = 'copy_indicator_cleared'
