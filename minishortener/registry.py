"""Bounded, insertion-ordered registry of shortened URL records

Responsibilities:
    - Validate submissions and mint records with a unique id and shortcode;
    - Enforce the fixed capacity;
    - Count simulated clicks per record;
    - Expose read-only snapshots in insertion order.

Classes:
    ShortURLRegistry:
        In-memory owner of all ShortURLRecord instances.

Example:
    >>> from minishortener.registry import ShortURLRegistry

    >>> registry = ShortURLRegistry()
    >>> record = registry.add('https://example.com')
    >>> record.clicks
    0
    >>> registry.increment_clicks(record.id)
    >>> registry.get(record.id).clicks
    1
    >>> registry.remove(record.id)
    >>> len(registry)
    0
"""

import logging
import itertools
import dataclasses
from collections.abc import Iterator

from beartype import beartype

from minishortener.models import ShortURLRecord
from minishortener.constants import Limits, Event
from minishortener.types import ShortcodeFactory, URLValidator, DateSource
from minishortener.utils.helpers import today
from minishortener.utils.shortener import generate_shortcode
from minishortener.utils.validators import validate_url
from minishortener.exceptions import (
    EmptyInputError,
    InvalidURLError,
    CapacityExceededError,
    ShortcodeExhaustedError,
)


logger = logging.getLogger(__name__)


class ShortURLRegistry:
    """In-memory registry of shortened URL records

    Records are kept in a dict keyed by id; dict order is insertion order and
    replacing a value keeps its position, so mutation never reorders records.
    Ids come from a private monotonic counter and are never reused within one
    registry, even after removal.

    Attributes:
        capacity (int):
            Maximum number of records held at once.

    Methods:
        add(original_url: str) -> ShortURLRecord:
            Validate and append a new record.
            Raises EmptyInputError, InvalidURLError, CapacityExceededError or
            ShortcodeExhaustedError; the registry is unchanged on any of them.

        remove(record_id: int) -> None:
            Drop a record if present. Idempotent.

        increment_clicks(record_id: int) -> None:
            Add exactly one click to a record if present.

        list() -> tuple[ShortURLRecord, ...]:
            Snapshot of held records in insertion order.
    """

    def __init__(
        self,
        capacity: int = Limits.CAPACITY,
        shortcode_generator: ShortcodeFactory = generate_shortcode,
        validator: URLValidator = validate_url,
        date_source: DateSource = today,
    ):
        """Initialize an empty registry

        Args:
            capacity (int):
                Maximum number of records. Defaults to 5.

            shortcode_generator (Callable[[], str]):
                Zero-argument factory for shortcodes. Defaults to random base36 codes.

            validator (Callable[[str], bool]):
                URL validator. Defaults to validate_url().

            date_source (Callable[[], date]):
                Source of record creation dates. Defaults to today's local date.
        """
        if capacity <= 0:
            raise ValueError(f'Capacity must be a positive integer (given value: {capacity}).')

        self.capacity = capacity
        self._generate_shortcode = shortcode_generator
        self._validate = validator
        self._today = date_source
        self._ids = itertools.count(1)
        self._records: dict[int, ShortURLRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[ShortURLRecord]:
        return iter(self.list())

    @property
    def remaining(self) -> int:
        return self.capacity - len(self._records)

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self.capacity

    @beartype
    def add(self, original_url: str) -> ShortURLRecord:
        """Create a record for `original_url` and append it

        Checks run in this order: blank input, URL validity, capacity. The
        stored `original_url` is exactly the submitted string.

        Args:
            original_url (str):
                Candidate absolute URL.

        Returns:
            ShortURLRecord: the newly created record (clicks == 0).

        Raises:
            EmptyInputError:
                If `original_url` is empty or whitespace only.
            InvalidURLError:
                If `original_url` is not a valid absolute URL.
            CapacityExceededError:
                If the registry already holds `capacity` records.
            ShortcodeExhaustedError:
                If every attempt produced a shortcode already held by another record.
        """
        if not original_url.strip():
            raise EmptyInputError('Please enter a URL.')
        if not self._validate(original_url):
            raise InvalidURLError(f'Not a valid absolute URL: {original_url!r}.')
        if self.is_full:
            raise CapacityExceededError(f'Maximum {self.capacity} URLs allowed.')

        shortcode = self._unique_shortcode()
        record = ShortURLRecord(
            id=next(self._ids),
            original_url=original_url,
            shortcode=shortcode,
            created_at=self._today(),
            clicks=0,
        )
        self._records[record.id] = record

        logger.debug(
            'Record added.',
            extra={'recordId': record.id, 'shortcode': record.shortcode, 'event': Event.RECORD_ADDED},
        )
        return record

    @beartype
    def remove(self, record_id: int) -> None:
        """Remove the record with `record_id`; no-op if it is not held."""
        if self._records.pop(record_id, None) is not None:
            logger.debug('Record removed.', extra={'recordId': record_id, 'event': Event.RECORD_REMOVED})

    @beartype
    def increment_clicks(self, record_id: int) -> None:
        """Add one click to the record with `record_id`; no-op if it is not held."""
        record = self._records.get(record_id)
        if record is None:
            return

        self._records[record_id] = dataclasses.replace(record, clicks=record.clicks + 1)
        logger.debug(
            'Record clicked.',
            extra={'recordId': record_id, 'clicks': record.clicks + 1, 'event': Event.RECORD_CLICKED},
        )

    @beartype
    def get(self, record_id: int) -> ShortURLRecord | None:
        return self._records.get(record_id)

    def list(self) -> tuple[ShortURLRecord, ...]:
        """Return a read-only snapshot of held records in insertion order."""
        return tuple(self._records.values())

    def _unique_shortcode(self) -> str:
        held = {record.shortcode for record in self._records.values()}
        for _ in range(Limits.SHORTCODE_ATTEMPTS):
            shortcode = self._generate_shortcode()
            if shortcode not in held:
                return shortcode
        raise ShortcodeExhaustedError(f'Could not mint a unique shortcode in {Limits.SHORTCODE_ATTEMPTS} attempts.')
