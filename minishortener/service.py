"""Session facade driven by a presentation layer

ShortenerSession is the single entry point a UI (or any other driver) uses.
It wires the registry, statistics, and the clipboard copy tracker together,
and turns rejected submissions into plain SubmitResult values so the core
never decides how an error is displayed.

Example:
    >>> session = ShortenerSession()
    >>> result = session.submit('https://example.com')
    >>> result.ok
    True
    >>> session.click(result.record.id)
    >>> session.stats().total_clicks
    1
    >>> session.submit('not a url').error_code
    'registry:invalid_url'
"""

import asyncio
import logging

from minishortener.constants import Event, SHORT_URL_BASE
from minishortener.models import ShortURLRecord, RegistryStats, SubmitResult
from minishortener.registry import ShortURLRegistry
from minishortener.stats import StatsAggregator
from minishortener.clipboard import Clipboard, CopyTracker, MemoryClipboard
from minishortener.exceptions import RegistryError
from minishortener.types import RecordId
from minishortener.utils.helpers import get_short_url


logger = logging.getLogger(__name__)


class ShortenerSession:
    """Process-lifetime shortener state and the operations a UI triggers

    Attributes:
        registry (ShortURLRegistry):
            Owner of all records.
        statistics (StatsAggregator):
            Derived totals over the registry.
        tracker (CopyTracker):
            Clipboard writes and the "copied" indicator.
    """

    def __init__(
        self,
        registry: ShortURLRegistry | None = None,
        clipboard: Clipboard | None = None,
        base_url: str = SHORT_URL_BASE,
        **tracker_options,
    ):
        self.registry = registry if registry is not None else ShortURLRegistry()
        self.statistics = StatsAggregator(self.registry)
        self.tracker = CopyTracker(
            clipboard if clipboard is not None else MemoryClipboard(),
            is_live=self.registry.__contains__,
            **tracker_options,
        )
        self.base_url = base_url

    @property
    def copied_id(self) -> RecordId | None:
        return self.tracker.copied_id

    def submit(self, original_url: str) -> SubmitResult:
        """Try to shorten `original_url`

        Returns:
            SubmitResult:
                `record` set on success; `error_code` and `message` set when the
                registry rejected the submission (registry left unchanged).
        """
        try:
            record = self.registry.add(original_url)
        except RegistryError as e:
            logger.info(
                'Submission rejected.',
                extra={'errorCode': e.error_code, 'event': Event.RECORD_REJECTED},
            )
            return SubmitResult(error_code=e.error_code, message=str(e))

        logger.info('Shortened URL.', extra={'recordId': record.id, 'shortUrl': self.short_url(record)})
        return SubmitResult(record=record)

    def click(self, record_id: RecordId) -> None:
        self.registry.increment_clicks(record_id)

    def delete(self, record_id: RecordId) -> None:
        self.registry.remove(record_id)
        self.tracker.forget(record_id)

    def copy(self, record_id: RecordId) -> asyncio.Task | None:
        """Copy the short URL of a record to the clipboard (fire-and-forget)

        Returns:
            asyncio.Task | None: the scheduled write, or None for an unknown id.
        """
        record = self.registry.get(record_id)
        if record is None:
            return None
        return self.tracker.copy(self.short_url(record), record_id)

    def records(self) -> tuple[ShortURLRecord, ...]:
        return self.registry.list()

    def stats(self) -> RegistryStats:
        return self.statistics.summary()

    def short_url(self, record: ShortURLRecord) -> str:
        return get_short_url(record.shortcode, base=self.base_url)

    def close(self) -> None:
        self.tracker.close()
