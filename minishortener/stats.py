"""Usage statistics derived from a registry

StatsAggregator holds no state of its own: every figure is recomputed from
`registry.list()` on each call, so it can never go stale.

Example:
    >>> registry = ShortURLRegistry()
    >>> stats = StatsAggregator(registry)
    >>> record = registry.add('https://example.com')
    >>> registry.increment_clicks(record.id)
    >>> stats.total_urls(), stats.total_clicks()
    (1, 1)
"""

from minishortener.models import RegistryStats
from minishortener.registry import ShortURLRegistry


class StatsAggregator:
    """Derive totals from the current contents of a ShortURLRegistry."""

    def __init__(self, registry: ShortURLRegistry):
        self.registry = registry

    def total_urls(self) -> int:
        return len(self.registry.list())

    def total_clicks(self) -> int:
        return sum(record.clicks for record in self.registry.list())

    def summary(self) -> RegistryStats:
        """Return totals, remaining capacity and the per-record listing in one snapshot."""
        records = self.registry.list()
        return RegistryStats(
            total_urls=len(records),
            total_clicks=sum(record.clicks for record in records),
            capacity=self.registry.capacity,
            remaining=self.registry.capacity - len(records),
            records=records,
        )
