from minishortener.models import ShortURLRecord, RegistryStats, SubmitResult
from minishortener.registry import ShortURLRegistry
from minishortener.stats import StatsAggregator
from minishortener.clipboard import Clipboard, MemoryClipboard, CopyTracker
from minishortener.service import ShortenerSession


__all__ = [
    'ShortURLRecord',
    'RegistryStats',
    'SubmitResult',
    'ShortURLRegistry',
    'StatsAggregator',
    'Clipboard',
    'MemoryClipboard',
    'CopyTracker',
    'ShortenerSession',
]
