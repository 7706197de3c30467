from minishortener.utils.config import log_level
from minishortener.utils.helpers import get_short_url, today
from minishortener.utils.shortener import generate_shortcode, generate_counter_shortcode, CounterShortcodeGenerator
from minishortener.utils.validators import validate_url
from minishortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'generate_counter_shortcode',
    'CounterShortcodeGenerator',
    'validate_url',
    'get_short_url',
    'today',
    'log_level',
    'initialize_logging',
]
