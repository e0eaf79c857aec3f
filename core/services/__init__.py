"""
Core services shared by the client.
"""
from .lazy_value import LazyValue
from .list_decoder import decode_list, single, many
from .structured_logger import StructuredFormatter, configure_logging

__all__ = [
    'LazyValue',
    'decode_list',
    'single',
    'many',
    'StructuredFormatter',
    'configure_logging',
]
