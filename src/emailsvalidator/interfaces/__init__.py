from .filter import Filter
from .handler import Handler
from .processor import Processor
from .transform import Transform

__all__ = [
    'Filter',
    'Handler',
    'Processor',
    'Transform',
]
