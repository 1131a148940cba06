from .entry_collector_processor import EntryCollectorProcessor

__all__ = [
    'EntryCollectorProcessor',
]
