"""
Persistence for the recent words history.
"""

from .history_store import InMemoryHistoryStore, FileHistoryStore, WORD_DELIMITER

__all__ = ['InMemoryHistoryStore', 'FileHistoryStore', 'WORD_DELIMITER']
