"""Key-value state stores and typed accessors."""
from .file import JsonFileStore
from .memory import MemoryStore
from .transaction import Transaction
from .typed import Item, Map

__all__ = ["Item", "JsonFileStore", "Map", "MemoryStore", "Transaction"]
