from .keys import KeyBuilder
from .reader import CounterReader
from .store import StoreClient

__all__ = ["CounterReader", "KeyBuilder", "StoreClient"]
