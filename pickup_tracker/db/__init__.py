# JSON file persistence
from .json_store import JsonListStore

__all__ = ["JsonListStore"]
