from farmstead.storage.base import Storage
from farmstead.storage.database import DatabaseStorage
from farmstead.storage.memory import MemStorage

__all__ = ["Storage", "DatabaseStorage", "MemStorage"]
