"""
Storage for Notion OAuth token records.

Records live only as long as the process. Callers depend on the ``TokenStore``
interface through ``get_token_store`` so a persistent backend can be swapped in
without touching them.
"""

import threading
from typing import Dict, Optional

from app.models.schemas import NotionTokenRecord


class TokenStore:
    """Keyed store of token records, looked up by Notion bot ID."""

    def get(self, bot_id: str) -> Optional[NotionTokenRecord]:
        raise NotImplementedError

    def put(self, record: NotionTokenRecord) -> None:
        raise NotImplementedError

    def first(self) -> Optional[NotionTokenRecord]:
        """Earliest stored record. Only meaningful with a single connected workspace."""
        raise NotImplementedError

    def lookup(self, bot_id: Optional[str] = None) -> Optional[NotionTokenRecord]:
        if bot_id:
            return self.get(bot_id)
        return self.first()


class InMemoryTokenStore(TokenStore):
    """Dict-backed store, cleared on restart."""

    def __init__(self):
        self._records: Dict[str, NotionTokenRecord] = {}
        self._lock = threading.Lock()

    def get(self, bot_id: str) -> Optional[NotionTokenRecord]:
        with self._lock:
            return self._records.get(bot_id)

    def put(self, record: NotionTokenRecord) -> None:
        with self._lock:
            self._records[record.bot_id] = record

    def first(self) -> Optional[NotionTokenRecord]:
        with self._lock:
            return next(iter(self._records.values()), None)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


_token_store = InMemoryTokenStore()


def get_token_store() -> TokenStore:
    """
    Get the process-wide token store.

    This is a dependency that will be used in FastAPI route functions.
    """
    return _token_store
