"""Base repository class with common functionality."""

from typing import Optional

from google.cloud import firestore

from ...config.logging import LoggerMixin
from ..database import get_client


class BaseRepository(LoggerMixin):
    """Base repository bound to a single Firestore collection."""

    collection_name: str = ""

    def __init__(self, client: Optional[firestore.AsyncClient] = None):
        # Resolved lazily so constructing a repository never needs credentials
        self._client = client

    @property
    def client(self) -> firestore.AsyncClient:
        if self._client is None:
            self._client = get_client()
        return self._client

    @property
    def collection(self) -> firestore.AsyncCollectionReference:
        return self.client.collection(self.collection_name)
