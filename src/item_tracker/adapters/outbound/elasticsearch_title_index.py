"""Elasticsearch-backed title index.

Each created item is appended as a ``{"text": title}`` document. The
index is created with an explicit text mapping for that one field and
nothing links a document back to its item id.
"""

from __future__ import annotations

from typing import Any

from elasticsearch import ApiError, BadRequestError, Elasticsearch, TransportError

from item_tracker.domain.entities import TitleDocument
from item_tracker.infrastructure.config import SearchConfig
from item_tracker.infrastructure.logging import get_logger
from item_tracker.ports.outbound.errors import StoreConnectionError, StoreError

STORE_NAME = "index"

_ALREADY_EXISTS = "resource_already_exists_exception"

logger = get_logger(__name__)


def build_elasticsearch_client(config: SearchConfig) -> Elasticsearch:
    """Create the Elasticsearch client shared by every request."""
    return Elasticsearch(
        config.node_url,
        request_timeout=config.request_timeout_seconds,
    )


class ElasticsearchTitleIndex:
    """Title index implementing TitleIndexPort on one Elasticsearch index."""

    def __init__(self, client: Elasticsearch, index_name: str = "items") -> None:
        """Initialize the index adapter.

        Args:
            client: Elasticsearch client.
            index_name: Name of the index holding title documents.
        """
        self._client = client
        self._index_name = index_name

    @property
    def index_name(self) -> str:
        return self._index_name

    def ensure_index(self) -> bool:
        """Create the index with its text mapping unless it exists.

        Returns:
            True if this call created the index. False if it was already
            there, including when another process created it first.
        """
        if self._client.ping():
            logger.info("search_cluster_reachable", index=self._index_name)
        else:
            logger.warning("search_cluster_unreachable", index=self._index_name)

        try:
            if self._client.indices.exists(index=self._index_name):
                logger.info("search_index_exists", index=self._index_name)
                return False
            self._client.indices.create(
                index=self._index_name,
                mappings=TitleDocument.mapping(),
            )
        except BadRequestError as e:
            if e.error != _ALREADY_EXISTS:
                raise StoreError(STORE_NAME, str(e)) from e
            logger.info("search_index_exists", index=self._index_name)
            return False
        except TransportError as e:
            raise StoreConnectionError(STORE_NAME, str(e)) from e
        except ApiError as e:
            raise StoreError(STORE_NAME, str(e)) from e

        logger.info("search_index_created", index=self._index_name)
        return True

    def index_document(self, document: TitleDocument) -> None:
        try:
            self._client.index(index=self._index_name, document=document.to_source())
        except TransportError as e:
            raise StoreConnectionError(STORE_NAME, str(e)) from e
        except ApiError as e:
            raise StoreError(STORE_NAME, str(e)) from e

    def match_query(self, field: str, text: str) -> list[dict[str, Any]]:
        try:
            response = self._client.search(
                index=self._index_name,
                query={"match": {field: text}},
            )
        except TransportError as e:
            raise StoreConnectionError(STORE_NAME, str(e)) from e
        except ApiError as e:
            raise StoreError(STORE_NAME, str(e)) from e

        return list(response["hits"]["hits"])
