from indexregistry.clients.opensearch.client import OpenSearchIndexClient

__all__ = ["OpenSearchIndexClient"]
