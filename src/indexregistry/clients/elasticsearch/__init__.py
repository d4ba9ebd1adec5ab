from indexregistry.clients.elasticsearch.client import ElasticsearchIndexClient

__all__ = ["ElasticsearchIndexClient"]
