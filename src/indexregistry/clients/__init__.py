"""Index client layer — Pluggable bindings for search backends.

Built-in clients:
  - elasticsearch: Elasticsearch v8+ (``elasticsearch`` package)
  - opensearch: OpenSearch v2+ (``opensearch-py`` package)
  - memory: in-process dictionaries, no backend required

Implement ``IndexClient`` to connect your own search backend.
"""
