from indexregistry.clients.memory.client import MemoryIndexClient

__all__ = ["MemoryIndexClient"]
