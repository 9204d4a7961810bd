from portfolio_common.infrastructure.interfaces import StorageClient, StoredObject

__all__ = ["StorageClient", "StoredObject"]
