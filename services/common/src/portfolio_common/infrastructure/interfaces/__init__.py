from portfolio_common.infrastructure.interfaces.storage import (
    StorageClient,
    StoredObject,
)

__all__ = ["StorageClient", "StoredObject"]
