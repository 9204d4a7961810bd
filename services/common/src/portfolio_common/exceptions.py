"""Storage exceptions shared across services."""


class StorageUploadError(Exception):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class StorageDownloadError(Exception):
    """Raised when downloading a file from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to download '{object_name}' from storage")


class StorageObjectNotFoundError(StorageDownloadError):
    """Raised when the requested object does not exist in storage."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        super().__init__(object_name, cause)
        self.args = (f"Object '{object_name}' not found in storage",)
