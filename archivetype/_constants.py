"""
Global constants for archivetype.

Organized by: Stream Copy, Remote Staging.
"""

# Stream Copy
DEFAULT_BUFFER_SIZE = 8024
"""Default chunk size in bytes for copy operations."""

BUFFER_SIZE_ENV_VAR = "ARCHIVETYPE_BUFFER_SIZE"
"""Environment variable overriding DEFAULT_BUFFER_SIZE at first use."""


# Remote Staging (archivetype.remote, optional obstore extra)
REMOTE_STORE_CLASSES = {
    "s3": "S3Store",
    "gs": "GCSStore",
    "az": "AzureStore",
    "azure": "AzureStore",
    "http": "HTTPStore",
    "https": "HTTPStore",
}
"""URL scheme → obstore.store class name used by archivetype.remote."""
