"""
Stage remote archives (S3, GCS, Azure, HTTP) into local files.

Optional: requires the ``remote`` extra (``pip install archivetype[remote]``).
The core package never touches the network; this module is imported only
on request and feeds obstore readers into archivetype.io.copy.

Usage:
    from archivetype.remote import download

    download("s3://bucket/backups/site.tar.gz", "/tmp/site.tar.gz")
"""

try:
    import obstore as obs
except ImportError as e:
    raise ImportError(
        "archivetype.remote requires obstore.\n"
        "Install with: pip install archivetype[remote]"
    ) from e

from archivetype._constants import REMOTE_STORE_CLASSES
from archivetype._exceptions import ArchiveIOError
from archivetype._logging import get_logger
from archivetype.io import PathType, close_quietly, copy

logger = get_logger(__name__)


def _create_store(url: str):
    """Build the obstore store matching the URL scheme (case-insensitive)."""
    scheme, separator, _ = url.partition("://")
    class_name = REMOTE_STORE_CLASSES.get(scheme.lower()) if separator else None
    if class_name is None:
        raise ArchiveIOError(
            f"Unsupported URL scheme: {url}\n"
            f"Supported: {', '.join(f'{s}://' for s in REMOTE_STORE_CLASSES)}"
        )

    store_class = getattr(obs.store, class_name)
    logger.debug(f"Using {class_name} for {url}")
    return store_class.from_url(url)


def open_remote(url: str, store=None):
    """
    Open a remote object for sequential reading.

    Args:
        url: Object URL (e.g., "s3://bucket/backup.tar.gz"), or the object
            path inside ``store`` when one is given
        store: Optional pre-configured obstore ObjectStore

    Returns:
        obstore ReadableFile (supports read(size) and close())
    """
    if store is None:
        store = _create_store(url)
        path = ""
    else:
        path = url

    try:
        return obs.open_reader(store, path)
    except Exception as e:
        raise ArchiveIOError(f"Failed to open {url}: {e}") from e


def download(
    url: str,
    destination: PathType,
    store=None,
    buffer_size: int | None = None,
) -> int:
    """
    Copy a remote object into a local file.

    Args:
        url: Object URL, or object path inside ``store``
        destination: Local file path (created or truncated)
        store: Optional pre-configured obstore ObjectStore
        buffer_size: Chunk size in bytes

    Returns:
        Number of bytes written
    """
    reader = open_remote(url, store=store)
    try:
        count = copy(reader, destination, buffer_size)
    except (ArchiveIOError, ValueError):
        raise
    except Exception as e:
        # obstore transport errors are not all OSError subclasses
        raise ArchiveIOError(f"Failed to download {url}: {e}") from e
    finally:
        close_quietly(reader)

    logger.info(f"Downloaded {count} bytes from {url} to {destination}")
    return count
