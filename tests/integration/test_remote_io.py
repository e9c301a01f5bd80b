"""Remote staging through obstore, using an in-memory store."""

import pytest

obs = pytest.importorskip("obstore")

from obstore.store import HTTPStore, MemoryStore  # noqa: E402

from archivetype._exceptions import ArchiveIOError  # noqa: E402
from archivetype.filetype import get_file_type  # noqa: E402
from archivetype.remote import _create_store, download, open_remote  # noqa: E402


@pytest.fixture
def store(payload):
    store = MemoryStore()
    obs.put(store, "backups/site.tar.gz", payload(20000))
    obs.put(store, "empty.zip", b"")
    return store


class TestDownload:
    def test_bytes_identical(self, store, payload, tmp_path):
        target = tmp_path / "site.tar.gz"

        count = download("backups/site.tar.gz", target, store=store)

        assert count == 20000
        assert target.read_bytes() == payload(20000)

    def test_small_buffer(self, store, payload, tmp_path):
        target = tmp_path / "site.tar.gz"
        assert download("backups/site.tar.gz", target, store=store, buffer_size=333) == 20000
        assert target.read_bytes() == payload(20000)

    def test_empty_object(self, store, tmp_path):
        target = tmp_path / "empty.zip"
        assert download("empty.zip", target, store=store) == 0
        assert target.read_bytes() == b""

    def test_missing_object_raises(self, store, tmp_path):
        with pytest.raises(ArchiveIOError):
            download("nope.zip", tmp_path / "nope.zip", store=store)

    def test_downloaded_name_identifies_type(self, store, tmp_path):
        target = tmp_path / "site.tar.gz"
        download("backups/site.tar.gz", target, store=store)
        assert get_file_type(target).suffix == ".tar.gz"


class TestCreateStore:
    def test_scheme_is_case_insensitive(self):
        assert isinstance(_create_store("HTTPS://example.com/dl/site.zip"), HTTPStore)

    @pytest.mark.parametrize(
        "url", ["ftp://example.com/data.zip", "FTP://example.com/data.zip", "backups/site.zip"]
    )
    def test_unsupported_scheme_raises(self, url):
        with pytest.raises(ArchiveIOError, match="Unsupported URL scheme"):
            _create_store(url)


class TestOpenRemote:
    def test_unsupported_scheme_raises(self):
        with pytest.raises(ArchiveIOError, match="Unsupported URL scheme"):
            open_remote("ftp://example.com/data.zip")

    def test_reader_reads_object(self, store):
        reader = open_remote("empty.zip", store=store)
        try:
            assert len(reader.read(100)) == 0
        finally:
            reader.close()
