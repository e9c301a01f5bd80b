"""Tests for archivetype.__init__ public API."""

import io

import pytest

import archivetype
from archivetype._constants import BUFFER_SIZE_ENV_VAR, DEFAULT_BUFFER_SIZE


class TestBufferSize:
    """Buffer size global state via set_buffer_size() and get_buffer_size()."""

    def test_default(self):
        assert archivetype.get_buffer_size() == DEFAULT_BUFFER_SIZE == 8024

    def test_set_and_get_roundtrip(self):
        archivetype.set_buffer_size(4096)
        assert archivetype.get_buffer_size() == 4096

    @pytest.mark.parametrize("invalid", [0, -5, 1.5, "1024", None, True])
    def test_invalid_size_raises(self, invalid):
        with pytest.raises(ValueError, match="positive integer"):
            archivetype.set_buffer_size(invalid)

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv(BUFFER_SIZE_ENV_VAR, "3")
        assert archivetype.get_buffer_size() == 3

    def test_explicit_setting_beats_env_var(self, monkeypatch):
        monkeypatch.setenv(BUFFER_SIZE_ENV_VAR, "3")
        archivetype.set_buffer_size(10)
        assert archivetype.get_buffer_size() == 10

    def test_malformed_env_var_raises(self, monkeypatch):
        monkeypatch.setenv(BUFFER_SIZE_ENV_VAR, "lots")
        with pytest.raises(ValueError, match=BUFFER_SIZE_ENV_VAR):
            archivetype.get_buffer_size()

    def test_non_positive_env_var_raises(self, monkeypatch):
        monkeypatch.setenv(BUFFER_SIZE_ENV_VAR, "0")
        with pytest.raises(ValueError):
            archivetype.get_buffer_size()

    def test_copy_uses_configured_size(self):
        reads = []

        class Source:
            def __init__(self):
                self._data = io.BytesIO(b"x" * 10)

            def read(self, size):
                reads.append(size)
                return self._data.read(size)

        archivetype.set_buffer_size(4)
        assert archivetype.copy_stream(Source(), io.BytesIO()) == 10
        assert set(reads) == {4}


class TestVerbose:
    """verbose() logging configuration."""

    @pytest.mark.parametrize("level", [True, False, "info", "debug"])
    def test_valid_levels_accepted(self, level):
        archivetype.verbose(level)

    @pytest.mark.parametrize("invalid", ["warning", "error", 42, None, []])
    def test_invalid_level_raises_valueerror(self, invalid):
        with pytest.raises(ValueError) as exc_info:
            archivetype.verbose(invalid)

        assert "Invalid verbose level" in str(exc_info.value)


class TestPublicApi:
    def test_all_names_exported(self):
        for name in archivetype.__all__:
            assert hasattr(archivetype, name)

    def test_core_has_no_remote_surface(self):
        assert "download" not in archivetype.__all__
        assert "open_remote" not in archivetype.__all__
        assert not hasattr(archivetype, "download")

    def test_version_string(self):
        assert isinstance(archivetype.__version__, str)

    def test_exceptions_share_base(self):
        for exc in (
            archivetype.UnknownFormatError,
            archivetype.InvalidDestinationError,
            archivetype.ArchiveIOError,
            archivetype.ArchivePathError,
        ):
            assert issubclass(exc, archivetype.ArchiveTypeError)
