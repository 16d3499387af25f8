"""Tests for tailpane.stream.sources."""

import pytest

from tailpane.errors import StreamError
from tailpane.stream.sources import command_source, file_source, is_remote_path


class TestIsRemotePath:
    @pytest.mark.parametrize(
        "path",
        [
            "https://example.com/build.log",
            "sftp://host/var/log/syslog",
            "/ssh:build-host:/var/log/app.log",
            "deploy@build-host:/var/log/app.log",
            "build-host:/var/log/app.log",
        ],
    )
    def test_remote(self, path: str) -> None:
        assert is_remote_path(path)

    @pytest.mark.parametrize(
        "path",
        ["/var/log/app.log", "build.log", "./logs/out.txt", "~/notes.txt", "logs/a:b.txt"],
    )
    def test_local(self, path: str) -> None:
        assert not is_remote_path(path)


class TestFileSource:
    def test_key_is_absolute_path(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "build.log").write_text("")
        monkeypatch.chdir(tmp_path)

        source = file_source("build.log")

        expected = str((tmp_path / "build.log").resolve())
        assert source.key == expected
        assert source.kind == "file"
        assert source.argv == ("tail", "-f", expected)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(StreamError, match="No such file"):
            file_source(str(tmp_path / "nope.log"))

    def test_directory_is_not_a_file(self, tmp_path) -> None:
        with pytest.raises(StreamError, match="No such file"):
            file_source(str(tmp_path))

    def test_remote_rejected(self) -> None:
        with pytest.raises(StreamError, match="Remote files cannot be tailed"):
            file_source("/ssh:build-host:/var/log/app.log")


class TestCommandSource:
    def test_key_is_quoted_command_line(self) -> None:
        source = command_source(["make", "-C", "my dir"])
        assert source.key == "make -C 'my dir'"
        assert source.kind == "command"
        assert source.argv == ("make", "-C", "my dir")

    @pytest.mark.parametrize("argv", [[], [""]])
    def test_empty_command(self, argv) -> None:
        with pytest.raises(StreamError, match="No command given"):
            command_source(argv)
