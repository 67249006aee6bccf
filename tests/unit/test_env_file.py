"""Tests for the TAG_VERSION env file store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from version_bump_hooks.exceptions import ConfigError, ConfigNotFoundError
from version_bump_hooks.project.env_file import (
    get_env_value,
    read_tag_version,
    set_env_value,
    write_tag_version,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestSetEnvValue:
    """Tests for set_env_value()."""

    def test_replaces_existing_entry(self):
        """Unrelated lines survive and trailing whitespace is trimmed."""
        content = "FOO=bar\nTAG_VERSION=1.0.0.0\n"
        assert set_env_value(content, "2.1.0.5") == "FOO=bar\nTAG_VERSION=2.1.0.5"

    def test_replaces_in_place(self):
        """The entry keeps its position among other lines."""
        content = "A=1\nTAG_VERSION=0.0.0.0\nB=2\n"
        assert set_env_value(content, "1.2.3.4") == "A=1\nTAG_VERSION=1.2.3.4\nB=2"

    def test_appends_when_missing(self):
        assert set_env_value("FOO=bar\n", "0.1.0.1") == "FOO=bar\nTAG_VERSION=0.1.0.1"

    def test_appends_on_new_line(self):
        """Content without a final newline is not glued to the new entry."""
        assert set_env_value("FOO=bar", "0.1.0.1") == "FOO=bar\nTAG_VERSION=0.1.0.1"

    def test_empty_content(self):
        assert set_env_value("", "3.4.5.6") == "TAG_VERSION=3.4.5.6"

    def test_similar_key_untouched(self):
        """Keys that merely end in TAG_VERSION are different keys."""
        content = "OLD_TAG_VERSION=9.9.9.9\n"
        assert set_env_value(content, "1.0.1.0") == (
            "OLD_TAG_VERSION=9.9.9.9\nTAG_VERSION=1.0.1.0"
        )

    def test_crlf_line_endings_kept(self):
        content = "FOO=bar\r\nTAG_VERSION=1.0.0.0\r\nB=2\r\n"
        assert set_env_value(content, "2.1.0.5") == "FOO=bar\r\nTAG_VERSION=2.1.0.5\r\nB=2"

    def test_crlf_append(self):
        assert set_env_value("FOO=bar\r\n", "0.1.0.1") == "FOO=bar\r\nTAG_VERSION=0.1.0.1"

    def test_comments_preserved(self):
        content = "# deployment settings\nTAG_VERSION=1.1.1.1\n\n# end\n"
        assert set_env_value(content, "2.2.2.2") == (
            "# deployment settings\nTAG_VERSION=2.2.2.2\n\n# end"
        )


class TestGetEnvValue:
    """Tests for get_env_value()."""

    def test_present(self):
        assert get_env_value("FOO=bar\nTAG_VERSION=2.3.5.6") == "2.3.5.6"

    def test_absent(self):
        assert get_env_value("FOO=bar\n") is None

    def test_empty_value_is_absent(self):
        assert get_env_value("TAG_VERSION=\n") is None

    def test_quoted_value(self):
        assert get_env_value('TAG_VERSION="2.3.5.6"\n') == "2.3.5.6"

    def test_single_quoted_value(self):
        assert get_env_value("TAG_VERSION='2.3.5.6'\n") == "2.3.5.6"

    def test_inline_comment_ignored(self):
        assert get_env_value("TAG_VERSION=2.3.5.6 # set by pre-commit\n") == "2.3.5.6"

    def test_crlf_line_endings(self):
        assert get_env_value("FOO=bar\r\nTAG_VERSION=2.3.5.6\r\n") == "2.3.5.6"

    def test_similar_key_ignored(self):
        assert get_env_value("OLD_TAG_VERSION=9.9.9.9\n") is None


class TestReadTagVersion:
    """Tests for read_tag_version()."""

    def test_reads_value(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("FOO=bar\nTAG_VERSION=2.3.5.6")

        assert read_tag_version(env_file) == "2.3.5.6"

    def test_reads_quoted_value_with_comment(self, tmp_path: Path):
        """Quotes and inline comments never leak into the tag name."""
        env_file = tmp_path / ".env"
        env_file.write_text('TAG_VERSION="2.3.5.6"  # deploy\n')

        assert read_tag_version(env_file) == "2.3.5.6"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigNotFoundError, match="not found"):
            read_tag_version(tmp_path / ".env")

    def test_missing_key(self, tmp_path: Path):
        """A missing key is a configuration error."""
        env_file = tmp_path / ".env"
        env_file.write_text("FOO=bar\n")

        with pytest.raises(ConfigError, match="TAG_VERSION not found"):
            read_tag_version(env_file)


class TestWriteTagVersion:
    """Tests for write_tag_version()."""

    def test_creates_file_and_parents(self, tmp_path: Path):
        env_file = tmp_path / "build" / ".env"

        write_tag_version(env_file, "2.3.5.6")

        assert env_file.read_text() == "TAG_VERSION=2.3.5.6"

    def test_updates_existing_file(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("FOO=bar\nTAG_VERSION=1.0.0.0\n")

        write_tag_version(env_file, "2.1.0.5")

        assert env_file.read_text() == "FOO=bar\nTAG_VERSION=2.1.0.5"

    def test_no_temporary_files_left(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        write_tag_version(env_file, "1.1.1.1")

        assert [p.name for p in tmp_path.iterdir()] == [".env"]

    def test_crlf_file_keeps_line_endings(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_bytes(b"FOO=bar\r\nTAG_VERSION=1.0.0.0\r\nB=2\r\n")

        write_tag_version(env_file, "2.1.0.5")

        assert env_file.read_bytes() == b"FOO=bar\r\nTAG_VERSION=2.1.0.5\r\nB=2"
