"""Tests for reference parsing."""

import pytest

from git_link.core.errors import FormatError
from git_link.core.models import Local, Reference, Remote
from git_link.core.reference import format_reference, parse_reference


class TestParseReference:
    """Test cases for parse_reference."""

    def test_full_reference(self) -> None:
        ref = parse_reference("localhost:/a/b.txt::master")
        assert ref == Reference(
            access_point="localhost", location="/a/b.txt", object_expression="master"
        )

    def test_bare_path_defaults_to_localhost(self) -> None:
        ref = parse_reference("/a/b.txt")
        assert ref.access_point == "localhost"
        assert ref.location == "/a/b.txt"
        assert ref.object_expression == ""

    def test_no_object_delimiter(self) -> None:
        """Without '::' the expression is empty and the head splits on the first ':'."""
        for raw, access_point, location in [
            ("host:/srv/repo.git", "host", "/srv/repo.git"),
            ("host:path:with:colons", "host", "path:with:colons"),
            ("relative/file", "localhost", "relative/file"),
            ("", "localhost", ""),
        ]:
            ref = parse_reference(raw)
            assert ref.access_point == access_point
            assert ref.location == location
            assert ref.object_expression == ""

    def test_expression_is_text_after_delimiter(self) -> None:
        ref = parse_reference("build:/srv/repo.git::v1.2:src/main.c")
        assert ref.access_point == "build"
        assert ref.location == "/srv/repo.git"
        assert ref.object_expression == "v1.2:src/main.c"

    def test_expression_with_reflog_date(self) -> None:
        ref = parse_reference("/home/me/proj/notes.org::master@{2009-06-21}")
        assert ref.location == "/home/me/proj/notes.org"
        assert ref.object_expression == "master@{2009-06-21}"

    def test_empty_expression_after_delimiter(self) -> None:
        ref = parse_reference("localhost:/a::")
        assert ref.object_expression == ""
        assert ref.location == "/a"

    def test_multiple_delimiters_rejected(self) -> None:
        for raw in ["a::b::c", "localhost:/a::master::x", "::::", "h:/p::a:b::"]:
            with pytest.raises(FormatError):
                parse_reference(raw)

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="at most once"):
            parse_reference("x::y::z")

    def test_target_variant(self) -> None:
        assert parse_reference("/a").target == Local()
        assert parse_reference("build:/a").target == Remote(host="build")
        assert parse_reference("/a").is_local
        assert not parse_reference("build:/a").is_local


class TestFormatReference:
    """Test cases for format_reference."""

    def test_format(self) -> None:
        ref = Reference("localhost", "/a/b.txt", "master")
        assert format_reference(ref) == "localhost:/a/b.txt::master"

    def test_format_without_expression(self) -> None:
        assert format_reference(Reference("host", "/repo.git")) == "host:/repo.git"

    def test_parses_back(self) -> None:
        for ref in [
            Reference("localhost", "/a/b.txt", "master@{2020-01-01}"),
            Reference("build", "/srv/repo.git", "v1:dir/file.py"),
            Reference("localhost", "/x", ""),
        ]:
            assert parse_reference(format_reference(ref)) == ref
