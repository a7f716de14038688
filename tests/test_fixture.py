"""Tests for fixture loading and parsing."""

import pytest

from pointbench.core import (
    ExpectedFixture,
    FixtureFormatError,
    FixtureIOError,
    load_fixture,
    parse_fixture_text,
)


class TestParseFixtureText:
    """Tests for parse_fixture_text."""

    def test_parses_three_fields(self):
        """Fields become float, float, int."""
        fixture = parse_fixture_text("1.5,2.5,3\n")
        assert fixture == ExpectedFixture(1.5, 2.5, 3)
        assert isinstance(fixture.lines, int)

    def test_without_trailing_newline(self):
        """A missing trailing newline is accepted."""
        assert parse_fixture_text("-12.34,56.78,100") == ExpectedFixture(-12.34, 56.78, 100)

    def test_crlf_newline(self):
        """Windows line endings are stripped."""
        assert parse_fixture_text("1.0,2.0,5\r\n").lines == 5

    @pytest.mark.parametrize("content", ["1.5,2.5\n", "1.5,2.5,3,4\n", "\n", ""])
    def test_wrong_field_count(self, content):
        """Anything but three fields is a format error."""
        with pytest.raises(FixtureFormatError):
            parse_fixture_text(content)

    @pytest.mark.parametrize(
        "content",
        [
            "abc,2.5,3\n",
            "1.5,x,3\n",
            "1.5,2.5,three\n",
            "1.5,2.5,3.5\n",
            "1_000,2.5,3\n",
            " 1.5,2.5,3\n",
            "1.5,2.5, 3\n",
            "1.5,2.5,1_0\n",
            "1.5,2.5,\n",
        ],
    )
    def test_non_numeric_fields(self, content):
        """Non-numeric sums or a non-integer count are format errors."""
        with pytest.raises(FixtureFormatError):
            parse_fixture_text(content)

    @pytest.mark.parametrize(
        "content",
        ["nan,0.0,0\n", "0.0,inf,0\n", "infinity,0.0,0\n", "-Infinity,0.0,0\n", "1e400,0.0,0\n"],
    )
    def test_non_finite_sums(self, content):
        """NaN, infinities and out-of-range sums are format errors."""
        with pytest.raises(FixtureFormatError):
            parse_fixture_text(content)

    def test_exponent_and_sign_notation(self):
        """Signed and exponent forms are accepted."""
        assert parse_fixture_text("+1.5e1,-.5,+3\n") == ExpectedFixture(15.0, -0.5, 3)

    def test_to_dict(self):
        """Fixture converts to a plain dict."""
        assert parse_fixture_text("1.5,2.5,3\n").to_dict() == {"first": 1.5, "second": 2.5, "lines": 3}


class TestLoadFixture:
    """Tests for load_fixture."""

    def test_loads_file(self, fixture_file):
        """The fixture file is read and parsed."""
        assert load_fixture(fixture_file) == ExpectedFixture(1.5, 2.5, 3)

    def test_missing_file(self, tmp_path):
        """A missing file raises FixtureIOError."""
        with pytest.raises(FixtureIOError) as exc:
            load_fixture(str(tmp_path / "missing.txt"))
        assert isinstance(exc.value.__cause__, OSError)

    def test_reads_fresh_content(self, make_fixture_file):
        """Each call reflects the current file content."""
        path = make_fixture_file("1.0,2.0,3\n")
        assert load_fixture(path).lines == 3
        make_fixture_file("1.0,2.0,7\n")
        assert load_fixture(path).lines == 7
