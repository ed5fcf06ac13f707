"""Tests for timestamp formats."""

from __future__ import annotations

import pytest

from datef.core.instant import Instant
from datef.errors import FormatError, ParseError
from datef.formats import NAMED_FORMATS, Format, FormatKind, new_format
from datef.layout import RFC3339
from datef.units.timezone import Timezone


class TestFormatConstruction:
    """Tests for classifying format specifiers."""

    def test_unix(self):
        """The unix specifier selects whole seconds."""
        f = new_format("unix")
        assert f.kind is FormatKind.UNIX
        assert f.layout is None

    def test_unixms(self):
        """The unixms specifier selects whole milliseconds."""
        f = new_format("unixms")
        assert f.kind is FormatKind.UNIX_MS
        assert f.layout is None

    def test_named(self):
        """A key of the named table resolves to its layout."""
        f = new_format("RFC3339")
        assert f.kind is FormatKind.NAMED
        assert f.layout == RFC3339

    def test_layout(self):
        """Anything else is a custom layout."""
        f = new_format("2006/01/02")
        assert f.kind is FormatKind.LAYOUT
        assert f.layout == "2006/01/02"

    def test_names_are_case_sensitive(self):
        """Differently cased names are custom layouts."""
        assert new_format("UNIX").kind is FormatKind.LAYOUT
        assert new_format("rfc3339").kind is FormatKind.LAYOUT

    def test_construction_never_fails(self):
        """Strings without any chunks are accepted and checked lazily."""
        assert new_format("").kind is FormatKind.LAYOUT
        assert new_format("hello").kind is FormatKind.LAYOUT

    def test_every_named_format_has_description(self):
        """Every named format has a layout and a description."""
        assert "RFC3339" in NAMED_FORMATS
        for name, named in NAMED_FORMATS.items():
            assert named.layout, name
            assert named.description, name

    def test_named_table_is_read_only(self):
        """The named table cannot be modified."""
        with pytest.raises(TypeError):
            NAMED_FORMATS["Mine"] = NAMED_FORMATS["RFC3339"]  # type: ignore[index]


class TestFormatDisplay:
    """Tests for str, repr and equality."""

    def test_display(self):
        """Display gives back the specifier."""
        assert str(new_format("unix")) == "unix"
        assert str(new_format("unixms")) == "unixms"
        assert str(new_format("RFC3339")) == "RFC3339"
        assert new_format("2006/01/02").display() == "2006/01/02"

    def test_repr(self):
        """Repr shows the constructor call."""
        assert repr(new_format("unix")) == "Format('unix')"

    def test_equality(self):
        """Formats compare by kind and text."""
        assert new_format("unix") == Format("unix")
        assert hash(new_format("RFC3339")) == hash(Format("RFC3339"))
        assert new_format("unix") != new_format("unixms")

    def test_named_differs_from_its_layout(self):
        """A named format is not equal to its spelled-out layout."""
        assert new_format("RFC3339") != new_format(RFC3339)


class TestEpochFormats:
    """Tests for unix and unixms parsing and rendering."""

    def test_parse_unix(self):
        """Parse whole seconds."""
        t = new_format("unix").parse("1234567890")
        assert t.to_unix_seconds() == 1234567890

    def test_parse_signs(self):
        """Leading plus and minus signs are accepted."""
        assert new_format("unix").parse("+5").to_unix_seconds() == 5
        assert new_format("unix").parse("-5").to_unix_seconds() == -5

    def test_parse_unixms(self):
        """Parse whole milliseconds."""
        t = new_format("unixms").parse("1500")
        assert t.to_unix_nanos() == 1_500_000_000

    def test_parsed_instants_are_utc(self):
        """Epoch formats produce UTC instants."""
        assert new_format("unix").parse("0").timezone.is_utc

    def test_int64_bounds(self):
        """Values must fit a signed 64-bit integer."""
        f = new_format("unix")
        assert f.parse("-9223372036854775808").to_unix_seconds() == -(2**63)
        with pytest.raises(FormatError):
            f.parse("9223372036854775808")

    @pytest.mark.parametrize("value", ["", "abc", " 5", "5 ", "1e3", "1.5", "+", "0x10", "١٢"])
    def test_rejects_non_integers(self, value):
        """Only plain ASCII decimal integers are accepted."""
        with pytest.raises(FormatError):
            new_format("unix").parse(value)

    def test_error_message(self):
        """The error names the value and the format."""
        with pytest.raises(FormatError) as exc_info:
            new_format("unixms").parse("abc")
        assert str(exc_info.value) == '"abc" is an invalid value for format unixms'
        assert exc_info.value.value == "abc"
        assert exc_info.value.format == "unixms"

    def test_render_truncates_toward_epoch(self):
        """Fractional seconds are dropped toward zero."""
        assert new_format("unix").render(Instant.from_unix_millis(1500)) == "1"
        assert new_format("unix").render(Instant.from_unix_millis(-1500)) == "-1"

    def test_render_unixms(self):
        """Render whole milliseconds."""
        assert new_format("unixms").render(Instant.from_unix_seconds(2)) == "2000"

    def test_render_ignores_display_zone(self):
        """The display zone does not change the epoch count."""
        t = Instant.from_unix_seconds(60, timezone=Timezone.from_hours(3))
        assert new_format("unix").render(t) == "60"

    @pytest.mark.parametrize(
        "nanos,seconds,millis",
        [
            (-1_500_000_001, -1, -1500),
            (-1, 0, 0),
            (0, 0, 0),
            (999_999_999, 0, 999),
            (1_500_000_001, 1, 1500),
        ],
    )
    def test_round_trip_truncates(self, nanos, seconds, millis):
        """Parsing a rendered instant gives it back truncated to the unit."""
        t = Instant.from_unix_nanos(nanos)
        unix = new_format("unix")
        unixms = new_format("unixms")
        assert unix.parse(unix.render(t)) == Instant.from_unix_seconds(seconds)
        assert unixms.parse(unixms.render(t)) == Instant.from_unix_millis(millis)


class TestLayoutFormats:
    """Tests for named and custom layout formats."""

    def test_parse_named(self):
        """Named formats parse through their layout."""
        t = new_format("RFC3339").parse("2024-01-15T00:00:00Z")
        assert t.to_unix_seconds() == 1705276800

    def test_render_named(self):
        """Named formats render through their layout."""
        t = Instant.from_unix_seconds(1700000000)
        assert new_format("RFC3339").render(t) == "2023-11-14T22:13:20Z"

    def test_render_kitchen(self):
        """Kitchen renders a 12-hour clock."""
        assert new_format("Kitchen").render(Instant.from_unix_seconds(0)) == "12:00AM"

    def test_parse_custom(self):
        """Custom layouts parse."""
        t = new_format("2006-01-02 15:04:05 -0700").parse("2006-01-02 15:04:05 -0700")
        assert t.to_unix_seconds() == 1136239445

    def test_render_custom(self):
        """Custom layouts render."""
        t = Instant.from_unix_seconds(0)
        assert new_format("02/Jan/2006").render(t) == "01/Jan/1970"

    def test_literal_layout_renders_itself(self):
        """A layout without chunks renders as its own text."""
        assert new_format("hello").render(Instant.from_unix_seconds(0)) == "hello"

    def test_parse_error_wraps_layout_error(self):
        """Layout errors surface as FormatError chained to the ParseError."""
        with pytest.raises(FormatError) as exc_info:
            new_format("RFC3339").parse("yesterday")
        assert str(exc_info.value) == '"yesterday" is an invalid value for format RFC3339'
        assert isinstance(exc_info.value.__cause__, ParseError)

    def test_custom_error_names_the_layout(self):
        """Custom layout errors name the layout text."""
        with pytest.raises(FormatError) as exc_info:
            new_format("2006/01/02").parse("x")
        assert str(exc_info.value) == '"x" is an invalid value for format 2006/01/02'

    def test_format_error_is_value_error(self):
        """FormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            new_format("DateOnly").parse("2024-02-30")

    @pytest.mark.parametrize(
        "spec,instant",
        [
            ("DateTime", Instant.from_components(2024, 2, 29, 13, 14, 15)),
            (
                "RFC1123Z",
                Instant.from_components(
                    2006, 1, 2, 15, 4, 5, timezone=Timezone.from_hours(-7)
                ),
            ),
            (
                "RFC3339",
                Instant.from_components(
                    2024, 1, 15, 12, 0, 0, timezone=Timezone.from_hours(5, 30)
                ),
            ),
            (
                "RFC822Z",
                Instant.from_components(2030, 6, 1, 8, 9, timezone=Timezone.from_hours(1)),
            ),
            ("StampNano", Instant.from_components(0, 3, 4, 5, 6, 7, 123_456_789)),
            (
                "RFC3339Nano",
                Instant.from_components(
                    1969, 12, 31, 23, 59, 59, 1, timezone=Timezone.from_hours(-3)
                ),
            ),
            (
                "2006-002 15:04:05.000000000 Z07:00",
                Instant.from_components(
                    2023, 7, 4, 1, 2, 3, 5, timezone=Timezone.from_hours(9)
                ),
            ),
            (
                "Monday 02 January 2006 03:04:05.999 PM -07:00:00",
                Instant.from_components(
                    1999, 12, 31, 23, 59, 59, 250_000_000, timezone=Timezone(-12615)
                ),
            ),
        ],
    )
    def test_round_trip_lossless_layouts(self, spec, instant):
        """Parsing a rendered instant gives the same point in time."""
        f = new_format(spec)
        assert f.parse(f.render(instant)) == instant


class TestErrorQuoting:
    """Tests for how offending values are quoted in error messages."""

    def test_quotes_and_backslashes(self):
        """Quotes inside the value are escaped."""
        with pytest.raises(FormatError) as exc_info:
            new_format("unix").parse('a"b')
        assert str(exc_info.value) == '"a\\"b" is an invalid value for format unix'

    def test_control_characters(self):
        """Control characters appear as hex escapes."""
        with pytest.raises(FormatError) as exc_info:
            new_format("unix").parse("a\x00\x7f\t")
        assert str(exc_info.value) == '"a\\x00\\x7f\\t" is an invalid value for format unix'

    def test_printable_unicode_is_kept(self):
        """Printable non-ASCII characters are not escaped."""
        with pytest.raises(FormatError) as exc_info:
            new_format("unix").parse("ünï")
        assert str(exc_info.value) == '"ünï" is an invalid value for format unix'

    def test_non_printable_unicode(self):
        """Other non-printable characters appear as unicode escapes."""
        with pytest.raises(FormatError) as exc_info:
            new_format("unix").parse("\u200b")
        assert str(exc_info.value) == '"\\u200b" is an invalid value for format unix'
