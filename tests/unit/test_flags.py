"""Tests for flag formatting."""

import pytest

from clishow.exceptions import MalformedMetadataError
from clishow.flags import format_flags, is_repeatable, value_placeholders
from clishow.sources import ArgumentSpec


class TestValuePlaceholders:
    """Tests for value placeholder generation."""

    def test_no_value_for_flags(self):
        """Flags that take no value produce no placeholder."""
        arg = ArgumentSpec(id="verbose", short="v", takes_value=False)
        assert value_placeholders(arg) == []

    def test_fallback_to_uppercase_id(self):
        """Without declared value names the upper-cased id is used."""
        arg = ArgumentSpec(id="output_dir", long="output-dir")
        assert value_placeholders(arg) == ["[OUTPUT_DIR]"]

    def test_declared_value_names(self):
        """Declared value names win over the id."""
        arg = ArgumentSpec(id="pair", long="pair", value_names=("KEY", "VALUE"), required=True)
        assert value_placeholders(arg) == ["<KEY>", "<VALUE>"]

    def test_single_name_repeated_for_nargs(self):
        """A single name is repeated for arguments taking several values."""
        arg = ArgumentSpec(id="point", long="point", value_names=("N",), nargs=2)
        assert value_placeholders(arg) == ["[N]", "[N]"]

    def test_unbounded_appends_ellipsis(self):
        """Unbounded arguments end with the repeat marker."""
        arg = ArgumentSpec(id="files", positional=True, max_occurrences=None)
        assert value_placeholders(arg) == ["[FILES]", "..."]

    def test_empty_value_names_is_malformed(self):
        """An empty (not missing) value name list violates the parser contract."""
        arg = ArgumentSpec(id="name", long="name", value_names=())
        with pytest.raises(MalformedMetadataError, match="empty list of value names"):
            value_placeholders(arg)

    def test_empty_value_names_ignored_without_value(self):
        """The malformed check only applies to value-taking arguments."""
        arg = ArgumentSpec(id="quiet", long="quiet", value_names=(), takes_value=False)
        assert value_placeholders(arg) == []


class TestFormatFlags:
    """Tests for format_flags."""

    def test_short_and_long_required(self):
        """Short+long required argument uses one angle-bracket placeholder."""
        arg = ArgumentSpec(id="flag", short="f", long="flag", required=True)
        result = format_flags(arg)

        assert result == "-f, --flag <FLAG>"
        assert "-f" in result
        assert "--flag" in result
        assert result.count("<") == 1
        assert "[" not in result

    def test_long_only_optional(self):
        """Long-only optional argument keeps the short column blank."""
        arg = ArgumentSpec(id="name", long="name")
        result = format_flags(arg)

        assert result.startswith("  ")
        assert result.lstrip() == "--name [NAME]"
        assert result == "    --name [NAME]"

    def test_short_only(self):
        """Short-only flag without value."""
        arg = ArgumentSpec(id="quiet", short="q", takes_value=False)
        assert format_flags(arg) == "-q"

    def test_flag_without_value(self):
        """Flags never get a placeholder."""
        arg = ArgumentSpec(id="verbose", short="v", long="verbose", takes_value=False)
        assert format_flags(arg) == "-v, --verbose"

    def test_repeatable_ends_with_ellipsis(self):
        """Arguments accepted more than once end with '...'."""
        arg = ArgumentSpec(id="tag", short="t", long="tag", max_occurrences=3)
        result = format_flags(arg)

        assert result.endswith("...")
        assert result == "-t, --tag [TAG] ..."

    def test_positional_has_no_padding(self):
        """Positional arguments render as their placeholders only."""
        arg = ArgumentSpec(id="target", positional=True, required=True)
        assert format_flags(arg) == "<TARGET>"

    def test_deterministic(self):
        """Same argument, same string."""
        arg = ArgumentSpec(id="level", short="l", long="level", value_names=("N",))
        assert format_flags(arg) == format_flags(arg)


class TestIsRepeatable:
    """Tests for the repeatable check."""

    @pytest.mark.parametrize(
        ("max_occurrences", "expected"),
        [(1, False), (2, True), (None, True)],
    )
    def test_cardinality(self, max_occurrences, expected):
        """Only cardinality above one (or unbounded) is repeatable."""
        arg = ArgumentSpec(id="x", max_occurrences=max_occurrences)
        assert is_repeatable(arg) is expected
