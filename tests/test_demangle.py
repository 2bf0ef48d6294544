# tests/test_demangle.py
"""
Tests for restoring Clojure names from mangled JVM class names.
"""

import pytest

from causeprint.demangle import CHAR_MAP, NameDemangler, demangle, mangle
from causeprint.errors import UnrecognizedEscapeError


class TestDemangle:

    def test_plain_name_unchanged(self):
        assert demangle("clojure.core") == "clojure.core"

    def test_dash(self):
        assert demangle("update_row") == "update-row"

    def test_named_escapes(self):
        assert demangle("valid_QMARK_") == "valid?"
        assert demangle("swap_BANG_") == "swap!"
        assert demangle("_STAR_print_length_STAR_") == "*print-length*"

    def test_arrow_macro(self):
        assert demangle("__GT__GT_") == "->>"

    def test_longest_match_wins(self):
        # "_" alone is a valid escape; it must not shadow "_QMARK_"
        assert demangle("a_QMARK_b") == "a?b"
        assert demangle("a_QMARKb") == "a-QMARKb"

    def test_empty(self):
        assert demangle("") == ""


class TestNameDemangler:

    def test_overlapping_keys(self):
        d = NameDemangler({"+": "_PLUS_", "#": "_PLUS_PLUS_"})
        assert d.demangle("a_PLUS_PLUS_b") == "a#b"
        assert d.demangle("a_PLUS_b") == "a+b"

    def test_overlapping_keys_independent_of_table_order(self):
        d = NameDemangler({"#": "_PLUS_PLUS_", "+": "_PLUS_"})
        assert d.demangle("_PLUS_PLUS__PLUS_") == "#+"

    def test_unrecognized_escape(self):
        d = NameDemangler({"?": "_QMARK_"})
        with pytest.raises(UnrecognizedEscapeError) as info:
            d.demangle("ok_QMARK_then_oops")
        assert info.value.position == 13
        assert info.value.name == "ok_QMARK_then_oops"

    def test_custom_marker(self):
        d = NameDemangler({"?": "$Q$"}, marker="$")
        assert d.demangle("valid$Q$") == "valid?"

    def test_match(self):
        d = NameDemangler()
        assert d.match("x_GT_", 1) == ("_GT_", ">")
        assert d.match("x_GT_", 0) is None


class TestMangle:

    def test_mangle(self):
        assert mangle("foo-bar?") == "foo_bar_QMARK_"

    @pytest.mark.parametrize("name", ["swap!", "->>", "*ns*", "a/b", "<=>", "x'"])
    def test_round_trip(self, name):
        assert demangle(mangle(name)) == name

    def test_every_table_entry_round_trips(self):
        text = "".join(CHAR_MAP)
        assert demangle(mangle(text)) == text
