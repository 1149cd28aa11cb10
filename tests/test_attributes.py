# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Tests for the attribute store and escaping helpers."""

import pytest

from htmlgen import Attributes, InvalidInputError, Paragraph, escape_attribute, escape_text


class TestEscaping:
    def test_text_escapes_markup_characters(self):
        assert escape_text('a < b & c > "d"') == 'a &lt; b &amp; c &gt; "d"'

    def test_attribute_escapes_quotes(self):
        assert escape_attribute('say "hi" & <go>') == "say &quot;hi&quot; &amp; &lt;go&gt;"

    def test_existing_entities_are_escaped_once(self):
        assert escape_text("&amp;") == "&amp;amp;"

    def test_plain_text_is_unchanged(self):
        assert escape_text("hello world") == "hello world"


class TestAttributes:
    def test_empty_store_renders_nothing(self):
        assert Attributes().render() == ""

    def test_render_keeps_insertion_order(self):
        attrs = Attributes()
        attrs.set("id", "x")
        attrs.set("class", "y")
        assert attrs.render() == ' id="x" class="y"'

    def test_reset_updates_in_place(self):
        """Setting an existing name changes the value but not the position."""
        attrs = Attributes()
        attrs.set("id", "x")
        attrs.set("class", "y")
        attrs.set("id", "z")
        assert attrs.render() == ' id="z" class="y"'
        assert list(attrs) == ["id", "class"]

    def test_values_are_escaped(self):
        attrs = Attributes()
        attrs.set("title", '"quoted" <b> & more')
        assert attrs.render() == ' title="&quot;quoted&quot; &lt;b&gt; &amp; more"'

    def test_mapping_access(self):
        attrs = Attributes()
        attrs.set("data-id", "7")
        assert len(attrs) == 1
        assert "data-id" in attrs
        assert "id" not in attrs
        assert attrs["data-id"] == "7"

    @pytest.mark.parametrize("name", ["", "a b", 'a"', "a'", "a=b", "a>", "a/b", "a\tb", "a\x00"])
    def test_invalid_names_are_rejected(self, name):
        attrs = Attributes()
        with pytest.raises(InvalidInputError):
            attrs.set(name, "value")
        assert len(attrs) == 0

    def test_reserved_names_are_rejected(self):
        attrs = Attributes(reserved=("href",))
        with pytest.raises(InvalidInputError):
            attrs.set("href", "/")

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            Attributes().set("", "x")

    @pytest.mark.parametrize("value", [5, None, b"bytes", ["x"]])
    def test_non_string_values_are_rejected(self, value):
        attrs = Attributes()
        with pytest.raises(InvalidInputError):
            attrs.set("data-n", value)
        assert len(attrs) == 0

    @pytest.mark.parametrize("key", [5, None, b"id"])
    def test_non_string_names_are_rejected(self, key):
        with pytest.raises(InvalidInputError):
            Attributes().set(key, "x")

    def test_bad_value_on_a_node_is_rejected_before_render(self):
        paragraph = Paragraph("p")
        with pytest.raises(InvalidInputError):
            paragraph.with_attribute("data-n", 5)
        assert paragraph.render() == "<p>p</p>"
