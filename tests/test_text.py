"""Tests for TextNode operations and the fluent builders."""

import dataclasses
from datetime import timedelta

import pytest

from tailtext.builder import (
    StyleBuilder,
    TextBuilder,
    bold_text,
    error_text,
    info_text,
    italic_text,
    muted_text,
    status_text,
    success_text,
    warning_text,
)
from tailtext.text import TextNode, humanize_duration


class TestValueSemantics:
    def test_list_children_become_tuple(self):
        children = [TextNode(content="a")]
        node = TextNode(children=children)
        children.append(TextNode(content="b"))
        assert node.children == (TextNode(content="a"),)

    def test_frozen(self):
        node = TextNode(content="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.content = "b"

    def test_add_returns_new_node(self):
        base = TextNode(content="base")
        grown = base.add(TextNode(content="x"))
        assert base.children == ()
        assert len(grown.children) == 1

    def test_sibling_chains_do_not_share_children(self):
        base = TextNode(content="base").append("shared")
        left = base.append("left")
        right = base.append("right")
        assert [c.content for c in left.children] == ["shared", "left"]
        assert [c.content for c in right.children] == ["shared", "right"]
        assert [c.content for c in base.children] == ["shared"]

    def test_equality(self):
        assert TextNode(content="a", style="font-bold") == TextNode(content="a", style="font-bold")


class TestOperations:
    def test_append_joins_styles(self):
        node = TextNode().append("x", "font-bold", "text-red-500")
        assert node.children[0] == TextNode(content="x", style="font-bold text-red-500")

    def test_indent_prefixes_every_line(self):
        node = TextNode(content="a\nb").indent(2)
        assert node.content == "  a\n  b"

    def test_indent_children_two_deeper(self):
        node = TextNode(content="p", children=[TextNode(content="c", children=[TextNode(content="g")])])
        out = node.indent(1)
        assert out.content == " p"
        assert out.children[0].content == "   c"
        assert out.children[0].children[0].content == "     g"

    def test_printf(self):
        node = TextNode().printf("%s items in %s", 3, 1.5)
        assert node.children[0].content == "3 items in 1.50"
        assert node.children[0].style == ""

    def test_printf_duration(self):
        node = TextNode().printf("took %s", timedelta(minutes=2, seconds=3))
        assert node.plain() == "took 2m3s"

    def test_printf_without_args_is_literal(self):
        assert TextNode().printf("100%").plain() == "100%"

    def test_printf_with_style(self):
        node = TextNode().printf_with_style("%d failed", "text-red-600 font-bold", 2)
        assert node.children[0] == TextNode(content="2 failed", style="text-red-600 font-bold")

    def test_is_empty(self):
        assert TextNode().is_empty()
        assert TextNode(style="font-bold", children=[TextNode(), TextNode(style="italic")]).is_empty()
        assert not TextNode(children=[TextNode(children=[TextNode(content="x")])]).is_empty()

    def test_render_shortcuts(self):
        node = TextNode(content="x", style="font-bold")
        assert node.plain() == "x"
        assert node.ansi() == "\x1b[1mx\x1b[0m"
        assert node.markdown() == "**x**"
        assert node.html() == '<span class="font-bold"><strong>x</strong></span>'


class TestHumanizeDuration:
    @pytest.mark.parametrize("value,expected", [
        (timedelta(milliseconds=250), "250ms"),
        (timedelta(0), "0ms"),
        (timedelta(seconds=5), "5s"),
        (timedelta(hours=1, seconds=5), "1h5s"),
        (timedelta(hours=1, minutes=2, seconds=3), "1h2m3s"),
        (timedelta(days=2, hours=3), "2d3h"),
        (timedelta(seconds=-90), "-1m30s"),
    ])
    def test_values(self, value, expected):
        assert humanize_duration(value) == expected


class TestStyleBuilder:
    def test_chain(self):
        style = StyleBuilder().bold().italic().underline().strikethrough().build()
        assert style == "font-bold italic underline line-through"

    def test_colors(self):
        assert StyleBuilder().color("red-500").background("#00ff00").build() == "text-red-500 bg-[#00ff00]"

    def test_faint_and_transforms(self):
        assert StyleBuilder().faint().uppercase().build() == "opacity-50 uppercase"
        assert StyleBuilder().lowercase().capitalize().build() == "lowercase capitalize"

    def test_semantic_colors(self):
        style = StyleBuilder().success().error().warning().info().muted().build()
        assert style == "text-green-600 text-red-600 text-yellow-600 text-blue-600 text-gray-500"

    def test_custom(self):
        assert StyleBuilder().custom("p-2").bold().build() == "p-2 font-bold"

    def test_empty(self):
        assert StyleBuilder().build() == ""


class TestTextBuilder:
    def test_build(self):
        node = TextBuilder("hi").bold().color("#FF0000").build()
        assert node == TextNode(content="hi", style="font-bold text-[#FF0000]")

    def test_bracket_hex_renders_lowercase(self):
        node = TextBuilder("hi").color("#FF0000").build()
        assert node.ansi() == "\x1b[38;2;255;0;0mhi\x1b[0m"

    def test_style_replaces_tokens(self):
        node = TextBuilder("x").bold().style("italic  underline").build()
        assert node.style == "italic underline"

    def test_content_and_children(self):
        node = (
            TextBuilder()
            .content("parent ")
            .child(TextNode(content="a"))
            .child_builder(TextBuilder("b").italic())
            .build()
        )
        assert node.plain() == "parent ab"
        assert node.markdown() == "parent a*b*"

    def test_builder_reuse_does_not_alias(self):
        builder = TextBuilder("x").child(TextNode(content="1"))
        first = builder.build()
        builder.child(TextNode(content="2"))
        assert len(first.children) == 1
        assert len(builder.build().children) == 2

    def test_decorations(self):
        node = TextBuilder("x").underline().strikethrough().faint().background("yellow-200").build()
        assert node.style == "underline line-through opacity-50 bg-yellow-200"

    def test_transforms(self):
        assert TextBuilder("ab cd").capitalize().build().plain() == "Ab Cd"
        assert TextBuilder("ab").uppercase().build().plain() == "AB"
        assert TextBuilder("AB").lowercase().build().plain() == "ab"


class TestHelpers:
    @pytest.mark.parametrize("make,style", [
        (success_text, "text-green-600"),
        (error_text, "text-red-600"),
        (warning_text, "text-yellow-600"),
        (info_text, "text-blue-600"),
        (muted_text, "text-gray-500"),
        (bold_text, "font-bold"),
        (italic_text, "italic"),
    ])
    def test_helper_styles(self, make, style):
        assert make("x") == TextNode(content="x", style=style)

    @pytest.mark.parametrize("status,style", [
        ("PASS", "text-green-600"),
        ("success", "text-green-600"),
        ("Ok", "text-green-600"),
        ("FAIL", "text-red-600"),
        ("failed", "text-red-600"),
        ("ERROR", "text-red-600"),
        ("warn", "text-yellow-600"),
        ("WARNING", "text-yellow-600"),
        ("SKIP", "text-gray-500"),
        ("skipped", "text-gray-500"),
        ("INFO", "text-blue-600"),
        ("pending", ""),
    ])
    def test_status_text(self, status, style):
        assert status_text(status, "msg") == TextNode(content="msg", style=style)
