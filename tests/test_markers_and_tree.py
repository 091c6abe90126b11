"""
parsedtext — Marker and Tree Builder Tests
==========================================
Run with: python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from parsedtext.core.data_types import ParseResult, Token
from parsedtext.extraction import build_tree, parse, reconstruct
from parsedtext.extraction._core.marker import (
    count_markers, extract_token_names, find_markers, format_marker,
    parse_token_name, token_name,
)


# ── Marker grammar ────────────────────────────────────────────────────────────

class TestMarkers:
    def test_format(self):
        assert format_marker(token_name(2, 17)) == "{{TOKEN-2-17}}"

    def test_find_markers_positions(self):
        text = "a {{TOKEN-0-0}} b {{TOKEN-1-12}}"
        assert find_markers(text) == [("TOKEN-0-0", 2, 15), ("TOKEN-1-12", 18, 32)]

    def test_find_ignores_malformed(self):
        assert find_markers("{TOKEN-0-0} {{TOKEN-a-0}} {{token-0-0}}") == []

    def test_extract_unique_names(self):
        text = "{{TOKEN-0-1}} {{TOKEN-0-0}} {{TOKEN-0-1}}"
        assert extract_token_names(text) == ["TOKEN-0-1", "TOKEN-0-0"]
        assert count_markers(text) == 3

    def test_parse_token_name(self):
        assert parse_token_name("TOKEN-3-9") == (3, 9)
        assert parse_token_name("TOKEN-3") is None


# ── Reconstruct ───────────────────────────────────────────────────────────────

class TestReconstruct:
    def test_nested_tokens_restored(self):
        source = "[@michel:561316513] says hi"
        result = parse(source, [{"pattern": r"\[@[^\]]+\]"}, {"pattern": r"@\w+"}])
        assert reconstruct(result) == source

    def test_render_text_is_kept(self):
        result = parse("Mention [@michel:561316513]", [{
            "pattern":     r"\[(@[^:]+):([^\]]+)\]",
            "render_text": lambda s, m: f"^^{m[1]}^^",
        }])
        assert reconstruct(result) == "Mention ^^@michel^^"

    def test_unknown_marker_left_literal(self):
        result = ParseResult(text="x {{TOKEN-9-9}}", tokens={})
        assert reconstruct(result) == "x {{TOKEN-9-9}}"

    def test_self_reference_terminates(self):
        tok = Token(name="TOKEN-0-0", text="<{{TOKEN-0-0}}>")
        result = ParseResult(text="{{TOKEN-0-0}}", tokens={"TOKEN-0-0": tok})
        assert reconstruct(result) == "<{{TOKEN-0-0}}>"


# ── Tree builder ──────────────────────────────────────────────────────────────

@pytest.fixture
def nested_result():
    return parse(
        "Hi [@ann:1]!",
        [
            {"pattern": r"\[@[^\]]+\]", "role": "mention"},
            {"pattern": r"@\w+", "role": "handle"},
        ],
    )


class TestBuildTree:
    def test_plain_text_round_trips(self, nested_result):
        tree = build_tree(nested_result)
        assert tree.plain_text() == "Hi [@ann:1]!"

    def test_structure(self, nested_result):
        tree = build_tree(nested_result)
        assert tree.name == "root"
        assert [c.name for c in tree.children] == ["root.0", "TOKEN-0-0", "root.1"]
        assert tree.children[0].text == "Hi "
        assert tree.children[2].text == "!"

        mention = tree.children[1]
        assert mention.props == {"role": "mention"}
        assert [c.name for c in mention.children] == ["TOKEN-0-0.0", "TOKEN-1-1", "TOKEN-0-0.1"]
        assert mention.children[0].text == "["
        assert mention.children[2].text == ":1]"

        handle = mention.children[1]
        assert handle.props == {"role": "handle"}
        assert handle.children[0].text == "@ann"
        assert handle.children[0].is_leaf

    def test_children_props_under_token_props(self, nested_result):
        tree = build_tree(nested_result, {"role": "plain", "color": "black"})
        assert tree.children[0].props == {"role": "plain", "color": "black"}
        assert tree.children[1].props == {"role": "mention", "color": "black"}

    def test_no_tokens(self):
        tree = build_tree(parse("just text", []))
        assert len(tree.children) == 1
        assert tree.children[0].text == "just text"

    def test_empty_text(self):
        tree = build_tree(parse("", []))
        assert tree.children == []
        assert tree.plain_text() == ""

    def test_unknown_marker_stays_text(self):
        tree = build_tree(ParseResult(text="a {{TOKEN-5-5}} b", tokens={}))
        assert [c.text for c in tree.children] == ["a {{TOKEN-5-5}} b"]

    def test_self_reference_stays_text(self):
        tok = Token(name="TOKEN-0-0", text="<{{TOKEN-0-0}}>")
        tree = build_tree(ParseResult(text="{{TOKEN-0-0}}", tokens={"TOKEN-0-0": tok}))
        (node,) = tree.children
        assert node.plain_text() == "<{{TOKEN-0-0}}>"
