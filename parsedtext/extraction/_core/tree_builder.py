"""
parsedtext.extraction._core.tree_builder
========================================
Walks a ParseResult and resolves its markers.

  build_tree(result, children_props)  → nested TextNode tree
  reconstruct(result)                 → plain text with every marker
                                        replaced by its token's text
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, Optional

from parsedtext.core.data_types import ParseResult, TextNode, Token
from parsedtext.extraction._core.marker import MARKER_RE, find_markers


ROOT_NAME = "root"


def build_tree(
    result: ParseResult,
    children_props: Optional[Dict[str, Any]] = None,
) -> TextNode:
    """
    Build the presentation tree for a parse result.

    The root node spans ``result.text``. Text between markers becomes leaf
    nodes; each marker becomes a child node built from its token, so a
    token nested inside another token's text ends up nested in the tree.
    Leaf props are ``children_props`` overlaid with the owning token's props.

    A marker that names an unknown token, or a token already being expanded
    above it, is kept as literal text.
    """
    defaults = dict(children_props or {})
    root = Token(name=ROOT_NAME, text=result.text)
    return _build_node(result.tokens, root, defaults, frozenset())


def _build_node(
    tokens: Dict[str, Token],
    token: Token,
    defaults: Dict[str, Any],
    path: FrozenSet[str],
) -> TextNode:
    props = {**defaults, **token.props}
    path = path | {token.name}
    children: List[TextNode] = []
    pending = ""
    cursor = 0
    leaf_count = 0

    def flush() -> None:
        nonlocal pending, leaf_count
        if pending:
            children.append(TextNode(
                name  = f"{token.name}.{leaf_count}",
                text  = pending,
                props = props,
            ))
            leaf_count += 1
            pending = ""

    for name, start, end in find_markers(token.text):
        pending += token.text[cursor:start]
        cursor = end
        sub_token = tokens.get(name)
        # Unknown names and markers that point back up the path stay literal
        if sub_token is None or name in path:
            pending += token.text[start:end]
            continue
        flush()
        children.append(_build_node(tokens, sub_token, defaults, path))

    pending += token.text[cursor:]
    flush()

    return TextNode(name=token.name, props=props, children=children)


def reconstruct(result: ParseResult) -> str:
    """
    Replace every marker with its token's text, recursively.

    Without ``render_text`` transformations this returns the original
    source string.
    """
    cache: Dict[str, str] = {}

    def expand(text: str) -> str:
        return MARKER_RE.sub(lambda m: resolve(m.group(1), m.group(0)), text)

    def resolve(name: str, marker: str) -> str:
        if name not in cache:
            # Seeded with the marker itself so a self-reference stays literal
            cache[name] = marker
            token = result.tokens.get(name)
            if token is not None:
                cache[name] = expand(token.text)
        return cache[name]

    return expand(result.text)
