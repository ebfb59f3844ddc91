"""Render Markdown into a small element tree with presentation classes."""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Union

from markdown_it import MarkdownIt
from markdown_it.token import Token

log = logging.getLogger(__name__)

_VOID_TAGS = frozenset({"hr", "br", "img"})

_LANGUAGE_CLASSES = {
    "html": "html-language",
    "rust": "rust-language",
    "java": "java-language",
    "c": "c-language",
}

_ALIGN_CLASSES = {
    "left": "text-left",
    "center": "text-center",
    "right": "text-right",
}

_parser = MarkdownIt("commonmark").enable("table")

Node = Union["Element", str]


@dataclass
class Element:
    """An HTML element with ordered attributes and text or element children."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List[Node] = field(default_factory=list)

    def add_child(self, child: Node) -> None:
        self.children.append(child)

    def add_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def add_class(self, classes: str) -> None:
        """Add whitespace-separated classes, keeping existing ones and skipping duplicates."""
        current = self.attributes.get("class", "").split()
        for name in classes.split():
            if name not in current:
                current.append(name)
        self.attributes["class"] = " ".join(current)

    def to_html(self) -> str:
        attrs = "".join(
            f' {name}="{html.escape(value, quote=True)}"'
            for name, value in self.attributes.items()
        )
        if self.tag in _VOID_TAGS:
            return f"<{self.tag}{attrs}>"
        body = "".join(
            child.to_html() if isinstance(child, Element) else html.escape(child, quote=False)
            for child in self.children
        )
        return f"<{self.tag}{attrs}>{body}</{self.tag}>"


def _cell_alignment(token: Token) -> Optional[str]:
    style = token.attrGet("style")
    if not isinstance(style, str):
        return None
    for part in style.split(";"):
        key, _, value = part.partition(":")
        if key.strip() == "text-align":
            return value.strip()
    return None


class _Builder:
    def __init__(self) -> None:
        self.spine: List[Element] = []
        self.elems: List[Element] = []
        self.opened: List[Optional[str]] = []
        self.aligns: List[List[Optional[str]]] = []
        self.in_head = False

    def _add_child(self, child: Node) -> None:
        if not self.spine:
            raise ValueError("markdown content outside of any element")
        self.spine[-1].add_child(child)

    def _push(self, element: Element) -> None:
        self.spine.append(element)

    def _close(self, kind: str) -> None:
        top = self.spine.pop()
        if kind == "code":
            top = Element("pre", children=[top])
        elif kind == "table":
            aligns = self.aligns.pop()
            for row in top.children:
                if not isinstance(row, Element):
                    continue
                for position, cell in enumerate(row.children):
                    if isinstance(cell, Element) and position < len(aligns):
                        css = _ALIGN_CLASSES.get(aligns[position] or "")
                        if css is not None:
                            cell.add_class(css)
        elif kind == "thead":
            for cell in top.children:
                if isinstance(cell, Element):
                    cell.add_attribute("scope", "col")
        if self.spine:
            self.spine[-1].add_child(top)
        else:
            self.elems.append(top)

    def _open(self, token: Token) -> Optional[str]:
        kind = token.type[: -len("_open")]
        if kind == "paragraph":
            if token.hidden:
                return None
            self._push(Element("p"))
        elif kind == "heading":
            self._push(Element(token.tag))
        elif kind == "blockquote":
            self._push(Element("blockquote", {"class": "blockquote"}))
        elif kind == "bullet_list":
            self._push(Element("ul"))
        elif kind == "ordered_list":
            element = Element("ol")
            start = token.attrGet("start")
            if start is not None and int(start) != 1:
                element.add_attribute("start", str(int(start)))
            self._push(element)
        elif kind == "list_item":
            self._push(Element("li"))
        elif kind == "table":
            self.aligns.append([])
            self._push(Element("table", {"class": "table"}))
        elif kind == "thead":
            self.in_head = True
            self._push(Element("th"))
        elif kind == "tbody":
            return None
        elif kind == "tr":
            if self.in_head:
                return None
            self._push(Element("tr"))
        elif kind in ("th", "td"):
            if self.in_head and self.aligns:
                self.aligns[-1].append(_cell_alignment(token))
            self._push(Element("td"))
        elif kind == "em":
            self._push(Element("span", {"class": "font-italic"}))
        elif kind == "strong":
            self._push(Element("span", {"class": "font-weight-bold"}))
        elif kind == "s":
            self._push(Element("span", {"class": "text-decoration-strikethrough"}))
        elif kind == "link":
            element = Element("a", {"href": str(token.attrGet("href") or "")})
            title = token.attrGet("title")
            if title:
                element.add_attribute("title", str(title))
            self._push(element)
        else:
            log.debug("Unknown event: %s", token.type)
            return None
        return kind

    def feed(self, tokens: Sequence[Token]) -> None:
        for token in tokens:
            kind = token.type
            if kind.endswith("_open"):
                self.opened.append(self._open(token))
            elif kind.endswith("_close"):
                opened = self.opened.pop()
                if opened == "thead":
                    self.in_head = False
                if opened is not None:
                    self._close(opened)
            elif kind == "inline":
                self.feed(token.children or [])
            elif kind == "text":
                self._add_child(token.content)
            elif kind == "softbreak":
                self._add_child("\n")
            elif kind == "hardbreak":
                self._add_child(Element("br"))
            elif kind == "hr":
                self._add_child(Element("hr"))
            elif kind in ("fence", "code_block"):
                self._code_block(token)
            elif kind == "image":
                self._image(token)
            else:
                log.debug("Unknown event: %s", kind)

    def _code_block(self, token: Token) -> None:
        element = Element("code")
        if token.type == "fence":
            css = _LANGUAGE_CLASSES.get(token.info.strip())
            if css is not None:
                element.add_attribute("class", css)
        self._push(element)
        self._add_child(token.content)
        self._close("code")

    def _image(self, token: Token) -> None:
        element = Element("img", {"src": str(token.attrGet("src") or "")})
        title = token.attrGet("title")
        if title:
            element.add_attribute("title", str(title))
        self._push(element)
        self.feed(token.children or [])
        self._close("img")

    def finish(self) -> Element:
        if len(self.elems) == 1:
            return self.elems[0]
        return Element("div", children=list[Node](self.elems))


def render_markdown(source: str) -> Element:
    """Render Markdown (tables enabled, footnotes disabled) into an element tree."""
    builder = _Builder()
    builder.feed(_parser.parse(source))
    return builder.finish()


def _iter_elements(node: Element) -> Iterable[Element]:
    yield node
    for child in node.children:
        if isinstance(child, Element):
            yield from _iter_elements(child)