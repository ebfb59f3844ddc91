from demokit.markdown_view import Element, render_markdown


def test_single_paragraph_is_root():
    root = render_markdown("hello")
    assert root.tag == "p"
    assert root.children == ["hello"]
    assert root.to_html() == "<p>hello</p>"


def test_several_blocks_wrapped_in_div():
    root = render_markdown("one\n\ntwo")
    assert root.tag == "div"
    assert [c.tag for c in root.children] == ["p", "p"]
    assert root.children[1].children == ["two"]


def test_heading_level():
    root = render_markdown("## Title")
    assert root.tag == "h2"
    assert root.children == ["Title"]


def test_emphasis_and_strong():
    root = render_markdown("*a* **b**")
    em, space, strong = root.children
    assert em.attributes == {"class": "font-italic"}
    assert em.children == ["a"]
    assert space == " "
    assert strong.attributes == {"class": "font-weight-bold"}


def test_blockquote_class():
    root = render_markdown("> quoted")
    assert root.tag == "blockquote"
    assert root.attributes["class"] == "blockquote"
    assert root.children[0].tag == "p"


def test_fenced_code_language():
    root = render_markdown("```rust\nfn main() {}\n```")
    assert root.tag == "pre"
    code = root.children[0]
    assert code.tag == "code"
    assert code.attributes == {"class": "rust-language"}
    assert code.children == ["fn main() {}\n"]


def test_fenced_code_unknown_language_has_no_class():
    root = render_markdown("```python\nx = 1\n```")
    assert root.children[0].attributes == {}


def test_ordered_list_start():
    assert "start" not in render_markdown("1. a\n2. b").attributes
    root = render_markdown("3. a\n4. b")
    assert root.tag == "ol"
    assert root.attributes["start"] == "3"
    assert [li.children for li in root.children] == [["a"], ["b"]]


def test_bullet_list_items():
    root = render_markdown("- x\n- y")
    assert root.tag == "ul"
    assert all(li.tag == "li" for li in root.children)


def test_link_with_title():
    root = render_markdown('[text](http://example.com "Hint")')
    link = root.children[0]
    assert link.tag == "a"
    assert link.attributes == {"href": "http://example.com", "title": "Hint"}
    assert link.children == ["text"]


def test_link_without_title():
    link = render_markdown("[t](http://example.com)").children[0]
    assert "title" not in link.attributes


def test_rule_and_breaks():
    root = render_markdown("a\nb")
    assert root.children == ["a", "\n", "b"]
    assert render_markdown("---").children == [] or render_markdown("---").tag == "hr"


def test_table_structure_and_alignment():
    root = render_markdown("| a | b |\n|:--|--:|\n| 1 | 2 |")
    assert root.tag == "table"
    assert root.attributes["class"] == "table"
    head, row = root.children
    assert head.tag == "th"
    assert row.tag == "tr"
    for cell in head.children:
        assert cell.tag == "td"
        assert cell.attributes["scope"] == "col"
    assert head.children[0].attributes["class"] == "text-left"
    assert row.children[0].attributes["class"] == "text-left"
    assert row.children[1].attributes["class"] == "text-right"


def test_add_class_deduplicates():
    element = Element("span", {"class": "a"})
    element.add_class("b a c")
    assert element.attributes["class"] == "a b c"


def test_to_html_escapes():
    element = Element("p", {"title": 'x"y'})
    element.add_child("<&>")
    element.add_child(Element("br"))
    assert element.to_html() == '<p title="x&quot;y">&lt;&amp;&gt;<br></p>'