"""Tests for the HTML element builder."""

from a11y_audit.report.markup import Raw, el, render_document, render_node


def test_escapes_text_children() -> None:
    """Text content is escaped."""
    assert render_node(el("p", "<b>&</b>")) == "<p>&lt;b&gt;&amp;&lt;/b&gt;</p>"


def test_escapes_attribute_values() -> None:
    """Attribute values are quoted and escaped."""
    html = render_node(el("a", "x", href='https://x" onclick="alert(1)'))

    assert html == '<a href="https://x&quot; onclick=&quot;alert(1)">x</a>'


def test_raw_is_not_escaped() -> None:
    """Trusted markup passes through."""
    assert render_node(el("style", Raw("a > b { }"))) == "<style>a > b { }</style>"


def test_attribute_names() -> None:
    """class_name maps to class and underscores become dashes."""
    html = render_node(el("div", class_name="card", data_rule_id="x", hidden=True))

    assert html == '<div class="card" data-rule-id="x" hidden></div>'


def test_skips_none_and_false() -> None:
    """None children and None/False attributes are dropped."""
    html = render_node(el("div", None, "a", [None, "b"], title=None, hidden=False))

    assert html == "<div>ab</div>"


def test_void_elements_have_no_closing_tag() -> None:
    """Void elements render without children or end tag."""
    assert render_node(el("br")) == "<br>"
    assert render_node(el("meta", charset="UTF-8")) == '<meta charset="UTF-8">'


def test_render_document() -> None:
    """Documents start with a doctype and carry the language."""
    html = render_document(el("head"), el("body"))

    assert html == '<!DOCTYPE html>\n<html lang="en"><head></head><body></body></html>\n'
