from decimal import Decimal
from fractions import Fraction

import pytest

from pyccup import (
    InvalidNodeError,
    InvalidTagSpec,
    UnsupportedAttributeValue,
    comment,
    raw,
    render,
)


def test_text_is_escaped() -> None:
    assert render(["p", "<b>"]) == "<p>&lt;b&gt;</p>"
    assert render(["p", "Tom & \"Jerry\" 'x'"]) == "<p>Tom &amp; &quot;Jerry&quot; &#x27;x&#x27;</p>"


def test_raw_bypasses_escaping() -> None:
    assert render(["div", raw("<b>")]) == "<div><b></div>"


def test_plain_text_is_unchanged_and_stable() -> None:
    tree = ["p", "plain words"]
    first = render(tree)
    assert first == "<p>plain words</p>"
    assert render(tree) == first


def test_numbers_render_as_text() -> None:
    assert render(["span", 3, " / ", 4.5]) == "<span>3 / 4.5</span>"


def test_comment() -> None:
    assert render(["div", comment("todo: <fix>")]) == "<div><!-- todo: <fix> --></div>"


def test_boolean_attributes() -> None:
    assert render(["input", {"checked": True, "disabled": False}]) == '<input checked="checked">'


def test_class_merge_keeps_shorthand_first() -> None:
    html = render(["div.base", {"class": ["added", "another"]}, "content"])
    assert html == '<div class="base added another">content</div>'


def test_attributes_class_id_then_sorted() -> None:
    html = render(["a#top.nav", {"target": "_blank", "href": "/x?a=1&b=2"}, "Go"])
    assert html == '<a class="nav" id="top" href="/x?a=1&amp;b=2" target="_blank">Go</a>'


def test_attribute_values_escape_quotes() -> None:
    assert render(["img", {"alt": 'say "hi"'}]) == '<img alt="say &quot;hi&quot;">'


def test_id_precedence_both_directions() -> None:
    assert render(["p#spec", {"id": "attr"}]) == '<p id="spec"></p>'
    assert render(["p", {"id": "attr"}]) == '<p id="attr"></p>'


def test_flattening_one_level() -> None:
    html = render(["ul", [["li", "One"], ["li", "Two"]]])
    assert html == "<ul><li>One</li><li>Two</li></ul>"


def test_flattening_generator_children() -> None:
    items = ["a", "b"]
    html = render(["ul", (["li", item] for item in items)])
    assert html == "<ul><li>a</li><li>b</li></ul>"


def test_flattening_does_not_go_deeper() -> None:
    with pytest.raises(InvalidNodeError, match="nested two levels deep"):
        render(["ul", [[["li", "One"]], [["li", "Two"]]]])


def test_void_element_ignores_children() -> None:
    assert render(["img", {"src": "a.jpg"}, ["span", "ignored"]]) == '<img src="a.jpg">'
    assert render(["br"]) == "<br>"


def test_empty_values_render_nothing() -> None:
    assert render(None) == ""
    assert render(False) == ""
    assert render(["div", None, False, "x", {"stray": 1}]) == "<div>x</div>"


def test_conditional_children() -> None:
    show = False
    assert render(["div", show and ["span", "hidden"], "shown"]) == "<div>shown</div>"


def test_root_list_renders_siblings() -> None:
    assert render([["p", "a"], ["p", "b"]]) == "<p>a</p><p>b</p>"


def test_root_text() -> None:
    assert render("a < b") == "a &lt; b"


def test_nested_elements() -> None:
    tree = [
        "header",
        ["a", {"href": "/"}, "embedding-shapes"],
        ["nav", ["a", {"href": "/"}, "Home"], ["a", {"href": "/posts/"}, "Posts"]],
    ]
    assert render(tree) == (
        '<header><a href="/">embedding-shapes</a>'
        '<nav><a href="/">Home</a><a href="/posts/">Posts</a></nav></header>'
    )


def test_errors_propagate_without_partial_output() -> None:
    with pytest.raises(InvalidTagSpec):
        render(["div", ["p", "fine"], ["span#a#b", "bad"]])
    with pytest.raises(UnsupportedAttributeValue):
        render(["div", ["a", {"href": object()}]])
    with pytest.raises(InvalidNodeError):
        render([{"class": "x"}, "no tag"])


def test_tuples_work_like_lists() -> None:
    assert render(("p", ("em", "x"))) == "<p><em>x</em></p>"


def test_empty_list_inside_spliced_children_is_dropped() -> None:
    assert render(["main", [[], raw("<p>b</p>")]]) == "<main><p>b</p></main>"
    date = None
    content = [[["p.post-date", date]] if date else [], raw("<p>body</p>")]
    assert render(["main", content]) == "<main><p>body</p></main>"


def test_mapping_first_list_inside_spliced_children_names_the_mapping() -> None:
    with pytest.raises(InvalidNodeError, match="Attribute mapping without a tag"):
        render(["div", [[{"href": "/"}, "x"]]])


def test_decimal_and_fraction_render_as_text() -> None:
    assert render(["p", Decimal("1.50"), Fraction(1, 2)]) == "<p>1.501/2</p>"


def test_attribute_names_cannot_break_out_of_markup() -> None:
    with pytest.raises(InvalidNodeError, match="markup characters"):
        render(["a", {'x" onclick="evil()': True}])


def test_tag_names_cannot_break_out_of_markup() -> None:
    with pytest.raises(InvalidTagSpec, match="markup characters"):
        render(["img/><script>", "x"])
