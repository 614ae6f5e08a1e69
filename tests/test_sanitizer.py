import pytest
from bs4 import BeautifulSoup

from simplemarkup import MarkupProcessor
from simplemarkup.sanitizer import normalize_tag_name, strip_disallowed_tags

DEFAULT_TAGS = {"strong", "u", "em", "del", "a"}

HOSTILE_INPUTS = [
    "<script>alert('x')</script>",
    '<img src=x onerror="alert(1)">',
    "*<b>bold</b>* _<i>u</i>_",
    "https://example.com/<script>",
    'https://example.com/"onmouseover="alert(1)',
    "<!-- comment --> -strike- ~em~",
    "<a href='javascript:alert(1)'>click</a>",
    "&lt;already escaped&gt; & <div>\n</div>",
    "",
]


def _tag_names(html):
    return {tag.name for tag in BeautifulSoup(html, "html.parser").find_all(True)}


@pytest.mark.parametrize("text", HOSTILE_INPUTS)
def test_parse_never_emits_tags_outside_allow_list(text):
    assert _tag_names(MarkupProcessor(text).parse()) <= DEFAULT_TAGS
    assert _tag_names(MarkupProcessor(text).all().parse()) <= DEFAULT_TAGS


@pytest.mark.parametrize("text", HOSTILE_INPUTS)
def test_raw_input_never_becomes_markup(text):
    assert _tag_names(MarkupProcessor(text).set_allowed_tags([]).parse()) == set()


def test_disallowed_template_tags_are_stripped():
    processor = MarkupProcessor("This *text* should be bold.")
    processor.set_template("bold", r"<script>\1</script>").bold()

    html = processor.parse()

    assert "script" not in _tag_names(html)
    assert "text" in html


def test_strip_keeps_content_of_disallowed_tags():
    assert strip_disallowed_tags("<div>a <span>b</span></div>", ["span"]) == "a <span>b</span>"


def test_strip_keeps_attributes_of_allowed_tags():
    html = '<a href="https://example.com" target="_blank" rel="nofollow">x</a>'
    assert strip_disallowed_tags(html, ["a"]) == html


def test_strip_removes_disallowed_link_protocols():
    assert strip_disallowed_tags('<a href="javascript:alert(1)">x</a>', ["a"]) == "<a>x</a>"


def test_strip_leaves_entities_alone():
    assert strip_disallowed_tags("&lt;b&gt; &amp; <em>x</em>", ["em"]) == "&lt;b&gt; &amp; <em>x</em>"


def test_strip_removes_comments():
    assert strip_disallowed_tags("a<!-- hidden -->b", ["em"]) == "ab"


@pytest.mark.parametrize(
    "tag, expected",
    [("strong", "strong"), ("<strong>", "strong"), (" <BR/> ", "br"), ("</u>", "u")],
)
def test_normalize_tag_name(tag, expected):
    assert normalize_tag_name(tag) == expected


def test_strip_keeps_self_closing_void_tags_in_xhtml_mode():
    assert strip_disallowed_tags("a<br />\nb", ["br"], xhtml=True) == "a<br />\nb"
    assert strip_disallowed_tags("a<br />\nb", ["br"]) == "a<br>\nb"
