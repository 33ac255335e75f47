"""Test paragraph value extraction on hand-built and parsed paragraphs"""

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from jobboard.core.document import CommentNode, Element, TextNode, parse_html
from jobboard.portal.extraction.text import extract_text
from portal_pages import protected_email


def paragraph(*children):
    return Element("p", children=list(children))


LABEL = Element("strong", children=[TextNode("Contact:")])
ICON = Element("i", attrs={"class": "icon"})


def test_skips_label_and_icon():
    p = paragraph(LABEL, ICON, TextNode("  Jane Smith  "))
    assert extract_text(p) == "Jane Smith"


def test_skips_first_two_children_regardless_of_type():
    p = paragraph(TextNode("Label"), TextNode("more label"), TextNode("value"))
    assert extract_text(p) == "value"

    p = paragraph(Element("br"), Element("br"), TextNode("value"))
    assert extract_text(p) == "value"


def test_fewer_than_two_children_is_empty():
    assert extract_text(paragraph()) == ""
    assert extract_text(paragraph(TextNode("only label"))) == ""
    assert extract_text(paragraph(LABEL, ICON)) == ""


def test_line_breaks_become_newlines():
    p = paragraph(LABEL, ICON, TextNode("154 Hicks Way"), Element("br"), TextNode("Room 10"))
    assert extract_text(p) == "154 Hicks Way\nRoom 10"


def test_link_text_is_space_prefixed():
    link = Element("a", attrs={"href": "https://umass.edu"}, children=[TextNode("umass.edu")])
    p = paragraph(LABEL, ICON, TextNode("See"), link)
    assert extract_text(p) == "See umass.edu"


def test_protected_email_on_anchor():
    link = Element("a", attrs={"data-cfemail": "5a3b1a387439"}, children=[TextNode("[email protected]")])
    p = paragraph(LABEL, ICON, TextNode("Email"), link)
    assert extract_text(p) == "Email a@b.c"


def test_protected_email_alone_is_trimmed():
    link = Element("a", attrs={"data-cfemail": "5a3b1a387439"})
    assert extract_text(paragraph(LABEL, ICON, link)) == "a@b.c"


def test_protected_email_on_descendant():
    span = Element("span", attrs={"class": "__cf_email__", "data-cfemail": "5a3b1a387439"})
    link = Element("a", attrs={"href": "/cdn-cgi/l/email-protection"}, children=[span])
    assert extract_text(paragraph(LABEL, ICON, link)) == "a@b.c"


def test_email_decoding_can_be_disabled():
    link = Element("a", attrs={"data-cfemail": "5a3b1a387439"}, children=[TextNode("[email protected]")])
    assert extract_text(paragraph(LABEL, ICON, link), decode_emails=False) == "[email protected]"


def test_other_elements_contribute_nothing():
    p = paragraph(
        LABEL, ICON, TextNode("Amherst"), Element("span", children=[TextNode("ignored")])
    )
    assert extract_text(p) == "Amherst"


def test_parsed_paragraph_with_protected_email():
    html = f'<p><strong>Email</strong><i></i>{protected_email("jobs@umass.edu")}</p>'
    p = parse_html(html).find_all("p")[0]
    assert extract_text(p) == "jobs@umass.edu"


def test_comment_counts_as_a_skipped_child():
    p = paragraph(LABEL, CommentNode("x"), TextNode("Jane"), ICON, TextNode(" Smith"))
    assert extract_text(p) == "Jane Smith"


def test_comment_after_prefix_contributes_nothing():
    p = paragraph(LABEL, ICON, TextNode("Jane"), CommentNode("x"), TextNode(" Smith"))
    assert extract_text(p) == "Jane Smith"


def test_parsed_paragraph_with_comment_in_prefix():
    p = parse_html("<p><strong>Name</strong><!--x-->Jane<i></i> Smith</p>").find_all("p")[0]
    assert extract_text(p) == "Jane Smith"
