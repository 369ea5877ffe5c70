import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.jsx_parser import JSXParser


def parse(source):
    return JSXParser().parse(source)


def test_paired_tag_with_props_and_text():
    elements = parse('<Heading as="h1" color="#111">Hello</Heading>')
    assert len(elements) == 1
    el = elements[0]
    assert el.tag_name == 'Heading'
    assert el.attributes == {'as': 'h1', 'color': '#111'}
    assert el.text_child == 'Hello'


def test_self_closing_tag():
    elements = parse('<Img src="a.png" alt="A" width="300" />')
    assert len(elements) == 1
    assert elements[0].tag_name == 'Img'
    assert elements[0].attributes['width'] == '300'
    assert elements[0].text_child is None


def test_self_closing_without_space():
    elements = parse('<Hr/>')
    assert [e.tag_name for e in elements] == ['Hr']


def test_quote_styles_and_braces():
    elements = parse("<Button href='https://x.io' padding={pad} textColor=\"#fff\">Go</Button>")
    attrs = elements[0].attributes
    assert attrs['href'] == 'https://x.io'
    assert attrs['padding'] == 'pad'
    assert attrs['textColor'] == '#fff'


def test_brace_value_is_not_evaluated():
    elements = parse('<Text fontSize={12 + 2}>x</Text>')
    assert elements[0].attributes['fontSize'] == '12 + 2'


def test_malformed_attributes_are_skipped():
    elements = parse('<Text align=left color="red" broken=">x</Text>')
    assert elements[0].tag_name == 'Text'
    assert 'align' not in elements[0].attributes


def test_multiline_content_is_trimmed_and_kept_verbatim():
    source = '<Text>\n  line one\n  line two\n</Text>'
    assert parse(source)[0].text_child == 'line one\n  line two'


def test_nested_tags_stay_in_text():
    elements = parse('<Text>Hello <b>world</b></Text>')
    assert len(elements) == 1
    assert elements[0].text_child == 'Hello <b>world</b>'


def test_empty_content_has_no_text_child():
    assert parse('<Text>   </Text>')[0].text_child is None


def test_unknown_tags_pass_through():
    elements = parse('<Foo bar="1"/><Section>x</Section>')
    assert [e.tag_name for e in elements] == ['Foo', 'Section']


def test_self_closing_tags_come_before_paired_tags():
    # Known limitation of the two-pass scan: source order across tag classes is lost.
    source = '<Text>first</Text>\n<Hr />\n<Heading>last</Heading>'
    assert [e.tag_name for e in parse(source)] == ['Hr', 'Text', 'Heading']


def test_mismatched_closer_yields_nothing():
    assert parse('<Heading>x</Text>') == []


@pytest.mark.parametrize('source', ['', 'plain text', '<', '<Heading', '</Text>', '<Text>unterminated'])
def test_never_raises(source):
    assert parse(source) == []


def test_parse_file(tmp_path):
    path = tmp_path / 'email.jsx'
    path.write_text('<Text>From disk</Text>', encoding='utf-8')
    assert JSXParser().parse_file(path)[0].text_child == 'From disk'


def test_parse_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        JSXParser().parse_file(tmp_path / 'missing.jsx')


def test_greater_than_inside_quoted_value():
    elements = parse('<Img alt="a > b" />\n<Button href=\'x?y>1\' padding={1 > 0}>Go</Button>')
    assert elements[0].attributes['alt'] == 'a > b'
    assert elements[1].attributes == {'href': 'x?y>1', 'padding': '1 > 0'}
    assert elements[1].text_child == 'Go'
