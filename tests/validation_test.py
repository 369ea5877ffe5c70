import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.component_mapper import parse_jsx
from core.models import ComponentKind, EmailComponent, ImageProps, TextProps
from core.starter_templates import list_templates
from core.validation import lint_components, validate_jsx


def test_balanced_heading_is_valid():
    result = validate_jsx('<Heading>x</Heading>')
    assert result.valid
    assert result.errors == []


def test_balance_is_counted_not_paired():
    # One opener and one closer: the count balances even though the names differ.
    result = validate_jsx('<Heading>x</Text>')
    assert not any('Unbalanced' in e for e in result.errors)


def test_missing_closer_is_unbalanced():
    result = validate_jsx('<Heading>x')
    assert not result.valid
    assert result.errors == ['Unbalanced tags detected']


def test_extra_closer_is_unbalanced():
    assert validate_jsx('<Text>x</Text></Text>').errors == ['Unbalanced tags detected']


def test_self_closing_tags_do_not_unbalance():
    assert validate_jsx('<Img src="a.png" />\n<Hr/>\n<Text>x</Text>').valid


def test_unknown_component_named_in_error():
    result = validate_jsx('<Foo>x</Foo>')
    assert not result.valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith('Unknown component: Foo.')


def test_each_unknown_name_reported_once():
    result = validate_jsx('<Foo /><Bar>x</Bar><Foo />')
    unknown = [e for e in result.errors if e.startswith('Unknown component')]
    assert len(unknown) == 2
    assert 'Foo' in unknown[0] and 'Bar' in unknown[1]


def test_errors_are_collected_together():
    result = validate_jsx('<Section>\n<Text>x</Text>')
    assert result.errors[0] == 'Unbalanced tags detected'
    assert any('Section' in e for e in result.errors)


def test_to_dict():
    assert validate_jsx('<Text>x</Text>').to_dict() == {'valid': True, 'errors': []}


@pytest.mark.parametrize('template', list_templates(), ids=lambda t: t.key)
def test_starter_templates_validate(template):
    assert validate_jsx(template.jsx).valid
    assert parse_jsx(template.jsx)


def test_lint_flags_empty_email():
    issues = lint_components([])
    assert [(i.message, i.component_index) for i in issues] == [('Email is empty - add some content!', -1)]


def test_lint_flags_button_without_http():
    issues = lint_components(parse_jsx('<Button href="mailto:a@b.c">Mail</Button>'))
    assert len(issues) == 1
    assert issues[0].component_index == 0
    assert 'Button URL' in issues[0].message


def test_lint_flags_missing_alt():
    image = EmailComponent('i', ComponentKind.IMAGE, ImageProps(alt=''))
    issues = lint_components([image])
    assert issues[0].message == 'Component 1: Image missing alt text (accessibility issue)'


def test_lint_flags_long_text():
    text = EmailComponent('t', ComponentKind.TEXT, TextProps(text='x' * 21))
    assert len(lint_components([text], max_text_length=20)) == 1
    assert lint_components([text], max_text_length=21) == []


def test_lint_clean_template():
    assert lint_components(parse_jsx(list_templates()[0].jsx)) == []


def test_greater_than_in_self_closing_attribute_is_balanced():
    assert validate_jsx('<Img alt="Before > After" />\n<Text>x</Text>').valid
