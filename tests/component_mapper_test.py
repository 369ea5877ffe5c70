import sys
import os
import itertools
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.component_mapper import ComponentMapper, parse_jsx
from core.models import (
    ButtonProps, ComponentKind, DividerProps, HeadingProps, ImageProps, ParsedElement, TextProps,
)


def test_text_defaults_fill_missing_attributes():
    components = parse_jsx('<Text>hi</Text>')
    assert len(components) == 1
    text = components[0]
    assert text.kind is ComponentKind.TEXT
    assert text.props == TextProps(text='hi', align='left', color='#000000', font_size='14px')


def test_unknown_tag_is_skipped():
    assert parse_jsx('<Foo bar="1"/>') == []


def test_unknown_tags_mixed_with_known():
    components = parse_jsx('<Section>x</Section>\n<Text>kept</Text>')
    assert [c.kind for c in components] == [ComponentKind.TEXT]


@pytest.mark.parametrize('tag,kind', [
    ('Img', ComponentKind.IMAGE),
    ('Image', ComponentKind.IMAGE),
    ('Hr', ComponentKind.DIVIDER),
    ('Divider', ComponentKind.DIVIDER),
])
def test_tag_aliases(tag, kind):
    assert parse_jsx(f'<{tag} />')[0].kind is kind


def test_heading_reads_level_from_as():
    heading = parse_jsx('<Heading as="h3" align="center" fontSize="30px" color="#123">Hi</Heading>')[0]
    assert heading.props == HeadingProps(text='Hi', heading_level='h3', align='center', color='#123', font_size='30px')


def test_heading_out_of_range_values_use_defaults():
    heading = parse_jsx('<Heading as="h7" align="justify">Hi</Heading>')[0]
    assert heading.props.heading_level == 'h2'
    assert heading.props.align == 'left'


@pytest.mark.parametrize('attrs', ['bgColor="#111"', 'backgroundColor="#111"'])
def test_button_background_synonyms(attrs):
    button = parse_jsx(f'<Button {attrs}>Buy</Button>')[0]
    assert button.props.background_color == '#111'


@pytest.mark.parametrize('attrs', ['textColor="#222"', 'color="#222"'])
def test_button_text_color_synonyms(attrs):
    button = parse_jsx(f'<Button {attrs}>Buy</Button>')[0]
    assert button.props.text_color == '#222'


def test_button_prefers_bg_color_over_background_color():
    button = parse_jsx('<Button backgroundColor="#bbb" bgColor="#aaa">Buy</Button>')[0]
    assert button.props.background_color == '#aaa'


@pytest.mark.parametrize('attrs', ['borderColor="#333"', 'color="#333"'])
def test_divider_color_synonyms(attrs):
    divider = parse_jsx(f'<Hr {attrs} />')[0]
    assert divider.props == DividerProps(border_color='#333', border_width='1px')


def test_button_defaults():
    button = parse_jsx('<Button></Button>')[0]
    assert button.props == ButtonProps()


def test_image_defaults():
    image = parse_jsx('<Img />')[0]
    assert image.props == ImageProps(src='https://via.placeholder.com/600x300', alt='Image description', width='600')


def test_text_falls_back_to_children_attribute():
    heading = parse_jsx('<Heading children="From prop" />')[0]
    assert heading.props.text == 'From prop'


def test_text_child_wins_over_children_attribute():
    text = parse_jsx('<Text children="prop">child</Text>')[0]
    assert text.props.text == 'child'


def test_placeholder_text_when_nothing_given():
    assert parse_jsx('<Heading></Heading>')[0].props.text == 'Your Heading Here'
    assert parse_jsx('<Text />')[0].props.text == 'Your text content here...'


def test_empty_attribute_uses_default():
    assert parse_jsx('<Text color="">x</Text>')[0].props.color == '#000000'


def test_fresh_ids_on_every_parse():
    first = parse_jsx('<Text>a</Text>')[0]
    second = parse_jsx('<Text>a</Text>')[0]
    assert first.id != second.id
    assert first.props == second.props


def test_injected_id_factory():
    counter = itertools.count(1)
    mapper = ComponentMapper(id_factory=lambda: f'c{next(counter)}')
    components = mapper.to_components([
        ParsedElement('Text', {}, 'a'),
        ParsedElement('Nope', {}, 'b'),
        ParsedElement('Hr', {}),
    ])
    assert [c.id for c in components] == ['c1', 'c2']


def test_to_component_returns_none_for_unknown():
    assert ComponentMapper().to_component(ParsedElement('Section')) is None
