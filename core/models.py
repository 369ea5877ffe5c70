"""
Component Model Module
Email component kinds, per-kind property records and builder defaults.
"""

from dataclasses import dataclass, field, fields, asdict
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type, Union
import uuid


class ComponentKind(Enum):
    HEADING = 'heading'
    TEXT = 'text'
    BUTTON = 'button'
    IMAGE = 'image'
    DIVIDER = 'divider'


# Surface tag spelling -> component kind
TAG_ALIASES: Dict[str, ComponentKind] = {
    'Heading': ComponentKind.HEADING,
    'Text': ComponentKind.TEXT,
    'Button': ComponentKind.BUTTON,
    'Img': ComponentKind.IMAGE,
    'Image': ComponentKind.IMAGE,
    'Hr': ComponentKind.DIVIDER,
    'Divider': ComponentKind.DIVIDER,
}

# Tag names used when writing JSX back out
CANONICAL_TAGS: Dict[ComponentKind, str] = {
    ComponentKind.HEADING: 'Heading',
    ComponentKind.TEXT: 'Text',
    ComponentKind.BUTTON: 'Button',
    ComponentKind.IMAGE: 'Img',
    ComponentKind.DIVIDER: 'Hr',
}

HEADING_LEVELS = ('h1', 'h2', 'h3', 'h4')
ALIGNMENTS = ('left', 'center', 'right')

# Fields restricted to a fixed set of values, whichever record holds them
FIELD_CHOICES = {'heading_level': HEADING_LEVELS, 'align': ALIGNMENTS}


def _to_camel(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


class _PropsMixin:
    """JSON conversion shared by the property records."""

    def to_dict(self) -> Dict[str, str]:
        return {_to_camel(k): v for k, v in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        data = data or {}
        values = {}
        for f in fields(cls):
            value = data.get(_to_camel(f.name), data.get(f.name))
            if value in (None, ''):
                continue
            value = str(value)
            if f.name in FIELD_CHOICES and value not in FIELD_CHOICES[f.name]:
                continue
            values[f.name] = value
        return cls(**values)


@dataclass
class HeadingProps(_PropsMixin):
    text: str = 'Your Heading Here'
    heading_level: str = 'h2'
    align: str = 'left'
    color: str = '#000000'
    font_size: str = '24px'


@dataclass
class TextProps(_PropsMixin):
    text: str = 'Your text content here...'
    align: str = 'left'
    color: str = '#000000'
    font_size: str = '14px'


@dataclass
class ButtonProps(_PropsMixin):
    text: str = 'Click Me'
    href: str = 'https://example.com'
    background_color: str = '#3b82f6'
    text_color: str = '#ffffff'
    padding: str = '12px 24px'


@dataclass
class ImageProps(_PropsMixin):
    src: str = 'https://via.placeholder.com/600x300'
    alt: str = 'Image description'
    width: str = '600'


@dataclass
class DividerProps(_PropsMixin):
    border_color: str = '#e5e7eb'
    border_width: str = '1px'


ComponentProps = Union[HeadingProps, TextProps, ButtonProps, ImageProps, DividerProps]

PROPS_BY_KIND: Dict[ComponentKind, Type] = {
    ComponentKind.HEADING: HeadingProps,
    ComponentKind.TEXT: TextProps,
    ComponentKind.BUTTON: ButtonProps,
    ComponentKind.IMAGE: ImageProps,
    ComponentKind.DIVIDER: DividerProps,
}


def default_props(kind: ComponentKind) -> ComponentProps:
    """Return the property set a freshly added component of this kind receives."""
    return PROPS_BY_KIND[kind]()


def new_component_id() -> str:
    return uuid.uuid4().hex


IdFactory = Callable[[], str]


@dataclass
class ParsedElement:
    """A single tag found in a JSX fragment, before any component mapping."""
    tag_name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    text_child: Optional[str] = None


@dataclass
class EmailComponent:
    id: str
    kind: ComponentKind
    props: ComponentProps

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'type': self.kind.value,
            'props': self.props.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], id_factory: IdFactory = new_component_id) -> 'EmailComponent':
        """Build a component from its JSON form; unknown types raise ValueError."""
        kind = ComponentKind(data.get('type'))
        props = PROPS_BY_KIND[kind].from_dict(data.get('props'))
        return cls(id=data.get('id') or id_factory(), kind=kind, props=props)

    @classmethod
    def create(cls, kind: ComponentKind, id_factory: IdFactory = new_component_id) -> 'EmailComponent':
        return cls(id=id_factory(), kind=kind, props=default_props(kind))
