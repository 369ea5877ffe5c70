"""
Component Mapper Module
Turns parsed JSX elements into canonical email components.
"""

from typing import Dict, List, Optional, Sequence, Tuple
import logging

from .jsx_parser import JSXParser
from .models import (
    ALIGNMENTS,
    HEADING_LEVELS,
    TAG_ALIASES,
    ButtonProps,
    ComponentKind,
    DividerProps,
    EmailComponent,
    HeadingProps,
    IdFactory,
    ImageProps,
    ParsedElement,
    TextProps,
    new_component_id,
)

logger = logging.getLogger(__name__)


def _pick(attrs: Dict[str, str], names: Sequence[str], default: str) -> str:
    """First non-empty attribute among the synonyms, else the default."""
    for name in names:
        value = attrs.get(name)
        if value:
            return value
    return default


def _pick_choice(attrs: Dict[str, str], names: Sequence[str], choices: Tuple[str, ...], default: str) -> str:
    value = _pick(attrs, names, default)
    if value not in choices:
        logger.debug(f"Ignoring out-of-range value {value!r} for {names[0]}, using {default!r}")
        return default
    return value


class ComponentMapper:
    def __init__(self, id_factory: IdFactory = new_component_id):
        self.id_factory = id_factory

    def to_component(self, element: ParsedElement) -> Optional[EmailComponent]:
        """Map one element; tags outside the alias table give None."""
        kind = TAG_ALIASES.get(element.tag_name)
        if kind is None:
            logger.debug(f"Skipping unknown tag: {element.tag_name}")
            return None

        attrs = element.attributes
        if kind is ComponentKind.HEADING:
            d = HeadingProps()
            props = HeadingProps(
                text=self._text(element, d.text),
                heading_level=_pick_choice(attrs, ('as', 'headingLevel'), HEADING_LEVELS, d.heading_level),
                align=_pick_choice(attrs, ('align',), ALIGNMENTS, d.align),
                color=_pick(attrs, ('color',), d.color),
                font_size=_pick(attrs, ('fontSize',), d.font_size),
            )
        elif kind is ComponentKind.TEXT:
            d = TextProps()
            props = TextProps(
                text=self._text(element, d.text),
                align=_pick_choice(attrs, ('align',), ALIGNMENTS, d.align),
                color=_pick(attrs, ('color',), d.color),
                font_size=_pick(attrs, ('fontSize',), d.font_size),
            )
        elif kind is ComponentKind.BUTTON:
            d = ButtonProps()
            props = ButtonProps(
                text=self._text(element, d.text),
                href=_pick(attrs, ('href',), d.href),
                background_color=_pick(attrs, ('bgColor', 'backgroundColor'), d.background_color),
                text_color=_pick(attrs, ('textColor', 'color'), d.text_color),
                padding=_pick(attrs, ('padding',), d.padding),
            )
        elif kind is ComponentKind.IMAGE:
            d = ImageProps()
            props = ImageProps(
                src=_pick(attrs, ('src',), d.src),
                alt=_pick(attrs, ('alt',), d.alt),
                width=_pick(attrs, ('width',), d.width),
            )
        else:
            d = DividerProps()
            props = DividerProps(
                border_color=_pick(attrs, ('borderColor', 'color'), d.border_color),
                border_width=_pick(attrs, ('borderWidth',), d.border_width),
            )

        return EmailComponent(id=self.id_factory(), kind=kind, props=props)

    def to_components(self, elements: Sequence[ParsedElement]) -> List[EmailComponent]:
        components = []
        for element in elements:
            component = self.to_component(element)
            if component is not None:
                components.append(component)
        return components

    @staticmethod
    def _text(element: ParsedElement, default: str) -> str:
        return element.text_child or element.attributes.get('children') or default


def parse_jsx(source: str, id_factory: IdFactory = new_component_id) -> List[EmailComponent]:
    """Parse JSX text straight into email components, skipping unknown tags."""
    elements = JSXParser().parse(source)
    return ComponentMapper(id_factory).to_components(elements)
