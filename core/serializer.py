"""
Serializer Module
Writes email components back out as JSX using canonical tag and prop names.
"""

from typing import Iterable, List, Tuple

from .models import CANONICAL_TAGS, ComponentKind, EmailComponent


def _attr(name: str, value: str) -> str:
    if '"' not in value:
        return f'{name}="{value}"'
    if "'" not in value:
        return f"{name}='{value}'"
    if '}' not in value:
        # Braced values are read back raw, never evaluated.
        return f'{name}={{{value}}}'
    # No form is free; the value cannot be read back verbatim.
    return f'{name}="{value.replace(chr(34), "&quot;")}"'


def _attrs(pairs: Iterable[Tuple[str, str]]) -> str:
    return ' '.join(_attr(name, value) for name, value in pairs)


def component_to_jsx(component: EmailComponent) -> str:
    tag = CANONICAL_TAGS[component.kind]
    p = component.props

    if component.kind is ComponentKind.IMAGE:
        return f"<{tag} {_attrs([('src', p.src), ('alt', p.alt), ('width', p.width)])} />"
    if component.kind is ComponentKind.DIVIDER:
        return f"<{tag} {_attrs([('borderColor', p.border_color), ('borderWidth', p.border_width)])} />"

    if component.kind is ComponentKind.HEADING:
        pairs = [('as', p.heading_level), ('fontSize', p.font_size), ('align', p.align), ('color', p.color)]
    elif component.kind is ComponentKind.TEXT:
        pairs = [('fontSize', p.font_size), ('align', p.align), ('color', p.color)]
    else:
        pairs = [
            ('href', p.href),
            ('backgroundColor', p.background_color),
            ('textColor', p.text_color),
            ('padding', p.padding),
        ]
    return f"<{tag} {_attrs(pairs)}>\n  {p.text}\n</{tag}>"


def to_jsx(components: Iterable[EmailComponent]) -> str:
    """Serialize components in list order, one block each, separated by a blank line."""
    blocks: List[str] = [component_to_jsx(c) for c in components]
    return '\n\n'.join(blocks)
