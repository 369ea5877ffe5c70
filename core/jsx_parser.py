"""
JSX Parser Module
A flat, regex-based parser for the JSX subset used by email templates.

Self-closing tags are collected first, then paired tags are scanned over the
remaining text. Paired tag content is kept as one opaque text node, so nested
markup is never parsed into children. Because the two tag classes are scanned
separately, a self-closing tag always sorts before every paired tag in the
result, whatever their order in the source.
"""

from pathlib import Path
from typing import Dict, List, Union
import logging
import re

from .models import ParsedElement

logger = logging.getLogger(__name__)

# Attribute span: a `>` inside a quoted or braced value does not end the tag.
# A quote or brace that is never closed is taken as a plain character.
ATTRIBUTE_SPAN = (
    r"""(?:[^>"'{]"""
    r"""|"[^"]*"|'[^']*'|\{[^}]*\}"""
    r"""|"(?![^"]*")|'(?![^']*')|\{(?![^}]*\}))*?"""
)

SELF_CLOSING_TAG = re.compile(rf'<(\w+)\b({ATTRIBUTE_SPAN})/>')
PAIRED_TAG = re.compile(rf'<(\w+)\b({ATTRIBUTE_SPAN})>(.*?)</\1>', re.DOTALL)
# name="v", name='v' or name={raw}
PROP = re.compile(r'(\w+)=(?:\{([^}]*)\}|"([^"]*)"|\'([^\']*)\')')


class JSXParser:
    def parse(self, source: str) -> List[ParsedElement]:
        """Parse a JSX fragment into elements. Never raises on odd markup."""
        elements = []

        for match in SELF_CLOSING_TAG.finditer(source):
            elements.append(ParsedElement(
                tag_name=match.group(1),
                attributes=self._parse_props(match.group(2)),
            ))

        remainder = SELF_CLOSING_TAG.sub('', source)
        for match in PAIRED_TAG.finditer(remainder):
            content = match.group(3).strip()
            elements.append(ParsedElement(
                tag_name=match.group(1),
                attributes=self._parse_props(match.group(2)),
                text_child=content or None,
            ))

        logger.debug(f"Parsed {len(elements)} elements from {len(source)} characters")
        return elements

    def parse_file(self, file_path: Union[str, Path]) -> List[ParsedElement]:
        """Parse a .jsx/.tsx file."""
        path = Path(file_path)
        try:
            source = path.read_text(encoding='utf-8')
        except OSError as e:
            logger.error(f"Error reading JSX file {path}: {str(e)}", exc_info=True)
            raise
        return self.parse(source)

    def _parse_props(self, props_str: str) -> Dict[str, str]:
        """Parse a JSX props string into a flat name -> string dictionary."""
        props = {}
        for match in PROP.finditer(props_str):
            name, braced, double_quoted, single_quoted = match.groups()
            for value in (braced, double_quoted, single_quoted):
                if value is not None:
                    props[name] = value
                    break
        return props
