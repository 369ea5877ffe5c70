"""
Export Builder Module
Renders an email component list as static HTML or React-Email source
using Jinja2 templates.
"""

from pathlib import Path
from typing import Sequence, Union
import logging

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.models import EmailComponent
from core.serializer import to_jsx

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / 'templates'

EXPORT_FORMATS = ('html', 'react-email', 'jsx')


def _js_quote(value: str) -> str:
    """Make a value safe inside a single-quoted JS string literal."""
    return str(value).replace('\\', '\\\\').replace("'", "\\'")


class ExportBuilder:
    def __init__(self, template_dir: Union[str, Path] = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(enabled_extensions=('html',), default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters['js_quote'] = _js_quote

    def generate_html(self, components: Sequence[EmailComponent], title: str = 'Email Template') -> str:
        """Table-based HTML that renders in common email clients."""
        template = self.env.get_template('email.html')
        return template.render(components=components, title=title)

    def generate_react_email(self, components: Sequence[EmailComponent]) -> str:
        """A React-Email component module built from @react-email/components."""
        template = self.env.get_template('react_email.tsx')
        return template.render(components=components)

    def export(self, components: Sequence[EmailComponent], export_format: str) -> str:
        logger.info(f"Exporting {len(components)} components as {export_format}")
        if export_format == 'html':
            return self.generate_html(components)
        if export_format == 'react-email':
            return self.generate_react_email(components)
        if export_format == 'jsx':
            return to_jsx(components)
        raise ValueError(f"Unknown export format: {export_format}. Use one of: {', '.join(EXPORT_FORMATS)}")

