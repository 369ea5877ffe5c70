"""
Validation Module
Structural checks on raw JSX and content lint rules on parsed components.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence
import re

from .jsx_parser import ATTRIBUTE_SPAN
from .models import TAG_ALIASES, ComponentKind, EmailComponent

KNOWN_TAGS = tuple(TAG_ALIASES)

OPEN_TAG = re.compile(r'<(\w+)(?:\s|>)')
CLOSE_TAG = re.compile(r'</(\w+)>')
SELF_CLOSING_TAG = re.compile(rf'<\w+\b{ATTRIBUTE_SPAN}/>')
TAG_NAME = re.compile(r'<(\w+)')


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {'valid': self.valid, 'errors': list(self.errors)}


@dataclass
class LintIssue:
    message: str
    component_index: int

    def to_dict(self) -> Dict:
        return {'message': self.message, 'componentIndex': self.component_index}


def validate_jsx(source: str) -> ValidationResult:
    """
    Check tag balance and component names. All problems are collected.

    Balance is a plain count of openers against closers; tag names are not
    paired up. Self-closing tags are removed before openers are counted, so
    they count as both opened and closed. A plain literal count would take
    `<Img ... />` as an opener with no closer and flag every image.
    """
    errors = []

    open_count = len(OPEN_TAG.findall(SELF_CLOSING_TAG.sub('', source)))
    close_count = len(CLOSE_TAG.findall(source))
    if open_count != close_count:
        errors.append('Unbalanced tags detected')

    seen = []
    for name in TAG_NAME.findall(source):
        if name not in KNOWN_TAGS and name not in seen:
            seen.append(name)
            errors.append(f"Unknown component: {name}. Valid components: {', '.join(KNOWN_TAGS)}")

    return ValidationResult(valid=not errors, errors=errors)


def lint_components(components: Sequence[EmailComponent], max_text_length: int = 1000) -> List[LintIssue]:
    """Content rules for an email that parses fine but may render badly."""
    issues = []
    for idx, comp in enumerate(components):
        position = idx + 1
        if comp.kind is ComponentKind.BUTTON and not comp.props.href.startswith('http'):
            issues.append(LintIssue(
                f"Component {position}: Button URL should start with http:// or https://", idx))
        elif comp.kind is ComponentKind.IMAGE and not comp.props.alt:
            issues.append(LintIssue(
                f"Component {position}: Image missing alt text (accessibility issue)", idx))
        elif comp.kind is ComponentKind.TEXT and len(comp.props.text) > max_text_length:
            issues.append(LintIssue(
                f"Component {position}: Text block too long (may be truncated in some email clients)", idx))

    if not components:
        issues.append(LintIssue('Email is empty - add some content!', -1))
    return issues
