"""
Agent API Module
An explicit handle agents use to read and rewrite an email as JSX.
"""

from typing import List, Optional, Sequence
import logging

from .component_mapper import parse_jsx
from .errors import ComponentNotFoundError, InvalidJSXError
from .models import EmailComponent, IdFactory, new_component_id
from .serializer import to_jsx
from .validation import validate_jsx

logger = logging.getLogger(__name__)


def find_index(components: Sequence[EmailComponent], node_id: str) -> int:
    for idx, component in enumerate(components):
        if component.id == node_id:
            return idx
    raise ComponentNotFoundError(node_id)


def replace_component(components: Sequence[EmailComponent], node_id: str, jsx: str,
                      id_factory: IdFactory = new_component_id) -> List[EmailComponent]:
    """
    Return a new list where the component with ``node_id`` is replaced by
    whatever ``jsx`` parses to (possibly nothing, possibly several).
    """
    index = find_index(components, node_id)
    replacement = parse_jsx(jsx, id_factory)
    return list(components[:index]) + replacement + list(components[index + 1:])


class AgentAPI:
    def __init__(self, components: Optional[Sequence[EmailComponent]] = None,
                 id_factory: IdFactory = new_component_id):
        self.components: List[EmailComponent] = list(components or [])
        self.id_factory = id_factory

    def to_jsx(self, node_id: Optional[str] = None) -> str:
        """JSX for the whole email, or for one component when ``node_id`` is given."""
        if node_id is not None:
            return to_jsx([self.components[find_index(self.components, node_id)]])
        return to_jsx(self.components)

    def from_jsx(self, jsx: str, node_id: Optional[str] = None, strict: bool = True) -> List[EmailComponent]:
        """
        Replace the whole email, or a single component, with parsed JSX.

        With ``strict`` the markup must pass validate_jsx first, otherwise
        InvalidJSXError is raised and nothing changes.
        """
        if strict:
            result = validate_jsx(jsx)
            if not result.valid:
                logger.info(f"Rejected JSX: {result.errors}")
                raise InvalidJSXError(result.errors)

        if node_id is not None:
            self.components = replace_component(self.components, node_id, jsx, self.id_factory)
        else:
            self.components = parse_jsx(jsx, self.id_factory)
        return self.get_components()

    def get_components(self) -> List[EmailComponent]:
        return list(self.components)
