"""
Component Selector Module
Query helpers over a component list, for agents that need to target a
component without a rendered page.
"""

from typing import Callable, Dict, List, Optional, Sequence

from .models import ComponentKind, EmailComponent

Predicate = Callable[[EmailComponent, int], bool]


class ComponentSelector:
    def __init__(self, components: Sequence[EmailComponent]):
        self.components = list(components)

    def get_by_id(self, component_id: str) -> Optional[EmailComponent]:
        return next((c for c in self.components if c.id == component_id), None)

    def get_by_type(self, kind: ComponentKind) -> List[EmailComponent]:
        return [c for c in self.components if c.kind is kind]

    def get_by_index(self, index: int) -> Optional[EmailComponent]:
        if 0 <= index < len(self.components):
            return self.components[index]
        return None

    def get_index_by_id(self, component_id: str) -> int:
        """Position of the component, or -1."""
        for idx, c in enumerate(self.components):
            if c.id == component_id:
                return idx
        return -1

    def exists(self, component_id: str) -> bool:
        return self.get_index_by_id(component_id) != -1

    def find(self, predicate: Predicate) -> List[EmailComponent]:
        return [c for idx, c in enumerate(self.components) if predicate(c, idx)]

    def find_one(self, predicate: Predicate) -> Optional[EmailComponent]:
        matches = self.find(predicate)
        return matches[0] if matches else None

    def find_by_text(self, search_text: str, case_sensitive: bool = False) -> List[EmailComponent]:
        """Search heading and text components by their text."""
        needle = search_text if case_sensitive else search_text.lower()
        results = []
        for c in self.components:
            if c.kind not in (ComponentKind.HEADING, ComponentKind.TEXT):
                continue
            text = c.props.text if case_sensitive else c.props.text.lower()
            if needle in text:
                results.append(c)
        return results

    def find_by_url(self, search_url: str) -> List[EmailComponent]:
        """Search button links and image sources."""
        results = []
        for c in self.components:
            if c.kind is ComponentKind.BUTTON and search_url in c.props.href:
                results.append(c)
            elif c.kind is ComponentKind.IMAGE and search_url in c.props.src:
                results.append(c)
        return results

    def count_by_type(self) -> Dict[str, int]:
        counts = {kind.value: 0 for kind in ComponentKind}
        for c in self.components:
            counts[c.kind.value] += 1
        return counts

    def first(self, n: int = 1) -> List[EmailComponent]:
        return self.components[:n]

    def last(self, n: int = 1) -> List[EmailComponent]:
        return self.components[-n:] if n > 0 else []

    def get_metadata(self) -> Dict:
        return {
            'totalComponents': len(self.components),
            'componentsByType': self.count_by_type(),
            'componentIds': [c.id for c in self.components],
            'componentTypes': [c.kind.value for c in self.components],
        }
