"""
Errors Module
Exceptions raised by the email builder core.
"""

from typing import List


class EmailBuilderError(Exception):
    """Base class for builder errors."""


class ComponentNotFoundError(EmailBuilderError):
    def __init__(self, node_id: str):
        super().__init__(f'Component with id "{node_id}" not found')
        self.node_id = node_id


class InvalidJSXError(EmailBuilderError):
    def __init__(self, errors: List[str]):
        super().__init__(f"Invalid JSX: {', '.join(errors)}")
        self.errors = list(errors)


class ConfigError(EmailBuilderError):
    pass
