"""
Streaming JSX Parser Module
Keeps a component list in sync with JSX that arrives in arbitrary chunks,
e.g. token by token from an LLM.

The buffer is read line by line with a stack of open tag names:

- a line holding a self-closing tag is kept;
- a line opening a tag is kept and pushes the tag name, unless the same line
  also closes it (this departs from a plain push-on-open rule, which would
  leave a one-line element open forever);
- a closing line is kept and pops only when it closes the tag on top of the
  stack, otherwise it is dropped and the stack is left alone;
- any other line is kept only while some tag is open.

The kept lines form the well-nested prefix, which is parsed after every
chunk. Completed lines never change once a newline has arrived, so their
scan state is cached and only the trailing partial line is re-read.
"""

from enum import Enum
from typing import Callable, List, Optional, Tuple
import logging
import re
import time

from .component_mapper import parse_jsx
from .jsx_parser import ATTRIBUTE_SPAN
from .models import EmailComponent, IdFactory, new_component_id

logger = logging.getLogger(__name__)

SELF_CLOSING_LINE = re.compile(rf'<\w+\b{ATTRIBUTE_SPAN}/>')
OPENING_LINE = re.compile(r'<(\w+)(?:\s|>|$)')
CLOSING_LINE = re.compile(r'</(\w+)>')

UpdateCallback = Callable[[str, List[EmailComponent]], None]


class ParseStatus(Enum):
    PENDING = 'pending'    # nothing complete yet, more input may fix it
    PARSED = 'parsed'      # component list replaced
    INVALID = 'invalid'    # complete markup with no recognisable component


def _scan_line(line: str, stack: List[str], kept: List[str]) -> None:
    trimmed = line.strip()

    if SELF_CLOSING_LINE.search(trimmed):
        kept.append(line)
        return

    opener = OPENING_LINE.search(trimmed)
    if opener and not trimmed.startswith('</'):
        name = opener.group(1)
        if f'</{name}>' not in trimmed[opener.start():]:
            stack.append(name)
        kept.append(line)
        return

    closer = CLOSING_LINE.search(trimmed)
    if closer:
        if stack and closer.group(1) == stack[-1]:
            stack.pop()
            kept.append(line)
        return

    if stack:
        kept.append(line)


class StreamingJSXParser:
    def __init__(self, on_update: Optional[UpdateCallback] = None,
                 id_factory: IdFactory = new_component_id):
        self.on_update = on_update
        self.id_factory = id_factory
        self.reset()

    def reset(self) -> None:
        """Drop the buffer, open tags and components."""
        self._buffer = ''
        self._committed = 0
        self._stack: List[str] = []
        self._kept: List[str] = []
        self._tail_stack: List[str] = []
        self._tail_kept: List[str] = []
        self._components: List[EmailComponent] = []
        self.status = ParseStatus.PENDING

    def append(self, chunk: str) -> ParseStatus:
        """Add a chunk and re-parse the well-nested prefix."""
        self._buffer += chunk
        self._scan()

        prefix = self.well_formed_prefix()
        if not prefix:
            self.status = ParseStatus.PENDING
            return self.status

        components = parse_jsx(prefix, self.id_factory)
        if components:
            self._components = components
            self.status = ParseStatus.PARSED
            if self.on_update:
                self.on_update(chunk, list(components))
        elif self._tail_stack:
            self.status = ParseStatus.PENDING
        else:
            self.status = ParseStatus.INVALID
        return self.status

    def finalize(self) -> ParseStatus:
        """Parse the whole buffer once the stream has ended."""
        components = parse_jsx(self._buffer, self.id_factory)
        if not components:
            logger.warning(f"Failed to finalize parse: no components in {len(self._buffer)} buffered characters")
            self.status = ParseStatus.INVALID
            return self.status

        self._components = components
        self.status = ParseStatus.PARSED
        if self.on_update:
            self.on_update('', list(components))
        return self.status

    def get_components(self) -> List[EmailComponent]:
        return list(self._components)

    def get_buffer(self) -> str:
        return self._buffer

    @property
    def open_tags(self) -> Tuple[str, ...]:
        return tuple(self._tail_stack)

    def well_formed_prefix(self) -> str:
        return ''.join(line + '\n' for line in self._kept + self._tail_kept).strip()

    def _scan(self) -> None:
        last_newline = self._buffer.rfind('\n')
        if last_newline >= self._committed:
            for line in self._buffer[self._committed:last_newline].split('\n'):
                _scan_line(line, self._stack, self._kept)
            self._committed = last_newline + 1

        self._tail_stack = list(self._stack)
        self._tail_kept = []
        _scan_line(self._buffer[self._committed:], self._tail_stack, self._tail_kept)


def simulate_agent_stream(jsx: str, on_chunk: UpdateCallback, chunk_size: int = 5,
                          delay_ms: int = 50, id_factory: IdFactory = new_component_id) -> List[EmailComponent]:
    """Feed JSX through a streaming parser in fixed-size chunks, as an agent would."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    parser = StreamingJSXParser(id_factory=id_factory)
    for start in range(0, len(jsx), chunk_size):
        chunk = jsx[start:start + chunk_size]
        parser.append(chunk)
        on_chunk(chunk, parser.get_components())
        if delay_ms:
            time.sleep(delay_ms / 1000)

    parser.finalize()
    return parser.get_components()
