"""

Laid-out pages - final page representation ready for rendering.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Union

from .fragments import FragmentSpan
from .geometry import Size
from .models import DocText


@dataclass(slots=True)
class PlacedLine:
    """A queued line with its resolved baseline position."""
    doc_text: DocText
    x: float
    y: float
    spans: List[FragmentSpan] = field(default_factory=list)

    @property
    def text(self) -> str:
        return self.doc_text.text or ""

    @property
    def font_size(self) -> float:
        return self.doc_text.text_type.font_size


@dataclass(slots=True)
class LayoutPage:
    """One page of laid-out content plus its header and footer lines."""
    number: int
    size: Size
    lines: List[PlacedLine] = field(default_factory=list)
    header: List[PlacedLine] = field(default_factory=list)
    footer: List[PlacedLine] = field(default_factory=list)

    def add_line(self, line: PlacedLine) -> None:
        self.lines.append(line)

    def all_lines(self) -> Iterator[PlacedLine]:
        yield from self.lines
        yield from self.header
        yield from self.footer

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True, slots=True)
class SplicedBlock:
    """Externally rendered pages inserted verbatim between laid-out pages."""
    data: bytes


FlowItem = Union[LayoutPage, SplicedBlock]
