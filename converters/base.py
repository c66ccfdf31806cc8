"""Base types for the Markdown → HTML conversion engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence


class BlockKind(Enum):
    """Semantic category of one rendered line."""

    PARAGRAPH = "paragraph"
    HEADER1 = "header1"
    HEADER2 = "header2"
    HEADER3 = "header3"
    HEADER4 = "header4"
    HEADER5 = "header5"
    HEADER6 = "header6"
    BULLET = "bullet"
    HORIZONTAL_RULE = "horizontal_rule"


@dataclass
class LineRecord:
    """One input line as it flows through the rule chain.

    ``current_line`` is shortened in place when a rule strips its prefix.
    """

    current_line: str = ""


@dataclass(frozen=True)
class ConversionResult:
    """HTML produced for a document plus the kind chosen for every line."""

    html: str
    kinds: Sequence[BlockKind] = field(default_factory=tuple)

    @property
    def line_count(self) -> int:
        return len(self.kinds)

    def block_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for kind in self.kinds:
            counts[kind.value] = counts.get(kind.value, 0) + 1
        return counts

    def as_dict(self) -> Dict[str, object]:
        return {
            "html": self.html,
            "line_count": self.line_count,
            "block_counts": self.block_counts(),
        }


class BaseDocument(ABC):
    """Append-only sink for emitted HTML fragments."""

    @abstractmethod
    def add(self, *fragments: str) -> None:
        """Append one or more fragments in call order."""

    @abstractmethod
    def get(self) -> str:
        """Return every fragment appended so far, concatenated."""


class MarkdownDocument(BaseDocument):
    """Document owned by a single conversion call."""

    def __init__(self) -> None:
        self._fragments: List[str] = []

    def add(self, *fragments: str) -> None:
        self._fragments.extend(fragments)

    def get(self) -> str:
        return "".join(self._fragments)
