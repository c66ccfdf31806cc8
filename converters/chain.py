"""Ordered prefix rules that classify and render one line at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .base import BaseDocument, BlockKind, LineRecord
from .inline import apply_emphasis
from .registry import TagRegistry, get_tag_registry


@dataclass(frozen=True)
class MatchRule:
    """A literal line prefix and the block kind it selects."""

    prefix: str
    kind: BlockKind

    def matches(self, text: str) -> bool:
        if text == "":
            return False
        return text.startswith(self.prefix)


FALLBACK_KIND = BlockKind.PARAGRAPH

# Tried first to last; the paragraph fallback is applied after all of them.
RULES: Tuple[MatchRule, ...] = (
    MatchRule("# ", BlockKind.HEADER1),
    MatchRule("## ", BlockKind.HEADER2),
    MatchRule("### ", BlockKind.HEADER3),
    MatchRule("#### ", BlockKind.HEADER4),
    MatchRule("##### ", BlockKind.HEADER5),
    MatchRule("###### ", BlockKind.HEADER6),
    MatchRule("- ", BlockKind.BULLET),
    MatchRule("---", BlockKind.HORIZONTAL_RULE),
)


class BlockMatcherChain:
    """First-match-wins rule chain bound to one output document."""

    def __init__(
        self,
        document: BaseDocument,
        registry: Optional[TagRegistry] = None,
        rules: Sequence[MatchRule] = RULES,
    ) -> None:
        self._document = document
        self._registry = registry or get_tag_registry()
        self._rules = tuple(rules)

    @property
    def rules(self) -> Tuple[MatchRule, ...]:
        return self._rules

    def find_rule(self, text: str) -> Optional[MatchRule]:
        """Return the first rule matching ``text``, or None for the fallback."""
        for rule in self._rules:
            if rule.matches(text):
                return rule
        return None

    def classify(self, text: str) -> BlockKind:
        rule = self.find_rule(text)
        return rule.kind if rule is not None else FALLBACK_KIND

    def handle(self, record: LineRecord) -> BlockKind:
        """Render ``record`` into the document and return the kind used."""
        rule = self.find_rule(record.current_line)
        if rule is None:
            kind = FALLBACK_KIND
        else:
            kind = rule.kind
            record.current_line = record.current_line[len(rule.prefix):]

        self._document.add(
            self._registry.opening_tag(kind),
            apply_emphasis(record.current_line),
            self._registry.closing_tag(kind),
        )
        return kind


def build_chain(document: BaseDocument) -> BlockMatcherChain:
    """Return a fresh chain with the default rules writing into ``document``."""

    return BlockMatcherChain(document)
