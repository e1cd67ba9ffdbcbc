"""
Text -> Graph extraction.

Accepts loosely structured lines such as:
    frontend ui connects to api gateway
    api gateway -> auth service, database
    queue publishes to api gateway

Only fixed lexical heuristics are applied. Lines that match no connector
pattern become standalone nodes; nothing here raises on bad input.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from archmirror.graph.types import Node, Edge, Graph
from archmirror.parsing.classifier import classify

logger = logging.getLogger(__name__)

LINE_SPLIT = re.compile(r"\n+")
WHITESPACE = re.compile(r"\s+")

ARROW_SPLIT = re.compile(r"->|→| to ", re.IGNORECASE)
TRAILING_VERB = re.compile(
    r"\b(connects?|talks?|calls?|publishes?|reads|writes)\s*$",
    re.IGNORECASE,
)
VERB_PHRASE = re.compile(
    r"(.*?)(connects?|talks?|calls?|publishes?|sends|reads|writes)\s+to\s+(.*)",
    re.IGNORECASE,
)
TARGET_SPLIT = re.compile(r",| and ", re.IGNORECASE)
WORD_SPLIT = re.compile(r"[\s_-]+")


def title_case(name: str) -> str:
    return " ".join(
        word[:1].upper() + word[1:] for word in WORD_SPLIT.split(name)
    )


def normalize_line(line: str) -> str:
    """Pad commas with spaces and collapse whitespace runs."""
    return WHITESPACE.sub(" ", line.replace(",", " , ")).strip()


def split_targets(text: str) -> List[str]:
    return [
        part.strip()
        for part in TARGET_SPLIT.split(text)
        if part.strip()
    ]


def dedupe_edges(edges: List[Edge]) -> List[Edge]:
    """
    Drop self-loops and collapse repeated (source, target) pairs.
    The first occurrence keeps its position; a later label overwrites it.
    """
    kept: Dict[Tuple[str, str], Edge] = {}

    for edge in edges:
        if edge.source == edge.target:
            continue

        key = (edge.source, edge.target)
        if key in kept:
            if edge.label:
                kept[key].label = edge.label
            continue

        kept[key] = Edge(source=edge.source, target=edge.target, label=edge.label)

    return list(kept.values())


class _GraphBuilder:
    """Per-run node registry. Insertion order is first-mention order."""

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.edges: List[Edge] = []

    def ensure(self, name: str) -> Optional[Node]:
        key = name.strip().lower()
        if not key:
            return None

        node = self.nodes.get(key)
        if node is None:
            node = Node(
                id=key,
                label=title_case(key),
                kind=classify(key),
            )
            self.nodes[key] = node
        return node

    def connect(self, source_name: str, target_names: List[str]):
        src = self.ensure(source_name)
        for name in target_names:
            dst = self.ensure(name)
            if src and dst:
                self.edges.append(Edge(source=src.id, target=dst.id))

    # ---------- rules, tried in order ----------

    def apply_arrow(self, line: str) -> bool:
        parts = [p.strip() for p in ARROW_SPLIT.split(line)]
        if len(parts) < 2:
            return False

        source = TRAILING_VERB.sub("", parts[0]).strip()
        targets = split_targets(" to ".join(parts[1:]))
        self.connect(source, targets)
        return True

    def apply_verb_phrase(self, line: str) -> bool:
        match = VERB_PHRASE.match(line)
        if not match:
            return False

        self.connect(match.group(1), split_targets(match.group(3)))
        return True

    def add_line(self, line: str):
        if self.apply_arrow(line):
            return
        if self.apply_verb_phrase(line):
            return
        # orphan line
        self.ensure(line)

    def build(self) -> Graph:
        return Graph(
            nodes=list(self.nodes.values()),
            edges=dedupe_edges(self.edges),
        )


def extract(text: str) -> Graph:
    """
    Build a fresh, un-laid-out Graph from free-form text.
    Identical input always yields the same ids, kinds and edges.
    """
    lines = [
        line.strip()
        for line in LINE_SPLIT.split(text or "")
        if line.strip()
    ]

    builder = _GraphBuilder()
    for raw in lines:
        builder.add_line(normalize_line(raw))

    graph = builder.build()
    logger.debug(
        "Extracted %d nodes and %d edges from %d lines",
        len(graph.nodes),
        len(graph.edges),
        len(lines),
    )
    return graph
