"""
Syllabus tree model.

Nodes are a tagged variant decided once at construction: ``Leaf`` (a
micro-topic carrying SRS tracking state) or ``Parent`` (a roll-up node whose
status is derived from its children). ``SyllabusTree`` owns every node in a
flat id -> node map plus a parent index, so lookups and ancestor walks never
re-scan the hierarchy.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from upsc_tracker.core.logging import DOMAIN_SYLLABUS, get_domain_logger

logger = get_domain_logger(__name__, DOMAIN_SYLLABUS)

REVISION_KEYS = ("d1", "d3", "d7", "d21")


class Status(str, Enum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TopicNotFoundError(KeyError):
    def __init__(self, topic_id: str):
        super().__init__(topic_id)
        self.topic_id = topic_id

    def __str__(self) -> str:
        return f"topic {self.topic_id} not found"


def default_revisions() -> dict[str, bool]:
    return {key: False for key in REVISION_KEYS}


def parse_status(value) -> Status | None:
    if isinstance(value, Status):
        return value
    try:
        return Status(str(value))
    except ValueError:
        return None


def parse_start_date(value) -> date | None:
    """Accept ``None``, a ``date`` or an ISO ``YYYY-MM-DD`` string; raise ValueError otherwise."""
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


@dataclass
class Leaf:
    id: str
    name: str
    status: Status = Status.NOT_STARTED
    start_date: date | None = None
    revisions: dict[str, bool] = field(default_factory=default_revisions)

    is_leaf = True

    def progress_record(self) -> dict:
        """Persisted shape: ``{status, startDate, revisions}``."""
        return {
            "status": self.status.value,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "revisions": {key: bool(self.revisions.get(key, False)) for key in REVISION_KEYS},
        }


@dataclass
class Parent:
    id: str
    name: str
    status: Status = Status.NOT_STARTED
    children: list[str] = field(default_factory=list)

    is_leaf = False


Node = Leaf | Parent


class SyllabusTree:
    def __init__(self):
        self.roots: list[str] = []
        self.nodes: dict[str, Node] = {}
        self._parents: dict[str, str | None] = {}

    @classmethod
    def from_definitions(cls, definitions: list[dict]) -> SyllabusTree:
        """Build a tree from normalized definitions (see ``normalizer.normalize``)."""
        tree = cls()
        for definition in definitions:
            root_id = tree._add(definition, parent_id=None)
            if root_id is not None:
                tree.roots.append(root_id)
        return tree

    def _add(self, definition: dict, parent_id: str | None) -> str | None:
        node_id = definition["id"]
        if node_id in self.nodes:
            logger.warning("Duplicate syllabus id dropped id=%s parent=%s", node_id, parent_id)
            return None
        status = parse_status(definition.get("status")) or Status.NOT_STARTED
        name = str(definition.get("name") or node_id)
        children = definition.get("children") or []
        if children:
            node: Node = Parent(id=node_id, name=name, status=status)
            self.nodes[node_id] = node
            self._parents[node_id] = parent_id
            for child in children:
                child_id = self._add(child, parent_id=node_id)
                if child_id is not None:
                    node.children.append(child_id)
            return node_id

        try:
            start_date = parse_start_date(definition.get("startDate"))
        except ValueError:
            logger.warning("Invalid startDate ignored id=%s value=%r", node_id, definition.get("startDate"))
            start_date = None
        revisions = default_revisions()
        revisions.update({k: bool(v) for k, v in (definition.get("revisions") or {}).items() if k in REVISION_KEYS})
        self.nodes[node_id] = Leaf(id=node_id, name=name, status=status, start_date=start_date, revisions=revisions)
        self._parents[node_id] = parent_id
        return node_id

    def __contains__(self, node_id: str) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, node_id: str) -> Node | None:
        return self.nodes.get(node_id)

    def require(self, node_id: str) -> Node:
        node = self.nodes.get(node_id)
        if node is None:
            raise TopicNotFoundError(node_id)
        return node

    def parent_of(self, node_id: str) -> Parent | None:
        parent_id = self._parents.get(node_id)
        return self.nodes[parent_id] if parent_id else None  # type: ignore[return-value]

    def ancestors(self, node_id: str) -> list[Parent]:
        """Nearest first."""
        chain: list[Parent] = []
        parent = self.parent_of(node_id)
        while parent is not None:
            chain.append(parent)
            parent = self.parent_of(parent.id)
        return chain

    def walk(self, node_id: str | None = None) -> Iterator[Node]:
        """Depth-first pre-order over the whole forest, or the subtree under ``node_id``."""
        stack = [node_id] if node_id is not None else list(reversed(self.roots))
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            if isinstance(node, Parent):
                stack.extend(reversed(node.children))

    def leaves(self, node_id: str | None = None) -> Iterator[Leaf]:
        for node in self.walk(node_id):
            if isinstance(node, Leaf):
                yield node

    def to_dict(self, node_id: str) -> dict:
        """Nested projection of one subtree, in the persisted key style."""
        node = self.require(node_id)
        if isinstance(node, Leaf):
            return {"id": node.id, "name": node.name, "children": [], **node.progress_record()}
        return {
            "id": node.id,
            "name": node.name,
            "status": node.status.value,
            "children": [self.to_dict(child_id) for child_id in node.children],
        }

    def to_forest(self) -> list[dict]:
        return [self.to_dict(root_id) for root_id in self.roots]
