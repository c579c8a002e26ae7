"""
X-Bar phrase-structure trees.

A `PhraseTree` is an arena: nodes live in a list and refer to each other by
index. Upward navigation uses each node's optional `parent` index, so a tree
never holds reference cycles and can be copied or serialized node by node.

Every phrase has the fixed three-level shape

    XP (specifier?, bar, adjuncts*)
     └─ X' (head?, complement?)
         └─ X (token)

Each level has at most two structural slots (XP: specifier + bar, X': head +
complement). Adjuncts hang off the XP in an unbounded side list and do not
count against binary branching.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional

from .grammar import NodeLevel, PhraseCategory, SemanticRole, head_symbol
from .token import Token


class Slot(Enum):
    """Position a child occupies under its parent."""
    HEAD = "head"
    BAR = "bar"
    SPECIFIER = "specifier"
    COMPLEMENT = "complement"
    ADJUNCT = "adjunct"


# Slots each level may fill
_LEVEL_SLOTS = {
    NodeLevel.HEAD: (),
    NodeLevel.BAR: (Slot.HEAD, Slot.COMPLEMENT),
    NodeLevel.PHRASE: (Slot.SPECIFIER, Slot.BAR, Slot.ADJUNCT),
}


@dataclass
class PhraseNode:
    """One node of the arena. Child and parent links are arena indices."""
    index: int
    level: NodeLevel
    category: PhraseCategory
    token: Optional[Token] = None
    head: Optional[int] = None
    complement: Optional[int] = None
    specifier: Optional[int] = None
    bar: Optional[int] = None
    adjuncts: List[int] = field(default_factory=list)
    role: SemanticRole = SemanticRole.NONE
    parent: Optional[int] = None

    @property
    def is_head(self) -> bool:
        return self.level == NodeLevel.HEAD

    @property
    def is_bar(self) -> bool:
        return self.level == NodeLevel.BAR

    @property
    def is_phrase(self) -> bool:
        return self.level == NodeLevel.PHRASE

    def structural_children(self) -> List[int]:
        """Specifier and bar for phrases, head and complement for bars."""
        if self.is_phrase:
            slots = (self.specifier, self.bar)
        elif self.is_bar:
            slots = (self.head, self.complement)
        else:
            slots = ()
        return [index for index in slots if index is not None]

    def children(self) -> List[int]:
        return self.structural_children() + list(self.adjuncts)


class PhraseTree:
    """Arena of `PhraseNode`s with a designated root."""

    def __init__(self):
        self.nodes: List[PhraseNode] = []
        self.root: Optional[int] = None

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> PhraseNode:
        if index is None or not 0 <= index < len(self.nodes):
            raise IndexError(f"No node at index {index!r}")
        return self.nodes[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PhraseTree):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"PhraseTree(nodes={len(self.nodes)}, root={self.root})"

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, level: NodeLevel, category: PhraseCategory,
                 token: Optional[Token] = None,
                 role: SemanticRole = SemanticRole.NONE) -> int:
        """Append a detached node and return its index."""
        if level == NodeLevel.HEAD and token is None:
            raise ValueError("A head node must wrap a token")
        node = PhraseNode(index=len(self.nodes), level=level, category=category,
                          token=token, role=role)
        self.nodes.append(node)
        return node.index

    def attach(self, parent: int, child: Optional[int], slot) -> None:
        """
        Link `child` under `parent` in `slot`.

        Raises:
            ValueError: missing child, unknown slot, slot not valid for the
                parent's level, child already attached, or a cycle.
        """
        if child is None:
            raise ValueError("Cannot attach a missing node")
        slot = Slot(slot)
        parent_node = self[parent]
        child_node = self[child]

        if slot not in _LEVEL_SLOTS[parent_node.level]:
            raise ValueError(f"{parent_node.level.value} nodes have no {slot.value} slot")
        if child_node.parent is not None:
            raise ValueError(f"Node {child} is already attached to node {child_node.parent}")
        if child == parent or child in self.ancestors(parent):
            raise ValueError(f"Attaching node {child} under node {parent} would create a cycle")

        if slot == Slot.ADJUNCT:
            parent_node.adjuncts.append(child)
        else:
            current = getattr(parent_node, slot.value)
            if current is not None:
                raise ValueError(f"Slot {slot.value} of node {parent} is already filled")
            setattr(parent_node, slot.value, child)
        child_node.parent = parent

    def head(self, token: Token, category: PhraseCategory) -> int:
        """Create an X node wrapping `token`."""
        return self.add_node(NodeLevel.HEAD, category, token=token)

    def bar(self, category: PhraseCategory, head: Optional[int] = None,
            complement: Optional[int] = None) -> int:
        """Create an X' node over an optional head and complement."""
        index = self.add_node(NodeLevel.BAR, category)
        if head is not None:
            self.attach(index, head, Slot.HEAD)
        if complement is not None:
            self.attach(index, complement, Slot.COMPLEMENT)
        return index

    def phrase(self, category: PhraseCategory, bar: Optional[int] = None,
               specifier: Optional[int] = None,
               role: SemanticRole = SemanticRole.NONE) -> int:
        """Create an XP node over a bar and an optional specifier."""
        index = self.add_node(NodeLevel.PHRASE, category, role=role)
        if specifier is not None:
            self.attach(index, specifier, Slot.SPECIFIER)
        if bar is not None:
            self.attach(index, bar, Slot.BAR)
        return index

    def simple_phrase(self, token: Token, category: PhraseCategory,
                      specifier: Optional[int] = None,
                      complement: Optional[int] = None,
                      role: SemanticRole = SemanticRole.NONE) -> int:
        """Build the full X -> X' -> XP projection of `token`."""
        head = self.head(token, category)
        bar = self.bar(category, head=head, complement=complement)
        return self.phrase(category, bar=bar, specifier=specifier, role=role)

    def graft(self, other: PhraseTree, index: Optional[int] = None) -> int:
        """Copy the subtree of `other` rooted at `index` (default: its root) into this arena."""
        if index is None:
            index = other.root
        if index is None:
            raise ValueError("Cannot graft an empty tree")
        source = other[index]
        copy = self.add_node(source.level, source.category, token=source.token, role=source.role)
        if source.specifier is not None:
            self.attach(copy, self.graft(other, source.specifier), Slot.SPECIFIER)
        if source.bar is not None:
            self.attach(copy, self.graft(other, source.bar), Slot.BAR)
        if source.head is not None:
            self.attach(copy, self.graft(other, source.head), Slot.HEAD)
        if source.complement is not None:
            self.attach(copy, self.graft(other, source.complement), Slot.COMPLEMENT)
        for adjunct in source.adjuncts:
            self.attach(copy, self.graft(other, adjunct), Slot.ADJUNCT)
        return copy

    # ------------------------------------------------------------------
    # Navigation and queries
    # ------------------------------------------------------------------

    def _resolve(self, index: Optional[int]) -> int:
        if index is None:
            index = self.root
        if index is None:
            raise ValueError("Tree has no root")
        return index

    def parent(self, index: int) -> Optional[int]:
        return self[index].parent

    def ancestors(self, index: int) -> List[int]:
        """Indices from the parent of `index` up to the root."""
        result = []
        current = self[index].parent
        while current is not None:
            result.append(current)
            current = self.nodes[current].parent
        return result

    def depth(self, index: int) -> int:
        return len(self.ancestors(index))

    def find_head(self, index: Optional[int] = None) -> Optional[int]:
        """Follow the XP -> X' -> X spine to the head node, if there is one."""
        node = self[self._resolve(index)]
        if node.is_head:
            return node.index
        if node.is_phrase:
            return self.find_head(node.bar) if node.bar is not None else None
        if node.head is not None:
            return node.head
        # Stacked bars: the head sits in the inner X'
        if node.complement is not None and self.nodes[node.complement].is_bar:
            return self.find_head(node.complement)
        return None

    def head_token(self, index: Optional[int] = None) -> Optional[Token]:
        head = self.find_head(index)
        return self.nodes[head].token if head is not None else None

    def is_complete(self, index: Optional[int] = None) -> bool:
        """
        True when every projection on the spine reaches a head.

        A TP bar without an overt tense/copula head counts as complete when it
        carries a complement: tense is then expressed on the verb.
        """
        node = self[self._resolve(index)]
        if node.is_head:
            return node.token is not None
        if node.is_phrase:
            return node.bar is not None and self.nodes[node.bar].is_bar and self.is_complete(node.bar)
        if node.head is not None:
            return self.is_complete(node.head)
        if node.complement is not None:
            complement = self.nodes[node.complement]
            if complement.is_bar:
                return self.is_complete(node.complement)
            if node.category == PhraseCategory.TP:
                return self.is_complete(node.complement)
        return False

    def walk(self, index: Optional[int] = None, order: str = 'pre') -> Iterator[int]:
        """
        Yield node indices depth-first: specifier, bar/head, complement, adjuncts.

        Args:
            index: Subtree root (default: tree root).
            order: 'pre' yields a node before its children, 'post' after.
        """
        if order not in ('pre', 'post'):
            raise ValueError(f"Unknown traversal order '{order}'")
        start = self._resolve(index)
        yield from self._walk(start, order)

    def _walk(self, index: int, order: str) -> Iterator[int]:
        node = self.nodes[index]
        if order == 'pre':
            yield index
        for child in node.children():
            yield from self._walk(child, order)
        if order == 'post':
            yield index

    def find(self, predicate: Callable[[PhraseNode], bool],
             index: Optional[int] = None) -> List[int]:
        if self.root is None and index is None:
            return []
        return [i for i in self.walk(index) if predicate(self.nodes[i])]

    def find_by_category(self, category: PhraseCategory,
                         index: Optional[int] = None,
                         level: NodeLevel = NodeLevel.PHRASE) -> List[int]:
        """Phrases (by default) of `category` in pre-order."""
        return self.find(lambda n: n.category == category and n.level == level, index)

    def find_by_level(self, level: NodeLevel, index: Optional[int] = None) -> List[int]:
        return self.find(lambda n: n.level == level, index)

    def leaves(self, index: Optional[int] = None) -> List[Token]:
        """Tokens of all head nodes, ordered by sentence position."""
        if self.root is None and index is None:
            return []
        tokens = [self.nodes[i].token for i in self.find_by_level(NodeLevel.HEAD, index)]
        return sorted(tokens, key=lambda t: t.position)

    def label(self, index: int) -> str:
        """Bracket label: token text for X, e.g. N' for X', NP for XP."""
        node = self[index]
        if node.is_head:
            return node.token.text
        if node.is_bar:
            return f"{head_symbol(node.category)}'"
        return node.category.value

    def pretty(self, index: Optional[int] = None, indent: int = 0) -> str:
        """Indented multi-line rendering of the subtree."""
        lines: List[str] = []
        self._pretty(self._resolve(index), indent, None, lines)
        return "\n".join(lines)

    def _pretty(self, index: int, indent: int, prefix: Optional[str], lines: List[str]) -> None:
        node = self.nodes[index]
        label = self.label(index)
        if node.is_head:
            label = f"{head_symbol(node.category)}: {label}"
        if node.role != SemanticRole.NONE:
            label += f" [{node.role.value}]"
        pad = "  " * indent
        lines.append(f"{pad}{prefix + ' ' if prefix else ''}{label}")
        if node.specifier is not None:
            self._pretty(node.specifier, indent + 1, "Spec:", lines)
        if node.bar is not None:
            self._pretty(node.bar, indent + 1, None, lines)
        if node.head is not None:
            self._pretty(node.head, indent + 1, None, lines)
        if node.complement is not None:
            self._pretty(node.complement, indent + 1, "Comp:", lines)
        for i, adjunct in enumerate(node.adjuncts):
            self._pretty(adjunct, indent + 1, f"Adjunct[{i}]:", lines)

    def __str__(self) -> str:
        return self.pretty() if self.root is not None else "(empty tree)"

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self, index: Optional[int] = None) -> Optional[Dict[str, Any]]:
        """Nested plain-dict form of the subtree. Parent links are implied by nesting."""
        if index is None and self.root is None:
            return None
        node = self[self._resolve(index)]
        data: Dict[str, Any] = {
            'level': node.level.value,
            'category': node.category.value,
            'role': node.role.value,
        }
        if node.token is not None:
            data['token'] = node.token.to_dict()
        for slot in ('specifier', 'bar', 'head', 'complement'):
            child = getattr(node, slot)
            if child is not None:
                data[slot] = self.to_dict(child)
        if node.adjuncts:
            data['adjuncts'] = [self.to_dict(a) for a in node.adjuncts]
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> PhraseTree:
        tree = cls()
        if data:
            tree.root = tree._load(data)
        return tree

    def _load(self, data: Dict[str, Any]) -> int:
        try:
            level = NodeLevel(data['level'])
            category = PhraseCategory(data['category'])
        except KeyError as e:
            raise ValueError(f"Serialized node is missing {e}") from e
        token = Token.from_dict(data['token']) if data.get('token') else None
        role = SemanticRole(data.get('role', SemanticRole.NONE.value))
        index = self.add_node(level, category, token=token, role=role)
        for slot in (Slot.SPECIFIER, Slot.BAR, Slot.HEAD, Slot.COMPLEMENT):
            if data.get(slot.value):
                self.attach(index, self._load(data[slot.value]), slot)
        for adjunct in data.get('adjuncts', []):
            self.attach(index, self._load(adjunct), Slot.ADJUNCT)
        return index
