"""
Phrase builder: tagged token runs -> X-Bar tree fragments.

Every builder returns a `BuildResult` holding a fresh `PhraseTree` whose root
is the maximal projection it built. Fragments are combined by grafting them
into a parent arena, so a built fragment is never shared between trees.

Rules:
- Head: the rightmost token whose POS may head the target category.
- Specifier: the consecutive run of specifier tokens starting at the first
  token of the run and stopping at the first non-specifier before the head.
- Complement: category-specific greedy scan right after the head
  (NP -> NP or PP, VP -> NP, AP -> PP, PP -> NP).
- Adjectives between specifier and head of an NP become AP adjuncts.

A missing head is a build failure reported in `errors`, never an exception.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .grammar import (
    POS,
    PhraseCategory,
    SemanticRole,
    is_valid_head,
    is_valid_specifier,
    pos_to_category,
)
from .token import Token
from .tree import PhraseNode, PhraseTree, Slot

logger = logging.getLogger(__name__)


# Human-readable head names used in failure messages
_HEAD_NAMES = {
    PhraseCategory.NP: 'noun',
    PhraseCategory.VP: 'verb',
    PhraseCategory.AP: 'adjective',
    PhraseCategory.PP: 'preposition',
    PhraseCategory.ADVP: 'adverb',
    PhraseCategory.DP: 'determiner',
    PhraseCategory.TP: 'tense marker',
}


@dataclass
class BuildResult:
    """Outcome of building one phrase."""
    tree: Optional[PhraseTree] = None
    errors: List[str] = field(default_factory=list)
    consumed: List[Token] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.tree is not None and self.tree.root is not None

    @property
    def node(self) -> Optional[PhraseNode]:
        """Root node of the built fragment, or None on failure."""
        return self.tree[self.tree.root] if self.success else None

    @classmethod
    def failure(cls, message: str) -> BuildResult:
        logger.debug("Build failed: %s", message)
        return cls(tree=None, errors=[message], consumed=[])


# ----------------------------------------------------------------------
# Head / specifier / complement finding
# ----------------------------------------------------------------------

def find_head(tokens: List[Token], category: PhraseCategory) -> Optional[Tuple[int, Token]]:
    """Return (index, token) of the rightmost valid head for `category`, or None."""
    if not tokens:
        return None
    for i in range(len(tokens) - 1, -1, -1):
        if is_valid_head(tokens[i].pos, category):
            return i, tokens[i]
    return None


def find_specifier(tokens: List[Token], head_index: int, category: PhraseCategory) -> List[int]:
    """
    Indices of the specifier run in front of the head.

    The run starts at index 0 and ends at the first token that is not a valid
    specifier (or at the head). Specifiers appearing again later are ignored.
    """
    indices = []
    for i in range(0, max(head_index, 0)):
        if not is_valid_specifier(tokens[i].pos, category):
            break
        indices.append(i)
    return indices


def find_complement(tokens: List[Token], head_index: int,
                    category: PhraseCategory) -> Optional[Tuple[BuildResult, int]]:
    """
    Build the complement that directly follows the head.

    Returns (result, consumed_count) relative to the tokens after the head,
    or None when the category takes no complement or none is present.
    """
    remaining = tokens[head_index + 1:]
    if not remaining:
        return None

    if category in (PhraseCategory.VP, PhraseCategory.PP):
        return find_np(remaining)
    if category == PhraseCategory.NP:
        return find_np(remaining) or find_pp(remaining)
    if category == PhraseCategory.AP:
        return find_pp(remaining)
    return None


# ----------------------------------------------------------------------
# Greedy finders: build a phrase from the front of a token run
# ----------------------------------------------------------------------

def find_np(tokens: List[Token]) -> Optional[Tuple[BuildResult, int]]:
    """Greedy NP at the start of `tokens`: Det? Adj* (Noun|Pronoun)."""
    if not tokens:
        return None

    count = 0
    if tokens[0].pos == POS.DETERMINER:
        count = 1
    while count < len(tokens) and tokens[count].pos == POS.ADJECTIVE:
        count += 1

    if count < len(tokens) and tokens[count].is_noun():
        count += 1
        return build_np(tokens[:count]), count

    if tokens[0].is_noun():
        return build_np(tokens[:1]), 1

    return None


def find_pp(tokens: List[Token]) -> Optional[Tuple[BuildResult, int]]:
    """Greedy PP at the start of `tokens`: Prep NP?."""
    if not tokens or tokens[0].pos != POS.PREPOSITION:
        return None
    count = 1
    np = find_np(tokens[1:])
    if np is not None:
        count += np[1]
    return build_pp(tokens[:count]), count


def find_ap(tokens: List[Token]) -> Optional[Tuple[BuildResult, int]]:
    """Greedy AP at the start of `tokens`: Adv? Adj."""
    if not tokens:
        return None
    count = 1 if tokens[0].pos == POS.ADVERB else 0
    if count < len(tokens) and tokens[count].pos == POS.ADJECTIVE:
        count += 1
        return build_ap(tokens[:count]), count
    return None


def find_vp(tokens: List[Token]) -> Optional[Tuple[BuildResult, int]]:
    """Greedy VP at the start of `tokens`: Verb NP?."""
    if not tokens or tokens[0].pos != POS.VERB:
        return None
    count = 1
    np = find_np(tokens[1:])
    if np is not None:
        count += np[1]
    return build_vp(tokens[:count]), count


# ----------------------------------------------------------------------
# Builders
# ----------------------------------------------------------------------

def _graft_specifier(tree: PhraseTree, tokens: List[Token]) -> int:
    """
    Build a specifier phrase from a run of specifier tokens.

    The token nearest the head heads the phrase; earlier tokens nest as its
    own specifier ("all the" -> DP(Spec: DP(all), D: the)).
    """
    last = tokens[-1]
    category = pos_to_category(last.pos) or PhraseCategory.DP
    inner = _graft_specifier(tree, tokens[:-1]) if len(tokens) > 1 else None
    return tree.simple_phrase(last, category, specifier=inner)


def _begin(tokens: List[Token], category: PhraseCategory):
    """Shared prologue: check input, locate head and specifier run."""
    if not tokens:
        return None, BuildResult.failure(f"No tokens provided for {category.value}")
    head = find_head(tokens, category)
    if head is None:
        return None, BuildResult.failure(f"No {_HEAD_NAMES[category]} found for {category.value} head")
    head_index, _ = head
    return (head_index, find_specifier(tokens, head_index, category)), None


def _assemble(tokens: List[Token], category: PhraseCategory, head_index: int,
              spec_indices: List[int],
              complement: Optional[Tuple[BuildResult, int]],
              role: SemanticRole = SemanticRole.NONE,
              complement_role: Optional[SemanticRole] = None) -> Tuple[PhraseTree, int, List[Token]]:
    """Assemble X -> X' -> XP with optional specifier and complement."""
    tree = PhraseTree()
    consumed = [tokens[i] for i in spec_indices] + [tokens[head_index]]

    spec = _graft_specifier(tree, [tokens[i] for i in spec_indices]) if spec_indices else None

    comp = None
    if complement is not None and complement[0].success:
        result, _ = complement
        comp = tree.graft(result.tree)
        if complement_role is not None:
            tree[comp].role = complement_role
        consumed.extend(result.consumed)

    root = tree.simple_phrase(tokens[head_index], category,
                              specifier=spec, complement=comp, role=role)
    tree.root = root
    return tree, root, consumed


def build_np(tokens: List[Token]) -> BuildResult:
    """NP: (Det) (Adj)* N (NP | PP)."""
    prologue, failure = _begin(tokens, PhraseCategory.NP)
    if failure:
        return failure
    head_index, spec_indices = prologue

    start = spec_indices[-1] + 1 if spec_indices else 0
    for token in tokens[start:head_index]:
        if token.pos == POS.PREPOSITION:
            return BuildResult.failure(
                f'Preposition "{token.text}" precedes NP head "{tokens[head_index].text}"')

    complement = find_complement(tokens, head_index, PhraseCategory.NP)
    tree, root, consumed = _assemble(tokens, PhraseCategory.NP, head_index, spec_indices, complement)

    # Prenominal adjectives
    for token in tokens[start:head_index]:
        if token.pos == POS.ADJECTIVE:
            adjunct = tree.simple_phrase(token, PhraseCategory.AP, role=SemanticRole.PROPERTY)
            tree.attach(root, adjunct, Slot.ADJUNCT)
            consumed.append(token)

    consumed.sort(key=lambda t: t.position)
    return BuildResult(tree=tree, errors=[], consumed=consumed)


def build_vp(tokens: List[Token]) -> BuildResult:
    """VP: (Adv) V (NP) with trailing AdvP / PP adjuncts."""
    prologue, failure = _begin(tokens, PhraseCategory.VP)
    if failure:
        return failure
    head_index, spec_indices = prologue

    complement = find_complement(tokens, head_index, PhraseCategory.VP)
    tree, root, consumed = _assemble(tokens, PhraseCategory.VP, head_index, spec_indices,
                                     complement, complement_role=SemanticRole.PATIENT)

    i = head_index + 1 + (complement[1] if complement else 0)
    while i < len(tokens):
        token = tokens[i]
        if token.pos == POS.ADVERB:
            adjunct = tree.simple_phrase(token, PhraseCategory.ADVP)
            tree.attach(root, adjunct, Slot.ADJUNCT)
            consumed.append(token)
            i += 1
            continue
        pp = find_pp(tokens[i:])
        if pp is not None and pp[0].success:
            result, count = pp
            tree.attach(root, tree.graft(result.tree), Slot.ADJUNCT)
            consumed.extend(result.consumed)
            i += count
            continue
        logger.debug("VP: leaving token %s unattached", token)
        i += 1

    consumed.sort(key=lambda t: t.position)
    return BuildResult(tree=tree, errors=[], consumed=consumed)


def build_ap(tokens: List[Token]) -> BuildResult:
    """AP: (Adv) A (PP)."""
    prologue, failure = _begin(tokens, PhraseCategory.AP)
    if failure:
        return failure
    head_index, spec_indices = prologue

    complement = find_complement(tokens, head_index, PhraseCategory.AP)
    tree, _, consumed = _assemble(tokens, PhraseCategory.AP, head_index, spec_indices,
                                  complement, role=SemanticRole.PROPERTY)
    return BuildResult(tree=tree, errors=[], consumed=consumed)


def build_pp(tokens: List[Token]) -> BuildResult:
    """PP: P (NP)."""
    prologue, failure = _begin(tokens, PhraseCategory.PP)
    if failure:
        return failure
    head_index, spec_indices = prologue

    complement = find_complement(tokens, head_index, PhraseCategory.PP)
    tree, _, consumed = _assemble(tokens, PhraseCategory.PP, head_index, spec_indices,
                                  complement, role=SemanticRole.LOCATION,
                                  complement_role=SemanticRole.LOCATION)
    return BuildResult(tree=tree, errors=[], consumed=consumed)


def build_advp(tokens: List[Token]) -> BuildResult:
    """AdvP: (Adv)* Adv."""
    prologue, failure = _begin(tokens, PhraseCategory.ADVP)
    if failure:
        return failure
    head_index, spec_indices = prologue
    tree, _, consumed = _assemble(tokens, PhraseCategory.ADVP, head_index, spec_indices, None)
    return BuildResult(tree=tree, errors=[], consumed=consumed)


def build_dp(tokens: List[Token]) -> BuildResult:
    prologue, failure = _begin(tokens, PhraseCategory.DP)
    if failure:
        return failure
    head_index, spec_indices = prologue
    tree, _, consumed = _assemble(tokens, PhraseCategory.DP, head_index, spec_indices, None)
    return BuildResult(tree=tree, errors=[], consumed=consumed)


def build_tp(subject: Optional[PhraseTree], predicate: Optional[PhraseTree],
             tense_marker: Optional[Token] = None) -> PhraseTree:
    """
    Wrap a subject and a predicate into a clause.

    The subject becomes the TP specifier, the predicate the complement of T',
    and the copula/tense token (if any) the head of T'. The subject is
    annotated AGENT under a VP predicate and THEME otherwise.
    """
    tree = PhraseTree()

    head = tree.head(tense_marker, PhraseCategory.TP) if tense_marker is not None else None
    complement = None
    predicate_category = None
    if predicate is not None and predicate.root is not None:
        complement = tree.graft(predicate)
        predicate_category = tree[complement].category
    bar = tree.bar(PhraseCategory.TP, head=head, complement=complement)

    specifier = None
    if subject is not None and subject.root is not None:
        specifier = tree.graft(subject)
        tree[specifier].role = (SemanticRole.AGENT if predicate_category == PhraseCategory.VP
                                else SemanticRole.THEME)

    tree.root = tree.phrase(PhraseCategory.TP, bar=bar, specifier=specifier)
    return tree


def build_tp_from_tokens(tokens: List[Token]) -> BuildResult:
    """Build a whole clause greedily: subject NP, then copula + AP/NP/PP or a VP."""
    if not tokens:
        return BuildResult.failure("No tokens provided for TP")

    subject = find_np(tokens)
    if subject is None:
        return BuildResult.failure("Could not find subject NP")
    subject_result, subject_count = subject
    consumed = list(subject_result.consumed)

    remaining = tokens[subject_count:]
    if not remaining:
        return BuildResult(tree=None, errors=["No predicate found"], consumed=consumed)

    predicate = None
    tense_marker = None
    if remaining[0].is_copula():
        tense_marker = remaining[0]
        consumed.append(tense_marker)
        after = remaining[1:]
        predicate = find_ap(after) or find_np(after) or find_pp(after)
    elif remaining[0].is_verb():
        predicate = find_vp(remaining)

    if predicate is None or not predicate[0].success:
        return BuildResult(tree=None, errors=["Could not build predicate"], consumed=consumed)

    predicate_result, _ = predicate
    consumed.extend(predicate_result.consumed)
    tree = build_tp(subject_result.tree, predicate_result.tree, tense_marker)
    return BuildResult(tree=tree, errors=[], consumed=consumed)


_BUILDERS = {
    PhraseCategory.NP: build_np,
    PhraseCategory.VP: build_vp,
    PhraseCategory.AP: build_ap,
    PhraseCategory.PP: build_pp,
    PhraseCategory.ADVP: build_advp,
    PhraseCategory.DP: build_dp,
    PhraseCategory.TP: build_tp_from_tokens,
}


def build_phrase(tokens: List[Token], category) -> BuildResult:
    """
    Build a phrase of the given category.

    Raises:
        ValueError: if `category` is not a phrase category.
    """
    category = PhraseCategory(category)
    return _BUILDERS[category](tokens)
