"""
Semantic extraction: clause tree -> MeaningRepresentation.

The walk is structural rather than a generic traversal: the TP specifier
gives the subject, and the category of the T' complement decides the
predicate kind (VP -> DOES, AP -> HAS_PROPERTY, NP -> IS_A, PP -> IS_LOCATED).
The subject is first stored as THEME and promoted to AGENT for actions.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .grammar import POS, PhraseCategory, PredicateType, SemanticRole, SentenceType, Tense
from .meaning import Entity, MeaningRepresentation, Predicate
from .tree import PhraseTree

logger = logging.getLogger(__name__)

# Preposition lemma -> role of its object
PREPOSITION_ROLES: Dict[str, SemanticRole] = {
    'to': SemanticRole.GOAL,
    'toward': SemanticRole.GOAL,
    'from': SemanticRole.SOURCE,
    'away': SemanticRole.SOURCE,
    'with': SemanticRole.INSTRUMENT,
    'using': SemanticRole.INSTRUMENT,
    'at': SemanticRole.LOCATION,
    'in': SemanticRole.LOCATION,
    'on': SemanticRole.LOCATION,
    'under': SemanticRole.LOCATION,
    'over': SemanticRole.LOCATION,
    'near': SemanticRole.LOCATION,
    'for': SemanticRole.RECIPIENT,
}

NEGATION_ADVERBS = frozenset({'not', 'never'})


def preposition_role(lemma: str) -> SemanticRole:
    return PREPOSITION_ROLES.get(lemma.lower(), SemanticRole.LOCATION)


class SemanticExtractor:
    """
    Builds meaning representations from clause trees.

    Stateless: entity ids are derived from the noun phrase node index
    (`e<index>`), so repeated extraction of one tree gives identical output.
    """

    def extract(self, tree: Optional[PhraseTree]) -> Optional[MeaningRepresentation]:
        """
        Extract the meaning of the first clause in `tree`.

        Returns None when the tree is missing or contains no TP.
        """
        if tree is None or tree.root is None:
            return None

        root = tree[tree.root]
        if root.category == PhraseCategory.TP and root.is_phrase:
            tp = root.index
        else:
            candidates = tree.find_by_category(PhraseCategory.TP)
            if not candidates:
                logger.debug("No TP in tree; nothing to extract")
                return None
            tp = candidates[0]

        return self._extract_clause(tree, tp)

    def _extract_clause(self, tree: PhraseTree, tp: int) -> MeaningRepresentation:
        meaning = MeaningRepresentation(sentence_type=SentenceType.DECLARATIVE)
        node = tree[tp]

        if node.specifier is not None:
            subject = self.extract_entity(tree, node.specifier)
            if subject is not None:
                meaning.set_argument(SemanticRole.THEME, subject)

        if node.bar is not None:
            self._extract_bar(tree, node.bar, meaning)

        self.assign_roles(meaning)
        return meaning

    def _extract_bar(self, tree: PhraseTree, bar: int, meaning: MeaningRepresentation) -> None:
        node = tree[bar]
        tense = None
        if node.head is not None:
            tense = tree[node.head].token.features.tense

        if node.complement is not None:
            complement = tree[node.complement]
            category = complement.category
            if category == PhraseCategory.VP:
                self._extract_action(tree, complement.index, meaning)
            elif category == PhraseCategory.AP:
                self._extract_property(tree, complement.index, meaning)
            elif category == PhraseCategory.NP:
                self._extract_identity(tree, complement.index, meaning)
            elif category == PhraseCategory.PP:
                self._extract_location(tree, complement.index, meaning)
            else:
                logger.debug("T' complement %s carries no predicate", category.value)

        if tense is None and meaning.predicate is not None:
            tense = meaning.predicate.features.tense
        meaning.set_feature('tense', tense or Tense.PRESENT)

    def extract_entity(self, tree: PhraseTree, index: int) -> Optional[Entity]:
        """Entity for a noun phrase: head noun, determiner and adjective modifiers."""
        head = tree.head_token(index)
        if head is None:
            return None

        entity = Entity(
            text=head.text,
            lemma=head.effective_lemma,
            categories=list(head.categories),
            features=head.features,
            id=f"e{index}",
        )

        node = tree[index]
        if node.is_phrase and node.specifier is not None:
            determiner = tree.head_token(node.specifier)
            if determiner is not None and determiner.pos == POS.DETERMINER:
                entity.determiner = determiner.text

        modifiers = [tree.head_token(a).text for a in node.adjuncts
                     if tree[a].category == PhraseCategory.AP and tree.head_token(a) is not None]
        if modifiers:
            entity.set_feature('modifiers', modifiers)
        return entity

    def _predicate(self, tree: PhraseTree, index: int, kind: PredicateType) -> Optional[Predicate]:
        head = tree.head_token(index)
        if head is None:
            return None
        return Predicate(text=head.text, lemma=head.effective_lemma, type=kind,
                         features=head.features)

    def _extract_action(self, tree: PhraseTree, vp: int, meaning: MeaningRepresentation) -> None:
        predicate = self._predicate(tree, vp, PredicateType.DOES)
        if predicate is None:
            return
        predicate.argument_structure = {
            SemanticRole.AGENT: {'required': True},
            SemanticRole.PATIENT: {'required': predicate.is_transitive()},
        }
        meaning.predicate = predicate

        node = tree[vp]
        bar = tree[node.bar] if node.bar is not None else None
        if bar is not None and bar.complement is not None:
            obj = self.extract_entity(tree, bar.complement)
            if obj is not None:
                meaning.set_argument(SemanticRole.PATIENT, obj)

        for adjunct in node.adjuncts:
            self._extract_adjunct(tree, adjunct, meaning)

    def _extract_property(self, tree: PhraseTree, ap: int, meaning: MeaningRepresentation) -> None:
        predicate = self._predicate(tree, ap, PredicateType.HAS_PROPERTY)
        if predicate is None:
            return
        predicate.argument_structure = {SemanticRole.THEME: {'required': True}}
        meaning.predicate = predicate

        node = tree[ap]
        if node.specifier is not None:
            adverb = tree.head_token(node.specifier)
            if adverb is not None and adverb.pos == POS.ADVERB:
                if adverb.normalized in NEGATION_ADVERBS:
                    predicate.negated = True
                else:
                    predicate.set_feature('degree', adverb.text)

    def _extract_identity(self, tree: PhraseTree, np: int, meaning: MeaningRepresentation) -> None:
        predicate = self._predicate(tree, np, PredicateType.IS_A)
        if predicate is None:
            return
        predicate.argument_structure = {
            SemanticRole.THEME: {'required': True},
            SemanticRole.PROPERTY: {'required': True},
        }
        meaning.predicate = predicate

        value = self.extract_entity(tree, np)
        if value is not None:
            meaning.set_argument(SemanticRole.PROPERTY, value)

    def _extract_location(self, tree: PhraseTree, pp: int, meaning: MeaningRepresentation) -> None:
        predicate = self._predicate(tree, pp, PredicateType.IS_LOCATED)
        if predicate is None:
            return
        role = preposition_role(predicate.lemma)
        predicate.argument_structure = {
            SemanticRole.THEME: {'required': True},
            role: {'required': True},
        }
        meaning.predicate = predicate

        bar = tree[tree[pp].bar]
        if bar.complement is not None:
            place = self.extract_entity(tree, bar.complement)
            if place is not None:
                meaning.set_argument(role, place)

    def _extract_adjunct(self, tree: PhraseTree, index: int, meaning: MeaningRepresentation) -> None:
        node = tree[index]
        head = tree.head_token(index)
        if head is None:
            return

        if node.category == PhraseCategory.PP:
            bar = tree[node.bar]
            if bar.complement is None:
                return
            obj = self.extract_entity(tree, bar.complement)
            if obj is not None:
                meaning.add_argument(preposition_role(head.effective_lemma), obj)
        elif node.category == PhraseCategory.ADVP:
            if head.normalized in NEGATION_ADVERBS and meaning.predicate is not None:
                meaning.predicate.negated = True
                return
            modifiers = meaning.features.modifiers + (head.text,)
            meaning.set_feature('modifiers', modifiers)

    @staticmethod
    def assign_roles(meaning: MeaningRepresentation) -> None:
        """Promote the provisional THEME subject to AGENT for actions."""
        if meaning.predicate is None:
            return
        if meaning.predicate.type == PredicateType.DOES:
            meaning.rename_argument(SemanticRole.THEME, SemanticRole.AGENT)

    def extract_all_entities(self, tree: Optional[PhraseTree]) -> List[Entity]:
        """One entity per noun phrase, in pre-order."""
        if tree is None or tree.root is None:
            return []
        entities = []
        for index in tree.find_by_category(PhraseCategory.NP):
            entity = self.extract_entity(tree, index)
            if entity is not None:
                entities.append(entity)
        return entities

    @staticmethod
    def create_summary(meaning: Optional[MeaningRepresentation]) -> str:
        if meaning is None:
            return 'No meaning extracted.'

        lines = [f"Sentence Type: {meaning.sentence_type.value}"]
        predicate = meaning.predicate
        if predicate is not None:
            lines.append(f"Predicate: {predicate.text} ({predicate.type.value})")
            if predicate.negated:
                lines.append("  - Negated: true")

        subject = meaning.get_subject()
        if subject is not None:
            lines.append(f"Subject: {subject.text}")
            if subject.categories:
                lines.append(f"  - Categories: {', '.join(subject.categories)}")

        obj = meaning.get_object()
        if obj is not None:
            lines.append(f"Object: {obj.text}")
            if obj.categories:
                lines.append(f"  - Categories: {', '.join(obj.categories)}")

        for role, value in meaning.arguments.items():
            if role in (SemanticRole.AGENT, SemanticRole.THEME, SemanticRole.PATIENT):
                continue
            if isinstance(value, list):
                lines.append(f"{role.value}: {', '.join(e.text for e in value)}")
            else:
                lines.append(f"{role.value}: {value.text}")

        return "\n".join(lines)


def extract_meaning(tree: Optional[PhraseTree]) -> Optional[MeaningRepresentation]:
    """Extract a meaning with a fresh extractor."""
    return SemanticExtractor().extract(tree)
