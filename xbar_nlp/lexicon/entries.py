"""
Built-in sample vocabulary.

Entries are plain dicts in the serialized `LexicalEntry` form so they can be
dumped to or replaced by a JSON lexicon file.
"""
from typing import Any, Dict, List

_PAST = {'tense': 'PAST'}
_PARTICIPLE = {'aspect': 'PERFECT'}

# Inflected forms no regular suffix explains
IRREGULAR_FORMS: Dict[str, Dict[str, Any]] = {
    **{form: {'number': 'PLURAL'} for form in ('men', 'women', 'people', 'children')},
    **{form: _PAST for form in (
        'ran', 'went', 'came', 'said', 'told', 'spoke', 'wrote', 'saw', 'heard', 'thought',
        'knew', 'understood', 'ate', 'drank', 'slept', 'sat', 'stood', 'had', 'gave', 'took',
        'bought', 'sold', 'made', 'built', 'broke', 'did')},
    **{form: _PARTICIPLE for form in (
        'gone', 'spoken', 'written', 'seen', 'known', 'eaten', 'drunk', 'given', 'taken',
        'broken', 'done', 'been')},
    'has': {'person': 'THIRD', 'number': 'SINGULAR'},
    **{form: {'degree': 'COMPARATIVE'} for form in ('better', 'worse', 'more', 'elder')},
    **{form: {'degree': 'SUPERLATIVE'} for form in ('best', 'worst', 'most', 'eldest')},
}


def _with_forms(entry, forms):
    entry['forms'] = list(forms)
    irregular = {form: IRREGULAR_FORMS[form] for form in forms if form in IRREGULAR_FORMS}
    if irregular:
        entry['form_features'] = irregular
    return entry


def _noun(lemma, categories, forms=(), number='SINGULAR'):
    return _with_forms({'lemma': lemma, 'pos': 'NOUN', 'categories': list(categories),
                        'features': {'number': number}}, forms)


def _verb(lemma, categories, transitive, forms, **extra):
    entry = _with_forms({'lemma': lemma, 'pos': 'VERB', 'categories': list(categories),
                         'features': {'transitive': transitive}}, forms)
    entry.update(extra)
    return entry


def _adjective(lemma, categories, forms=()):
    return _with_forms({'lemma': lemma, 'pos': 'ADJECTIVE', 'categories': list(categories),
                        'features': {'degree': 'POSITIVE'}}, forms)


NOUNS: List[Dict[str, Any]] = [
    # People
    _noun('man', ['person', 'male', 'adult', 'human'], ['men']),
    _noun('boy', ['person', 'male', 'child', 'human'], ['boys']),
    _noun('father', ['person', 'male', 'parent', 'family', 'human'], ['fathers']),
    _noun('king', ['person', 'male', 'royalty', 'ruler', 'human'], ['kings']),
    _noun('woman', ['person', 'female', 'adult', 'human'], ['women']),
    _noun('girl', ['person', 'female', 'child', 'human'], ['girls']),
    _noun('mother', ['person', 'female', 'parent', 'family', 'human'], ['mothers']),
    _noun('queen', ['person', 'female', 'royalty', 'ruler', 'human'], ['queens']),
    _noun('person', ['person', 'human', 'being'], ['people', 'persons']),
    _noun('child', ['person', 'young', 'human'], ['children']),
    _noun('teacher', ['person', 'profession', 'education', 'human'], ['teachers']),
    _noun('doctor', ['person', 'profession', 'medicine', 'human'], ['doctors']),
    # Animals
    _noun('dog', ['animal', 'mammal', 'pet', 'canine'], ['dogs']),
    _noun('cat', ['animal', 'mammal', 'pet', 'feline'], ['cats']),
    _noun('bird', ['animal', 'bird', 'flying'], ['birds']),
    _noun('fish', ['animal', 'aquatic'], ['fishes']),
    _noun('horse', ['animal', 'mammal', 'equine'], ['horses']),
    # Objects
    _noun('ball', ['object', 'toy', 'round'], ['balls']),
    _noun('book', ['object', 'reading', 'information'], ['books']),
    _noun('car', ['object', 'vehicle', 'transportation'], ['cars']),
    _noun('house', ['object', 'building', 'shelter', 'place'], ['houses']),
    _noun('table', ['object', 'furniture'], ['tables']),
    _noun('chair', ['object', 'furniture'], ['chairs']),
    _noun('door', ['object', 'fixture'], ['doors']),
    _noun('window', ['object', 'fixture'], ['windows']),
    # Food and substances
    _noun('apple', ['food', 'fruit', 'plant'], ['apples']),
    _noun('bread', ['food', 'baked'], number='MASS'),
    _noun('water', ['substance', 'liquid', 'drink'], number='MASS'),
    # Places
    _noun('city', ['place', 'location', 'urban'], ['cities']),
    _noun('park', ['place', 'location', 'outdoor', 'recreation'], ['parks']),
    _noun('school', ['place', 'building', 'education'], ['schools']),
    # Abstract
    _noun('happiness', ['abstract', 'emotion', 'state'], number='MASS'),
    _noun('time', ['abstract', 'concept'], number='MASS'),
    _noun('idea', ['abstract', 'thought', 'mental'], ['ideas']),
]

VERBS: List[Dict[str, Any]] = [
    # Motion
    _verb('run', ['action', 'motion'], False, ['runs', 'running', 'ran']),
    _verb('walk', ['action', 'motion'], False, ['walks', 'walking', 'walked']),
    _verb('go', ['action', 'motion'], False, ['goes', 'going', 'went', 'gone']),
    _verb('come', ['action', 'motion'], False, ['comes', 'coming', 'came']),
    _verb('move', ['action', 'motion'], True, ['moves', 'moving', 'moved']),
    # Communication
    _verb('say', ['action', 'communication'], True, ['says', 'saying', 'said']),
    _verb('tell', ['action', 'communication'], True, ['tells', 'telling', 'told']),
    _verb('ask', ['action', 'communication'], True, ['asks', 'asking', 'asked']),
    _verb('speak', ['action', 'communication'], False, ['speaks', 'speaking', 'spoke', 'spoken']),
    _verb('write', ['action', 'communication', 'creation'], True,
          ['writes', 'writing', 'wrote', 'written']),
    # Perception and cognition
    _verb('read', ['action', 'perception', 'mental'], True, ['reads', 'reading']),
    _verb('see', ['action', 'perception'], True, ['sees', 'seeing', 'saw', 'seen']),
    _verb('hear', ['action', 'perception'], True, ['hears', 'hearing', 'heard']),
    _verb('watch', ['action', 'perception'], True, ['watches', 'watching', 'watched']),
    _verb('look', ['action', 'perception'], False, ['looks', 'looking', 'looked']),
    _verb('think', ['action', 'mental'], True, ['thinks', 'thinking', 'thought']),
    _verb('know', ['action', 'mental', 'state'], True, ['knows', 'knowing', 'knew', 'known']),
    _verb('understand', ['action', 'mental'], True, ['understands', 'understanding', 'understood']),
    _verb('believe', ['action', 'mental'], True, ['believes', 'believing', 'believed']),
    _verb('love', ['action', 'emotion'], True, ['loves', 'loving', 'loved'],
          alternate_pos=['NOUN']),
    _verb('hate', ['action', 'emotion'], True, ['hates', 'hating', 'hated']),
    _verb('want', ['action', 'mental'], True, ['wants', 'wanting', 'wanted']),
    # Consumption and state
    _verb('eat', ['action', 'consumption'], True, ['eats', 'eating', 'ate', 'eaten']),
    _verb('drink', ['action', 'consumption'], True, ['drinks', 'drinking', 'drank', 'drunk']),
    _verb('sleep', ['action', 'state'], False, ['sleeps', 'sleeping', 'slept']),
    _verb('sit', ['action', 'state'], False, ['sits', 'sitting', 'sat']),
    _verb('stand', ['action', 'state'], False, ['stands', 'standing', 'stood']),
    # Possession and transfer
    _verb('have', ['action', 'possession', 'state'], True, ['has', 'having', 'had']),
    _verb('own', ['action', 'possession', 'state'], True, ['owns', 'owning', 'owned']),
    _verb('give', ['action', 'transfer'], True, ['gives', 'giving', 'gave', 'given']),
    _verb('take', ['action', 'transfer'], True, ['takes', 'taking', 'took', 'taken']),
    _verb('buy', ['action', 'transfer', 'commercial'], True, ['buys', 'buying', 'bought']),
    _verb('sell', ['action', 'transfer', 'commercial'], True, ['sells', 'selling', 'sold']),
    # Creation and destruction
    _verb('make', ['action', 'creation'], True, ['makes', 'making', 'made']),
    _verb('build', ['action', 'creation'], True, ['builds', 'building', 'built']),
    _verb('break', ['action', 'destruction'], True, ['breaks', 'breaking', 'broke', 'broken']),
    _verb('fix', ['action', 'repair'], True, ['fixes', 'fixing', 'fixed']),
    # Copula and auxiliaries
    _verb('be', ['copula', 'auxiliary'], False, ['been', 'being'],
          alternate_pos=['COPULA', 'AUXILIARY']),
    _verb('do', ['action', 'auxiliary'], False, ['does', 'doing', 'did', 'done'],
          alternate_pos=['AUXILIARY']),
]

COPULAS: List[Dict[str, Any]] = [
    {'lemma': 'is', 'pos': 'COPULA', 'categories': ['copula'],
     'features': {'tense': 'PRESENT', 'number': 'SINGULAR', 'person': 'THIRD'}},
    {'lemma': 'am', 'pos': 'COPULA', 'categories': ['copula'],
     'features': {'tense': 'PRESENT', 'number': 'SINGULAR', 'person': 'FIRST'}},
    {'lemma': 'are', 'pos': 'COPULA', 'categories': ['copula'],
     'features': {'tense': 'PRESENT'}},
    {'lemma': 'was', 'pos': 'COPULA', 'categories': ['copula'],
     'features': {'tense': 'PAST', 'number': 'SINGULAR'}},
    {'lemma': 'were', 'pos': 'COPULA', 'categories': ['copula'],
     'features': {'tense': 'PAST'}},
]

AUXILIARIES: List[Dict[str, Any]] = [
    {'lemma': lemma, 'pos': 'AUXILIARY', 'categories': ['modal', 'auxiliary'], 'forms': forms}
    for lemma, forms in (('can', ['could']), ('will', ['would']), ('should', []), ('must', []))
]

ADJECTIVES: List[Dict[str, Any]] = [
    _adjective('big', ['size', 'dimension', 'physical'], ['bigger', 'biggest']),
    _adjective('small', ['size', 'dimension', 'physical'], ['smaller', 'smallest']),
    _adjective('large', ['size', 'dimension', 'physical'], ['larger', 'largest']),
    _adjective('tiny', ['size', 'dimension', 'physical'], ['tinier', 'tiniest']),
    _adjective('huge', ['size', 'dimension', 'physical'], ['huger', 'hugest']),
    _adjective('red', ['color', 'visual', 'physical'], ['redder', 'reddest']),
    _adjective('blue', ['color', 'visual', 'physical'], ['bluer', 'bluest']),
    _adjective('green', ['color', 'visual', 'physical'], ['greener', 'greenest']),
    _adjective('yellow', ['color', 'visual', 'physical'], ['yellower', 'yellowest']),
    _adjective('black', ['color', 'visual', 'physical'], ['blacker', 'blackest']),
    _adjective('white', ['color', 'visual', 'physical'], ['whiter', 'whitest']),
    _adjective('good', ['quality', 'evaluation'], ['better', 'best']),
    _adjective('bad', ['quality', 'evaluation'], ['worse', 'worst']),
    _adjective('excellent', ['quality', 'evaluation']),
    _adjective('terrible', ['quality', 'evaluation']),
    _adjective('happy', ['emotion', 'state', 'mental'], ['happier', 'happiest']),
    _adjective('sad', ['emotion', 'state', 'mental'], ['sadder', 'saddest']),
    _adjective('angry', ['emotion', 'state', 'mental'], ['angrier', 'angriest']),
    _adjective('afraid', ['emotion', 'state', 'mental']),
    _adjective('calm', ['emotion', 'state', 'mental'], ['calmer', 'calmest']),
    _adjective('nervous', ['emotion', 'state', 'mental']),
    _adjective('old', ['age', 'time'], ['older', 'oldest', 'elder', 'eldest']),
    _adjective('young', ['age', 'time'], ['younger', 'youngest']),
    _adjective('new', ['age', 'time'], ['newer', 'newest']),
    _adjective('ancient', ['age', 'time']),
    _adjective('fast', ['speed', 'movement'], ['faster', 'fastest']),
    _adjective('slow', ['speed', 'movement'], ['slower', 'slowest']),
    _adjective('quick', ['speed', 'movement'], ['quicker', 'quickest']),
    _adjective('hot', ['temperature', 'physical'], ['hotter', 'hottest']),
    _adjective('cold', ['temperature', 'physical'], ['colder', 'coldest']),
    _adjective('warm', ['temperature', 'physical'], ['warmer', 'warmest']),
    _adjective('cool', ['temperature', 'physical'], ['cooler', 'coolest']),
    _adjective('round', ['shape', 'physical'], ['rounder', 'roundest']),
    _adjective('square', ['shape', 'physical']),
    _adjective('flat', ['shape', 'physical'], ['flatter', 'flattest']),
    _adjective('easy', ['difficulty', 'evaluation'], ['easier', 'easiest']),
    _adjective('hard', ['difficulty', 'evaluation'], ['harder', 'hardest']),
    _adjective('difficult', ['difficulty', 'evaluation']),
    _adjective('simple', ['difficulty', 'evaluation'], ['simpler', 'simplest']),
    _adjective('many', ['quantity', 'number'], ['more', 'most']),
    _adjective('few', ['quantity', 'number'], ['fewer', 'fewest']),
    _adjective('beautiful', ['appearance', 'evaluation']),
    _adjective('ugly', ['appearance', 'evaluation'], ['uglier', 'ugliest']),
    _adjective('pretty', ['appearance', 'evaluation'], ['prettier', 'prettiest']),
    _adjective('true', ['truth', 'evaluation'], ['truer', 'truest']),
    _adjective('false', ['truth', 'evaluation']),
    _adjective('real', ['truth', 'evaluation']),
    _adjective('important', ['evaluation', 'significance']),
    _adjective('interesting', ['evaluation', 'interest']),
    _adjective('ready', ['state', 'preparedness'], ['readier', 'readiest']),
    _adjective('available', ['state', 'availability']),
]

DETERMINERS: List[Dict[str, Any]] = [
    {'lemma': 'the', 'pos': 'DETERMINER', 'categories': ['article', 'definite'],
     'features': {'definiteness': 'DEFINITE'}},
    {'lemma': 'a', 'pos': 'DETERMINER', 'categories': ['article', 'indefinite'],
     'features': {'definiteness': 'INDEFINITE', 'number': 'SINGULAR'}},
    {'lemma': 'an', 'pos': 'DETERMINER', 'categories': ['article', 'indefinite'],
     'features': {'definiteness': 'INDEFINITE', 'number': 'SINGULAR'}},
    {'lemma': 'this', 'pos': 'DETERMINER', 'categories': ['demonstrative', 'proximal'],
     'features': {'distance': 'PROXIMAL', 'number': 'SINGULAR'}},
    {'lemma': 'that', 'pos': 'DETERMINER', 'categories': ['demonstrative', 'distal'],
     'features': {'distance': 'DISTAL', 'number': 'SINGULAR'}},
    {'lemma': 'these', 'pos': 'DETERMINER', 'categories': ['demonstrative', 'proximal'],
     'features': {'distance': 'PROXIMAL', 'number': 'PLURAL'}},
    {'lemma': 'those', 'pos': 'DETERMINER', 'categories': ['demonstrative', 'distal'],
     'features': {'distance': 'DISTAL', 'number': 'PLURAL'}},
    {'lemma': 'my', 'pos': 'DETERMINER', 'categories': ['possessive'], 'features': {'person': 'FIRST'}},
    {'lemma': 'your', 'pos': 'DETERMINER', 'categories': ['possessive'], 'features': {'person': 'SECOND'}},
    {'lemma': 'his', 'pos': 'DETERMINER', 'categories': ['possessive'], 'features': {'person': 'THIRD'}},
    {'lemma': 'its', 'pos': 'DETERMINER', 'categories': ['possessive'], 'features': {'person': 'THIRD'}},
    {'lemma': 'our', 'pos': 'DETERMINER', 'categories': ['possessive'], 'features': {'person': 'FIRST'}},
    {'lemma': 'their', 'pos': 'DETERMINER', 'categories': ['possessive'], 'features': {'person': 'THIRD'}},
    {'lemma': 'some', 'pos': 'DETERMINER', 'alternate_pos': ['ADJECTIVE'], 'categories': ['quantifier']},
    {'lemma': 'any', 'pos': 'DETERMINER', 'categories': ['quantifier']},
    {'lemma': 'every', 'pos': 'DETERMINER', 'categories': ['quantifier', 'universal'],
     'features': {'number': 'SINGULAR'}},
    {'lemma': 'each', 'pos': 'DETERMINER', 'categories': ['quantifier', 'distributive'],
     'features': {'number': 'SINGULAR'}},
    {'lemma': 'all', 'pos': 'DETERMINER', 'alternate_pos': ['ADJECTIVE'],
     'categories': ['quantifier', 'universal'], 'features': {'number': 'PLURAL'}},
    {'lemma': 'no', 'pos': 'DETERMINER', 'categories': ['quantifier', 'negative']},
    {'lemma': 'one', 'pos': 'DETERMINER', 'alternate_pos': ['NOUN', 'ADJECTIVE'],
     'categories': ['numeral', 'cardinal'], 'features': {'number': 'SINGULAR'}},
    {'lemma': 'two', 'pos': 'DETERMINER', 'alternate_pos': ['NOUN', 'ADJECTIVE'],
     'categories': ['numeral', 'cardinal'], 'features': {'number': 'PLURAL'}},
    {'lemma': 'three', 'pos': 'DETERMINER', 'alternate_pos': ['NOUN', 'ADJECTIVE'],
     'categories': ['numeral', 'cardinal'], 'features': {'number': 'PLURAL'}},
    {'lemma': 'which', 'pos': 'DETERMINER', 'categories': ['interrogative']},
    {'lemma': 'whose', 'pos': 'DETERMINER', 'categories': ['interrogative', 'possessive']},
]

PRONOUNS: List[Dict[str, Any]] = [
    {'lemma': lemma, 'pos': 'PRONOUN', 'categories': categories,
     'features': {'person': person, 'number': number}}
    for lemma, person, number, categories in (
        ('i', 'FIRST', 'SINGULAR', ['person']),
        ('me', 'FIRST', 'SINGULAR', ['person']),
        ('you', 'SECOND', 'SINGULAR', ['person']),
        ('he', 'THIRD', 'SINGULAR', ['person', 'male']),
        ('him', 'THIRD', 'SINGULAR', ['person', 'male']),
        ('she', 'THIRD', 'SINGULAR', ['person', 'female']),
        ('her', 'THIRD', 'SINGULAR', ['person', 'female']),
        ('it', 'THIRD', 'SINGULAR', []),
        ('we', 'FIRST', 'PLURAL', ['person']),
        ('us', 'FIRST', 'PLURAL', ['person']),
        ('they', 'THIRD', 'PLURAL', []),
        ('them', 'THIRD', 'PLURAL', []),
    )
]

PREPOSITIONS: List[Dict[str, Any]] = [
    {'lemma': lemma, 'pos': 'PREPOSITION', 'categories': [category]}
    for lemma, category in (
        ('to', 'direction'), ('toward', 'direction'), ('into', 'direction'),
        ('from', 'source'), ('with', 'instrument'), ('by', 'agent'),
        ('at', 'location'), ('in', 'location'), ('on', 'location'),
        ('under', 'location'), ('over', 'location'), ('near', 'location'),
        ('for', 'beneficiary'), ('of', 'relation'),
    )
]

ADVERBS: List[Dict[str, Any]] = [
    {'lemma': lemma, 'pos': 'ADVERB', 'categories': [category]}
    for lemma, category in (
        ('very', 'degree'), ('really', 'degree'), ('quite', 'degree'),
        ('extremely', 'degree'), ('too', 'degree'),
        ('quickly', 'manner'), ('slowly', 'manner'), ('always', 'frequency'),
        ('never', 'frequency'), ('not', 'negation'),
    )
]

CONJUNCTIONS: List[Dict[str, Any]] = [
    {'lemma': lemma, 'pos': 'CONJUNCTION', 'categories': ['coordinating']}
    for lemma in ('and', 'or', 'but')
]

ALL_ENTRIES: List[Dict[str, Any]] = (
    NOUNS + VERBS + COPULAS + AUXILIARIES + ADJECTIVES + DETERMINERS
    + PRONOUNS + PREPOSITIONS + ADVERBS + CONJUNCTIONS
)
