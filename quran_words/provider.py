import re
import requests
import logging
from dataclasses import dataclass
from typing import Optional

from camel_tools.data.catalogue import CatalogueError
from camel_tools.morphology.analyzer import Analyzer
from camel_tools.morphology.database import MorphologyDB
from camel_tools.tokenizers.word import simple_word_tokenize
from camel_tools.utils.charmap import CharMapper
from camel_tools.utils.dediac import dediac_ar

from aratools_alkhalil.helper import analyze_with_alkhalil, best_parse
from quran_words.corpus import Corpus, Verse, load_quran
from quran_words.errors import ProviderFailure

# --- Arabic cleanup helpers ---------------------------------------------
QURANIC_MARKS = re.compile(
    r'[\u0610-\u061A\u064B-\u065F\u0640\u0670\u06D6-\u06DC\u06DF-\u06E8\u06EA-\u06ED]'
)
HIDDEN_CHARS = re.compile(r'[\uFEFF\u200B\u00A0]')
SENSE_INDEX = re.compile(r'_\d+$')

# CAMeL placeholders for "no root" / "no lemma"
NO_ROOT = {'', '0', '#', 'NTWS', 'PUNC', 'DIGIT', 'FOREIGN'}
NO_LEMMA = {'', 'NOAN', 'NTWS', 'PUNC', 'DIGIT', 'FOREIGN'}


@dataclass(frozen=True)
class Token:
    chapter: int
    verse: int
    position: int
    text: str

    @property
    def is_word(self) -> bool:
        return any(c.isalpha() for c in self.text)


@dataclass(frozen=True)
class TokenAnalysis:
    surface_form: str
    transliteration: str
    lemma: Optional[str] = None
    root: Optional[str] = None
    part_of_speech: Optional[str] = None


def clean_word(word: str) -> str:
    word = HIDDEN_CHARS.sub('', word)
    return dediac_ar(QURANIC_MARKS.sub('', word))


def _present(value, placeholders):
    if value is None:
        return None
    value = str(value).strip()
    return None if value in placeholders else value


def pick_analysis(analyses):
    """First analysis with a real root, else the first one at all."""
    if not analyses:
        return None
    for a in analyses:
        if a.get('root', '') not in NO_ROOT:
            return a
    return analyses[0]


def load_analyzer():
    """Analyzer over CAMeL's default MSA database (installed with camel_data)."""
    return Analyzer(MorphologyDB.builtin_db())


class QuranProvider:
    """
    Read-only view over the Quran corpus plus CAMeL Tools analysis.

    The morphological analyzer is only built on the first morphology
    request, so transliteration-only runs never need the CAMeL database.
    """

    def __init__(self, corpus: Corpus, analyzer=None, transliterator=None,
                 use_alkhalil=False, alkhalil_url=None):
        self.corpus = corpus
        self._analyzer = analyzer
        self._transliterator = transliterator
        self.use_alkhalil = use_alkhalil
        self.alkhalil_url = alkhalil_url

    @classmethod
    def from_settings(cls, settings):
        return cls(
            load_quran(settings.corpus_path),
            use_alkhalil=settings.use_hybrid_alkhalil,
            alkhalil_url=settings.alkhalil_url,
        )

    # --- lazy resources ---
    @property
    def analyzer(self):
        if self._analyzer is None:
            try:
                self._analyzer = load_analyzer()
            except (CatalogueError, OSError) as e:
                raise ProviderFailure(f"Cannot load CAMeL morphology database: {e}") from e
            logging.info("CAMeL morphological analyzer loaded")
        return self._analyzer

    @property
    def transliterator(self):
        if self._transliterator is None:
            self._transliterator = CharMapper.builtin_mapper('ar2bw')
        return self._transliterator

    # --- lookup ---
    def list_verses(self, chapter: int) -> list:
        return self.corpus.list_verses(chapter)

    def get_verse(self, chapter: int, verse: int) -> Verse:
        return self.corpus.get_verse(chapter, verse)

    def list_tokens(self, verse: Verse) -> list:
        words = simple_word_tokenize(verse.text)
        return [Token(verse.chapter, verse.number, i, w)
                for i, w in enumerate(words, 1)]

    # --- analysis ---
    def analyze(self, token: Token, morphology=True) -> TokenAnalysis:
        transliteration = self.transliterator.map_string(token.text)
        if not morphology or not token.is_word:
            return TokenAnalysis(token.text, transliteration)

        lemma, root, pos = self._morphology(clean_word(token.text))
        return TokenAnalysis(token.text, transliteration, lemma, root, pos)

    def _morphology(self, word: str):
        best = pick_analysis(self.analyzer.analyze(word))
        if best is not None:
            lemma = _present(best.get('lex'), NO_LEMMA)
            if lemma:
                lemma = SENSE_INDEX.sub('', lemma)
            return (lemma,
                    _present(best.get('root'), NO_ROOT),
                    _present(best.get('pos'), NO_LEMMA))

        if self.use_alkhalil:
            logging.debug("No CAMeL analysis for %r, asking Alkhalil", word)
            try:
                parse = best_parse(analyze_with_alkhalil(word, self.alkhalil_url))
            except requests.RequestException as e:
                raise ProviderFailure(f"Alkhalil analysis failed for {word!r}: {e}") from e
            return parse.get('lemma'), parse.get('root'), parse.get('pos')

        return None, None, None
