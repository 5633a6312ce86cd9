import pytest
from pathlib import Path

from quran_words.corpus import Corpus, load_quran
from quran_words.provider import QuranProvider

SAMPLE_CORPUS = Path(__file__).parent / "data" / "quraan_sample.txt"


class FakeAnalyzer:
    """Stands in for the CAMeL analyzer; records every word it is asked about."""

    def __init__(self, analyses=None):
        self.analyses = analyses or {}
        self.calls = []

    def analyze(self, word):
        self.calls.append(word)
        return self.analyses.get(word, [])


FATIHA_ANALYSES = {
    "بسم": [{"lex": "اِسْم_1", "root": "س.م.و", "pos": "noun"}],
    "الله": [{"lex": "الله", "root": "#", "pos": "noun_prop"},
             {"lex": "اللّٰه", "root": "ا.ل.ه", "pos": "noun_prop"}],
    "الرحمن": [{"lex": "رَحْمٰن", "root": "ر.ح.م", "pos": "adj"}],
}


@pytest.fixture
def sample_corpus_path():
    return SAMPLE_CORPUS


@pytest.fixture
def corpus():
    return load_quran(str(SAMPLE_CORPUS))


@pytest.fixture
def analyzer():
    return FakeAnalyzer(FATIHA_ANALYSES)


@pytest.fixture
def provider(corpus, analyzer):
    return QuranProvider(corpus, analyzer=analyzer)


@pytest.fixture
def full_range_provider():
    """One short verse in every one of the 114 surahs."""
    lines = [f"{n}|1|قل هو" for n in range(1, 115)]
    return QuranProvider(Corpus.from_lines(lines), analyzer=FakeAnalyzer())


@pytest.fixture
def make_provider():
    def _make(lines, analyses=None, **kwargs):
        return QuranProvider(Corpus.from_lines(lines),
                             analyzer=FakeAnalyzer(analyses), **kwargs)
    return _make
