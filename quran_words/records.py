from dataclasses import dataclass, field
from typing import Optional, Union

from quran_words.scope import RangeScope, VerseScope


@dataclass(frozen=True)
class WordRecord:
    chapter: int
    verse: int
    position: int
    surface_form: str
    transliteration: str
    lemma: Optional[str] = None
    root: Optional[str] = None
    part_of_speech: Optional[str] = None


@dataclass
class ExtractionResult:
    scope: Union[RangeScope, VerseScope]
    records: list = field(default_factory=list)
    text: Optional[str] = None


def select_tokens(tokens, include_non_word_tokens: bool):
    if include_non_word_tokens:
        return list(tokens)
    return [t for t in tokens if t.is_word]


def map_token(token, analysis) -> WordRecord:
    return WordRecord(
        chapter=token.chapter,
        verse=token.verse,
        position=token.position,
        surface_form=analysis.surface_form,
        transliteration=analysis.transliteration,
        lemma=analysis.lemma,
        root=analysis.root,
        part_of_speech=analysis.part_of_speech,
    )
