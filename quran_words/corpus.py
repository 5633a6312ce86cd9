import logging
from collections import defaultdict
from dataclasses import dataclass

from quran_words.errors import NotFound, ProviderFailure

CHAPTER_COUNT = 114


@dataclass(frozen=True)
class Verse:
    chapter: int
    number: int
    text: str


class Corpus:
    """Verses of the Quran keyed by chapter, in file order."""

    def __init__(self, verses):
        self._chapters = defaultdict(list)
        for verse in verses:
            self._chapters[verse.chapter].append(verse)
        for chapter in self._chapters.values():
            chapter.sort(key=lambda v: v.number)

    @classmethod
    def from_lines(cls, lines, source='<memory>'):
        return cls(parse_lines(lines, source))

    def chapters(self):
        return sorted(self._chapters)

    def verse_count(self):
        return sum(len(v) for v in self._chapters.values())

    def list_verses(self, chapter: int) -> list:
        if chapter not in self._chapters:
            raise NotFound(f"Surah not found: {chapter}")
        return list(self._chapters[chapter])

    def get_verse(self, chapter: int, verse: int) -> Verse:
        for v in self.list_verses(chapter):
            if v.number == verse:
                return v
        raise NotFound(f"Verse not found: {chapter}:{verse}")


def parse_lines(lines, source='<memory>'):
    """
    Parse Tanzil pipe-format lines ("sura|aya|text").
    Blank lines and '#' comment lines are skipped; anything else that does
    not split into three fields with numeric sura/aya is a corpus error.
    """
    for i, line in enumerate(lines, 1):
        line = line.lstrip('\ufeff').strip()
        if not line or line.startswith('#'):
            continue
        parts = line.split('|', 2)
        if len(parts) != 3:
            raise ProviderFailure(f"Malformed corpus line {source}:{i}: {line[:40]!r}")
        sura, aya, text = parts
        try:
            yield Verse(int(sura), int(aya), text.strip())
        except ValueError:
            raise ProviderFailure(
                f"Malformed corpus line {source}:{i}: non-numeric sura/aya"
            ) from None


def load_quran(q_path='data/quraan.txt') -> Corpus:
    try:
        with open(q_path, encoding='utf-8') as f:
            corpus = Corpus.from_lines(f, source=q_path)
    except OSError as e:
        raise ProviderFailure(f"Cannot read Quran corpus {q_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ProviderFailure(f"Quran corpus {q_path} is not valid UTF-8: {e}") from e
    logging.info("Loaded %d verses in %d surahs from %s",
                 corpus.verse_count(), len(corpus.chapters()), q_path)
    return corpus
