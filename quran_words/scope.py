import re
from dataclasses import dataclass

from quran_words.corpus import CHAPTER_COUNT
from quran_words.errors import InvalidArgument

NUMBER = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class VerseScope:
    chapter: int
    verse: int


@dataclass(frozen=True)
class RangeScope:
    max_chapter: int

    @property
    def chapters(self):
        return range(1, self.max_chapter + 1)


def parse_number(raw, name: str) -> int:
    if raw is None:
        raise InvalidArgument(f"Missing {name}")
    text = str(raw).strip()
    if not NUMBER.fullmatch(text):
        raise InvalidArgument(f"Invalid number format for {name}: {raw!r}")
    return int(text)


def check_chapter(chapter: int):
    if chapter < 1 or chapter > CHAPTER_COUNT:
        raise InvalidArgument(
            f"Invalid surah number {chapter}. Must be between 1 and {CHAPTER_COUNT}."
        )


def resolve_range(raw_max_chapter) -> RangeScope:
    max_chapter = parse_number(raw_max_chapter, 'max surah number')
    check_chapter(max_chapter)
    return RangeScope(max_chapter)


def resolve_verse(raw_chapter, raw_verse) -> VerseScope:
    chapter = parse_number(raw_chapter, 'surah number')
    verse = parse_number(raw_verse, 'verse number')
    check_chapter(chapter)
    if verse < 1:
        raise InvalidArgument(f"Invalid verse number {verse}. Must be 1 or greater.")
    return VerseScope(chapter, verse)
