import sys
import logging
from dataclasses import dataclass
from typing import Optional

from quran_words.records import ExtractionResult, map_token, select_tokens
from quran_words.scope import RangeScope, VerseScope
from quran_words.serializer import OutputMode, render
from quran_words.sink import is_stdout, write_output

DEFAULT_RANGE_OUTPUT = 'quran_words.json'


@dataclass
class ExtractionOptions:
    mode: OutputMode
    output: Optional[str] = None
    include_non_word_tokens: Optional[bool] = None

    @property
    def keeps_non_word_tokens(self) -> bool:
        # Morphological output drops punctuation/markers unless asked not to
        if self.include_non_word_tokens is None:
            return self.mode is not OutputMode.NESTED
        return self.include_non_word_tokens

    @property
    def needs_morphology(self) -> bool:
        return self.mode is OutputMode.NESTED


def verse_records(provider, verse, options):
    tokens = select_tokens(provider.list_tokens(verse), options.keeps_non_word_tokens)
    return [map_token(t, provider.analyze(t, morphology=options.needs_morphology))
            for t in tokens]


def extract(provider, scope, options, progress=None) -> ExtractionResult:
    """Walk the scope through the provider and collect word records."""
    result = ExtractionResult(scope)

    if isinstance(scope, VerseScope):
        verse = provider.get_verse(scope.chapter, scope.verse)
        result.text = verse.text
        result.records.extend(verse_records(provider, verse, options))
        logging.info("Extracted %d words from %d:%d",
                     len(result.records), scope.chapter, scope.verse)
        return result

    if not isinstance(scope, RangeScope):
        raise TypeError(f"Unsupported scope: {scope!r}")

    for surah_num in scope.chapters:
        verses = provider.list_verses(surah_num)
        if progress is not None:
            print(f"Processing Surah {surah_num}: {verses[0].chapter}", file=progress)
        for verse in verses:
            result.records.extend(verse_records(provider, verse, options))
    logging.info("Extracted %d words from surahs 1..%d",
                 len(result.records), scope.max_chapter)
    return result


def run(provider, scope, options, stdout=None, progress=None) -> ExtractionResult:
    """
    Extract, serialize and write in one go. Nothing is written until the
    whole document has been rendered.
    """
    stdout = stdout or sys.stdout
    to_stdout = is_stdout(options.output)
    if progress is None and isinstance(scope, RangeScope):
        # keep stdout clean when the JSON itself goes there
        progress = sys.stderr if to_stdout else stdout

    result = extract(provider, scope, options, progress=progress)
    text = render(result, options.mode)
    write_output(text, options.output, stream=stdout)

    if isinstance(scope, RangeScope):
        where = 'standard output' if to_stdout else options.output
        print(f"Extraction complete. Data saved to {where}", file=progress)
    return result
