"""
Output shapes for extracted words.

flat     range export, one object per word, pretty-printed array
nested   single verse with morphology: {surah, verse, words: [...]}
compact  single verse, one-line array of position/arabic/transliteration
text     single verse as a plain listing ("Word n: ..."), not JSON
"""
import json
from enum import Enum


class OutputMode(Enum):
    FLAT = 'flat'
    NESTED = 'nested'
    COMPACT = 'compact'
    TEXT = 'text'


MODE_ALIASES = {
    'flat': OutputMode.FLAT,
    'nested': OutputMode.NESTED,
    'morphological': OutputMode.NESTED,
    'compact': OutputMode.COMPACT,
    'text': OutputMode.TEXT,
}


def flat_word(record) -> dict:
    return {
        'surah_number': record.chapter,
        'verse_number': record.verse,
        'word_position': record.position,
        'arabic': record.surface_form,
        'transliteration': record.transliteration,
    }


def nested_word(record) -> dict:
    return {
        'position': record.position,
        'arabic': record.surface_form,
        'lemma': record.lemma,
        'root': record.root,
        'partOfSpeech': record.part_of_speech,
        # Historical field: carries the lemma, not a real translation.
        'translation': record.lemma,
    }


def compact_word(record) -> dict:
    return {
        'position': record.position,
        'arabic': record.surface_form,
        'transliteration': record.transliteration,
    }


def text_lines(result) -> list:
    scope = result.scope
    lines = [f"Verse {scope.chapter}:{scope.verse}",
             f"Full verse: {result.text or ''}",
             "",
             "Words in this verse:"]
    lines.extend(f"Word {r.position}: {r.surface_form}" for r in result.records)
    return lines


def shape(result, mode: OutputMode):
    if mode is OutputMode.FLAT:
        return [flat_word(r) for r in result.records]
    if mode is OutputMode.NESTED:
        return {
            'surah': result.scope.chapter,
            'verse': result.scope.verse,
            'words': [nested_word(r) for r in result.records],
        }
    if mode is OutputMode.COMPACT:
        return [compact_word(r) for r in result.records]
    if mode is OutputMode.TEXT:
        return text_lines(result)
    raise ValueError(f"Unknown output mode: {mode!r}")


def encode(payload, mode: OutputMode) -> str:
    if mode is OutputMode.TEXT:
        return "\n".join(payload) + "\n"
    if mode is OutputMode.FLAT:
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    return json.dumps(payload, ensure_ascii=False) + "\n"


def render(result, mode: OutputMode) -> str:
    return encode(shape(result, mode), mode)
