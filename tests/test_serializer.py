import json

import pytest

from quran_words.records import ExtractionResult, WordRecord
from quran_words.scope import RangeScope, VerseScope
from quran_words.serializer import OutputMode, encode, render


@pytest.fixture
def records():
    return [
        WordRecord(1, 1, 1, "بسم", "bsm", "اِسْم", "س.م.و", "noun"),
        WordRecord(1, 1, 2, "الله", "Allh"),
    ]


class TestShapes:

    def test_flat(self, records):
        text = render(ExtractionResult(RangeScope(1), records), OutputMode.FLAT)
        data = json.loads(text)
        assert data[0] == {
            "surah_number": 1,
            "verse_number": 1,
            "word_position": 1,
            "arabic": "بسم",
            "transliteration": "bsm",
        }
        assert list(data[1]) == ["surah_number", "verse_number", "word_position",
                                 "arabic", "transliteration"]
        assert text.startswith("[\n  {\n    \"surah_number\": 1,")
        assert text.endswith("]\n")

    def test_nested(self, records):
        text = render(ExtractionResult(VerseScope(1, 1), records), OutputMode.NESTED)
        assert "\n" not in text.rstrip("\n")
        data = json.loads(text)
        assert list(data) == ["surah", "verse", "words"]
        assert data["surah"] == 1 and data["verse"] == 1
        assert list(data["words"][0]) == ["position", "arabic", "lemma", "root",
                                          "partOfSpeech", "translation"]
        assert data["words"][0]["translation"] == "اِسْم"

    def test_nested_missing_morphology_is_null(self, records):
        text = render(ExtractionResult(VerseScope(1, 1), records), OutputMode.NESTED)
        word = json.loads(text)["words"][1]
        assert word["lemma"] is None
        assert word["root"] is None
        assert word["partOfSpeech"] is None
        assert word["translation"] is None
        assert '"lemma": null' in text

    def test_compact_matches_legacy_layout(self, records):
        text = render(ExtractionResult(VerseScope(1, 1), records), OutputMode.COMPACT)
        assert text == ('[{"position": 1, "arabic": "بسم", "transliteration": "bsm"}, '
                        '{"position": 2, "arabic": "الله", "transliteration": "Allh"}]\n')

    def test_empty_result(self):
        assert render(ExtractionResult(RangeScope(1)), OutputMode.FLAT) == "[]\n"


class TestEncoding:

    def test_arabic_is_not_ascii_escaped(self, records):
        text = render(ExtractionResult(RangeScope(1), records), OutputMode.FLAT)
        assert "بسم" in text
        assert "\\u" not in text

    def test_escapes_round_trip(self):
        tricky = 'a"b\\c\nd\te\rf\bg\fh'
        record = WordRecord(1, 1, 1, tricky, tricky)
        text = render(ExtractionResult(VerseScope(1, 1), [record]), OutputMode.COMPACT)
        for escape in ['\\"', '\\\\', '\\n', '\\t', '\\r', '\\b', '\\f']:
            assert escape in text
        assert json.loads(text)[0]["arabic"] == tricky

    @pytest.mark.parametrize("mode,scope", [
        (OutputMode.FLAT, RangeScope(1)),
        (OutputMode.NESTED, VerseScope(1, 1)),
        (OutputMode.COMPACT, VerseScope(1, 1)),
    ])
    def test_reencoding_is_byte_identical(self, records, mode, scope):
        text = render(ExtractionResult(scope, records), mode)
        assert encode(json.loads(text), mode) == text


class TestTextListing:

    def test_lists_verse_then_words(self, records):
        result = ExtractionResult(VerseScope(1, 1), records, text="بسم الله")
        assert render(result, OutputMode.TEXT) == (
            "Verse 1:1\n"
            "Full verse: بسم الله\n"
            "\n"
            "Words in this verse:\n"
            "Word 1: بسم\n"
            "Word 2: الله\n"
        )
