from unittest import mock

import pytest
import requests

from aratools_alkhalil import helper


def fake_response(payload, status=200):
    resp = mock.Mock()
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return resp


class TestAnalyzeWithAlkhalil:

    def test_returns_parses(self):
        parses = [{"lemma": "كَتَبَ", "root": "كتب", "pos": "verb"}]
        with mock.patch.object(helper.requests, "get", return_value=fake_response(parses)) as get:
            assert helper.analyze_with_alkhalil("كتب", url="http://alkhalil.test") == parses
        get.assert_called_once_with("http://alkhalil.test", params={"word": "كتب"},
                                    timeout=helper.TIMEOUT)

    def test_default_url(self):
        with mock.patch.object(helper.requests, "get", return_value=fake_response([])) as get:
            helper.analyze_with_alkhalil("كتب")
        assert get.call_args[0][0] == helper.ALKHALIL_URL

    def test_timeout_returns_empty(self):
        with mock.patch.object(helper.requests, "get", side_effect=requests.Timeout()):
            assert helper.analyze_with_alkhalil("كتب") == []

    def test_http_error_propagates(self):
        with mock.patch.object(helper.requests, "get", return_value=fake_response(None, 503)):
            with pytest.raises(requests.HTTPError):
                helper.analyze_with_alkhalil("كتب")

    def test_unexpected_payload(self):
        with mock.patch.object(helper.requests, "get",
                               return_value=fake_response({"error": "no parse"})):
            assert helper.analyze_with_alkhalil("كتب") == []


class TestBestParse:

    def test_prefers_real_root(self):
        parses = [{"lemma": "x", "root": "#"}, {"lemma": "كِتاب", "root": "كتب", "partOfSpeech": "noun"}]
        assert helper.best_parse(parses) == {"lemma": "كِتاب", "root": "كتب", "pos": "noun"}

    def test_blanks_become_none(self):
        assert helper.best_parse([{"lemma": "", "root": "0"}]) == {
            "lemma": None, "root": None, "pos": None}

    def test_empty(self):
        assert helper.best_parse([]) == {}
