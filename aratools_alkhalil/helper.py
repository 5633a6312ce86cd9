import os
import logging
import requests

# Load stub URL from ENV, fallback to the Render-onrender stub
ALKHALIL_URL = os.getenv(
    "ALKHALIL_URL",
    "https://alkhalil-rest-api.onrender.com/analyze"
)

# (connect timeout, read timeout)
TIMEOUT = (5, 30)

NO_ROOT = {'', '0', '#'}


def analyze_with_alkhalil(word: str, url: str = None) -> list[dict]:
    """
    Send `word` to the remote Alkhalil REST API and return all parses.
    If the request times out reading, returns an empty list.
    """
    url = url or ALKHALIL_URL
    try:
        resp = requests.get(
            url,
            params={"word": word},
            timeout=TIMEOUT
        )
        resp.raise_for_status()
        parses = resp.json()
    except requests.Timeout:
        logging.error("alkhalil REST call timed out for URL: %s", url)
        return []
    except requests.RequestException as e:
        logging.error("alkhalil REST call error (%s): %s", url, e)
        raise
    if not isinstance(parses, list):
        logging.warning("alkhalil returned %s instead of a parse list for %r",
                        type(parses).__name__, word)
        return []
    return [p for p in parses if isinstance(p, dict)]


def best_parse(parses: list[dict]) -> dict:
    """
    Reduce Alkhalil parses to lemma/root/pos, preferring the first parse
    that carries a real root. Missing values come back as None.
    """
    if not parses:
        return {}
    chosen = next(
        (p for p in parses if (p.get('root') or '').strip() not in NO_ROOT),
        parses[0]
    )

    def clean(value):
        value = (value or '').strip()
        return value if value not in NO_ROOT else None

    return {
        'lemma': clean(chosen.get('lemma')),
        'root': clean(chosen.get('root')),
        'pos': clean(chosen.get('pos') or chosen.get('partOfSpeech')),
    }
