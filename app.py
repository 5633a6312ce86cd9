import logging
from flask import Flask, jsonify, request, current_app
from flask_cors import CORS

from quran_words.config import Settings
from quran_words.errors import InvalidArgument, NotFound, ProviderFailure
from quran_words.pipeline import ExtractionOptions, extract
from quran_words.provider import QuranProvider
from quran_words.scope import resolve_verse
from quran_words.serializer import MODE_ALIASES, OutputMode, shape

# --- Logging Setup ------------------------------------------------------
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")


def create_app(settings=None, provider=None):
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    CORS(app)
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    # Toggle our hybrid analyzer on/off
    app.config['USE_HYBRID_ALKHALIL'] = settings.use_hybrid_alkhalil
    app.config['QURAN_SETTINGS'] = settings
    app.config['QURAN_PROVIDER'] = provider

    # Runs at startup so it shows up immediately in the service logs
    logging.warning(
        "Quran word service starting with USE_HYBRID_ALKHALIL=%s, ALKHALIL_URL=%s, corpus=%s",
        app.config['USE_HYBRID_ALKHALIL'],
        settings.alkhalil_url,
        settings.corpus_path
    )

    app.register_error_handler(InvalidArgument, lambda e: error_response(e, 400))
    app.register_error_handler(NotFound, lambda e: error_response(e, 404))
    app.register_error_handler(ProviderFailure, provider_failure)

    app.add_url_rule("/", "index", index, methods=['GET'])
    app.add_url_rule("/api/word-analysis/<surah>/<verse>", "word_analysis",
                     word_analysis, methods=['GET'])
    return app


def get_provider():
    """Corpus is loaded on the first request and reused for the app's lifetime."""
    provider = current_app.config['QURAN_PROVIDER']
    if provider is None:
        provider = QuranProvider.from_settings(current_app.config['QURAN_SETTINGS'])
        current_app.config['QURAN_PROVIDER'] = provider
    return provider


def error_response(error, status):
    return jsonify({"message": str(error), "success": False}), status


def provider_failure(error):
    logging.error("Provider failure: %s", error, exc_info=error)
    return error_response(error, 500)


# --- Root Health Check --------------------------------------------------
def index():
    return jsonify({
        "status": "ok",
        "routes": ["/api/word-analysis/<surah>/<verse>?mode=compact|morphological"]
    }), 200


# --- Word Analysis ------------------------------------------------------
def word_analysis(surah, verse):
    raw_mode = request.args.get('mode', 'morphological').lower()
    mode = MODE_ALIASES.get(raw_mode)
    if mode is None or mode in (OutputMode.FLAT, OutputMode.TEXT):
        raise InvalidArgument(f"Unknown mode: {raw_mode}")

    scope = resolve_verse(surah, verse)
    logging.info("Processing word analysis request for %d:%d", scope.chapter, scope.verse)
    result = extract(get_provider(), scope, ExtractionOptions(mode))
    return jsonify(shape(result, mode))


app = create_app()
