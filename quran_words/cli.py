"""Command-line entry point: quran-words extract-range | extract-verse."""

import sys
import argparse
import logging

from quran_words.config import Settings
from quran_words.errors import ExtractionError, InvalidArgument, ProviderFailure
from quran_words.pipeline import DEFAULT_RANGE_OUTPUT, ExtractionOptions, run
from quran_words.provider import QuranProvider
from quran_words.scope import resolve_range, resolve_verse
from quran_words.serializer import MODE_ALIASES, OutputMode

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits 2 on usage errors; every failure here exits 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def add_output_options(parser, default_output):
    parser.add_argument("--output", "-o", default=default_output,
                        help="output file, or '-' for standard output "
                             f"(default: {default_output or '-'})")
    tokens = parser.add_mutually_exclusive_group()
    tokens.add_argument("--include-non-word", dest="include_non_word",
                        action="store_const", const=True, default=None,
                        help="keep punctuation and Quranic marks as words")
    tokens.add_argument("--exclude-non-word", dest="include_non_word",
                        action="store_const", const=False,
                        help="drop punctuation and Quranic marks")


def build_parser(settings: Settings):
    parser = ArgumentParser(
        prog="quran-words",
        description="Extract word-by-word Quran data as JSON."
    )
    parser.add_argument("--corpus", default=settings.corpus_path,
                        help="Tanzil pipe-format corpus (default: %(default)s)")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=settings.log_level)
    parser.add_argument("--alkhalil", action="store_true",
                        default=settings.use_hybrid_alkhalil,
                        help="fall back to the Alkhalil REST analyzer")
    sub = parser.add_subparsers(dest="command", parser_class=ArgumentParser)
    sub.required = True

    rng = sub.add_parser("extract-range",
                         help="export every word of surahs 1..N")
    rng.add_argument("max_chapter", help="last surah to export (1-114)")
    add_output_options(rng, DEFAULT_RANGE_OUTPUT)

    one = sub.add_parser("extract-verse", help="print the words of one verse")
    one.add_argument("chapter")
    one.add_argument("verse")
    one.add_argument("--mode", choices=sorted(MODE_ALIASES.keys() - {'flat'}),
                     default="compact")
    add_output_options(one, None)
    return parser


def main(argv=None) -> int:
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        # LOG_LEVEL from the environment bypasses argparse choices
        parser.error(f"invalid log level: {args.log_level}")

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    settings.corpus_path = args.corpus
    settings.use_hybrid_alkhalil = args.alkhalil
    logging.debug("quran-words starting with corpus=%s, USE_HYBRID_ALKHALIL=%s, ALKHALIL_URL=%s",
                  settings.corpus_path, settings.use_hybrid_alkhalil, settings.alkhalil_url)

    try:
        if args.command == "extract-range":
            scope = resolve_range(args.max_chapter)
            mode = OutputMode.FLAT
        else:
            scope = resolve_verse(args.chapter, args.verse)
            mode = MODE_ALIASES[args.mode]
        options = ExtractionOptions(mode, args.output, args.include_non_word)

        provider = QuranProvider.from_settings(settings)
        run(provider, scope, options)
    except InvalidArgument as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except ProviderFailure as e:
        logging.error("Provider failure: %s", e, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except ExtractionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
