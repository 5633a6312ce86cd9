import os
import sys
import logging
import tempfile

from quran_words.errors import IOFailure

STDOUT = '-'


def is_stdout(target) -> bool:
    return target is None or target == STDOUT


def write_output(text: str, target=None, stream=None):
    """
    Write a finished JSON document to stdout or to `target`.
    Files are replaced atomically so a failed run never leaves a
    truncated document behind.
    """
    if is_stdout(target):
        stream = stream or sys.stdout
        stream.write(text)
        stream.flush()
        return

    directory = os.path.dirname(os.path.abspath(target))
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=directory,
                                         prefix='.quran_words_', suffix='.tmp',
                                         delete=False) as tmp:
            tmp_path = tmp.name
            tmp.write(text)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, target)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise IOFailure(f"Error writing to file {target}: {e}") from e
    logging.info("Wrote %d bytes to %s", len(text.encode('utf-8')), target)
