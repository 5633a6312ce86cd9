class ExtractionError(Exception):
    """Base class for every failure the extraction pipeline reports."""
    exit_code = 1


class InvalidArgument(ExtractionError):
    """Missing, non-numeric or out-of-range chapter/verse input."""


class NotFound(ExtractionError):
    """Chapter or verse absent from the corpus."""


class ProviderFailure(ExtractionError):
    """Corpus file or analyzer could not be used."""


class IOFailure(ExtractionError):
    """Output could not be written."""
