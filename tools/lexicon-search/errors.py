class LexiconSearchError(Exception):
    pass

class StorageError(LexiconSearchError):
    """Key-value storage could not be read or written."""

class CorpusFormatError(LexiconSearchError):
    """A dataset resource is not strict JSON."""
