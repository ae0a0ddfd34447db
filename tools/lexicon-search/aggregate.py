import itertools
import logging
import threading
from typing import Sequence
import matchers
from custom_words import JsonFileStore, KeyValueStore, load_custom_words
from errors import StorageError
from models import (
    AggregateResult,
    ConjugationEntry,
    CustomWordPair,
    DateEntry,
    DeclensionEntry,
    NumberEntry,
    ResultType,
    SearchSettings,
    VocabularyEntry,
)

logger = logging.getLogger(__name__)

SECTION_FIELDS = {
    ResultType.Vocabulary: "vocabulary",
    ResultType.Numbers: "numbers",
    ResultType.Dates: "dates",
    ResultType.MyWords: "my_words",
    ResultType.Tenses: "tenses",
    ResultType.Cases: "cases",
}

def _fetch_custom_words(store: KeyValueStore, key: str) -> list[CustomWordPair]:
    try:
        return load_custom_words(store, key)
    except (StorageError, OSError) as e:
        logger.warning("Custom words unavailable, searching without them: %s", e)
        return []

def search_all(
    query: str,
    vocabulary: Sequence[VocabularyEntry],
    numbers: Sequence[NumberEntry],
    dates: Sequence[DateEntry],
    conjugations: Sequence[ConjugationEntry],
    declensions: Sequence[DeclensionEntry],
    store: KeyValueStore | None = None,
    settings: SearchSettings | None = None,
) -> AggregateResult:
    """
    Runs one query against every dataset.

    Custom words are read from ``store`` on every call so results follow the
    latest import. A store that cannot be read only empties that section.
    """
    if not query.strip():
        return AggregateResult()

    settings = settings or SearchSettings()
    if store is None:
        store = JsonFileStore(settings.store_path)

    datasets = {
        ResultType.Vocabulary: vocabulary,
        ResultType.Numbers: numbers,
        ResultType.Dates: dates,
        ResultType.MyWords: _fetch_custom_words(store, settings.custom_words_key),
        ResultType.Tenses: conjugations,
        ResultType.Cases: declensions,
    }

    sections = {}
    for kind, handler in matchers.MATCHERS.items():
        found = handler(datasets[kind], query, limit=settings.cap(kind), path=settings.route(kind))
        sections[SECTION_FIELDS[kind]] = tuple(found)

    return AggregateResult(**sections)

class LatestQueryGate:
    """
    Last-query-wins bookkeeping for callers that search while the user types.

        ticket = gate.issue(query)
        result = search_all(query, ...)
        if gate.accept(ticket):
            render(result)
    """
    def __init__(self):
        self._counter = itertools.count(1)
        self._latest = 0
        self.query = ""
        self._lock = threading.Lock()

    def issue(self, query: str) -> int:
        with self._lock:
            self._latest = next(self._counter)
            self.query = query
            return self._latest

    def accept(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._latest
