import csv
import json
import logging
from pathlib import Path
from typing import Any, Protocol
from pydantic import BaseModel, ValidationError
from errors import StorageError
from models import CustomWordPair

CUSTOM_WORDS_KEY = "customWords"

logger = logging.getLogger(__name__)

# --- Key-Value Storage ---

class KeyValueStore(Protocol):
    def get(self, key: str) -> Any: ...
    def set(self, key: str, value: Any) -> None: ...
    def remove(self, key: str) -> None: ...

class MemoryStore:
    def __init__(self, data: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(data or {})

    def get(self, key: str) -> Any:
        return self.data.get(key)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)

class JsonFileStore:
    """
    Single JSON document on disk holding every key.
    A missing file is an empty store.
    """
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read store {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Store {self.path} is not a JSON object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StorageError(f"Cannot write store {self.path}: {e}") from e

    def get(self, key: str) -> Any:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

# --- Custom Words ---

def load_custom_words(store: KeyValueStore, key: str = CUSTOM_WORDS_KEY) -> list[CustomWordPair]:
    stored = store.get(key)
    if stored is None:
        return []
    if not isinstance(stored, list):
        raise StorageError(f"Stored value under '{key}' is not a list")
    try:
        return [CustomWordPair.model_validate(item) for item in stored]
    except ValidationError as e:
        raise StorageError(f"Stored custom words under '{key}' are malformed: {e}") from e

def save_custom_words(store: KeyValueStore, words: list[CustomWordPair], key: str = CUSTOM_WORDS_KEY) -> None:
    store.set(key, [w.model_dump(by_alias=True) for w in words])

def clear_custom_words(store: KeyValueStore, key: str = CUSTOM_WORDS_KEY) -> None:
    store.remove(key)

# --- CSV Import ---

class CsvImportResult(BaseModel):
    words: list[CustomWordPair] = []
    errors: list[str] = []
    total_rows: int = 0
    successful_rows: int = 0

def _is_language(label: str, *names: str) -> bool:
    label = label.lower()
    return any(name in label for name in names)

def parse_translate_csv(content: str) -> CsvImportResult:
    """
    Parses a Google Translate phrasebook export.

    Rows are ``sourceLanguage,targetLanguage,sourceText,targetText``. The
    Polish side is detected from the language labels; when neither label
    names Polish or English the source column is taken as Polish and the
    row is reported.
    """
    result = CsvImportResult()
    lines = [line for line in content.splitlines() if line.strip()]
    result.total_rows = len(lines)

    for index, columns in enumerate(csv.reader(lines), start=1):
        if len(columns) < 4:
            result.errors.append(f"Row {index}: Not enough columns (expected 4, got {len(columns)})")
            continue

        source_language, target_language, source_text, target_text = (c.strip() for c in columns[:4])
        if not source_text or not target_text:
            result.errors.append(f"Row {index}: Empty source or target text")
            continue

        if _is_language(source_language, "polish", "pol"):
            polish, english = source_text, target_text
        elif _is_language(target_language, "polish", "pol"):
            polish, english = target_text, source_text
        elif _is_language(source_language, "english", "eng"):
            polish, english = target_text, source_text
        elif _is_language(target_language, "english", "eng"):
            polish, english = source_text, target_text
        else:
            result.errors.append(
                f"Row {index}: Could not determine Polish/English languages, assuming source is Polish"
            )
            polish, english = source_text, target_text

        result.words.append(CustomWordPair(
            id=index,
            source=polish,
            target=english,
            source_language=source_language,
            target_language=target_language,
        ))
        result.successful_rows += 1

    return result

def import_translate_csv(store: KeyValueStore, content: str, key: str = CUSTOM_WORDS_KEY) -> CsvImportResult:
    result = parse_translate_csv(content)
    if result.words:
        save_custom_words(store, result.words, key)
        logger.info("Saved %d custom words under '%s'", len(result.words), key)
    return result
