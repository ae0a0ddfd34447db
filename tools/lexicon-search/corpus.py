import json
import os
import random
from typing import TypeVar
from pydantic import BaseModel, TypeAdapter
from errors import CorpusFormatError
from models import (
    CaseDescription,
    ConjugationEntry,
    DateEntry,
    DeclensionEntry,
    NumberEntry,
    SearchSettings,
    VocabularyEntry,
)

RecordT = TypeVar("RecordT", bound=BaseModel)

POLISH_DAYS = ["poniedziałek", "wtorek", "środa", "czwartek", "piątek", "sobota", "niedziela"]
ENGLISH_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

# Genitive month names, as used in dates ("5 maja")
POLISH_MONTHS = [
    "stycznia", "lutego", "marca", "kwietnia", "maja", "czerwca",
    "lipca", "sierpnia", "września", "października", "listopada", "grudnia",
]
ENGLISH_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

SIMPLE_ESCAPES = {
    "n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0",
    "\\": "\\", "/": "/", "'": "'", '"': '"', "\n": "",
}

class Corpus(BaseModel):
    vocabulary: list[VocabularyEntry] = []
    numbers: list[NumberEntry] = []
    dates: list[DateEntry] = []
    conjugations: list[ConjugationEntry] = []
    declensions: list[DeclensionEntry] = []
    case_descriptions: list[CaseDescription] = []

# --- Object Literal Conversion ---

def _read_string(text: str, start: int) -> tuple[str, int]:
    quote = text[start]
    chars = []
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == quote:
            return "".join(chars), i + 1
        if ch == "\\" and i + 1 < len(text):
            nxt = text[i + 1]
            if nxt == "x":
                chars.append(chr(int(text[i + 2:i + 4], 16)))
                i += 4
                continue
            if nxt == "u":
                chars.append(chr(int(text[i + 2:i + 6], 16)))
                i += 6
                continue
            chars.append(SIMPLE_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        chars.append(ch)
        i += 1
    raise CorpusFormatError(f"Unterminated string starting at offset {start}")

def _drop_trailing_comma(out: list[str]) -> None:
    i = len(out) - 1
    while i >= 0 and out[i].isspace():
        i -= 1
    if i >= 0 and out[i] == ",":
        del out[i]

def _last_significant(out: list[str]) -> str:
    for token in reversed(out):
        if not token.isspace():
            return token[-1]
    return ""

def object_literal_to_json(text: str) -> str:
    """
    One-time conversion of object-literal resources into strict JSON.

    Handles unquoted keys, single-quoted strings, ``\\xHH`` escapes, comments
    and trailing commas. The text is tokenized, never evaluated.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if ch in "\"'":
            try:
                value, i = _read_string(text, i)
            except ValueError as e:
                raise CorpusFormatError(f"Bad escape sequence near offset {i}: {e}") from e
            out.append(json.dumps(value, ensure_ascii=False))
            continue

        if text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end == -1 else end
            continue
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = n if end == -1 else end + 2
            continue

        if ch.isalpha() or ch in "_$":
            j = i
            while j < n and (text[j].isalnum() or text[j] in "_$"):
                j += 1
            word = text[i:j]
            k = j
            while k < n and text[k].isspace():
                k += 1
            if k < n and text[k] == ":" and _last_significant(out) in ("{", ","):
                out.append(json.dumps(word))
            elif word == "undefined":
                out.append("null")
            else:
                out.append(word)
            i = j
            continue

        if ch in "}]":
            _drop_trailing_comma(out)

        out.append(ch)
        i += 1

    return "".join(out)

def convert_file(src: str, dst: str) -> int:
    with open(src, 'r', encoding='utf-8') as f:
        converted = object_literal_to_json(f.read())
    try:
        data = json.loads(converted)
    except json.JSONDecodeError as e:
        raise CorpusFormatError(f"{src} is still not valid JSON after conversion ({e})") from e
    with open(dst, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return len(data) if isinstance(data, list) else 1

# --- Loading ---

def load_records(path: str, model: type[RecordT]) -> list[RecordT]:
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorpusFormatError(
            f"{path} is not strict JSON ({e}). Convert it once with: main.py convert {path} <output>"
        ) from e
    # Missing tense/case keys fail here
    return TypeAdapter(list[model]).validate_python(data)

def generate_dates(count: int = 50, rng: random.Random | None = None) -> list[DateEntry]:
    rng = rng or random.Random()
    dates = []
    for i in range(count):
        day = rng.randrange(7)
        month = rng.randrange(12)
        day_number = rng.randint(1, 28)  # every month has 28 days
        dates.append(DateEntry(
            id=i + 1,
            source_text=f"{POLISH_DAYS[day]} {day_number} {POLISH_MONTHS[month]}",
            target_text=f"{ENGLISH_DAYS[day]} {day_number} {ENGLISH_MONTHS[month]}",
            weekday=POLISH_DAYS[day],
            day_number=day_number,
            month_name=POLISH_MONTHS[month],
        ))
    return dates

def load_corpus(data_dir: str, settings: SearchSettings | None = None) -> Corpus:
    settings = settings or SearchSettings()
    files = settings.files
    print(f"📂 Loading datasets from {data_dir}...")

    def path(name: str) -> str:
        return os.path.join(data_dir, name)

    corpus = Corpus(
        vocabulary=load_records(path(files.vocabulary), VocabularyEntry),
        numbers=load_records(path(files.numbers), NumberEntry),
        conjugations=load_records(path(files.tenses), ConjugationEntry),
        declensions=load_records(path(files.cases), DeclensionEntry),
    )

    if os.path.exists(path(files.case_descriptions)):
        corpus.case_descriptions = load_records(path(files.case_descriptions), CaseDescription)

    if files.dates and os.path.exists(path(files.dates)):
        corpus.dates = load_records(path(files.dates), DateEntry)
    else:
        print(f"ℹ️  No dates file found. Generating {settings.generated_dates} dates.")
        corpus.dates = generate_dates(settings.generated_dates)

    print(
        f"✅ Loaded {len(corpus.vocabulary)} words, {len(corpus.numbers)} numbers, "
        f"{len(corpus.dates)} dates, {len(corpus.conjugations)} conjugations, "
        f"{len(corpus.declensions)} declensions."
    )
    return corpus
