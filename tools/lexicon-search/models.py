from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, computed_field

class ResultType(str, Enum):
    Vocabulary = "vocabulary"
    Numbers = "numbers"
    Dates = "dates"
    MyWords = "mywords"
    Tenses = "tenses"
    Cases = "cases"

class TenseKey(str, Enum):
    PerfectivePast = "perfectivePast"
    ImperfectivePast = "imperfectivePast"
    PerfectivePresent = "perfectivePresent"
    ImperfectivePresent = "imperfectivePresent"
    PerfectiveFuture = "perfectiveFuture"
    ImperfectiveFuture = "imperfectiveFuture"

class CaseKey(str, Enum):
    Nominative = "nominative"
    Genitive = "genitive"
    Dative = "dative"
    Accusative = "accusative"
    Instrumental = "instrumental"
    Locative = "locative"
    Vocative = "vocative"

class Record(BaseModel):
    # Resources use camelCase keys, code uses field names
    model_config = ConfigDict(populate_by_name=True)

# --- Dataset Models ---

class VocabularyEntry(Record):
    id: int
    word: str
    translation: str
    example_source: str = Field(alias="exampleSentence")
    example_target: str = Field(alias="exampleSentenceTranslate")
    category: str = ""

class NumberEntry(Record):
    id: int
    value: int = Field(alias="number")
    word: str = Field(alias="polish")
    translation: str = Field(alias="english")
    category: str = ""

class DateEntry(Record):
    id: int
    source_text: str = Field(alias="polish")
    target_text: str = Field(alias="english")
    weekday: str = Field(alias="dayOfWeek")
    day_number: int = Field(alias="dayNumber")
    month_name: str = Field(alias="month")

class CustomWordPair(Record):
    id: int
    source: str = Field(alias="polish")
    target: str = Field(alias="english")
    source_language: str = Field(default="", alias="sourceLanguage")
    target_language: str = Field(default="", alias="targetLanguage")

class ConjugationEntry(Record):
    perfective_past: str = Field(alias="perfectivePast")
    imperfective_past: str = Field(alias="imperfectivePast")
    perfective_present: str = Field(alias="perfectivePresent")
    imperfective_present: str = Field(alias="imperfectivePresent")
    perfective_future: str = Field(alias="perfectiveFuture")
    imperfective_future: str = Field(alias="imperfectiveFuture")
    english_perfective_past: str = Field(alias="englishPerfectivePast")
    english_imperfective_past: str = Field(alias="englishImperfectivePast")
    english_perfective_present: str = Field(alias="englishPerfectivePresent")
    english_imperfective_present: str = Field(alias="englishImperfectivePresent")
    english_perfective_future: str = Field(alias="englishPerfectiveFuture")
    english_imperfective_future: str = Field(alias="englishImperfectiveFuture")

    def form(self, key: TenseKey) -> str:
        return getattr(self, _snake(key.value))

    def translation(self, key: TenseKey) -> str:
        return getattr(self, "english_" + _snake(key.value))

class CaseForms(Record):
    nominative: str
    genitive: str
    dative: str
    accusative: str
    instrumental: str
    locative: str
    vocative: str

    def __getitem__(self, key: CaseKey) -> str:
        return getattr(self, CaseKey(key).value)

class CaseExample(Record):
    source_text: str = Field(alias="pl")
    target_text: str = Field(alias="en")

class CaseExamples(Record):
    nominative: CaseExample
    genitive: CaseExample
    dative: CaseExample
    accusative: CaseExample
    instrumental: CaseExample
    locative: CaseExample
    vocative: CaseExample

    def __getitem__(self, key: CaseKey) -> CaseExample:
        return getattr(self, CaseKey(key).value)

class DeclensionEntry(Record):
    id: int
    base: CaseForms
    translation: str
    examples: CaseExamples

class CaseDescription(Record):
    case: str
    question: str
    description: str
    examples: list[str] = []

def _snake(name: str) -> str:
    return "".join("_" + c.lower() if c.isupper() else c for c in name)

# --- Search Results ---

class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: ResultType
    title: str
    subtitle: str
    source_text: str
    target_text: str
    path: str
    item_id: int | None = None
    item_index: int | None = None

class AggregateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    vocabulary: tuple[SearchResult, ...] = ()
    numbers: tuple[SearchResult, ...] = ()
    dates: tuple[SearchResult, ...] = ()
    my_words: tuple[SearchResult, ...] = ()
    tenses: tuple[SearchResult, ...] = ()
    cases: tuple[SearchResult, ...] = ()

    @computed_field
    @property
    def total_results(self) -> int:
        return sum(len(section) for section in self.sections().values())

    def sections(self) -> dict[ResultType, tuple[SearchResult, ...]]:
        return {
            ResultType.Vocabulary: self.vocabulary,
            ResultType.Numbers: self.numbers,
            ResultType.Dates: self.dates,
            ResultType.MyWords: self.my_words,
            ResultType.Tenses: self.tenses,
            ResultType.Cases: self.cases,
        }

# --- Configuration Models ---

class DatasetFiles(BaseModel):
    vocabulary: str = "1000-words.json"
    numbers: str = "numbers.json"
    dates: str | None = "dates.json"
    tenses: str = "tenses.json"
    cases: str = "cases.json"
    case_descriptions: str = "case-descriptions.json"

class SearchSettings(BaseModel):
    caps: dict[ResultType, int] = {
        ResultType.Vocabulary: 10,
        ResultType.Numbers: 5,
        ResultType.Dates: 5,
        ResultType.MyWords: 5,
        ResultType.Tenses: 8,
        ResultType.Cases: 8,
    }
    routes: dict[ResultType, str] = {
        ResultType.Vocabulary: "/polish-to-english",
        ResultType.Numbers: "/numbers",
        ResultType.Dates: "/dates",
        ResultType.MyWords: "/my-words",
        ResultType.Tenses: "/tenses",
        ResultType.Cases: "/cases",
    }
    store_path: str = "storage.json"
    custom_words_key: str = "customWords"
    working_set_size: int = 20
    generated_dates: int = 50
    files: DatasetFiles = DatasetFiles()

    def cap(self, kind: ResultType) -> int:
        return self.caps.get(kind, DEFAULT_CAPS[kind])

    def route(self, kind: ResultType) -> str:
        return self.routes.get(kind, DEFAULT_ROUTES[kind])

DEFAULT_CAPS = SearchSettings.model_fields["caps"].default
DEFAULT_ROUTES = SearchSettings.model_fields["routes"].default
