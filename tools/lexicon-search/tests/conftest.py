import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from custom_words import MemoryStore
from models import (
    CaseExample,
    CaseExamples,
    CaseForms,
    ConjugationEntry,
    DateEntry,
    DeclensionEntry,
    NumberEntry,
    VocabularyEntry,
)


def make_conjugation(stem="rob", english="do"):
    return ConjugationEntry(
        perfective_past=f"z{stem}iłem",
        imperfective_past=f"{stem}iłem",
        perfective_present=f"z{stem}ię (teraz)",
        imperfective_present=f"{stem}ię",
        perfective_future=f"z{stem}ię",
        imperfective_future=f"będę {stem}ić",
        english_perfective_past=f"I had {english}ne",
        english_imperfective_past=f"I was {english}ing",
        english_perfective_present=f"I get it {english}ne",
        english_imperfective_present=f"I {english}",
        english_perfective_future=f"I will have {english}ne",
        english_imperfective_future=f"I will be {english}ing",
    )


def make_declension(entry_id=1, base="kot", translation="cat"):
    forms = CaseForms(
        nominative=base,
        genitive=f"{base}a",
        dative=f"{base}u",
        accusative=f"{base}a",
        instrumental=f"{base}em",
        locative=f"{base}cie",
        vocative=f"{base}cie!",
    )
    examples = CaseExamples(**{
        key: CaseExample(source_text=f"Zdanie {key} o {forms.nominative}.", target_text=f"Sentence {key}.")
        for key in ("nominative", "genitive", "dative", "accusative", "instrumental", "locative", "vocative")
    })
    return DeclensionEntry(id=entry_id, base=forms, translation=translation, examples=examples)


@pytest.fixture
def vocabulary():
    return [
        VocabularyEntry(id=1, word="dzień", translation="day", example_source="Dobry dzień.", example_target="Good day.", category="time"),
        VocabularyEntry(id=2, word="łódź", translation="boat", example_source="Płynę łodzią.", example_target="I sail by boat.", category="travel"),
        VocabularyEntry(id=3, word="miasto", translation="city", example_source="Mieszkam w Łodzi.", example_target="I live in Lodz.", category="places"),
        VocabularyEntry(id=4, word="kot", translation="cat", example_source="Kot śpi.", example_target="The cat sleeps.", category="animals"),
    ]


@pytest.fixture
def numbers():
    return [
        NumberEntry(id=1, value=4, word="cztery", translation="four"),
        NumberEntry(id=2, value=14, word="czternaście", translation="fourteen"),
        NumberEntry(id=3, value=42, word="czterdzieści dwa", translation="forty two"),
        NumberEntry(id=4, value=100, word="sto", translation="one hundred"),
    ]


@pytest.fixture
def dates():
    return [
        DateEntry(id=1, source_text="piątek 5 maja", target_text="Friday 5 May", weekday="piątek", day_number=5, month_name="maja"),
        DateEntry(id=2, source_text="środa 12 września", target_text="Wednesday 12 September", weekday="środa", day_number=12, month_name="września"),
    ]


@pytest.fixture
def conjugations():
    return [make_conjugation("rob", "do"), make_conjugation("pis", "writ")]


@pytest.fixture
def declensions():
    return [make_declension(1, "kot", "cat"), make_declension(2, "pies", "dog")]


@pytest.fixture
def store():
    return MemoryStore({
        "customWords": [
            {"id": 1, "polish": "żółw", "english": "turtle", "sourceLanguage": "Polish", "targetLanguage": "English"},
            {"id": 2, "polish": "jabłko", "english": "apple", "sourceLanguage": "Polish", "targetLanguage": "English"},
        ]
    })
