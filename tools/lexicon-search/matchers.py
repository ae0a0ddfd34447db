from typing import Callable, Sequence
from models import (
    CaseKey,
    ConjugationEntry,
    CustomWordPair,
    DateEntry,
    DeclensionEntry,
    DEFAULT_CAPS,
    DEFAULT_ROUTES,
    NumberEntry,
    ResultType,
    SearchResult,
    TenseKey,
    VocabularyEntry,
)
from normalize import matches

Matcher = Callable[..., list[SearchResult]]

def _any_match(query: str, *fields: str) -> bool:
    return any(matches(field, query) for field in fields)

def search_vocabulary(
    data: Sequence[VocabularyEntry],
    query: str,
    limit: int = DEFAULT_CAPS[ResultType.Vocabulary],
    path: str = DEFAULT_ROUTES[ResultType.Vocabulary],
) -> list[SearchResult]:
    if not query.strip():
        return []

    results = []
    for index, item in enumerate(data):
        if len(results) >= limit:
            break
        if _any_match(query, item.word, item.translation, item.example_source, item.example_target):
            results.append(SearchResult(
                id=f"vocab-{item.id}",
                type=ResultType.Vocabulary,
                title=item.word,
                subtitle=item.translation,
                source_text=item.word,
                target_text=item.translation,
                path=path,
                item_id=item.id,
                item_index=index,
            ))
    return results

def search_numbers(
    data: Sequence[NumberEntry],
    query: str,
    limit: int = DEFAULT_CAPS[ResultType.Numbers],
    path: str = DEFAULT_ROUTES[ResultType.Numbers],
) -> list[SearchResult]:
    """
    Numerals are compared against the raw query: "4" finds 4, 14, 42 ...
    """
    numeral = query.strip()
    if not numeral:
        return []

    results = []
    for index, item in enumerate(data):
        if len(results) >= limit:
            break
        if _any_match(query, item.word, item.translation) or numeral in str(item.value):
            results.append(SearchResult(
                id=f"number-{item.id}",
                type=ResultType.Numbers,
                title=item.word,
                subtitle=f"{item.value} – {item.translation}",
                source_text=item.word,
                target_text=item.translation,
                path=path,
                item_id=item.id,
                item_index=index,
            ))
    return results

def search_dates(
    data: Sequence[DateEntry],
    query: str,
    limit: int = DEFAULT_CAPS[ResultType.Dates],
    path: str = DEFAULT_ROUTES[ResultType.Dates],
) -> list[SearchResult]:
    if not query.strip():
        return []

    results = []
    for index, item in enumerate(data):
        if len(results) >= limit:
            break
        if _any_match(query, item.source_text, item.target_text, item.weekday, item.month_name):
            results.append(SearchResult(
                id=f"date-{item.id}",
                type=ResultType.Dates,
                title=item.source_text,
                subtitle=item.target_text,
                source_text=item.source_text,
                target_text=item.target_text,
                path=path,
                item_id=item.id,
                item_index=index,
            ))
    return results

def search_custom_words(
    data: Sequence[CustomWordPair],
    query: str,
    limit: int = DEFAULT_CAPS[ResultType.MyWords],
    path: str = DEFAULT_ROUTES[ResultType.MyWords],
) -> list[SearchResult]:
    if not query.strip():
        return []

    results = []
    for index, item in enumerate(data):
        if len(results) >= limit:
            break
        if _any_match(query, item.source, item.target):
            results.append(SearchResult(
                id=f"custom-{item.id}",
                type=ResultType.MyWords,
                title=item.source,
                subtitle=item.target,
                source_text=item.source,
                target_text=item.target,
                path=path,
                item_id=item.id,
                item_index=index,
            ))
    return results

def search_tenses(
    data: Sequence[ConjugationEntry],
    query: str,
    limit: int = DEFAULT_CAPS[ResultType.Tenses],
    path: str = DEFAULT_ROUTES[ResultType.Tenses],
) -> list[SearchResult]:
    """
    Every tense form is tested on its own, so one conjugation table can
    contribute up to six results. Tables carry no id; results point at
    the table by position.
    """
    if not query.strip():
        return []

    results = []
    for index, item in enumerate(data):
        for key in TenseKey:
            if len(results) >= limit:
                return results
            polish = item.form(key)
            english = item.translation(key)
            if _any_match(query, polish, english):
                results.append(SearchResult(
                    id=f"tense-{index}-{key.value}",
                    type=ResultType.Tenses,
                    title=polish,
                    subtitle=f"{key.value} – {english}",
                    source_text=polish,
                    target_text=english,
                    path=path,
                    item_index=index,
                ))
    return results

def search_cases(
    data: Sequence[DeclensionEntry],
    query: str,
    limit: int = DEFAULT_CAPS[ResultType.Cases],
    path: str = DEFAULT_ROUTES[ResultType.Cases],
) -> list[SearchResult]:
    """
    Base forms are tested together with the entry translation, example
    sentences on their own. One entry yields at most fourteen results:
    all base forms first, then all examples.
    """
    if not query.strip():
        return []

    results = []
    for index, item in enumerate(data):
        # Base forms
        for key in CaseKey:
            polish = item.base[key]
            if _any_match(query, polish, item.translation):
                results.append(SearchResult(
                    id=f"case-{index}-{key.value}",
                    type=ResultType.Cases,
                    title=polish,
                    subtitle=f"{key.value} case – {item.translation}",
                    source_text=polish,
                    target_text=item.translation,
                    path=path,
                    item_id=item.id,
                    item_index=index,
                ))

        # Example sentences
        for key in CaseKey:
            example = item.examples[key]
            if _any_match(query, example.source_text, example.target_text):
                results.append(SearchResult(
                    id=f"case-example-{index}-{key.value}",
                    type=ResultType.Cases,
                    title=example.source_text,
                    subtitle=f"{key.value} example – {example.target_text}",
                    source_text=example.source_text,
                    target_text=example.target_text,
                    path=path,
                    item_id=item.id,
                    item_index=index,
                ))

        if len(results) >= limit:
            break
    return results[:limit]

# One handler per result type
MATCHERS: dict[ResultType, Matcher] = {
    ResultType.Vocabulary: search_vocabulary,
    ResultType.Numbers: search_numbers,
    ResultType.Dates: search_dates,
    ResultType.MyWords: search_custom_words,
    ResultType.Tenses: search_tenses,
    ResultType.Cases: search_cases,
}
