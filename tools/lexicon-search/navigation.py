"""
Deep-link resolution for quiz views.

A search result is opened by sending the user to its view with ``jumpToId``
(stable item id) and/or ``jumpTo`` (position) parameters. The view then
resolves those parameters against its own items:

* simple views (numbers, dates, custom words) show a fixed list, so the id
  or position is looked up directly;
* resampled views (vocabulary, tenses, cases) show a random working set of
  the full dataset, so a target outside the working set is spliced in at
  the front.

Parameters are single-use. Once a jump has been applied they are removed
from the carrier so a re-render does not jump again. A request that
resolves to nothing is ignored.
"""
import random
import re
from collections.abc import Mapping, MutableMapping
from typing import Any, Sequence
from urllib.parse import urlencode
from pydantic import BaseModel, ConfigDict
from models import ResultType, SearchResult

JUMP_TO_ID = "jumpToId"
JUMP_TO = "jumpTo"

MAX_WORKING_SET = 20

RESAMPLED_TYPES = frozenset({ResultType.Vocabulary, ResultType.Tenses, ResultType.Cases})

LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

class Jump(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    items: tuple[Any, ...]

def _parse_int(value: str | None) -> int | None:
    # Same leniency as a browser's parseInt: "12abc" -> 12, "abc" -> None
    if value is None:
        return None
    match = LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else None

def _item_id(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)

def _find_index(items: Sequence[Any], target_id: int) -> int:
    for index, item in enumerate(items):
        if _item_id(item) == target_id:
            return index
    return -1

def _index_in_range(params: Mapping[str, str], items: Sequence[Any]) -> int:
    index = _parse_int(params.get(JUMP_TO))
    if index is not None and 0 <= index < len(items):
        return index
    return -1

def resolve_simple(items: Sequence[Any], params: Mapping[str, str]) -> Jump | None:
    if not items:
        return None

    target_index = -1
    target_id = _parse_int(params.get(JUMP_TO_ID))
    if target_id is not None:
        target_index = _find_index(items, target_id)

    if target_index == -1:
        target_index = _index_in_range(params, items)

    if target_index == -1:
        return None
    return Jump(index=target_index, items=tuple(items))

def resolve_resampled(
    all_items: Sequence[Any],
    current_items: Sequence[Any],
    params: Mapping[str, str],
    max_size: int = MAX_WORKING_SET,
) -> Jump | None:
    if not current_items:
        return None

    target_id = _parse_int(params.get(JUMP_TO_ID))
    if target_id is not None:
        target_index = _find_index(current_items, target_id)
        if target_index != -1:
            return Jump(index=target_index, items=tuple(current_items))

        for item in all_items:
            if _item_id(item) == target_id:
                # Evict from the tail so the working set never grows
                kept = current_items[:min(len(current_items) - 1, max_size - 1)]
                return Jump(index=0, items=(item, *kept))

    # Positions only ever refer to the current working set
    target_index = _index_in_range(params, current_items)
    if target_index == -1:
        return None
    return Jump(index=target_index, items=tuple(current_items))

def consume(params: MutableMapping[str, str]) -> None:
    params.pop(JUMP_TO_ID, None)
    params.pop(JUMP_TO, None)

class QuizState(BaseModel):
    """Position of a quiz view plus the parameters of its current address."""
    items: list[Any] = []
    current_index: int = 0
    show_answer: bool = False
    params: dict[str, str] = {}
    view: ResultType | None = None

    def follow(self, all_items: Sequence[Any] | None = None, max_size: int = MAX_WORKING_SET) -> bool:
        """
        Applies a pending jump request. Resampled views can pull the target
        in from ``all_items``; simple views ignore it. Without a ``view`` the
        presence of ``all_items`` decides. Returns whether a jump happened.
        """
        if self.view is None:
            resampled = all_items is not None
        else:
            resampled = self.view in RESAMPLED_TYPES

        if resampled:
            backing = self.items if all_items is None else all_items
            jump = resolve_resampled(backing, self.items, self.params, max_size)
        else:
            jump = resolve_simple(self.items, self.params)

        if jump is None:
            return False

        self.items = list(jump.items)
        self.current_index = jump.index
        self.show_answer = False
        consume(self.params)
        return True

def sample_working_set(items: Sequence[Any], count: int = MAX_WORKING_SET, rng: random.Random | None = None) -> list[Any]:
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled[:count]

def jump_params(result: SearchResult) -> dict[str, str]:
    params = {}
    if result.item_id is not None:
        params[JUMP_TO_ID] = str(result.item_id)
    if result.item_index is not None:
        params[JUMP_TO] = str(result.item_index)
    return params

def navigation_link(result: SearchResult) -> str:
    params = jump_params(result)
    if not params:
        return result.path
    return f"{result.path}?{urlencode(params)}"
