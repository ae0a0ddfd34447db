"""
Tests for deep-link resolution into quiz views.
Run: python -m pytest tests/test_navigation.py -v
"""

import random

from models import ResultType, SearchResult, SearchSettings
from navigation import (
    QuizState,
    jump_params,
    navigation_link,
    resolve_resampled,
    resolve_simple,
    sample_working_set,
)


def items(*ids):
    return [{"id": i} for i in ids]


class TestSimpleResolver:

    def test_jump_by_id(self):
        """id 2 in [1, 2, 3] lands on index 1 and clears the request."""
        state = QuizState(items=items(1, 2, 3), show_answer=True, params={"jumpToId": "2", "tab": "x"})
        assert state.follow()
        assert state.current_index == 1
        assert state.show_answer is False
        assert state.params == {"tab": "x"}

    def test_id_preferred_over_index(self):
        jump = resolve_simple(items(1, 2, 3), {"jumpToId": "3", "jumpTo": "0"})
        assert jump.index == 2

    def test_falls_back_to_index(self):
        jump = resolve_simple(items(1, 2, 3), {"jumpToId": "99", "jumpTo": "1"})
        assert jump.index == 1

    def test_index_out_of_range_is_a_no_op(self):
        state = QuizState(items=items(1, 2, 3), current_index=2, show_answer=True, params={"jumpTo": "3"})
        assert not state.follow()
        assert state.current_index == 2
        assert state.show_answer is True
        assert state.params == {"jumpTo": "3"}

    def test_negative_and_malformed_values(self):
        assert resolve_simple(items(1, 2), {"jumpTo": "-1"}) is None
        assert resolve_simple(items(1, 2), {"jumpToId": "abc"}) is None
        assert resolve_simple(items(1, 2), {"jumpTo": "1abc"}).index == 1

    def test_empty_items(self):
        assert resolve_simple([], {"jumpTo": "0"}) is None

    def test_no_request(self):
        assert resolve_simple(items(1, 2), {}) is None

    def test_works_with_models(self, numbers):
        jump = resolve_simple(numbers, {"jumpToId": "3"})
        assert jump.index == 2

    def test_second_follow_does_not_jump_again(self):
        state = QuizState(items=items(1, 2, 3), params={"jumpToId": "3"})
        assert state.follow()
        state.current_index = 0
        assert not state.follow()
        assert state.current_index == 0


class TestResampledResolver:

    def test_target_already_in_working_set(self):
        current = items(5, 6, 7)
        jump = resolve_resampled(items(*range(1, 10)), current, {"jumpToId": "7"})
        assert jump.index == 2
        assert list(jump.items) == current

    def test_target_spliced_to_front(self):
        """Missing id 17 moves to the front; the tail of the working set is evicted."""
        backing = items(*range(1, 31))
        current = [item for item in backing if item["id"] != 17][:20]
        state = QuizState(items=current, show_answer=True, params={"jumpToId": "17"})

        assert state.follow(all_items=backing)

        assert len(state.items) == 20
        assert state.items[0]["id"] == 17
        assert state.items[1:] == current[:19]
        assert state.current_index == 0
        assert state.show_answer is False
        assert state.params == {}

    def test_small_working_set_keeps_its_length(self):
        jump = resolve_resampled(items(1, 2, 3, 4, 5), items(1, 2, 3), {"jumpToId": "5"})
        assert [i["id"] for i in jump.items] == [5, 1, 2]

    def test_working_set_size_from_settings(self):
        settings = SearchSettings(working_set_size=4)
        backing = items(*range(1, 11))
        current = sample_working_set(backing[:9], settings.working_set_size, rng=random.Random(0))
        jump = resolve_resampled(backing, current + items(98, 99), {"jumpToId": "10"}, settings.working_set_size)
        assert len(jump.items) == 4
        assert jump.items[0]["id"] == 10
        assert list(jump.items[1:]) == current[:3]

    def test_unknown_id_uses_index_into_working_set(self):
        current = items(4, 8, 15)
        jump = resolve_resampled(items(*range(1, 20)), current, {"jumpToId": "404", "jumpTo": "2"})
        assert jump.index == 2
        assert list(jump.items) == current

    def test_unresolvable_request_is_a_no_op(self):
        current = items(4, 8, 15)
        state = QuizState(items=list(current), current_index=1, params={"jumpToId": "404", "jumpTo": "9"})
        assert not state.follow(all_items=items(1, 2))
        assert state.items == current
        assert state.current_index == 1
        assert state.params == {"jumpToId": "404", "jumpTo": "9"}

    def test_empty_working_set(self):
        assert resolve_resampled(items(1, 2), [], {"jumpToId": "1"}) is None

    def test_positional_request_for_tenses(self, conjugations):
        jump = resolve_resampled(conjugations, conjugations, {"jumpTo": "1"})
        assert jump.index == 1


class TestLinks:

    def test_params_and_link(self):
        result = SearchResult(
            id="number-3", type=ResultType.Numbers, title="czterdzieści dwa", subtitle="42 – forty two",
            source_text="czterdzieści dwa", target_text="forty two", path="/numbers", item_id=3, item_index=2,
        )
        assert jump_params(result) == {"jumpToId": "3", "jumpTo": "2"}
        assert navigation_link(result) == "/numbers?jumpToId=3&jumpTo=2"

    def test_positional_only(self):
        result = SearchResult(
            id="tense-4-perfectivePast", type=ResultType.Tenses, title="zrobiłem", subtitle="",
            source_text="zrobiłem", target_text="I had done", path="/tenses", item_index=4,
        )
        assert navigation_link(result) == "/tenses?jumpTo=4"

    def test_simple_view_never_splices(self):
        state = QuizState(items=items(1, 2, 3), params={"jumpToId": "7", "jumpTo": "1"}, view=ResultType.Numbers)
        assert state.follow(all_items=items(*range(1, 10)))
        assert state.items == items(1, 2, 3)
        assert state.current_index == 1

    def test_resampled_view_splices(self):
        state = QuizState(items=items(1, 2, 3), params={"jumpToId": "7"}, view=ResultType.Cases)
        assert state.follow(all_items=items(*range(1, 10)))
        assert [i["id"] for i in state.items] == [7, 1, 2]
        assert state.current_index == 0

    def test_link_round_trips_through_resolver(self, vocabulary):
        result = SearchResult(
            id="vocab-3", type=ResultType.Vocabulary, title="miasto", subtitle="city",
            source_text="miasto", target_text="city", path="/polish-to-english", item_id=3, item_index=2,
        )
        state = QuizState(items=vocabulary[:2], params=jump_params(result), view=result.type)
        assert state.follow(all_items=vocabulary)
        assert state.items[0].word == "miasto"


class TestSampling:

    def test_sample_size_and_membership(self):
        data = items(*range(50))
        sample = sample_working_set(data, 20, rng=random.Random(3))
        assert len(sample) == 20
        assert all(item in data for item in sample)
        assert len({item["id"] for item in sample}) == 20

    def test_smaller_than_count(self):
        assert len(sample_working_set(items(1, 2), 20)) == 2
