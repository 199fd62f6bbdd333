"""Tests for cross-participant matching."""

from matchmaster.engine import AggregateRecord, Participant, ResultSet, match_participants


def _people(*item_lists):
    return [
        Participant(participant_id=i, name=f"P{i}", items=tuple(items))
        for i, items in enumerate(item_lists)
    ]


def test_end_to_end_example():
    result = match_participants(_people(["Pizza", "Sushi"], ["pizza ", "Tacos"]))

    assert [(r.label, r.count) for r in result.results] == [
        ("Pizza", 2),
        ("Sushi", 1),
        ("Tacos", 1),
    ]
    assert [r.key for r in result.results] == ["pizza", "sushi", "tacos"]
    assert result.total_participants == 2


def test_within_participant_duplicates_count_once():
    result = match_participants(_people(["Apple", "apple", "APPLE "]))

    assert result.results == (AggregateRecord(key="apple", label="Apple", count=1),)


def test_cross_participant_counting():
    result = match_participants(_people(["banana"], ["Banana"], [" BANANA"]))

    assert len(result.results) == 1
    assert result.results[0].count == 3
    assert result.is_shared_by_all(result.results[0])


def test_ranking_count_desc_then_key_asc():
    result = match_participants(
        _people(["c", "a", "b"], ["c", "b"], ["b", "c"])
    )

    assert [(r.key, r.count) for r in result.results] == [
        ("b", 3),
        ("c", 3),
        ("a", 1),
    ]


def test_tie_break_ignores_label_and_insertion_order():
    result = match_participants(_people(["Zebra", "  apple pie", "Mango"]))

    assert [r.key for r in result.results] == ["applepie", "mango", "zebra"]
    assert result.results[0].label == "apple pie"


def test_first_seen_label_is_kept():
    result = match_participants(_people(["  Crème brûlée "], ["CREME BRULEE"]))

    assert result.results[0].label == "Crème brûlée"
    assert result.results[0].count == 2


def test_empty_entries_are_skipped():
    result = match_participants(_people(["", "   ", "?!", "tea"], ["...", "Tea"]))

    assert [r.key for r in result.results] == ["tea"]
    assert all(r.key for r in result.results)


def test_zero_participants():
    result = match_participants([])

    assert result == ResultSet(results=(), total_participants=0)
    assert result.to_dict() == {"results": [], "totalParticipants": 0}


def test_all_empty_entries():
    result = match_participants(_people(["", " "], ["", ""], ["  "]))

    assert result.to_dict() == {"results": [], "totalParticipants": 3}


def test_non_string_items_are_treated_as_empty():
    result = match_participants(_people([None, 7, "kiwi"], ["kiwi"]))

    assert result.to_dict()["results"] == [{"key": "kiwi", "label": "kiwi", "count": 2}]


def test_count_bounds_and_determinism():
    people = _people(
        ["a", "b", "b", "c"], ["A", "d"], ["a", "c", "e"], ["f", "a", "A"]
    )
    first = match_participants(people)
    second = match_participants(iter(people))

    assert first == second
    for record in first.results:
        assert 1 <= record.count <= first.total_participants
    assert first.results[0] == AggregateRecord(key="a", label="a", count=4)


def test_participant_without_common_items_is_not_shared_by_all():
    result = match_participants(_people(["x"], ["y"]))

    assert not any(result.is_shared_by_all(r) for r in result.results)
