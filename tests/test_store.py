"""Tests for the card store."""

import random

import pytest

from flashcards import Card, CardStore, card_key


class TestUpsert:

    def test_appends_in_order(self, store):
        store.upsert("a", "x")
        store.upsert("b", "y")
        assert [card_key(c) for c in store] == ["a", "b"]
        assert len(store) == 2

    def test_existing_term_replaces_definition_only(self, store):
        store.upsert("a", "x", 4)
        store.upsert("a", "z", 9)
        assert list(store) == [Card("a", "z", 4)]

    def test_new_card_takes_mistakes(self, store):
        store.upsert("a", "x", 2)
        assert store.get("a").mistakes == 2


class TestLookups:

    @pytest.fixture(autouse=True)
    def cards(self, store):
        store.upsert("A", "X")
        store.upsert("B", "Y")

    def test_exists_by_term(self, store):
        assert store.exists_by_term("A")
        assert not store.exists_by_term("X")

    def test_find_term_by_definition(self, store):
        assert store.find_term_by_definition("Y") == "B"
        assert store.find_term_by_definition("Z") is None
        assert store.exists_by_definition("X")
        assert not store.exists_by_definition("A")

    def test_matches_needs_term_and_definition(self, store):
        assert store.matches("A", "X")
        assert not store.matches("A", "Y")
        assert not store.matches("C", "X")

    def test_remove(self, store):
        store.remove("A")
        assert not store.exists_by_term("A")
        assert len(store) == 1

    def test_remove_absent_is_noop(self, store):
        store.remove("nope")
        assert len(store) == 2


class TestHardest:

    def test_empty_store(self, store):
        assert store.hardest() == []

    def test_all_zero_mistakes(self, store):
        for term in "abc":
            store.upsert(term, term.upper())
        assert store.hardest() == []

    def test_single_maximum(self, store):
        store.upsert("a", "x", 1)
        store.upsert("b", "y", 3)
        store.upsert("c", "z", 0)
        assert [c.term for c in store.hardest()] == ["b"]

    def test_ties_in_store_order(self, store):
        store.upsert("a", "x", 2)
        store.upsert("b", "y", 1)
        store.upsert("c", "z", 2)
        assert [c.term for c in store.hardest()] == ["a", "c"]

    def test_reset_clears_hardest(self, store):
        store.upsert("a", "x", 2)
        store.upsert("b", "y", 5)
        store.reset_all_mistakes()
        assert store.hardest() == []
        assert all(card.mistakes == 0 for card in store)


def test_pick_random_uses_rng():
    store = CardStore(rng=random.Random(7))
    for term in "abcd":
        store.upsert(term, term * 2)
    picks = {store.pick_random().term for _ in range(50)}
    assert picks <= set("abcd")
    assert len(picks) > 1


def test_pick_random_empty_store():
    with pytest.raises(IndexError):
        CardStore().pick_random()
