"""Tests for random recommendation."""
import numpy as np

from bookdash.recommend import pick_random

from conftest import make_book


def test_pick_random_empty_returns_none():
    assert pick_random([]) is None
    assert pick_random(()) is None


def test_pick_random_single_book():
    book = make_book("Only")
    assert pick_random([book]) is book


def test_pick_random_returns_member(sample_table):
    subset = list(sample_table)
    for _ in range(50):
        assert pick_random(subset) in subset


def test_pick_random_varies_between_calls(sample_table):
    subset = list(sample_table)
    picks = {pick_random(subset).title for _ in range(200)}
    assert len(picks) > 1


def test_pick_random_with_injected_generator(sample_table):
    subset = list(sample_table)
    first = pick_random(subset, np.random.default_rng(7))
    second = pick_random(subset, np.random.default_rng(7))
    assert first is second
