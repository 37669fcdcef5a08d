from __future__ import annotations

import itertools

import pytest

from pyride.models.review import RatingSummary, ReviewRecord
from pyride.ratings import aggregate, percentage


def _reviews(*ratings: int) -> list[ReviewRecord]:
    return [ReviewRecord(id=f"r{i}", rating=rating) for i, rating in enumerate(ratings)]


def test_empty_reviews_give_zero_distribution_and_percentages() -> None:
    summary = aggregate([])

    assert summary.distribution == (0, 0, 0, 0, 0)
    assert summary.total == 0
    assert not summary.has_reviews
    for stars in range(1, 6):
        assert percentage(summary, stars) == 0


def test_distribution_and_percentages_for_mixed_reviews() -> None:
    summary = aggregate(_reviews(5, 5, 3, 4), average=4.6)

    assert summary.distribution == (0, 0, 1, 1, 2)
    assert summary.total == 4
    assert summary.average == 4.6
    assert summary.percentage(5) == 50
    assert summary.percentage(4) == 25
    assert summary.percentage(3) == 25
    assert summary.percentage(2) == 0
    assert summary.percentage(1) == 0


def test_average_is_passed_through_not_recomputed() -> None:
    summary = aggregate(_reviews(1, 1), average=4.9)

    assert summary.average == 4.9


def test_aggregate_is_order_independent() -> None:
    reviews = _reviews(1, 2, 2, 5, 4)
    expected = aggregate(reviews)

    for permutation in itertools.permutations(reviews):
        result = aggregate(permutation)
        assert result.distribution == expected.distribution
        assert result.total == expected.total


def test_aggregate_is_idempotent() -> None:
    reviews = _reviews(3, 4, 5)

    assert aggregate(reviews, average=4.0) == aggregate(reviews, average=4.0)


def test_out_of_range_ratings_are_skipped_without_touching_buckets() -> None:
    summary = aggregate(_reviews(0, 6, -1, 5, 1))

    assert summary.distribution == (1, 0, 0, 0, 1)
    assert summary.total == 2
    assert summary.skipped == 3
    assert summary.percentage(5) == 50


def test_only_invalid_ratings_behave_like_no_reviews() -> None:
    summary = aggregate(_reviews(9, 0))

    assert summary.total == 0
    assert summary.skipped == 2
    assert summary.percentage(1) == 0


def test_aggregate_accepts_generators() -> None:
    summary = aggregate(review for review in _reviews(2, 2))

    assert summary.distribution == (0, 2, 0, 0, 0)


def test_rows_are_ordered_five_stars_first() -> None:
    summary = aggregate(_reviews(5, 1))

    assert summary.rows() == [(5, 1, 50.0), (4, 0, 0.0), (3, 0, 0.0), (2, 0, 0.0), (1, 1, 50.0)]


def test_count_rejects_unknown_star_value() -> None:
    with pytest.raises(ValueError):
        RatingSummary().count(6)
