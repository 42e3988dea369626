"""Tests for password_strength module."""

from __future__ import annotations

import pytest

from password_strength import (
    StrengthLabel,
    StrengthRating,
    category_points,
    label_for,
    length_points,
    score,
)


@pytest.mark.parametrize(
    "length,points",
    [(0, 0), (4, 0), (5, 1), (7, 1), (8, 2), (10, 2), (11, 3), (14, 3), (15, 4), (64, 4)],
)
def test_length_points_boundaries(length: int, points: int):
    """Test length bands at each edge."""
    assert length_points(length) == points


@pytest.mark.parametrize(
    "password,points",
    [
        ("", 0),
        ("abc", 1),
        ("ABC", 1),
        ("123", 1),
        ("aB3", 3),
        ("!", 2),
        (" ", 2),
        ("é", 2),
        ("aB3!", 5),
    ],
)
def test_category_points(password: str, points: int):
    """Test per-class points, with +2 for anything not ASCII alphanumeric."""
    assert category_points(password) == points


@pytest.mark.parametrize(
    "total,label",
    [
        (0, StrengthLabel.VERY_WEAK),
        (2, StrengthLabel.VERY_WEAK),
        (3, StrengthLabel.WEAK),
        (4, StrengthLabel.WEAK),
        (5, StrengthLabel.MODERATE),
        (6, StrengthLabel.MODERATE),
        (7, StrengthLabel.STRONG),
        (8, StrengthLabel.STRONG),
        (9, StrengthLabel.VERY_STRONG),
    ],
)
def test_label_for(total: int, label: StrengthLabel):
    """Test the score to label bands."""
    assert label_for(total) is label


@pytest.mark.parametrize(
    "password,label,total",
    [
        ("", StrengthLabel.VERY_WEAK, 0),
        ("abcd", StrengthLabel.VERY_WEAK, 1),
        ("abcdE", StrengthLabel.WEAK, 3),
        ("abc12345", StrengthLabel.WEAK, 4),
        ("a" * 15, StrengthLabel.MODERATE, 5),
        ("Aa1!aaaaaaa", StrengthLabel.STRONG, 8),
        ("Aa1!Bb2@Cc3#", StrengthLabel.STRONG, 8),
        ("Aa1!Aa1!Aa1!Aa1", StrengthLabel.VERY_STRONG, 9),
    ],
)
def test_score_examples(password: str, label: StrengthLabel, total: int):
    """Test full ratings for known passwords."""
    assert score(password) == StrengthRating(label=label, score=total)


def test_score_counts_characters_not_bytes():
    """Test that multi-byte characters count once toward length."""
    rating = score("ééééé")

    assert rating.score == 3
    assert rating.label is StrengthLabel.WEAK


def test_score_is_pure():
    """Test that scoring the same string twice gives the same rating."""
    assert score("Tr0ub4dor&3") == score("Tr0ub4dor&3")


def test_label_display_data():
    """Test the description and color supplied for each label."""
    assert [(l.description, l.color) for l in StrengthLabel] == [
        ("Very Weak", "red"),
        ("Weak", "yellow"),
        ("Moderate", "blue"),
        ("Strong", "green"),
        ("Very Strong", "bright green"),
    ]
