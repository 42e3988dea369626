"""Heuristic password strength rating from length and character variety."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum


class StrengthLabel(Enum):
    VERY_WEAK = ("Very Weak", "red")
    WEAK = ("Weak", "yellow")
    MODERATE = ("Moderate", "blue")
    STRONG = ("Strong", "green")
    VERY_STRONG = ("Very Strong", "bright green")

    def __init__(self, description: str, color: str) -> None:
        self.description = description
        self.color = color


@dataclass(frozen=True)
class StrengthRating:
    label: StrengthLabel
    score: int


def length_points(length: int) -> int:
    if length <= 4:
        return 0
    if length <= 7:
        return 1
    if length <= 10:
        return 2
    if length <= 14:
        return 3
    return 4


def is_other(ch: str) -> bool:
    """True for anything that is not an ASCII letter or digit."""
    return not (ch.isascii() and ch.isalnum())


def category_points(password: str) -> int:
    points = 0
    if any(c in string.ascii_lowercase for c in password):
        points += 1
    if any(c in string.ascii_uppercase for c in password):
        points += 1
    if any(c in string.digits for c in password):
        points += 1
    if any(is_other(c) for c in password):
        points += 2
    return points


def label_for(total: int) -> StrengthLabel:
    if total <= 2:
        return StrengthLabel.VERY_WEAK
    if total <= 4:
        return StrengthLabel.WEAK
    if total <= 6:
        return StrengthLabel.MODERATE
    if total <= 8:
        return StrengthLabel.STRONG
    return StrengthLabel.VERY_STRONG


def score(password: str) -> StrengthRating:
    """Rate a password. Total over every string, including the empty one."""
    total = length_points(len(password)) + category_points(password)
    return StrengthRating(label=label_for(total), score=total)
