from __future__ import annotations

import random
from collections.abc import Sequence


DEFAULT_WORDS: tuple[str, ...] = (
    "cat",
    "dog",
    "house",
    "tree",
    "car",
    "bike",
    "sun",
    "moon",
    "star",
    "flower",
    "book",
    "phone",
    "computer",
    "table",
    "chair",
    "door",
    "window",
    "clock",
    "apple",
    "banana",
    "pizza",
    "hamburger",
    "coffee",
    "water",
    "mountain",
    "ocean",
    "beach",
    "forest",
    "city",
    "bridge",
    "airplane",
    "train",
    "boat",
)


def pick_word(words: Sequence[str] = DEFAULT_WORDS, rng: random.Random | None = None) -> str:
    """Uniform pick with replacement; the same word may come up in consecutive rounds."""
    if not words:
        raise ValueError("word list is empty")
    return (rng or random).choice(words)
