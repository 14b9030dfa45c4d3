from __future__ import annotations
from typing import Iterator, Tuple

Span = Tuple[int, int]

def is_letter(ch: str) -> bool:
    # Lu, Ll, Lt, Lm, Lo; marks and digits split words.
    return ch.isalpha()

def iter_word_spans(text: str) -> Iterator[Span]:
    """Yield (start, end) offsets of every maximal run of letters in `text`.

    Anything that is not a letter separates words, so punctuation touching a
    word ("Hello," or "(world)") never ends up inside it.
    """
    start = -1
    for i, ch in enumerate(text):
        if is_letter(ch):
            if start < 0:
                start = i
        elif start >= 0:
            yield start, i
            start = -1
    if start >= 0:
        yield start, len(text)

def is_lowercase_span(text: str, start: int, end: int) -> bool:
    for i in range(start, end):
        ch = text[i]
        if ch.lower() != ch:
            return False
    return True

def iter_words(text: str) -> Iterator[str]:
    for start, end in iter_word_spans(text):
        yield text[start:end].lower()
