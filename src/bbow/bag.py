from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Literal, Optional, Tuple

from .tokenize import is_lowercase_span, iter_word_spans

Ownership = Literal["borrowed", "owned"]


@dataclass(frozen=True, eq=False)
class WordKey:
    """A word in the bag, either a view into the ingested text or its own string.

    A borrowed key keeps a reference to the source text and a span inside it;
    an owned key spans the whole of a freshly lowercased string. Keys compare
    and hash by content, and also match a plain ``str`` with the same content.
    """
    source: str
    start: int
    end: int
    kind: Ownership
    _hash: int = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "_hash", hash(self.text))

    @classmethod
    def borrowed(cls, source: str, start: int, end: int) -> "WordKey":
        return cls(source, start, end, "borrowed")

    @classmethod
    def owned(cls, word: str) -> "WordKey":
        return cls(word, 0, len(word), "owned")

    @property
    def text(self) -> str:
        if self.kind == "owned":
            return self.source
        return self.source[self.start:self.end]

    @property
    def is_borrowed(self) -> bool:
        return self.kind == "borrowed"

    def __len__(self) -> int:
        return self.end - self.start

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other) -> bool:
        if isinstance(other, WordKey):
            if self._hash != other._hash or len(self) != len(other):
                return False
            return self.source.startswith(other.text, self.start, self.end)
        if isinstance(other, str):
            return len(self) == len(other) and self.source.startswith(other, self.start, self.end)
        return NotImplemented

    def __lt__(self, other: "WordKey") -> bool:
        return self.text < other.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"WordKey({self.text!r}, {self.kind})"


class WordBag:
    """Case-insensitive word -> occurrence count map built from in-memory text.

    Words are maximal runs of Unicode letters. Keys are always lowercase; a
    word already lowercase in the source is stored as a borrowed view of that
    text, any other casing as an owned lowercase copy.

    >>> bag = WordBag()
    >>> bag.extend_from_text("Hello, world! Hello.")
    >>> bag.count(), bag.match_count("HELLO")
    (2, 2)
    """

    def __init__(self):
        self._counts: Dict[WordKey, int] = {}

    def extend_from_text(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        counts = self._counts
        for start, end in iter_word_spans(text):
            if is_lowercase_span(text, start, end):
                key = WordKey.borrowed(text, start, end)
            else:
                key = WordKey.owned(text[start:end].lower())
            # The first key inserted stays in the map; later equal keys only bump it.
            if key in counts:
                counts[key] += 1
            else:
                counts[key] = 1

    def count(self) -> int:
        """Number of distinct words."""
        return len(self._counts)

    def total(self) -> int:
        """Number of word occurrences, repeats included."""
        return sum(self._counts.values())

    def match_count(self, word: str) -> int:
        return self._counts.get(word.lower(), 0)

    def is_empty(self) -> bool:
        return not self._counts

    def key_for(self, word: str) -> Optional[WordKey]:
        probe = WordKey.owned(word.lower())
        for key in self._counts:
            if key == probe:
                return key
        return None

    def words(self) -> Iterator[str]:
        for key in sorted(self._counts):
            yield key.text

    def ownership(self) -> Iterator[Tuple[str, Ownership]]:
        for key in sorted(self._counts):
            yield key.text, key.kind

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        ranked = sorted(((k.text, c) for k, c in self._counts.items()), key=lambda kv: (-kv[1], kv[0]))
        return ranked if n is None else ranked[:max(0, n)]

    def copy(self) -> "WordBag":
        other = WordBag()
        other._counts = dict(self._counts)
        return other

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._counts

    def __repr__(self) -> str:
        return f"WordBag(count={self.count()}, total={self.total()})"
