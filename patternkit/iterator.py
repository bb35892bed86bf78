"""A collection of book titles that can be iterated over."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass
class BookCollection:
    """Holds book titles in order."""

    titles: list[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[str]:
        yield from self.titles


def main(argv: Sequence[str] | None = None) -> None:
    """Print every book in a sample library."""
    library = BookCollection(
        ["Clean Code", "Design Patterns", "The Pragmatic Programmer"]
    )
    for book in library:
        print("Book: ", book)


if __name__ == "__main__":
    main()