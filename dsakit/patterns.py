"""Text patterns built from stars, digits and letters, one string per row."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _digits(values: range) -> str:
    return "".join(str(value) for value in values)


def solid_square(n: int) -> list[str]:
    """An ``n`` by ``n`` square of stars."""
    return ["*" * n for _ in range(n)]


def left_triangle(n: int) -> list[str]:
    """Row ``r`` holds ``r`` stars."""
    return ["*" * row for row in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Row ``r`` holds ``n - r + 1`` stars."""
    return ["*" * (n - row + 1) for row in range(1, n + 1)]


def right_aligned_inverted(n: int) -> list[str]:
    """An inverted triangle of stars pushed right by ``r - 1`` spaces."""
    return [" " * (row - 1) + "*" * (n - row + 1) for row in range(1, n + 1)]


def number_triangle(n: int) -> list[str]:
    """Row ``r`` counts up from ``r`` for ``r`` numbers."""
    return [_digits(range(row, 2 * row)) for row in range(1, n + 1)]


def right_aligned_numbers(n: int) -> list[str]:
    """Row ``r`` repeats the number ``r`` ``r`` times, aligned to the right."""
    return [" " * (n - row) + str(row) * row for row in range(1, n + 1)]


def number_pyramid(n: int) -> list[str]:
    """A centred pyramid counting up to ``r`` and back down on row ``r``."""
    return [
        " " * (n - row) + _digits(range(1, row + 1)) + _digits(range(row - 1, 0, -1))
        for row in range(1, n + 1)
    ]


def alpha_rows(n: int) -> list[str]:
    """Row ``r`` repeats the ``r``-th letter ``n`` times."""
    return [_letter(row) * n for row in range(n)]


def alpha_diagonal(n: int) -> list[str]:
    """Row ``r`` holds ``n`` consecutive letters starting at the ``r``-th."""
    return ["".join(_letter(row + col) for col in range(n)) for row in range(n)]


def alpha_reverse_triangle(n: int) -> list[str]:
    """Row ``r`` holds the last ``r`` of the first ``n`` letters."""
    return ["".join(_letter(n - row + col) for col in range(row)) for row in range(1, n + 1)]


def countdown_stars(n: int) -> list[str]:
    """Row ``r`` counts down from ``n - r`` to 1, then prints ``r`` stars."""
    return [_digits(range(n - row, 0, -1)) + "*" * row for row in range(1, n + 1)]


def butterfly(n: int) -> list[str]:
    """Numbers count in from both sides while a star gap widens each row."""
    rows = []
    for row in range(1, n + 1):
        width = n - row + 1
        rows.append(
            _digits(range(1, width + 1)) + "*" * (2 * row - 2) + _digits(range(width, 0, -1))
        )
    return rows


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "solid-square": solid_square,
    "left-triangle": left_triangle,
    "inverted-triangle": inverted_triangle,
    "right-aligned-inverted": right_aligned_inverted,
    "number-triangle": number_triangle,
    "right-aligned-numbers": right_aligned_numbers,
    "number-pyramid": number_pyramid,
    "alpha-rows": alpha_rows,
    "alpha-diagonal": alpha_diagonal,
    "alpha-reverse-triangle": alpha_reverse_triangle,
    "countdown-stars": countdown_stars,
    "butterfly": butterfly,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen pattern of size ``n``."""
    parser = argparse.ArgumentParser(prog="dsakit-patterns", description=main.__doc__)
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("n", type=int)
    args = parser.parse_args(argv)
    for line in PATTERNS[args.pattern](args.n):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())