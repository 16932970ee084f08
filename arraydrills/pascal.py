"""Pascal's triangle: single entries, rows and whole triangles."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence


def n_cr(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r); 0 when ``r > n``."""
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")
    if r > n:
        return 0
    r = min(r, n - r)
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_element(row: int, col: int) -> int:
    """Return the entry at zero-based ``row`` and ``col`` of Pascal's triangle."""
    return n_cr(row, col)


def nth_row(n: int) -> list[int]:
    """Return row ``n`` (zero-based) of Pascal's triangle."""
    return [n_cr(n, k) for k in range(n + 1)]


def pascal_triangle(n: int) -> list[list[int]]:
    """Return rows 0 through ``n`` of Pascal's triangle."""
    return [nth_row(row) for row in range(n + 1)]


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str = "") -> int:
    if prompt:
        print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return int(token)


def _format_row(row: Iterable[int]) -> str:
    return " ".join(map(str, row))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu; ``argv`` supplies the answers instead of stdin."""
    tokens = iter(argv) if argv is not None else _stdin_tokens()
    print("Choose an option:")
    print("1. Find element at position (r, c)")
    print("2. Print N-th row of Pascal's Triangle")
    print("3. Print entire Pascal's Triangle up to N-th row")
    try:
        choice = _read_int(tokens)
    except ValueError:
        choice = 0

    try:
        if choice == 1:
            r = _read_int(tokens, "Enter row number (r): ")
            c = _read_int(tokens, "Enter column number (c): ")
            try:
                element = pascal_element(r, c)
            except ValueError:
                element = 0
            if element:
                print(
                    f"Element at position ({r}, {c}) in Pascal's Triangle is: {element}"
                )
            else:
                print("Invalid position!")
        elif choice == 2:
            n = _read_int(tokens, "Enter row number (n): ")
            print(f"The {n}-th row of Pascal's Triangle is: {_format_row(nth_row(n))}")
        elif choice == 3:
            n = _read_int(tokens, "Enter number of rows (N): ")
            print(f"Pascal's Triangle up to {n}-th row:")
            for row in pascal_triangle(n):
                print(_format_row(row))
        else:
            print("Invalid choice!")
    except ValueError:
        print("Invalid input!")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())