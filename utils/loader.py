"""
Module used to read grids from text streams
"""

from collections.abc import Iterable, Iterator

from errors import InvalidInput


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    """
    Yield the lines of a grid, without their line terminator.

    Reading stops at the first blank line (only whitespace) or at the end
    of the stream. Nothing else is stripped: validation is left to the grid.

    Raises:
        InvalidInput: if the stream cannot be decoded as text.
    """
    try:
        for line in stream:
            line = line.rstrip("\r\n")
            if not line.strip():
                return
            yield line
    except UnicodeDecodeError as error:
        raise InvalidInput(
            f"Input is not valid {error.encoding} text: {error.reason}"
        ) from error


def read_grid_file(path: str) -> list[str]:
    with open(path, "r", encoding="utf-8") as file:
        return list(read_lines(file))
