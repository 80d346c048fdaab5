from typing import List, Optional, Tuple

from .ast import Location
from .source import split_lines

__all__ = ["print_location"]


def print_location(location: Location) -> str:
    """Print the position of a location together with an excerpt of its source.

    The excerpt shows the line of the location between its neighbors, with a caret
    under the column::

        GraphQL request:2:8
        1 | {
        2 |   user(uid: 4) {
          |        ^
        3 |     name
    """
    source = location.source
    line, column = source.get_location(location.start)
    offset_line, offset_column = source.location_offset
    # only the first line of the body starts at the column offset
    if line == 1:
        column += offset_column - 1
    line_num = line + offset_line - 1

    lines = split_lines(source.body)
    if offset_column > 1:
        lines[0] = " " * (offset_column - 1) + lines[0]
    excerpt: List[Tuple[str, Optional[str]]] = [
        (str(line_num - 1), lines[line - 2] if line > 1 else None),
        (str(line_num), lines[line - 1]),
        ("", " " * (column - 1) + "^"),
        (str(line_num + 1), lines[line] if line < len(lines) else None),
    ]
    width = max(len(prefix) for prefix, text in excerpt if text is not None)
    return f"{source.name}:{line_num}:{column}\n" + "\n".join(
        prefix.rjust(width) + (f" | {text}" if text else " |")
        for prefix, text in excerpt
        if text is not None
    )
