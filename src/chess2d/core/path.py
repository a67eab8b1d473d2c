"""Path reconstruction between an origin and an already-validated target."""

from __future__ import annotations

from chess2d.core.enums import Direction
from chess2d.core.types import Square, general_direction, offset

_STRAIGHT: frozenset[Direction] = frozenset(
    {Direction.N, Direction.E, Direction.S, Direction.W}
)


def line_step(origin: tuple[int, int], target: tuple[int, int]) -> tuple[int, int] | None:
    """Unit step from *origin* to *target*, or ``None`` if they are not on a line."""
    direction = general_direction(origin, target)
    if direction is Direction.NONE:
        return None
    if direction in _STRAIGHT:
        return direction.vector
    if abs(target[0] - origin[0]) == abs(target[1] - origin[1]):
        return direction.vector
    return None


def path_between(origin: tuple[int, int], target: tuple[int, int]) -> list[Square]:
    """Ordered squares from *origin* to *target*, both included.

    Straight and diagonal lines are walked square by square. Anything else
    (a knight jump) degenerates to ``[origin, target]``. No legality check
    is performed.
    """
    start = Square(*origin)
    end = Square(*target)
    path = [start]
    if start == end:
        return path

    step = line_step(start, end)
    if step is None:
        path.append(end)
        return path

    current = start
    while current != end:
        current = offset(current, *step)
        path.append(current)
    return path
