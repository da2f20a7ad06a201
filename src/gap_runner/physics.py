"""Motion and collision rules.

Motion is constant acceleration expressed as per-tick position deltas: gravity
moves the player down by a fixed amount each frame, and a jump moves it up by
a fixed amount once. Collision is a strict axis-aligned bounding box test.
"""

from typing import Union

from .entities import Player, Obstacle


Box = Union[Player, Obstacle]


def overlaps(a: Box, b: Box) -> bool:
    """Whether two rectangles overlap.

    Strict inequalities: rectangles that only share an edge do not overlap.
    """
    return (
        a.x < b.right
        and a.right > b.x
        and a.y < b.bottom
        and a.bottom > b.y
    )


def apply_gravity(player: Player, gravity: int) -> None:
    """Advance the player one gravity step and clamp y at the canvas top."""
    player.y = max(0, player.y + gravity)


def apply_jump(player: Player, impulse: int) -> None:
    """Apply an instantaneous jump.

    Not clamped: a jump near the top may leave y negative until the next
    gravity step.
    """
    player.y += impulse
