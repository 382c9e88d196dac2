"""
Joining independently timed animations into one playable unit.

A joined unit starts every branch together and is done when the slowest
branch is done; there is no ordering between branches. Branches are expected
to touch disjoint mobject channels.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from manim import Animation, AnimationGroup


def is_settled(animation) -> bool:
    """True when there is nothing left to play (``None``, empty or zero-length)."""
    if animation is None:
        return True
    if isinstance(animation, AnimationGroup):
        return all(is_settled(a) for a in animation.animations)
    if isinstance(animation, Animation):
        return animation.get_run_time() <= 0
    # Unbuilt `mobject.animate` builders always carry work
    return False


def _flatten(transitions: Iterable) -> Iterator:
    for t in transitions:
        if isinstance(t, (list, tuple)):
            yield from _flatten(t)
        elif not is_settled(t):
            yield t


def join_all(*transitions) -> AnimationGroup:
    """
    Run every transition concurrently as one `AnimationGroup`.

    ``None`` and already-settled entries are dropped, so joining nothing
    gives an empty group that `is_settled` reports as done.
    """
    return AnimationGroup(*_flatten(transitions), lag_ratio=0.0)
