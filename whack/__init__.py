"""Whack-a-Ninja gameplay core: hammer, holes, spawners and the round that ties them together."""

from .round import FrameInput, FrameOutput, RoundState

__all__ = ["FrameInput", "FrameOutput", "RoundState"]
