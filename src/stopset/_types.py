"""Segment and token shapes consumed by stop word filtering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class TokenLike(Protocol):
    @property
    def text(self) -> str: ...


class SegmentLike(Protocol):
    @property
    def token(self) -> TokenLike: ...


@dataclass(slots=True, frozen=True)
class Token:
    text: str
    frequency: int = 0   # dictionary frequency, not interpreted by stopset
    pos: str = ""        # part-of-speech tag, not interpreted by stopset


@dataclass(slots=True, frozen=True)
class Segment:
    start: int   # byte offset into the segmented text
    end: int     # exclusive
    token: Token
