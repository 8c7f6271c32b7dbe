from enum import Enum
from typing import List, NamedTuple, Optional

from pydantic import BaseModel, Field


class DelimiterMode(str, Enum):
    PRESERVE = "preserve"
    STRIP = "strip"


class Span(NamedTuple):
    """
    Half-open [start, end) range of codepoint offsets into a source string.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


class Match(NamedTuple):
    """
    An opening delimiter span paired with the first closing span after it.
    """

    opening: Span
    closing: Span

    @property
    def start(self) -> int:
        return self.opening.start

    @property
    def end(self) -> int:
        return self.closing.end

    @property
    def interior(self) -> Span:
        return Span(self.opening.end, self.closing.start)


class ReplaceRequest(BaseModel):
    """
    A single replace-between invocation, as received from the CLI or the tool server.
    """

    source: str
    opening: str
    closing: str
    replacement: str = ""
    case_insensitive: bool = False
    mode: DelimiterMode = DelimiterMode.PRESERVE
    # None means every match; 1 reproduces first-match-only behaviour
    limit: Optional[int] = Field(default=None, ge=0)


class MatchInfo(BaseModel):
    start: int
    end: int
    opening_text: str
    closing_text: str
    interior_text: str

    @classmethod
    def from_match(cls, text: str, match: Match) -> "MatchInfo":
        return cls(
            start=match.start,
            end=match.end,
            opening_text=text[match.opening.start : match.opening.end],
            closing_text=text[match.closing.start : match.closing.end],
            interior_text=text[match.opening.end : match.closing.start],
        )


class ReplaceResult(BaseModel):
    output: str
    matches: List[MatchInfo] = Field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def changed(self) -> bool:
        return bool(self.matches)
