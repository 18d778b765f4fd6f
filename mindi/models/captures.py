"""Ten-card capture tracking and match termination."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from mindi.models.card import Card
from mindi.models.deck import total_tens
from mindi.models.enums import Team


@dataclass(frozen=True)
class MatchResult:
    """Final outcome of a match.

    Attributes:
        winner: Winning team, or None for a draw
        team_a: Tens captured by team A
        team_b: Tens captured by team B

    """

    winner: Team | None
    team_a: int
    team_b: int

    @property
    def is_draw(self) -> bool:
        """Check if neither team reached a majority."""
        return self.winner is None

    @property
    def announcement(self) -> str:
        """Log line announcing the result."""
        if self.winner is None:
            return "--- GAME OVER: DRAW ---"
        return f"--- GAME OVER: {self.winner.display_name} WINS ---"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "winner": self.winner.value if self.winner else None,
            "team_a": self.team_a,
            "team_b": self.team_b,
            "is_draw": self.is_draw,
        }


@dataclass
class CapturedTens:
    """Ten-rank cards captured by each team.

    Attributes:
        table_size: Number of seats; fixes how many tens exist
        team_a: Tens captured by even seats, in capture order
        team_b: Tens captured by odd seats, in capture order

    """

    table_size: int
    team_a: list[Card] = field(default_factory=list)
    team_b: list[Card] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Tens available in this deck configuration (4 or 8)."""
        return total_tens(self.table_size)

    @property
    def majority(self) -> int:
        """Threshold a team must strictly exceed to win."""
        return self.total // 2

    def for_team(self, team: Team) -> list[Card]:
        """Get a team's captured tens."""
        return self.team_a if team is Team.A else self.team_b

    def add(self, team: Team, cards: Iterable[Card]) -> None:
        """Append captured tens to a team's pile."""
        self.for_team(team).extend(card for card in cards if card.is_ten())

    def captured_count(self) -> int:
        """Tens captured so far by both teams."""
        return len(self.team_a) + len(self.team_b)

    def is_complete(self) -> bool:
        """Check if every ten has been captured, which ends the match."""
        return self.captured_count() >= self.total

    def result(self) -> MatchResult:
        """Compute the match outcome from the current counts."""
        team_a, team_b = len(self.team_a), len(self.team_b)
        winner: Team | None = None
        if team_a > self.majority:
            winner = Team.A
        elif team_b > self.majority:
            winner = Team.B
        return MatchResult(winner=winner, team_a=team_a, team_b=team_b)
