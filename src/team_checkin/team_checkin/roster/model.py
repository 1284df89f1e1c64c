from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence


@dataclass(frozen=True)
class Roster:
    """Static assignment of members to teams.

    Team order and member order are the declaration order; dashboards and
    missing-member lists rely on it.
    """

    entries: tuple[tuple[str, tuple[str, ...]], ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[str]]) -> "Roster":
        return cls(entries=tuple((str(team), tuple(str(m) for m in members)) for team, members in mapping.items()))

    def teams(self) -> list[str]:
        return [team for team, _ in self.entries]

    def members_of(self, team: str) -> tuple[str, ...]:
        for name, members in self.entries:
            if name == team:
                return members
        return ()

    def has_team(self, team: str) -> bool:
        return any(name == team for name, _ in self.entries)

    def has_member(self, team: str, name: str) -> bool:
        return name in self.members_of(team)

    def size(self, team: str) -> int:
        return len(self.members_of(team))

    def all_members(self) -> list[str]:
        return [m for _, members in self.entries for m in members]

    def to_dict(self) -> dict:
        return {"teams": [{"team": team, "members": list(members)} for team, members in self.entries]}
