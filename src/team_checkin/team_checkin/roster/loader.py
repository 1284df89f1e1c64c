from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from ..common.validators import require_present
from ..core.exceptions import MissingFieldError, ValidationError
from .defaults import DEFAULT_ROSTER
from .model import Roster


def roster_from_data(data: Any) -> Roster:
    """Validate a team -> [member, ...] mapping and build a Roster."""
    if not isinstance(data, dict) or not data:
        raise ValidationError("Roster must be a non-empty object of team -> member list")

    mapping: dict[str, list[str]] = {}
    for team, members in data.items():
        try:
            team_name = require_present(team)
        except MissingFieldError:
            raise ValidationError("Roster team names must be non-empty strings") from None
        if not isinstance(members, list) or not members:
            raise ValidationError(f"Roster team {team_name!r} must list at least one member")

        names: list[str] = []
        for member in members:
            try:
                name = require_present(member)
            except MissingFieldError:
                raise ValidationError(f"Roster team {team_name!r} has an invalid member name") from None
            if name in names:
                raise ValidationError(f"Roster team {team_name!r} lists {name!r} twice")
            names.append(name)
        mapping[team_name] = names

    return Roster.from_mapping(mapping)


def load_roster(path: Optional[str | Path] = None) -> Roster:
    if not path:
        return roster_from_data(DEFAULT_ROSTER)

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Cannot read roster file {path}: {e}") from e
    return roster_from_data(data)
