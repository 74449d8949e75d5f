"""Roster text parsing.

A roster lists each force under a ``Name:`` header followed by one line per
squad::

    Immune System:
    17 units each with 5390 hit points (weak to radiation, bludgeoning) with an attack that does 4507 fire damage at initiative 2

    Infection:
    801 units each with 4706 hit points (weak to radiation) with an attack that does 116 bludgeoning damage at initiative 1
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import re
from typing import Dict, List

from clash.components.damage import DamageType, ResistanceLevel
from clash.components.squad import Attack, Squad

SQUAD_RE = re.compile(
    r"(?P<units>\d+) units each with (?P<hp>\d+) hit points "
    r"(?:\((?P<resistances>[^)]*)\) )?"
    r"with an attack that does (?P<damage>\d+) (?P<damage_type>\w+) damage "
    r"at initiative (?P<initiative>\d+)"
)
RESISTANCE_RE = re.compile(r"(?P<level>weak|immune) to (?P<types>\w+(?:, \w+)*)")
ARMY_HEADER_RE = re.compile(r"(?P<name>[^:]+):")

_LEVELS = {
    "weak": ResistanceLevel.WEAK,
    "immune": ResistanceLevel.IMMUNE,
}


class RosterParseError(ValueError):
    """Raised when roster text cannot be turned into squads."""


@dataclass
class ArmyDefinition:
    """Parsed, never-mutated description of one force."""
    name: str
    squads: List[Squad] = field(default_factory=list)


def parse_resistances(text: str | None) -> Dict[DamageType, ResistanceLevel]:
    """Parse ``immune to radiation, slashing; weak to bludgeoning`` style clauses."""
    resistances: Dict[DamageType, ResistanceLevel] = {}
    if not text:
        return resistances
    for clause in text.split(";"):
        clause = clause.strip()
        if not clause:
            continue
        match = RESISTANCE_RE.fullmatch(clause)
        if match is None:
            raise RosterParseError(f"Malformed resistance clause '{clause}'")
        level = _LEVELS[match.group("level")]
        for token in match.group("types").split(","):
            try:
                resistances[DamageType.from_token(token)] = level
            except ValueError as exc:
                raise RosterParseError(str(exc)) from exc
    return resistances


def parse_squad_line(line: str, squad_id: int) -> Squad:
    match = SQUAD_RE.fullmatch(line.strip())
    if match is None:
        raise RosterParseError(f"Malformed squad line '{line.strip()}'")
    try:
        damage_type = DamageType.from_token(match.group("damage_type"))
    except ValueError as exc:
        raise RosterParseError(str(exc)) from exc
    return Squad(
        id=squad_id,
        count=int(match.group("units")),
        hitpoints=int(match.group("hp")),
        attack=Attack(value=int(match.group("damage")), damage_type=damage_type),
        initiative=int(match.group("initiative")),
        resistances=parse_resistances(match.group("resistances")),
    )


def parse_squads(text: str) -> List[Squad]:
    """Parse every non-blank line as a squad, numbering them from 1."""
    lines = [line for line in text.splitlines() if line.strip()]
    return [parse_squad_line(line, index) for index, line in enumerate(lines, start=1)]


def parse_armies(text: str) -> List[ArmyDefinition]:
    armies: List[ArmyDefinition] = []
    current: ArmyDefinition | None = None
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        header = ARMY_HEADER_RE.fullmatch(line)
        if header is not None:
            current = ArmyDefinition(name=header.group("name").strip())
            armies.append(current)
            continue
        if current is None:
            raise RosterParseError(f"Line {line_number}: squad listed before any force header")
        try:
            squad = parse_squad_line(line, len(current.squads) + 1)
        except RosterParseError as exc:
            raise RosterParseError(f"Line {line_number}: {exc}") from exc
        current.squads.append(squad)
    return armies


def load_armies(path: Path | str) -> List[ArmyDefinition]:
    """Read a roster file holding exactly two forces."""
    armies = parse_armies(Path(path).read_text())
    if len(armies) != 2:
        raise RosterParseError(f"Expected two forces in {path}, found {len(armies)}")
    return armies
