"""Target selection for one attacking force against one defending force.

Attackers choose in order of effective power, then initiative (both
descending). Each picks the unclaimed defender it would hurt most, breaking
ties on the defender's effective power and then its initiative. A defender
can be claimed by at most one attacker per pass, and defenders immune to the
attacker's damage type are never chosen.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from esper import World

from clash.components.squad import Squad
from clash.events.bus import EventBus, EVENT_TARGET_CONSIDERED, EVENT_TARGET_SELECTED
from clash.systems.force_ops import living_squads

Assignment = Tuple[int, int]  # (defender_entity, attacker_entity)


def selection_order(squads: List[Tuple[int, Squad]]) -> List[Tuple[int, Squad]]:
    """Order in which attacking squads pick their targets."""
    # sorted() is stable, so equal keys keep roster order.
    return sorted(
        squads,
        key=lambda entry: (entry[1].effective_power(), entry[1].initiative),
        reverse=True,
    )


def target_priority(attacker: Squad, defender: Squad) -> Tuple[int, int, int]:
    return (
        defender.predicted_damage_from(attacker),
        defender.effective_power(),
        defender.initiative,
    )


def select_targets(
    world: World,
    attacking_force: int,
    defending_force: int,
    event_bus: Optional[EventBus] = None,
) -> List[Assignment]:
    """Assign each attacking squad at most one defending squad.

    Returns ``(defender_entity, attacker_entity)`` pairs in defender roster order.
    """
    defenders = living_squads(world, defending_force)
    claimed: Dict[int, int] = {}
    for attacker_ent, attacker in selection_order(living_squads(world, attacking_force)):
        best: Optional[Tuple[int, Squad]] = None
        best_key: Optional[Tuple[int, int, int]] = None
        for defender_ent, defender in defenders:
            if defender_ent in claimed:
                continue
            key = target_priority(attacker, defender)
            if event_bus is not None:
                event_bus.emit(
                    EVENT_TARGET_CONSIDERED,
                    attacking_force=attacking_force,
                    attacker_entity=attacker_ent,
                    defender_entity=defender_ent,
                    predicted_damage=key[0],
                )
            if key[0] <= 0:
                continue
            # Strict comparison keeps the earliest defender on exact ties.
            if best_key is None or key > best_key:
                best = (defender_ent, defender)
                best_key = key
        if best is None:
            continue
        claimed[best[0]] = attacker_ent
        if event_bus is not None:
            event_bus.emit(
                EVENT_TARGET_SELECTED,
                attacking_force=attacking_force,
                attacker_entity=attacker_ent,
                defender_entity=best[0],
                predicted_damage=best_key[0],
            )
    return [(ent, claimed[ent]) for ent, _ in defenders if ent in claimed]
