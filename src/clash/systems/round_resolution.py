from __future__ import annotations

from dataclasses import dataclass
from typing import List

from esper import World

from clash.components.squad import Squad
from clash.events.bus import (
    EventBus,
    EVENT_ATTACK_RESOLVED,
    EVENT_ROUND_RESOLVED,
    EVENT_SQUAD_DESTROYED,
)
from clash.systems.force_ops import remove_dead_squads
from clash.systems.targeting import select_targets


@dataclass(slots=True)
class ScheduledAttack:
    """One strike planned for the current round."""

    defender_entity: int
    attacker_entity: int
    attacking_force: int
    initiative: int


def build_attack_schedule(
    world: World,
    first_force: int,
    second_force: int,
    event_bus: EventBus | None = None,
) -> List[ScheduledAttack]:
    """Merge both sides' target choices into a single strike order.

    The two selection passes are independent. Strikes run by attacker
    initiative, highest first, regardless of the order targets were chosen in.
    """
    schedule: List[ScheduledAttack] = []
    for attacking, defending in ((first_force, second_force), (second_force, first_force)):
        for defender_ent, attacker_ent in select_targets(world, attacking, defending, event_bus):
            attacker = world.component_for_entity(attacker_ent, Squad)
            schedule.append(
                ScheduledAttack(
                    defender_entity=defender_ent,
                    attacker_entity=attacker_ent,
                    attacking_force=attacking,
                    initiative=attacker.initiative,
                )
            )
    schedule.sort(key=lambda strike: strike.initiative, reverse=True)
    return schedule


class RoundResolutionSystem:
    """Plays out one fight round between two forces."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def resolve_round(self, first_force: int, second_force: int, *, round_number: int = 0) -> int:
        """Run target selection and every strike of a round; return units killed."""
        schedule = build_attack_schedule(self.world, first_force, second_force, self.event_bus)
        total_killed = 0
        for strike in schedule:
            attacker = self.world.component_for_entity(strike.attacker_entity, Squad)
            if not attacker.is_alive():
                # Destroyed earlier this round, before its turn came up.
                continue
            defender = self.world.component_for_entity(strike.defender_entity, Squad)
            killed = defender.receive_attack_from(attacker)
            total_killed += killed
            self.event_bus.emit(
                EVENT_ATTACK_RESOLVED,
                attacker_entity=strike.attacker_entity,
                defender_entity=strike.defender_entity,
                attacking_force=strike.attacking_force,
                killed=killed,
            )
        for force_entity in (first_force, second_force):
            for squad_entity, squad in remove_dead_squads(self.world, force_entity):
                self.event_bus.emit(
                    EVENT_SQUAD_DESTROYED,
                    squad_entity=squad_entity,
                    force_entity=force_entity,
                    squad_id=squad.id,
                )
        self.event_bus.emit(EVENT_ROUND_RESOLVED, round_number=round_number, killed=total_killed)
        return total_killed
