from clash.components.battle_outcome import BattleOutcome
from clash.components.force import Force
from clash.components.squads_query import get_forces, get_squads_for_force
from clash.events.bus import EventBus
from clash.simulation import clone_world_state
from clash.systems.force_ops import apply_boost

from tests.helpers import example_world


def test_clone_remaps_forces_and_owners():
    world = example_world()
    state = clone_world_state(world)
    clone = state.world

    assert [f.name for _, f in get_forces(clone)] == ["Immune System", "Infection"]
    for source_force, _ in get_forces(world):
        cloned_force = state.entity_map[source_force]
        force = clone.component_for_entity(cloned_force, Force)
        assert force.squad_entities == [
            state.entity_map[ent] for ent, _ in get_squads_for_force(world, source_force)
        ]
        assert all(s.owner_id == cloned_force for _, s in get_squads_for_force(clone, cloned_force))
    assert len(list(clone.get_component(BattleOutcome))) == 1


def test_clone_shares_no_mutable_state():
    world = example_world()
    state = clone_world_state(world)
    source_force = get_forces(world)[0][0]
    cloned_force = state.entity_map[source_force]

    apply_boost(state.world, cloned_force, 10)
    get_squads_for_force(state.world, cloned_force)[0][1].count = 0

    source = [s for _, s in get_squads_for_force(world, source_force)]
    assert [s.attack.value for s in source] == [4507, 25]
    assert [s.count for s in source] == [17, 989]


def test_clone_gets_its_own_event_bus():
    world = example_world()
    first = clone_world_state(world)
    second = clone_world_state(world)
    assert isinstance(first.event_bus, EventBus)
    assert first.event_bus is not second.event_bus
    assert first.world is not second.world
