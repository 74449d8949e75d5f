from clash.components.damage import DamageType, ResistanceLevel
from clash.components.squad import Squad
from clash.components.squads_query import get_forces, get_squads_for_force
from clash.events.bus import EventBus, EVENT_TARGET_CONSIDERED, EVENT_TARGET_SELECTED
from clash.systems.targeting import select_targets, selection_order

from tests.helpers import example_world, make_squad, make_world


def _ids(world, pairs):
    squad = lambda ent: world.component_for_entity(ent, Squad).id
    return [(squad(defender), squad(attacker)) for defender, attacker in pairs]


def test_example_first_round_choices():
    world = example_world()
    immune, infection = (ent for ent, _ in get_forces(world))
    # (defender id, attacker id) in defender roster order
    assert _ids(world, select_targets(world, immune, infection)) == [(1, 2), (2, 1)]
    assert _ids(world, select_targets(world, infection, immune)) == [(1, 1), (2, 2)]


def test_selection_order_uses_power_then_initiative():
    squads = [
        (1, make_squad(1, count=10, attack=5, initiative=1)),
        (2, make_squad(2, count=5, attack=10, initiative=7)),
        (3, make_squad(3, count=100, attack=1, initiative=3)),
    ]
    assert [ent for ent, _ in selection_order(squads)] == [3, 2, 1]


def test_defender_tie_broken_by_effective_power_then_initiative():
    world = make_world(
        ("Red", [make_squad(1, count=1, attack=100, damage_type=DamageType.COLD)]),
        (
            "Blue",
            [
                make_squad(1, count=10, attack=3, initiative=9),
                make_squad(2, count=10, attack=5, initiative=1),
                make_squad(3, count=10, attack=5, initiative=4),
            ],
        ),
    )
    red, blue = (ent for ent, _ in get_forces(world))
    assert _ids(world, select_targets(world, red, blue)) == [(3, 1)]


def test_no_defender_claimed_twice_and_immune_targets_skipped():
    world = make_world(
        (
            "Red",
            [
                make_squad(1, count=10, attack=10, damage_type=DamageType.FIRE, initiative=3),
                make_squad(2, count=10, attack=5, damage_type=DamageType.FIRE, initiative=2),
                make_squad(3, count=10, attack=1, damage_type=DamageType.COLD, initiative=1),
            ],
        ),
        (
            "Blue",
            [
                make_squad(1, resistances={DamageType.FIRE: ResistanceLevel.WEAK}),
                make_squad(2, resistances={DamageType.COLD: ResistanceLevel.IMMUNE}),
            ],
        ),
    )
    red, blue = (ent for ent, _ in get_forces(world))
    assignments = select_targets(world, red, blue)
    # Red 1 takes the weak Blue 1, Red 2 settles for Blue 2, Red 3 finds nothing
    assert _ids(world, assignments) == [(1, 1), (2, 2)]
    defenders = [defender for defender, _ in assignments]
    assert len(defenders) == len(set(defenders))


def test_attacker_with_only_immune_targets_selects_nothing():
    world = make_world(
        ("Red", [make_squad(1, damage_type=DamageType.SLASHING)]),
        ("Blue", [make_squad(1, resistances={DamageType.SLASHING: ResistanceLevel.IMMUNE})]),
    )
    red, blue = (ent for ent, _ in get_forces(world))
    assert select_targets(world, red, blue) == []


def test_selection_events_report_predicted_damage():
    world = example_world()
    bus = EventBus()
    considered = []
    selected = []
    bus.subscribe(EVENT_TARGET_CONSIDERED, lambda s, **k: considered.append(k))
    bus.subscribe(EVENT_TARGET_SELECTED, lambda s, **k: selected.append(k))
    immune, infection = (ent for ent, _ in get_forces(world))

    select_targets(world, infection, immune, bus)

    assert [k["predicted_damage"] for k in considered] == [185832, 185832, 107640]
    assert [k["predicted_damage"] for k in selected] == [185832, 107640]
    immune_squads = [ent for ent, _ in get_squads_for_force(world, immune)]
    assert [k["defender_entity"] for k in selected] == immune_squads
