from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# TARGET SELECTION
# ============================================================================
EVENT_TARGET_CONSIDERED = "target_considered"  # payload: attacking_force=int, attacker_entity=int, defender_entity=int, predicted_damage=int
EVENT_TARGET_SELECTED = "target_selected"      # payload: attacking_force=int, attacker_entity=int, defender_entity=int, predicted_damage=int


# ============================================================================
# ROUND RESOLUTION
# ============================================================================
EVENT_ROUND_STARTED = "round_started"          # payload: round_number=int, forces=tuple[int, int]
EVENT_ATTACK_RESOLVED = "attack_resolved"      # payload: attacker_entity=int, defender_entity=int, attacking_force=int, killed=int
EVENT_SQUAD_DESTROYED = "squad_destroyed"      # payload: squad_entity=int, force_entity=int, squad_id=int
EVENT_ROUND_RESOLVED = "round_resolved"        # payload: round_number=int, killed=int


# ============================================================================
# BATTLE & BOOST SEARCH
# ============================================================================
EVENT_BATTLE_RESOLVED = "battle_resolved"      # payload: winner_entity=int, winner=str, survivors=int, rounds=int, forces=tuple[int, int]
EVENT_BATTLE_STALEMATE = "battle_stalemate"    # payload: rounds=int
EVENT_BOOST_TRIAL = "boost_trial"              # payload: boost=int, outcome=BattleOutcome, helped=str
