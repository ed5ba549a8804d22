from typing import Dict

from blinker import Signal


class EventBus:
    """Per-game event bus built on blinker signals.

    Renderers, audio and persistence hooks subscribe here; they observe the
    engine and never mutate it.
    """

    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps lambdas and bound methods of short-lived objects alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


EVENT_STATE_CHANGED = "state_changed"      # payload: state=GameState, paused=bool
EVENT_PIECE_MOVED = "piece_moved"          # payload: piece=PuyoPair, direction=str
EVENT_PIECE_ROTATED = "piece_rotated"      # payload: piece=PuyoPair, direction=str
EVENT_PIECE_LANDED = "piece_landed"        # payload: piece=PuyoPair
EVENT_CHAIN_STEP = "chain_step"            # payload: chain=int, cleared=int, points=int
EVENT_CHAIN_COMPLETE = "chain_complete"    # payload: chain_depth=int, score_delta=int
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, delta=int
EVENT_HIGH_SCORE = "high_score"            # payload: value=int
