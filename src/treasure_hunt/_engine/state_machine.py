# Area: Engine
"""
treasure_hunt._engine.state_machine — Round State Machine
=========================================================

Tracks whether a round is in progress. A freshly deployed engine
starts with round 1 already active; afterwards the machine cycles
between ROUND_ACTIVE and ROUND_INACTIVE indefinitely.
"""

import logging

from .enums import RoundEvent, RoundState

logger = logging.getLogger("treasure_hunt.engine.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    RoundState.ROUND_INACTIVE: {
        RoundEvent.START_NEW_GAME: RoundState.ROUND_ACTIVE,
    },
    RoundState.ROUND_ACTIVE: {
        RoundEvent.TREASURE_FOUND: RoundState.ROUND_INACTIVE,
    },
}


class RoundStateMachine:
    """
    State machine for the round lifecycle.

    Attributes:
        current_state: The current state of the round
    """

    def __init__(self, initial_state: RoundState = RoundState.ROUND_ACTIVE):
        self.current_state = initial_state

    @property
    def is_active(self) -> bool:
        return self.current_state == RoundState.ROUND_ACTIVE

    def can_transition(self, event: RoundEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: RoundEvent) -> RoundState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )
        next_state = TRANSITIONS[self.current_state][event]
        logger.debug(
            "Round state: %s → %s (%s)",
            self.current_state.value, next_state.value, event.value,
        )
        self.current_state = next_state
        return next_state
