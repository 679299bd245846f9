"""Setup wizard: players -> roles -> starting -> game plan."""

import logging
from typing import List, Tuple

from ..models import SETUP_STEPS, SessionState, SetupStep
from ..utils import POSITIONS

logger = logging.getLogger(__name__)


class SetupWizard:
    """
    Tracks the active setup step.

    Any step can be opened directly; only the forward "Continue" action is
    gated on the roster and lineup counts.
    """

    def __init__(self, state: SessionState):
        self.state = state

    @property
    def step(self) -> SetupStep:
        return self.state.setup_step

    @property
    def step_index(self) -> int:
        return SETUP_STEPS.index(self.state.setup_step)

    def go_to(self, step: SetupStep) -> None:
        """Open a step directly."""
        self.state.setup_step = step

    def can_continue(self) -> bool:
        """Check the forward gate of the active step."""
        step = self.state.setup_step
        if step is SetupStep.PLAYERS:
            return len(self.state.roster) >= len(POSITIONS)
        if step is SetupStep.ROLES:
            return True
        if step is SetupStep.STARTING:
            return len(self.state.starting_lineup) == len(POSITIONS)
        # The last step leaves the wizard through ClockService.start_game
        return False

    def continue_(self) -> bool:
        """Advance one step if the gate allows it."""
        if not self.can_continue():
            logger.debug("Cannot continue from %s", self.state.setup_step.value)
            return False
        self.state.setup_step = SETUP_STEPS[self.step_index + 1]
        return True

    def back(self) -> bool:
        """Return to the previous step."""
        if self.step_index == 0:
            return False
        self.state.setup_step = SETUP_STEPS[self.step_index - 1]
        return True

    def progress(self) -> List[Tuple[SetupStep, bool]]:
        """Each step paired with whether the wizard has reached it."""
        current = self.step_index
        return [(step, idx <= current) for idx, step in enumerate(SETUP_STEPS)]
