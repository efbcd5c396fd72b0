"""Application commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from shelves.application.config import (
    ScriptConfiguration,
    config_to_dividers,
    config_to_events,
    config_to_settings,
    config_to_shelf,
)
from shelves.application.session import DividerSession
from shelves.domain.interaction import InteractionState, MachineSnapshot


@dataclass(frozen=True)
class ReplayStep:
    """One replayed event and the state it left the machine in."""

    index: int
    event_type: str
    state: InteractionState
    changed: bool


@dataclass
class ReplayOutput:
    """Result of replaying an event script."""

    snapshot: MachineSnapshot
    steps: list[ReplayStep] = field(default_factory=list)
    session: DividerSession | None = field(default=None, repr=False)

    @property
    def absorbed_count(self) -> int:
        """Number of events that were ignored as inapplicable."""
        return sum(1 for step in self.steps if not step.changed)


class ReplayScriptCommand:
    """Builds a session from a script, restores its layout and replays its events."""

    def execute(self, script: ScriptConfiguration) -> ReplayOutput:
        session = DividerSession(settings=config_to_settings(script.settings))
        session.initialize(config_to_shelf(script.shelf), config_to_dividers(script))

        steps: list[ReplayStep] = []
        for index, event in enumerate(config_to_events(script)):
            before = session.snapshot
            after = session.send(event)
            steps.append(
                ReplayStep(
                    index=index,
                    event_type=event.type,
                    state=after.state,
                    changed=after is not before,
                )
            )

        return ReplayOutput(snapshot=session.snapshot, steps=steps, session=session)
