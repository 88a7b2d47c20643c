"""
Priority ordered choice of the single action an invocation performs
"""
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Callable, List, Optional, Sequence, Tuple

import click

from .config import Options
from .cycler import WindowCycler
from .errors import ProcessFoundNoWindow, UserAbort
from .launcher import Launcher
from .window import StackingSnapshot, Window
from .wm import WindowControl

class Action(Enum):
    LIST = "list"
    MINIMIZE = "minimize"
    ACTIVATE = "activate"
    ABORT = "abort"
    LAUNCH_BLOCKED = "launch-blocked"
    LAUNCH = "launch"

@dataclass(frozen=True)
class Decision:
    """Chosen action and, for minimize/activate, the window it applies to"""
    action: Action
    target: Optional[int] = None

@dataclass(frozen=True)
class DecisionInput:
    """Everything the rules look at, gathered once per invocation"""
    matched: Tuple[Window, ...]
    pids: AbstractSet[int]
    snapshot: StackingSnapshot

    @property
    def matched_ids(self) -> Tuple[int, ...]:
        return tuple(w.id for w in self.matched)

Rule = Tuple[Callable[[DecisionInput], bool], Action]

class LaunchDecisionEngine:
    """
    Evaluates (predicate, action) rules top to bottom

    The first rule whose predicate holds decides. The final rule always
    holds, so exactly one action is chosen.
    """

    def __init__(self, options: Options, cycler: WindowCycler = None):
        self.options = options
        self.cycler = cycler if cycler is not None else WindowCycler(reverse=options.reverse)
        self.rules: List[Rule] = [
            (self.wants_list, Action.LIST),
            (self.wants_minimize, Action.MINIMIZE),
            (self.can_activate, Action.ACTIVATE),
            (self.wants_abort, Action.ABORT),
            (self.launch_blocked, Action.LAUNCH_BLOCKED),
            (lambda state: True, Action.LAUNCH),
        ]

    def wants_list(self, state: DecisionInput) -> bool:
        return self.options.list_only

    def wants_minimize(self, state: DecisionInput) -> bool:
        # Pressing the key again on a focused single-window app hides it
        return (self.options.minimize and len(state.matched) == 1
                and state.matched[0].id == state.snapshot.active_id)

    def can_activate(self, state: DecisionInput) -> bool:
        return bool(state.matched) and not self.options.passthrough_launch

    def wants_abort(self, state: DecisionInput) -> bool:
        return self.options.abort_if_no_window and not state.matched

    def launch_blocked(self, state: DecisionInput) -> bool:
        return bool(state.pids) and not self.options.force

    def decide(self, matched: Sequence[Window], pids: AbstractSet[int],
               snapshot: StackingSnapshot) -> Decision:
        """Pick the action without performing it"""
        state = DecisionInput(matched=tuple(matched), pids=frozenset(pids), snapshot=snapshot)
        for predicate, action in self.rules:
            if not predicate(state):
                continue
            if action == Action.MINIMIZE:
                return Decision(action, snapshot.active_id)
            if action == Action.ACTIVATE:
                return Decision(action, self.cycler.select(state.matched_ids, snapshot))
            return Decision(action)
        return Decision(Action.LAUNCH)

    def execute(self, decision: Decision, matched: Sequence[Window],
                control: WindowControl, launcher: Launcher) -> None:
        """
        Perform the single side effect of a decision

        Raises:
            UserAbort: For Action.ABORT
            ProcessFoundNoWindow: For Action.LAUNCH_BLOCKED
        """
        command = self.options.command

        if decision.action == Action.LIST:
            click.echo(f"Matched windows [{len(matched)}]")
            for window in matched:
                click.echo(f"  {window.row()}")
        elif decision.action == Action.MINIMIZE:
            control.minimize(decision.target)
        elif decision.action == Action.ACTIVATE:
            control.activate(decision.target, bring_here=self.options.bring_here)
            if self.options.center_pointer:
                control.center_pointer(decision.target)
        elif decision.action == Action.ABORT:
            raise UserAbort(f"no window found for '{command}'")
        elif decision.action == Action.LAUNCH_BLOCKED:
            raise ProcessFoundNoWindow(
                f"found running process for '{command}', but found no window to jump to")
        else:
            launcher.launch(command, self.options.args, fork=self.options.fork)
