"""
Immutable option records built once from the command line
"""
import os
import re
from dataclasses import dataclass
from pprint import pprint
from typing import Optional, Pattern, Tuple

import click

@dataclass(frozen=True)
class MatchCriteria:
    """
    Identifies the windows that belong to the target application

    Attributes:
        wm_class: Compared case-insensitively against the res_class half of WM_CLASS
        process_name: Program name used to find running processes
        title_pattern: Unanchored regex searched in window titles, None matches all
        workspace: Only keep windows on this workspace (and sticky ones), None keeps all
        include_abnormal: Keep docks, menus, tooltips and the like
    """
    wm_class: str
    process_name: str
    title_pattern: Optional[Pattern] = None
    workspace: Optional[int] = None
    include_abnormal: bool = False

    @classmethod
    def for_command(cls, command: str, wm_class: str = None, process_name: str = None,
                    title: str = None, workspace: int = None) -> 'MatchCriteria':
        """
        Build criteria for a command, defaulting names to its base name

        Raises:
            re.error: If title is not a valid regular expression
        """
        base = os.path.basename(command)
        return cls(
            wm_class=wm_class or base,
            process_name=process_name or base,
            title_pattern=re.compile(title) if title else None,
            workspace=workspace,
        )

@dataclass(frozen=True)
class Options:
    """Every mode flag for one invocation"""
    command: str
    args: Tuple[str, ...] = ()
    reverse: bool = False
    force_launch: bool = False
    minimize: bool = False
    fork: bool = True
    abort_if_no_window: bool = False
    passthrough: bool = False
    list_only: bool = False
    current_workspace: bool = False
    bring_here: bool = False
    center_pointer: bool = False
    quiet: bool = False
    debug: bool = False
    criteria: MatchCriteria = None

    def __post_init__(self):
        if self.criteria is None:
            object.__setattr__(self, 'criteria', MatchCriteria.for_command(self.command))

    @property
    def force(self) -> bool:
        """Passthrough always relaunches, so it implies force"""
        return self.force_launch or self.passthrough

    @property
    def passthrough_launch(self) -> bool:
        """True when extra arguments must go to a fresh instance"""
        return self.passthrough and bool(self.args)

    def dump_structure(self) -> None:
        """Display the in-memory structure of the options"""
        click.echo("Options:")
        pprint(self)
