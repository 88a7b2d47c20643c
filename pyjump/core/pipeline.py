"""
Reduce the enumerated windows to those belonging to one application
"""
import socket
from typing import AbstractSet, Callable, FrozenSet, List, Optional, Pattern

from .config import MatchCriteria
from .window import ABNORMAL_TYPES, NOT_AVAILABLE, Window, WindowType

def title_matches(window: Window, pattern: Optional[Pattern]) -> bool:
    return pattern is None or pattern.search(window.title) is not None

def identity_matches(window: Window, wm_class: str, pids: AbstractSet[int], hostname: str) -> bool:
    """
    Check whether a window belongs to the application

    Either signal is enough: the res_class half of WM_CLASS, or a local
    window owned by one of the application's running processes.
    """
    if window.class_name and window.class_name.lower() == wm_class.lower():
        return True
    local = window.host in (hostname, NOT_AVAILABLE)
    return local and window.pid in pids

def workspace_matches(window: Window, workspace: Optional[int]) -> bool:
    """Sticky windows (negative workspace) are on every workspace"""
    return workspace is None or window.workspace == workspace or window.workspace < 0

def is_normal(types: AbstractSet[WindowType]) -> bool:
    return not (types & ABNORMAL_TYPES)

class MatchPipeline:
    """
    Ordered filter stages over the window snapshot

    Stages run in a fixed order: title, identity, workspace, normal.
    The normal-type stage queries the X server once per window, so it
    runs last on the already reduced set.
    """

    def __init__(self, criteria: MatchCriteria, pids: AbstractSet[int],
                 window_types: Callable[[int], FrozenSet[WindowType]],
                 hostname: str = None):
        """
        Args:
            criteria: What the application's windows look like
            pids: Running process ids of the application
            window_types: Lookup for a window's EWMH types
            hostname: Local host name, defaults to socket.gethostname()
        """
        self.criteria = criteria
        self.pids = frozenset(pids)
        self.window_types = window_types
        self.hostname = hostname if hostname is not None else socket.gethostname()
        self.stages = (
            self.filter_title,
            self.filter_identity,
            self.filter_workspace,
            self.filter_normal,
        )

    def filter_title(self, windows: List[Window]) -> List[Window]:
        return [w for w in windows if title_matches(w, self.criteria.title_pattern)]

    def filter_identity(self, windows: List[Window]) -> List[Window]:
        return [w for w in windows
                if identity_matches(w, self.criteria.wm_class, self.pids, self.hostname)]

    def filter_workspace(self, windows: List[Window]) -> List[Window]:
        return [w for w in windows if workspace_matches(w, self.criteria.workspace)]

    def filter_normal(self, windows: List[Window]) -> List[Window]:
        if self.criteria.include_abnormal:
            return list(windows)
        return [w for w in windows if is_normal(self.window_types(w.id))]

    def run(self, windows: List[Window]) -> List[Window]:
        """
        Apply every stage in order

        Returns:
            Matching windows in enumeration order, possibly empty
        """
        matched = list(windows)
        for stage in self.stages:
            if not matched:
                break
            matched = stage(matched)
        return matched
