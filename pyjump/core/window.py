"""
Window snapshot records shared by the matching and cycling stages
"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

# wmctrl prints this for a missing WM_CLIENT_MACHINE or WM_CLASS
NOT_AVAILABLE = "N/A"

class WindowType(Enum):
    """
    EWMH window types

    Values are the suffix of the _NET_WM_WINDOW_TYPE_* atom name.
    """
    DESKTOP = "DESKTOP"
    DOCK = "DOCK"
    TOOLBAR = "TOOLBAR"
    MENU = "MENU"
    UTILITY = "UTILITY"
    SPLASH = "SPLASH"
    DIALOG = "DIALOG"
    DROPDOWN_MENU = "DROPDOWN_MENU"
    POPUP_MENU = "POPUP_MENU"
    TOOLTIP = "TOOLTIP"
    NOTIFICATION = "NOTIFICATION"
    COMBO = "COMBO"
    DND = "DND"
    NORMAL = "NORMAL"

    @classmethod
    def from_atom(cls, atom: str) -> Optional['WindowType']:
        """Map an atom name like _NET_WM_WINDOW_TYPE_DOCK to its type, None if unknown"""
        prefix = "_NET_WM_WINDOW_TYPE_"
        if not atom.startswith(prefix):
            return None
        try:
            return cls(atom[len(prefix):])
        except ValueError:
            return None

# Types that never count as an application's own window
ABNORMAL_TYPES: FrozenSet[WindowType] = frozenset({
    WindowType.DESKTOP,
    WindowType.DOCK,
    WindowType.TOOLBAR,
    WindowType.MENU,
    WindowType.UTILITY,
    WindowType.SPLASH,
    WindowType.DROPDOWN_MENU,
    WindowType.POPUP_MENU,
    WindowType.TOOLTIP,
    WindowType.NOTIFICATION,
    WindowType.COMBO,
    WindowType.DND,
})

def split_wm_class(text: str) -> Optional[Tuple[str, str]]:
    """
    Split wmctrl's "res_name.res_class" text into its two halves

    Both halves may contain dots. The split is certain when there is a
    single dot, or when one split yields halves that differ only in case
    (as reverse-DNS names like "org.gnome.Nautilus.Org.gnome.Nautilus" do).

    Returns:
        (res_name, res_class), or None when the boundary is ambiguous
    """
    if not text or text == NOT_AVAILABLE:
        return ("", "")
    dots = [i for i, char in enumerate(text) if char == '.']
    if not dots:
        return ("", text)
    if len(dots) == 1:
        return (text[:dots[0]], text[dots[0] + 1:])
    for i in dots:
        res_name, res_class = text[:i], text[i + 1:]
        if res_name.lower() == res_class.lower():
            return (res_name, res_class)
    return None

@dataclass(frozen=True)
class Window:
    """
    A top-level window as enumerated once per invocation

    Missing fields follow the wmctrl conventions:
    - host is "N/A" when the client machine is unknown
    - pid is 0 when the window has no _NET_WM_PID
    - workspace is negative for sticky windows shown on every workspace
    """
    id: int
    host: str
    pid: int
    workspace: int
    wm_class: str
    title: str
    res_class: Optional[str] = None

    @property
    def class_name(self) -> str:
        """
        The res_class half of WM_CLASS

        Taken from res_class when it was read from the X server, otherwise
        derived from wmctrl's "res_name.res_class" text. When that text is
        ambiguous the part after the last dot is used.
        """
        if self.res_class is not None:
            return self.res_class
        names = split_wm_class(self.wm_class)
        if names is not None:
            return names[1]
        return self.wm_class.rpartition('.')[2]

    @property
    def class_ambiguous(self) -> bool:
        """True when the class name cannot be trusted without asking X"""
        return self.res_class is None and split_wm_class(self.wm_class) is None

    def row(self) -> str:
        """Metadata row used by --list"""
        return f"0x{self.id:08x} {self.workspace:>3} {self.pid:>7}  {self.host}  {self.wm_class}  {self.title}"

    def __str__(self) -> str:
        return self.row()

@dataclass(frozen=True)
class StackingSnapshot:
    """
    Active window and stacking order at the time of the query

    stack is ordered from least recently raised (bottom) to most recently
    raised (top). Ids may refer to windows that no longer exist.
    """
    active_id: Optional[int] = None
    stack: Tuple[int, ...] = ()

    @property
    def has_order(self) -> bool:
        return bool(self.stack)
