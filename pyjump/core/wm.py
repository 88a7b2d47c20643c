"""
Window manager queries and control

Enumeration and stacking come from the text output of wmctrl and xprop.
Per-window properties, minimizing and pointer warping talk to the X
server directly.
"""
import re
import subprocess
from dataclasses import replace
from typing import FrozenSet, List, Optional, Tuple

import click
from Xlib import X, Xutil, display, error, protocol

from .errors import ActivationFailure, ToolUnavailable
from .window import StackingSnapshot, Window, WindowType

HEX_ID = re.compile(r'0x[0-9a-fA-F]+')

def run_tool(cmd: List[str]) -> subprocess.CompletedProcess:
    """
    Run an external query tool and capture its output

    Raises:
        ToolUnavailable: If the tool is not installed
    """
    try:
        return subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError:
        raise ToolUnavailable(f"unable to find {cmd[0]}")

def parse_wmctrl_line(line: str) -> Optional[Window]:
    """
    Parse one row of `wmctrl -lpx`

    Columns are: id, desktop, pid, WM_CLASS, client machine, title.
    The title is optional and may contain spaces.
    """
    fields = line.split(None, 5)
    if len(fields) < 5:
        return None
    try:
        window_id = int(fields[0], 16)
        workspace = int(fields[1])
        pid = int(fields[2])
    except ValueError:
        return None
    title = fields[5] if len(fields) > 5 else ""
    return Window(id=window_id, host=fields[4], pid=pid, workspace=workspace,
                  wm_class=fields[3], title=title)

class WindowEnumerator:
    """Lists every top-level window the window manager knows about"""

    def __init__(self, session: 'XSession' = None):
        """
        Args:
            session: X connection used to read WM_CLASS when wmctrl's
                     "res_name.res_class" text cannot be split reliably
        """
        self.session = session

    def list_windows(self) -> List[Window]:
        result = run_tool(['wmctrl', '-lpx'])
        if result.returncode != 0:
            raise ToolUnavailable(f"wmctrl failed: {result.stderr.strip()}")

        windows = []
        for line in result.stdout.splitlines():
            window = parse_wmctrl_line(line)
            if window is None:
                continue
            if self.session is not None and window.class_ambiguous:
                names = self.session.wm_class(window.id)
                if names is not None:
                    window = replace(window, res_class=names[1])
            windows.append(window)
        return windows

    def current_workspace(self) -> Optional[int]:
        """Index of the workspace marked active by `wmctrl -d`"""
        result = run_tool(['wmctrl', '-d'])
        if result.returncode != 0:
            raise ToolUnavailable(f"wmctrl failed: {result.stderr.strip()}")

        for line in result.stdout.splitlines():
            fields = line.split()
            if len(fields) >= 2 and fields[1] == '*':
                try:
                    return int(fields[0])
                except ValueError:
                    return None
        return None

def parse_root_properties(output: str) -> StackingSnapshot:
    """
    Parse `xprop -root _NET_ACTIVE_WINDOW _NET_CLIENT_LIST_STACKING`

    Example:
        _NET_ACTIVE_WINDOW(WINDOW): window id # 0x3a00003
        _NET_CLIENT_LIST_STACKING(WINDOW): window id # 0x1a00003, 0x3a00003

    Unsupported properties print "not found." and contribute nothing.
    An active window of 0x0 means nothing is focused.
    """
    active_id = None
    stack = ()
    for line in output.splitlines():
        name, _, value = line.partition('#')
        ids = tuple(int(match, 16) for match in HEX_ID.findall(value))
        if name.startswith('_NET_ACTIVE_WINDOW'):
            if ids and ids[0] != 0:
                active_id = ids[0]
        elif name.startswith('_NET_CLIENT_LIST_STACKING'):
            stack = ids
    return StackingSnapshot(active_id=active_id, stack=stack)

class StackingOracle:
    """Reports the active window and the stacking order"""

    def snapshot(self) -> StackingSnapshot:
        result = run_tool(['xprop', '-root', '_NET_ACTIVE_WINDOW', '_NET_CLIENT_LIST_STACKING'])
        if result.returncode != 0:
            raise ToolUnavailable(f"xprop failed: {result.stderr.strip()}")
        return parse_root_properties(result.stdout)

class XSession:
    """
    Lazily opened X display shared by per-window queries and control

    Windows may vanish at any time after enumeration; queries against
    them return empty results instead of failing.
    """

    def __init__(self):
        self._display = None

    def open_display(self) -> 'display.Display':
        if self._display is None:
            try:
                self._display = display.Display()
            except error.DisplayError as e:
                raise ToolUnavailable(f"unable to open X display: {e}")
        return self._display

    def close(self) -> None:
        if self._display is None:
            return
        self._display.close()
        self._display = None

    def window(self, window_id: int):
        return self.open_display().create_resource_object('window', window_id)

    def window_types(self, window_id: int) -> FrozenSet[WindowType]:
        """EWMH types of a window, ignoring atoms this tool does not know"""
        d = self.open_display()
        try:
            prop = self.window(window_id).get_full_property(
                d.intern_atom('_NET_WM_WINDOW_TYPE'), X.AnyPropertyType)
        except error.BadWindow:
            return frozenset()
        if not prop:
            return frozenset()

        types = set()
        for atom in prop.value:
            window_type = WindowType.from_atom(d.get_atom_name(atom))
            if window_type is not None:
                types.add(window_type)
        return frozenset(types)

    def wm_class(self, window_id: int) -> Optional[Tuple[str, str]]:
        """The (res_name, res_class) pair of a window, None if unset"""
        try:
            return self.window(window_id).get_wm_class()
        except error.BadWindow:
            return None

class WindowControl:
    """Activates, minimizes and points at windows"""

    def __init__(self, session: XSession, label: str = ""):
        """
        Args:
            session: X connection used for minimize and pointer warping
            label: Application name used in failure messages
        """
        self.session = session
        self.label = label

    def activate(self, window_id: int, bring_here: bool = False) -> None:
        """
        Focus a window

        Args:
            window_id: Window to activate
            bring_here: Move the window to the current workspace instead
                        of switching to the window's workspace

        Raises:
            ActivationFailure: If wmctrl reports an error
        """
        flag = '-R' if bring_here else '-a'
        result = run_tool(['wmctrl', '-i', flag, f"0x{window_id:08x}"])
        if result.returncode != 0:
            raise ActivationFailure(f"unable to focus window for '{self.label}'")

    def minimize(self, window_id: int) -> None:
        """Ask the window manager to iconify a window (ICCCM WM_CHANGE_STATE)"""
        d = self.session.open_display()
        root = d.screen().root

        ev = protocol.event.ClientMessage(
            window=self.session.window(window_id),
            client_type=d.intern_atom('WM_CHANGE_STATE'),
            data=(32, [Xutil.IconicState, 0, 0, 0, 0])
        )
        root.send_event(ev, event_mask=X.SubstructureRedirectMask | X.SubstructureNotifyMask)
        d.flush()

    def center_pointer(self, window_id: int) -> None:
        """Warp the pointer to the midpoint of a window"""
        d = self.session.open_display()
        root = d.screen().root
        window = self.session.window(window_id)

        try:
            geometry = window.get_geometry()
            origin = root.translate_coords(window, 0, 0)
        except error.XError as e:
            click.secho(f"  Warning: unable to center pointer on 0x{window_id:08x}: {e}", fg="yellow", err=True)
            return

        root.warp_pointer(origin.x + geometry.width // 2, origin.y + geometry.height // 2)
        d.sync()
