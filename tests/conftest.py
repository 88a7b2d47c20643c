"""
Shared test fixtures for pyjump tests
"""
import pytest
from pyjump.core.config import MatchCriteria, Options
from pyjump.core.window import StackingSnapshot, Window, WindowType

HOSTNAME = "workstation"

def make_window(window_id, wm_class="firefox.Firefox", pid=100, workspace=0,
                title="Mozilla Firefox", host=HOSTNAME, res_class=None):
    return Window(id=window_id, host=host, pid=pid, workspace=workspace,
                  wm_class=wm_class, title=title, res_class=res_class)

@pytest.fixture
def hostname():
    return HOSTNAME

@pytest.fixture
def windows():
    """Fixture providing a desktop snapshot in enumeration order"""
    return [
        make_window(0x01000001, wm_class="xfce4-panel.Xfce4-panel", pid=50, workspace=-1, title="xfce4-panel"),
        make_window(10, title="Inbox - Mozilla Firefox"),
        make_window(0x02000001, wm_class="xterm.XTerm", pid=200, title="bash"),
        make_window(20, workspace=1, title="News - Mozilla Firefox"),
        make_window(30, workspace=-1, title="Docs - Mozilla Firefox"),
    ]

@pytest.fixture
def window_types():
    """Fixture providing a type lookup where only the panel is a dock"""
    types = {0x01000001: frozenset({WindowType.DOCK})}
    return lambda window_id: types.get(window_id, frozenset({WindowType.NORMAL}))

@pytest.fixture
def criteria():
    """Fixture providing criteria for the firefox command"""
    return MatchCriteria.for_command("/usr/bin/firefox")

@pytest.fixture
def options():
    """Fixture providing default options for the firefox command"""
    return Options(command="firefox")

@pytest.fixture
def snapshot():
    """Fixture providing an unrelated active window and a stacking order"""
    return StackingSnapshot(active_id=99, stack=(20, 10, 30))
