import pytest
from pyjump.core.window import ABNORMAL_TYPES, StackingSnapshot, Window, WindowType, split_wm_class
from conftest import make_window

@pytest.mark.parametrize("text,expected", [
    ("Navigator.Firefox", ("Navigator", "Firefox")),
    ("org.gnome.Nautilus.Org.gnome.Nautilus", ("org.gnome.Nautilus", "Org.gnome.Nautilus")),
    ("xterm", ("", "xterm")),
    ("N/A", ("", "")),
    ("", ("", "")),
    ("nautilus.Org.gnome.Nautilus", None),
])
def test_split_wm_class(text, expected):
    assert split_wm_class(text) == expected

def test_class_name_is_res_class_only():
    window = make_window(1, wm_class="Navigator.Firefox")
    assert window.class_name == "Firefox"
    assert not window.class_ambiguous

def test_class_name_reverse_dns():
    window = make_window(1, wm_class="org.gnome.Nautilus.Org.gnome.Nautilus")
    assert window.class_name == "Org.gnome.Nautilus"
    assert not window.class_ambiguous

def test_class_name_ambiguous_uses_last_dot():
    window = make_window(1, wm_class="nautilus.Org.gnome.Nautilus")
    assert window.class_ambiguous
    assert window.class_name == "Nautilus"

def test_class_name_resolved_from_x():
    window = make_window(1, wm_class="nautilus.Org.gnome.Nautilus", res_class="Org.gnome.Nautilus")
    assert not window.class_ambiguous
    assert window.class_name == "Org.gnome.Nautilus"

def test_class_name_unknown():
    assert make_window(1, wm_class="N/A").class_name == ""
    assert make_window(1, wm_class="").class_name == ""

def test_row_contains_metadata():
    row = make_window(0x3a00003, workspace=2, pid=4321, title="Hello world").row()
    assert row.startswith("0x03a00003")
    assert "4321" in row
    assert "firefox.Firefox" in row
    assert row.endswith("Hello world")

@pytest.mark.parametrize("atom,expected", [
    ("_NET_WM_WINDOW_TYPE_DOCK", WindowType.DOCK),
    ("_NET_WM_WINDOW_TYPE_DROPDOWN_MENU", WindowType.DROPDOWN_MENU),
    ("_NET_WM_WINDOW_TYPE_NORMAL", WindowType.NORMAL),
    ("_KDE_NET_WM_WINDOW_TYPE_OVERRIDE", None),
    ("_NET_WM_WINDOW_TYPE_BOGUS", None),
])
def test_window_type_from_atom(atom, expected):
    assert WindowType.from_atom(atom) == expected

def test_abnormal_types_exclude_normal_and_dialog():
    assert WindowType.NORMAL not in ABNORMAL_TYPES
    assert WindowType.DIALOG not in ABNORMAL_TYPES
    assert len(ABNORMAL_TYPES) == 12

def test_snapshot_defaults():
    snapshot = StackingSnapshot()
    assert snapshot.active_id is None
    assert not snapshot.has_order

def test_window_is_immutable():
    window = make_window(1)
    with pytest.raises(AttributeError):
        window.title = "changed"
