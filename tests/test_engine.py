from unittest.mock import Mock
import pytest
from pyjump.core.config import Options
from pyjump.core.engine import Action, Decision, LaunchDecisionEngine
from pyjump.core.errors import ProcessFoundNoWindow, UserAbort
from pyjump.core.window import StackingSnapshot
from conftest import make_window

MATCHED = [make_window(10), make_window(20), make_window(30)]

def decide(matched=MATCHED, pids=frozenset(), snapshot=None, **kwargs):
    engine = LaunchDecisionEngine(Options(command="firefox", **kwargs))
    return engine.decide(matched, pids, snapshot or StackingSnapshot(active_id=99, stack=(20, 10, 30)))

def test_rule_order():
    engine = LaunchDecisionEngine(Options(command="firefox"))
    assert [action for _, action in engine.rules] == [
        Action.LIST, Action.MINIMIZE, Action.ACTIVATE,
        Action.ABORT, Action.LAUNCH_BLOCKED, Action.LAUNCH]

def test_list_wins_over_everything():
    assert decide(list_only=True, minimize=True).action == Action.LIST
    assert decide(matched=[], pids={1}, list_only=True).action == Action.LIST

def test_activate_uses_cycler():
    assert decide() == Decision(Action.ACTIVATE, 30)
    assert decide(reverse=True) == Decision(Action.ACTIVATE, 20)

def test_activate_cycles_from_active():
    snapshot = StackingSnapshot(active_id=20, stack=(10, 30, 20))
    assert decide(snapshot=snapshot) == Decision(Action.ACTIVATE, 30)

def test_minimize_single_active_window():
    snapshot = StackingSnapshot(active_id=10, stack=(10,))
    decision = decide(matched=[make_window(10)], snapshot=snapshot, minimize=True)
    assert decision == Decision(Action.MINIMIZE, 10)

def test_minimize_requires_flag():
    snapshot = StackingSnapshot(active_id=10, stack=(10,))
    decision = decide(matched=[make_window(10)], snapshot=snapshot)
    assert decision == Decision(Action.ACTIVATE, 10)

def test_minimize_requires_active():
    snapshot = StackingSnapshot(active_id=99, stack=(10,))
    decision = decide(matched=[make_window(10)], snapshot=snapshot, minimize=True)
    assert decision.action == Action.ACTIVATE

def test_minimize_requires_single_window():
    snapshot = StackingSnapshot(active_id=10)
    assert decide(snapshot=snapshot, minimize=True) == Decision(Action.ACTIVATE, 20)

def test_passthrough_with_args_skips_activation():
    decision = decide(pids={5}, passthrough=True, args=("file.txt",))
    assert decision.action == Action.LAUNCH

def test_passthrough_without_args_activates():
    assert decide(passthrough=True).action == Action.ACTIVATE

def test_abort_if_no_window():
    assert decide(matched=[], pids={5}, abort_if_no_window=True).action == Action.ABORT

def test_abort_only_without_matches():
    assert decide(abort_if_no_window=True).action == Action.ACTIVATE

def test_launch_blocked_by_running_process():
    assert decide(matched=[], pids={5}).action == Action.LAUNCH_BLOCKED

def test_force_overrides_block():
    assert decide(matched=[], pids={5}, force_launch=True).action == Action.LAUNCH

def test_launch_when_nothing_runs():
    assert decide(matched=[], pids=frozenset()) == Decision(Action.LAUNCH)

def test_execute_list(capsys):
    control, launcher = Mock(), Mock()
    matched = MATCHED[:2]
    engine = LaunchDecisionEngine(Options(command="firefox", list_only=True))
    engine.execute(Decision(Action.LIST), matched, control, launcher)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Matched windows [2]"
    assert out[1] == "  " + matched[0].row()
    assert out[2] == "  " + matched[1].row()
    assert control.method_calls == []
    assert launcher.method_calls == []

def test_execute_minimize():
    control, launcher = Mock(), Mock()
    engine = LaunchDecisionEngine(Options(command="firefox", minimize=True))
    engine.execute(Decision(Action.MINIMIZE, 10), MATCHED[:1], control, launcher)
    control.minimize.assert_called_once_with(10)
    control.activate.assert_not_called()

def test_execute_activate():
    control, launcher = Mock(), Mock()
    engine = LaunchDecisionEngine(Options(command="firefox"))
    engine.execute(Decision(Action.ACTIVATE, 20), MATCHED, control, launcher)
    control.activate.assert_called_once_with(20, bring_here=False)
    control.center_pointer.assert_not_called()
    launcher.launch.assert_not_called()

def test_execute_activate_bring_here_and_center():
    control, launcher = Mock(), Mock()
    engine = LaunchDecisionEngine(Options(command="firefox", bring_here=True, center_pointer=True))
    engine.execute(Decision(Action.ACTIVATE, 20), MATCHED, control, launcher)
    control.activate.assert_called_once_with(20, bring_here=True)
    control.center_pointer.assert_called_once_with(20)

def test_execute_abort():
    control, launcher = Mock(), Mock()
    engine = LaunchDecisionEngine(Options(command="firefox", abort_if_no_window=True))
    with pytest.raises(UserAbort) as excinfo:
        engine.execute(Decision(Action.ABORT), [], control, launcher)
    assert excinfo.value.exit_code == 1
    launcher.launch.assert_not_called()

def test_execute_launch_blocked():
    control, launcher = Mock(), Mock()
    engine = LaunchDecisionEngine(Options(command="firefox"))
    with pytest.raises(ProcessFoundNoWindow) as excinfo:
        engine.execute(Decision(Action.LAUNCH_BLOCKED), [], control, launcher)
    assert "found running process for 'firefox'" in excinfo.value.message
    launcher.launch.assert_not_called()
    assert control.method_calls == []

def test_execute_launch():
    control, launcher = Mock(), Mock()
    engine = LaunchDecisionEngine(Options(command="gvim", args=("a.txt",), fork=False))
    engine.execute(Decision(Action.LAUNCH), [], control, launcher)
    launcher.launch.assert_called_once_with("gvim", ("a.txt",), fork=False)
    assert control.method_calls == []

def test_launch_is_the_fallback():
    engine = LaunchDecisionEngine(Options(command="firefox"))
    engine.rules = engine.rules[:-1]
    assert engine.decide([], frozenset(), StackingSnapshot()) == Decision(Action.LAUNCH)
