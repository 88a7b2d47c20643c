"""
Command line interface for pyjump
"""
import re
import shutil

import click

from .core.config import MatchCriteria, Options
from .core.engine import LaunchDecisionEngine
from .core.errors import ToolUnavailable
from .core.launcher import Launcher
from .core.pipeline import MatchPipeline
from .core.process import select_process_matcher
from .core.wm import StackingOracle, WindowControl, WindowEnumerator, XSession

def validate_regex(ctx, param, value):
    """Reject --title patterns that do not compile"""
    if value is None:
        return None
    try:
        re.compile(value)
    except re.error as e:
        raise click.BadParameter(f"invalid regular expression: {e}")
    return value

@click.command(context_settings=dict(help_option_names=['-h', '--help'],
                                     allow_interspersed_args=False))
@click.version_option()
@click.option('--reverse', '-r', is_flag=True, help='Cycle through windows in reverse order')
@click.option('--force', '-f', is_flag=True,
              help='Launch even if a process is running but has no matching window')
@click.option('--minimize', '-m', is_flag=True,
              help='Minimize the window if it is the only one and already active')
@click.option('--no-fork', '-n', is_flag=True,
              help='Replace this process with the command instead of launching it detached')
@click.option('--abort-if-no-window', '-a', is_flag=True,
              help='Exit with an error instead of launching when no window matches')
@click.option('--passthrough', '-p', is_flag=True,
              help='Launch a new instance whenever ARGS are given (implies --force)')
@click.option('--list', '-L', 'list_only', is_flag=True,
              help='List matching windows and exit')
@click.option('--title', '-t', metavar='REGEX', callback=validate_regex,
              help='Only match windows whose title matches REGEX')
@click.option('--class', '-c', 'wm_class', metavar='NAME',
              help='Window class to match (default: base name of COMMAND)')
@click.option('--process', '-i', 'process_name', metavar='NAME',
              help='Process name to match (default: base name of COMMAND)')
@click.option('--current-workspace', '-w', is_flag=True,
              help='Only match windows on the current workspace')
@click.option('--bring-here', '-R', is_flag=True,
              help='Move the window to the current workspace instead of switching workspace')
@click.option('--center-pointer', '-C', is_flag=True,
              help='Move the pointer to the center of the activated window')
@click.option('--quiet', '-q', is_flag=True, help='Suppress additional output')
@click.option('--debug', is_flag=True, help='Show options and matched windows before acting')
@click.argument('command')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def main(command, args, reverse, force, minimize, no_fork, abort_if_no_window, passthrough,
         list_only, title, wm_class, process_name, current_workspace, bring_here,
         center_pointer, quiet, debug):
    """pyjump - jump to COMMAND's window, or launch COMMAND if it has none.

Bind it to a key to switch to an application or start it. Pressing the
key again while the application is focused cycles through its windows.

\b
Windows belong to COMMAND when either:
    their WM_CLASS matches --class (case-insensitive), or
    they are owned by a local process matching --process

\b
Examples:
    pyjump firefox                  Focus or start Firefox
    pyjump -r firefox               Cycle Firefox windows backwards
    pyjump -t 'Inbox' thunderbird   Only the window titled Inbox
    pyjump -p gvim notes.txt        Always open notes.txt in a new gvim

Everything after COMMAND is passed to it when launching."""

    if shutil.which('wmctrl') is None:
        raise ToolUnavailable("unable to find wmctrl")

    session = XSession()
    try:
        run(session, command, args, reverse, force, minimize, no_fork, abort_if_no_window,
            passthrough, list_only, title, wm_class, process_name, current_workspace,
            bring_here, center_pointer, quiet, debug)
    finally:
        session.close()

def run(session, command, args, reverse, force, minimize, no_fork, abort_if_no_window, passthrough,
        list_only, title, wm_class, process_name, current_workspace, bring_here,
        center_pointer, quiet, debug):
    """Query the desktop once, decide, and perform the single resulting action"""
    enumerator = WindowEnumerator(session)

    workspace = None
    if current_workspace:
        workspace = enumerator.current_workspace()
        if workspace is None:
            raise ToolUnavailable("unable to determine current workspace")

    criteria = MatchCriteria.for_command(command, wm_class=wm_class, process_name=process_name,
                                         title=title, workspace=workspace)
    options = Options(
        command=command,
        args=tuple(args),
        reverse=reverse,
        force_launch=force,
        minimize=minimize,
        fork=not no_fork,
        abort_if_no_window=abort_if_no_window,
        passthrough=passthrough,
        list_only=list_only,
        current_workspace=current_workspace,
        bring_here=bring_here,
        center_pointer=center_pointer,
        quiet=quiet,
        debug=debug,
        criteria=criteria,
    )

    if debug:
        options.dump_structure()

    # Every query runs once; the rest of the run works on these snapshots
    windows = enumerator.list_windows()
    snapshot = StackingOracle().snapshot()
    pids = select_process_matcher().find_pids(criteria.process_name)

    matched = MatchPipeline(criteria, pids, session.window_types).run(windows)

    engine = LaunchDecisionEngine(options)
    decision = engine.decide(matched, pids, snapshot)

    if debug:
        click.secho(f"\nProcesses: {sorted(pids)}", bold=True)
        click.secho(f"Matched windows [{len(matched)}]:", bold=True)
        for window in matched:
            click.echo(f"   - {window}")
        click.secho(f"Decision: {decision.action.value}", fg="cyan")

    control = WindowControl(session, label=command)
    engine.execute(decision, matched, control, Launcher(quiet=quiet))

if __name__ == '__main__':
    main()
