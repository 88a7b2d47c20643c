"""
Core functionality for pyjump
"""
from .window import Window, WindowType, StackingSnapshot, ABNORMAL_TYPES
from .config import MatchCriteria, Options
from .process import ProcessMatcher, PgrepMatcher, PsPrefixMatcher, select_process_matcher
from .pipeline import MatchPipeline
from .cycler import WindowCycler
from .engine import Action, Decision, LaunchDecisionEngine
from .launcher import Launcher
from .wm import WindowEnumerator, StackingOracle, WindowControl, XSession
from .errors import (PyjumpError, ToolUnavailable, CommandNotFound, ActivationFailure,
                     ProcessFoundNoWindow, UserAbort)

__all__ = [
    'Window',
    'WindowType',
    'StackingSnapshot',
    'ABNORMAL_TYPES',
    'MatchCriteria',
    'Options',
    'ProcessMatcher',
    'PgrepMatcher',
    'PsPrefixMatcher',
    'select_process_matcher',
    'MatchPipeline',
    'WindowCycler',
    'Action',
    'Decision',
    'LaunchDecisionEngine',
    'Launcher',
    'WindowEnumerator',
    'StackingOracle',
    'WindowControl',
    'XSession',
    'PyjumpError',
    'ToolUnavailable',
    'CommandNotFound',
    'ActivationFailure',
    'ProcessFoundNoWindow',
    'UserAbort'
]
