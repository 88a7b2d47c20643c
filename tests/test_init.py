"""
Test core module exports
"""
from pyjump import core

EXPECTED = {
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
}

def test_core_exports():
    """Test that core module exports expected classes"""
    for name in EXPECTED:
        assert hasattr(core, name)

def test_import_all():
    """Test that __all__ contains expected exports"""
    assert set(core.__all__) == EXPECTED
