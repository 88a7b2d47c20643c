"""
Error types for pyjump

Every error is terminal: click prints "Error: <message>" on stderr and
exits with status 1.
"""
import click

class PyjumpError(click.ClickException):
    """Base class for all pyjump failures"""
    exit_code = 1

class ToolUnavailable(PyjumpError):
    """A required external query or control tool is missing or failed"""

class CommandNotFound(PyjumpError):
    """The launch target is not an executable on PATH"""

class ActivationFailure(PyjumpError):
    """The window manager refused to activate a window"""

class ProcessFoundNoWindow(PyjumpError):
    """A matching process is running but none of its windows matched"""

class UserAbort(PyjumpError):
    """No window matched and launching was disabled with --abort-if-no-window"""
