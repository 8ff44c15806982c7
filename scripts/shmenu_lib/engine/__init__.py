"""
shmenu_lib.engine - Navigation and execution for shmenu.

This package contains:
- navigation: the Navigator state machine
- execution: directory resolution, variable substitution, process spawn
- process: the process capability and SIGINT forwarding
- modify: the modify mode overlay and command builder
- mode: the RunMode threaded through a navigation
"""

from .execution import CommandExecutor, ExecutionResult, invokes_program, substitute_variables
from .mode import RunMode
from .modify import CommandAnswers, build_modify_view, graft_command, run_modify
from .navigation import NavigationResult, NavigationState, Navigator, Outcome
from .process import ProcessHandle, ProcessRunner, SubprocessRunner

__all__ = [
    'CommandExecutor',
    'ExecutionResult',
    'invokes_program',
    'substitute_variables',
    'RunMode',
    'CommandAnswers',
    'build_modify_view',
    'graft_command',
    'run_modify',
    'NavigationResult',
    'NavigationState',
    'Navigator',
    'Outcome',
    'ProcessHandle',
    'ProcessRunner',
    'SubprocessRunner',
]
