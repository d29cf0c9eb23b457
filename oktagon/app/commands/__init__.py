"""
User Commands

Planning and running of mutating user operations.
"""

from .dtos import CommandOutcome, UserCommand
from .planner import plan_activation, plan_password_expiration
from .runners import CommandExecutor, CommandRunner, DryRunReporter, select_runner

__all__ = [
    "UserCommand",
    "CommandOutcome",
    "plan_activation",
    "plan_password_expiration",
    "CommandRunner",
    "CommandExecutor",
    "DryRunReporter",
    "select_runner",
]
