"""
Organisation Use Cases

Reachability checks and the system log.
"""

from .get_logs_use_case import GetLogsUseCase, parse_window
from .ping_use_case import PingUseCase

__all__ = [
    "GetLogsUseCase",
    "PingUseCase",
    "parse_window",
]
