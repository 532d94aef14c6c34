"""Operation history: diffing of PLC audit log entries."""

from plc_history.domain.history.builder import (
    build_operation_history,
    diff_states,
    find_last_matching,
)

__all__ = [
    "build_operation_history",
    "diff_states",
    "find_last_matching",
]
