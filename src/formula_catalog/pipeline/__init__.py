from .enumeration import (
    RunStatus,
    StopReason,
    TractabilityReport,
    EnumerationResult,
    assess_tractability,
    run_enumeration,
)

__all__ = [
    "RunStatus",
    "StopReason",
    "TractabilityReport",
    "EnumerationResult",
    "assess_tractability",
    "run_enumeration",
]
