"""
Domain models — Pydantic types for jsongen.

All models are re-exported here for convenient access:

    from jsongen.core.models import TargetResolution, ArtifactSet, OperationOutcome
"""

from jsongen.core.models.action import Action, Receipt
from jsongen.core.models.outcome import (
    ArtifactSet,
    FailedItem,
    Failure,
    FailureKind,
    OperationOutcome,
    ResolutionFailure,
)
from jsongen.core.models.settings import GeneratorSettings, Settings
from jsongen.core.models.target import InputInfo, TargetMode, TargetResolution
from jsongen.core.models.tool import ToolInvocation

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # outcome.py
    "ArtifactSet",
    "FailedItem",
    "Failure",
    "FailureKind",
    "OperationOutcome",
    "ResolutionFailure",
    # settings.py
    "GeneratorSettings",
    "Settings",
    # target.py
    "InputInfo",
    "TargetMode",
    "TargetResolution",
    # tool.py
    "ToolInvocation",
]
