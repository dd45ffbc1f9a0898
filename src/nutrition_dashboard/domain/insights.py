"""Insight domain models."""

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """How an insight should be presented."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ALERT = "alert"


@dataclass(frozen=True)
class Insight:
    """Short advisory message produced by a threshold rule."""

    topic: str
    icon: str
    text: str
    severity: Severity
