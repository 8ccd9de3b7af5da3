from dataclasses import dataclass
from enum import Enum
from typing import Tuple


REPORTERS = ("xcode", "json")


class ConfigurationError(ValueError):
    """Raised when a configuration value cannot be used."""


class Severity(Enum):
    """Severity attached to every violation a rule reports."""
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, value: str) -> "Severity":
        normalized = value.strip().lower()
        for severity in cls:
            if severity.value == normalized:
                return severity
        raise ConfigurationError(
            f"Unknown severity '{value}'. Expected one of: "
            + ", ".join(s.value for s in cls)
        )


@dataclass(frozen=True)
class Settings:
    severity: Severity = Severity.WARNING
    jobs: int = 1
    extensions: Tuple[str, ...] = (".swift",)
    reporter: str = "xcode"
    strict: bool = False

    def __post_init__(self) -> None:
        if self.jobs < 1:
            raise ConfigurationError(f"jobs must be at least 1, got {self.jobs}")
        if self.reporter not in REPORTERS:
            raise ConfigurationError(
                f"Unknown reporter '{self.reporter}'. Expected one of: {', '.join(REPORTERS)}"
            )
        if not self.extensions:
            raise ConfigurationError("At least one file extension is required")
