"""Exceptions raised by the risk engine."""
from typing import List, Sequence


class RiskEngineError(Exception):
    """Base class for engine errors."""


class ValidationError(RiskEngineError):
    """One or more required clinical fields are missing or non-numeric."""

    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields: List[str] = list(missing_fields)
        super().__init__(
            "Please fill in required fields: " + ", ".join(self.missing_fields)
        )


class ConfigurationError(RiskEngineError):
    """Unknown model identifier."""

    def __init__(self, model_id: str):
        self.model_id = model_id
        super().__init__(f"Unknown model: {model_id!r}")
