# engine.py
"""
Entry points for the diabetes risk engine used by the dashboard.
- get_engine() builds a RiskEngine from environment settings.
- map_form_row() converts dashboard form keys (camelCase) to engine keys.
- DelayedEngine adds artificial latency for UI testing, outside the pure engine.
"""
import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional

from src.risk_engine.config import Settings, get_settings
from src.risk_engine.scoring import RiskAssessment, RiskEngine

logger = logging.getLogger(__name__)


def get_engine(settings: Optional[Settings] = None) -> RiskEngine:
    settings = settings or get_settings()
    return RiskEngine(
        clinical_overlay=settings.clinical_overlay,
        default_model=settings.default_model,
    )


class DelayedEngine:
    """Wraps a RiskEngine and sleeps before each evaluation.

    The delay has no effect on the result; it only simulates a slow backend.
    """

    def __init__(self, engine: RiskEngine, delay_seconds: float,
                 sleep: Callable[[float], None] = time.sleep):
        self.engine = engine
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    def evaluate(self, data: Mapping[str, Any], model_id: Optional[Any] = None) -> RiskAssessment:
        if self.delay_seconds > 0:
            self._sleep(self.delay_seconds)
        return self.engine.evaluate(data, model_id)


def get_dashboard_engine(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    engine = get_engine(settings)
    if settings.simulated_delay_seconds > 0:
        logger.info("Simulating %.1fs prediction latency", settings.simulated_delay_seconds)
        return DelayedEngine(engine, settings.simulated_delay_seconds)
    return engine


# mapping helper to convert dashboard form keys to engine keys
FORM_TO_ENGINE_KEY = {
    "glucose": "glucose",
    "bmi": "bmi",
    "age": "age",
    "bloodPressure": "blood_pressure",
    "diabetesPedigreeFunction": "diabetes_pedigree_function",
    "pregnancies": "pregnancies",
    "skinThickness": "skin_thickness",
    "insulin": "insulin",
}

MODEL_SELECTOR_KEY = "selectedModel"


def map_form_row(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a form row (dict-like) to the engine's input dict using the mapping above."""
    out = {}
    for src, dst in FORM_TO_ENGINE_KEY.items():
        out[dst] = row.get(src, None)
    return out


def evaluate_form(row: Mapping[str, Any], engine: Optional[RiskEngine] = None) -> RiskAssessment:
    """Score a raw form submission, including its model selector."""
    engine = engine or get_engine()
    return engine.evaluate(map_form_row(row), row.get(MODEL_SELECTOR_KEY))
