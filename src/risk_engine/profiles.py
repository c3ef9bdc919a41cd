"""
Static model catalog.

The profiles are display metadata only: nothing is trained or loaded. A profile
selects the score multiplier and the reported confidence (accuracy x 100).
"""
from dataclasses import asdict, dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigurationError


class ModelId(str, Enum):
    ENSEMBLE = "ensemble"
    GRADIENT = "gradient"
    LOGISTIC = "logistic"
    NEURAL = "neural"


@dataclass(frozen=True)
class ModelProfile:
    model_id: ModelId
    name: str
    accuracy: float
    precision: float
    recall: float
    f1_score: float
    auc: Optional[float] = None
    specificity: Optional[float] = None
    multiplier: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["model_id"] = self.model_id.value
        return out


MODEL_CATALOG: Mapping[ModelId, ModelProfile] = MappingProxyType({
    ModelId.ENSEMBLE: ModelProfile(
        model_id=ModelId.ENSEMBLE,
        name="Ensemble Model",
        accuracy=0.86, precision=0.87, recall=0.73, f1_score=0.79,
        auc=0.905, specificity=0.92,
        multiplier=1.10,  # ensemble typically more confident
    ),
    ModelId.GRADIENT: ModelProfile(
        model_id=ModelId.GRADIENT,
        name="Gradient Boosting",
        accuracy=0.84, precision=0.83, recall=0.67, f1_score=0.74,
        auc=0.891, specificity=0.89,
        multiplier=1.05,
    ),
    ModelId.LOGISTIC: ModelProfile(
        model_id=ModelId.LOGISTIC,
        name="Advanced Logistic Regression",
        accuracy=0.82, precision=0.85, recall=0.58, f1_score=0.69,
        auc=0.873, specificity=0.91,
        multiplier=1.00,
    ),
    ModelId.NEURAL: ModelProfile(
        model_id=ModelId.NEURAL,
        name="Neural Network",
        accuracy=0.81, precision=0.79, recall=0.71, f1_score=0.75,
        auc=0.885, specificity=0.86,
        multiplier=0.95,  # more conservative
    ),
})

# Used when the selector names a model that is not in the catalog.
FALLBACK_MODEL = ModelId.LOGISTIC


def resolve_model(model_id: Any) -> ModelProfile:
    """Look up a profile by id (string or ModelId); raise ConfigurationError if unknown."""
    if isinstance(model_id, ModelId):
        return MODEL_CATALOG[model_id]
    key = str(model_id).strip().lower()
    try:
        return MODEL_CATALOG[ModelId(key)]
    except ValueError:
        raise ConfigurationError(str(model_id)) from None
