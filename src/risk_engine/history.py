"""
Bounded, newest-first store of past predictions.

The dashboard keeps two of these: automatic history of every prediction and the
predictions a clinician explicitly saves. Once full, the oldest entry is evicted.
"""
import json
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Mapping, Optional

import pandas as pd

from .scoring import RiskAssessment

logger = logging.getLogger(__name__)


@dataclass
class HistoryEntry:
    timestamp: str
    input_data: Dict[str, Any]
    prediction: Dict[str, Any]
    patient_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "patient_id": self.patient_id,
            "input_data": self.input_data,
            "prediction": self.prediction,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "HistoryEntry":
        return cls(
            timestamp=d["timestamp"],
            input_data=dict(d.get("input_data") or {}),
            prediction=dict(d.get("prediction") or {}),
            patient_id=d.get("patient_id"),
        )


@dataclass
class PredictionHistory:
    max_entries: int = 100
    _entries: Deque[HistoryEntry] = field(init=False, repr=False)

    def __post_init__(self):
        if self.max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._entries = deque(maxlen=self.max_entries)

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, input_data: Mapping[str, Any], assessment: RiskAssessment,
               patient_id: Optional[str] = None, timestamp: Optional[datetime] = None) -> HistoryEntry:
        ts = timestamp or datetime.now(timezone.utc)
        entry = HistoryEntry(
            timestamp=ts.isoformat(),
            input_data=dict(input_data),
            prediction=assessment.to_dict(),
            patient_id=patient_id,
        )
        if len(self._entries) == self.max_entries:
            logger.debug("History full (%d), evicting oldest entry", self.max_entries)
        # deque(maxlen) drops from the opposite end on appendleft
        self._entries.appendleft(entry)
        return entry

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def for_patient(self, patient_id: str) -> List[HistoryEntry]:
        return [e for e in self._entries if e.patient_id == patient_id]

    def clear(self) -> None:
        self._entries.clear()

    def to_json(self) -> str:
        return json.dumps([e.to_dict() for e in self._entries])

    @classmethod
    def from_json(cls, payload: str, max_entries: int = 100) -> "PredictionHistory":
        """Rebuild from to_json() output, keeping only the newest max_entries."""
        history = cls(max_entries=max_entries)
        for item in json.loads(payload)[:max_entries]:
            history._entries.append(HistoryEntry.from_dict(item))
        return history

    def to_dataframe(self) -> pd.DataFrame:
        rows = [{
            "timestamp": e.timestamp,
            "patient_id": e.patient_id,
            "risk_percentage": e.prediction.get("risk_percentage"),
            "risk_level": e.prediction.get("risk_level"),
            "model_used": e.prediction.get("model_used"),
        } for e in self._entries]
        return pd.DataFrame(rows, columns=["timestamp", "patient_id", "risk_percentage",
                                           "risk_level", "model_used"])
