from __future__ import annotations

"""Batch distance runs and their summaries."""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from .config import DistanceSettings, PairModel
from .distance import TrivialMatrixError, build, distance_levenshtein
from .utils import jsonio

logger = logging.getLogger(__name__)


@dataclass
class PairResult:
    id: Optional[str]
    source: str
    target: str
    distance: Optional[int]
    trivial: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def compute(source: str, target: str, settings: DistanceSettings) -> int:
    """Distance for one pair under *settings*; may raise TrivialMatrixError."""

    if settings.method == "matrix":
        return build(source, target, settings.recurrence)[-1][-1]
    return distance_levenshtein(source, target)


def compute_pair(pair: PairModel, settings: DistanceSettings) -> PairResult:
    try:
        distance: Optional[int] = compute(pair.source, pair.target, settings)
        trivial = False
    except TrivialMatrixError as exc:
        if not settings.handle_trivial:
            logger.debug("trivial pair %s left unresolved", pair.id)
            distance = None
        else:
            distance = abs(len(exc.source) - len(exc.target))
        trivial = True
    return PairResult(
        id=pair.id,
        source=pair.source,
        target=pair.target,
        distance=distance,
        trivial=trivial,
    )


def load_pairs(path: Path) -> List[PairModel]:
    pairs: List[PairModel] = []
    for line_no, entry in enumerate(jsonio.iter_jsonl(path), start=1):
        try:
            pairs.append(PairModel.model_validate(entry))
        except ValidationError as exc:
            raise ValueError(f"Invalid pair on line {line_no} of {path}: {exc}") from exc
    return pairs


def run_batch(pairs: Iterable[PairModel], settings: DistanceSettings) -> List[PairResult]:
    results = [compute_pair(pair, settings) for pair in pairs]
    logger.info("computed %d pairs with method=%s", len(results), settings.method)
    return results


def summarise(results: List[PairResult]) -> Dict[str, Any]:
    if not results:
        return {
            "num_pairs": 0,
            "num_trivial": 0,
            "avg_distance": 0.0,
            "max_distance": None,
            "exact_match_rate": 0.0,
        }
    distances = [r.distance for r in results if r.distance is not None]
    exact = sum(1 for r in results if r.source == r.target)
    return {
        "num_pairs": len(results),
        "num_trivial": sum(1 for r in results if r.trivial),
        "avg_distance": (sum(distances) / len(distances) if distances else 0.0),
        "max_distance": (max(distances) if distances else None),
        "exact_match_rate": exact / len(results),
    }


def write_report(results: List[PairResult], destination: Path) -> Path:
    jsonio.write_json(
        destination,
        {
            "summary": summarise(results),
            "records": [result.to_dict() for result in results],
        },
    )
    return destination
