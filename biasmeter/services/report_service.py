"""
Bias Report Generator — BiasMeter AI

Produces a synthetic bias-analysis report for an uploaded dataset. The file
itself is never parsed: the score starts from an industry baseline and is
perturbed by the injected random source.

Selection rates are drawn independently and are not normalised; they do not
form a distribution and need not sum to 100.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Protocol

import numpy as np

from biasmeter.demo import catalogs
from biasmeter.models.report_model import AnalysisMetrics, AnalysisReport

logger = logging.getLogger(__name__)

# (upper bound, status, risk level), checked in order
THRESHOLDS = [
    (20.0, "Low Bias", "Low"),
    (40.0, "Moderate Bias", "Medium"),
    (60.0, "High Bias", "High"),
]
CRITICAL = ("Critical Bias", "Critical")


class RandomSource(Protocol):
    def random(self) -> float: ...

    def integers(self, low: int, high: int) -> Any: ...


def round_tenth(value: float) -> float:
    """Round to one decimal place, halves rounding up (23.45 -> 23.5)."""
    return math.floor(float(value) * 10 + 0.5) / 10


def bias_status(score: float) -> str:
    for bound, status, _ in THRESHOLDS:
        if score < bound:
            return status
    return CRITICAL[0]


def risk_level(score: float) -> str:
    for bound, _, risk in THRESHOLDS:
        if score < bound:
            return risk
    return CRITICAL[1]


class ReportGenerator:
    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def _uniform(self, span: float) -> float:
        return float(self.rng.random()) * span

    def analyze(self, industry: str, file_size: int) -> AnalysisReport:
        base = catalogs.get_base_bias(industry)
        raw_score = base + self._uniform(25)

        male = 30 + self._uniform(40)
        female = 30 + self._uniform(40)
        other = 5 + self._uniform(15)

        disparate_impact = abs(male - female)
        statistical_parity = 100 - disparate_impact

        score = round_tenth(raw_score)
        sample_size = 100 + int(self.rng.integers(0, 900))

        logger.debug(
            "Synthetic report for %s (%d bytes): score=%.1f sample=%d",
            industry, file_size, score, sample_size,
        )

        # Status is derived from the reported (rounded) score so the two
        # always agree at the threshold boundaries.
        return AnalysisReport(
            biasScore=score,
            status=bias_status(score),
            message=f"Analysis of {industry} data completed",
            maleRate=round_tenth(male),
            femaleRate=round_tenth(female),
            otherRate=round_tenth(other),
            metrics=AnalysisMetrics(
                disparateImpact=round_tenth(disparate_impact),
                statisticalParity=round_tenth(statistical_parity),
                biasScore=score,
                riskLevel=risk_level(score),
                sampleSize=sample_size,
                confidence=round_tenth(95 - raw_score / 2),
            ),
            recommendations=catalogs.get_recommendations(industry),
        )
