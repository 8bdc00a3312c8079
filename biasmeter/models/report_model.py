"""Bias analysis report models."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel

BiasStatus = Literal["Low Bias", "Moderate Bias", "High Bias", "Critical Bias"]
RiskLevel = Literal["Low", "Medium", "High", "Critical"]


class AnalysisMetrics(BaseModel):
    disparateImpact: float
    statisticalParity: float
    biasScore: float
    riskLevel: RiskLevel
    sampleSize: int
    confidence: float


class AnalysisReport(BaseModel):
    biasScore: float
    status: BiasStatus
    message: str
    maleRate: float
    femaleRate: float
    otherRate: float
    metrics: AnalysisMetrics
    recommendations: List[str]
