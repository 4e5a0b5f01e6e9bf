"""Response models for the Wolfram|Alpha full results API (JSON output)."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SubPod(BaseModel):
    model_config = ConfigDict(extra='ignore')

    plaintext: str = ""


class Pod(BaseModel):
    model_config = ConfigDict(extra='ignore')

    title: str = ""
    primary: Optional[bool] = None
    subpods: List[SubPod] = Field(default_factory=list)


class QueryResult(BaseModel):
    model_config = ConfigDict(extra='ignore')

    pods: List[Pod] = Field(default_factory=list)


class WolframAlphaResult(BaseModel):
    """Top-level envelope: ``{"queryresult": {...}}``."""
    model_config = ConfigDict(extra='ignore')

    queryresult: QueryResult

    def primary_plaintext(self) -> Optional[str]:
        """Plain text of the first subpod of the first primary pod, if any."""
        pod = next((p for p in self.queryresult.pods if p.primary is True), None)
        if pod is None or not pod.subpods:
            return None
        text = pod.subpods[0].plaintext.strip()
        return text or None
