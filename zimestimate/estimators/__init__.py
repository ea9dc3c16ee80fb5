"""Budget estimators built on top of the BOQ engine."""

from zimestimate.estimators.stage_budget import StageReachResult, StageReachRow, estimate_stage_reach

__all__ = ["StageReachResult", "StageReachRow", "estimate_stage_reach"]
