"""Scoring pipeline services."""

from semf.services.scoring_service import ScoringService, calculate_semf_level

__all__ = ["ScoringService", "calculate_semf_level"]
