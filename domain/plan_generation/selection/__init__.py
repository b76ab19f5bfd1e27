"""Catalog item selection."""

from .scored_selector import ScoredSelector, attribute_score, candidate_pool, score

__all__ = ["ScoredSelector", "attribute_score", "candidate_pool", "score"]
