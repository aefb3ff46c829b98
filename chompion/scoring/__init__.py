"""
Scoring layer.

Responsibilities:
- Hold category weight sets and keep them summing to 100%.
- Turn per-category star ratings into one composite score per entry.
- Round deterministically so stored scores survive recomputation unchanged.
"""
