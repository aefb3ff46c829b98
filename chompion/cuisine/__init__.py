"""
Cuisine detection.

Responsibilities:
- Keep the static cuisine -> keyword table.
- Classify an entry from its dish names and venue name by keyword hits.
"""
