"""
Entry export ingestion.

Responsibilities:
- Read a CSV export of logged entries.
- Normalize rows into Entry records (dishes, category ratings, costs).
- Write entries back out in the same layout.
"""
