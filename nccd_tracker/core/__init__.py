"""
Core stages: record store, extraction, linking, review and summary.
"""
