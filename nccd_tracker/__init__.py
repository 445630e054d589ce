"""
NCCD evidence tracker - adjustments, evidence, proposed links and compliance summaries.
"""

__version__ = "0.1.0"
