"""
Report module for the dungeon crawler.
"""

from .summary import Achievement, RunSummary, earned_achievements, print_summary, summarize

__all__ = [
    "Achievement",
    "RunSummary",
    "earned_achievements",
    "print_summary",
    "summarize",
]
