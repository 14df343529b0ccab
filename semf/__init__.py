"""SEMF scoring service.

Scores the SEMF English core skills test and maps performance onto the
S1-S5 proficiency levels.
"""

__version__ = "1.0.0"
