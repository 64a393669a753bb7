"""Fabric Readiness Assessment.

Scoring engine behind the Microsoft Fabric readiness questionnaire. Maps a
single answer record to a composite suitability score, four category scores,
competitor comparisons, business value metrics, and a recommendation tier.
"""

__version__ = "0.1.0"
