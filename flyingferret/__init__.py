"""
flyingferret — a rule-based responder for dice rolls, choices and questions.

Usage:
    from flyingferret import transform
    transform("roll 2d6")          # ['2d6 = 7: 3, 4']
    transform("Pizza or Tacos?")   # ['Tacos']
"""

from flyingferret.responder import Responder, transform

__version__ = "1.0.0"

__all__ = ["Responder", "transform", "__version__"]
