"""
Cardwar: a two-player War card game engine with automated and human play.
"""

__version__ = "0.1.0"
