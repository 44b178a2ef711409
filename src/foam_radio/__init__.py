"""
Foam Radio - playback session and radio scheduling engine
"""

__version__ = "0.1.0"
