"""
Radio domain module.

Provides the shuffled, ad-interleaved song stream used by radio mode.
"""

from .scheduler import DEFAULT_AD_INTERVAL, RadioScheduler, interleave_ads

__all__ = [
    "DEFAULT_AD_INTERVAL",
    "RadioScheduler",
    "interleave_ads",
]
