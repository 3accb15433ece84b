"""Building blocks for merging raw exposures into a floating-point HDR DNG."""

__version__ = "0.1.0"