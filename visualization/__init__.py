"""
Visualization Module
====================

This module draws the sampling comparison chart and exports it as an
image file.
"""

from .comparison_plotter import ComparisonPlotter, GridConfiguration

__all__ = ["ComparisonPlotter", "GridConfiguration"]
