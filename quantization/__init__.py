"""
Quantization Module
===================

This module contains the uniform amplitude quantizer used to model the
bit depth of a digital audio system.
"""

from .uniform_quantizer import UniformQuantizer

__all__ = ["UniformQuantizer"]
