"""
Fusion Studio
Image fusion, pose-based image generation and image-to-video using Google's Gemini API
"""

__version__ = "1.0.0"
__author__ = "Fusion Studio Team"

from .core.generator import GeminiMediaGenerator
from .ui.app import create_app

__all__ = [
    "GeminiMediaGenerator",
    "create_app",
]
