"""
Presentation adapters: section discovery, cleanup and drawing.

- PPTXAdapter (local .pptx files via python-pptx)
- GoogleSlidesAdapter (Slides API batchUpdate requests)
"""

from slidetabs.adapters.base import BasePresentationAdapter
from slidetabs.adapters.pptx_adapter import PPTXAdapter
from slidetabs.adapters.gslides_adapter import GoogleSlidesAdapter

__all__ = ["BasePresentationAdapter", "PPTXAdapter", "GoogleSlidesAdapter"]
