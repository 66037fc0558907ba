"""
Base text measurer interface.
"""

from abc import ABC, abstractmethod


class BaseTextMeasurer(ABC):
    """Abstract base class for all text width estimators."""

    def __init__(self):
        self.name = self.__class__.__name__.replace("Measurer", "").lower()

    @abstractmethod
    def measure(self, text: str, font: str, size: float) -> float:
        """
        Measure the rendered width of a single line of text.

        Args:
            text: Text to measure
            font: Font family name
            size: Font size in points

        Returns:
            Width in points
        """
        pass
