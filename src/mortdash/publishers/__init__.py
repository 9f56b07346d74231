"""Dashboard output publishers."""

from .base import Publisher
from .series_json import SeriesJsonPublisher

__all__ = [
    "Publisher",
    "SeriesJsonPublisher",
]
