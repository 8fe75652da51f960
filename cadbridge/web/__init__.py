"""
Web Layer.

This package fetches drawings from the drawing service, handling bearer
token authentication.
"""

from .auth import prepare_request, split_token
from .downloader import DrawingDownloader

__all__ = ["DrawingDownloader", "prepare_request", "split_token"]
