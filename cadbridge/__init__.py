"""
cadbridge - detects installed CAD software, downloads drawings and opens
them in the best matching application.
"""

__version__ = "0.3.0"
