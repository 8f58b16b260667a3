"""Reading bit sequences that are not aligned to byte boundaries."""

__version__ = "0.11.1"

__all__ = [
    "bits",
    "errors",
    "readbuffer",
    "readstream",
    "serialize",
    "writing",
]