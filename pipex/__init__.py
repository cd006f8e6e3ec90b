"""Run two commands joined by a pipe between an input file and an output file, with text and byte helpers."""

__version__ = "0.1.0"
__all__ = [
    "bytesops",
    "cformat",
    "chars",
    "linkedlist",
    "output",
    "pathsearch",
    "pipeline",
    "search",
    "text",
]