"""Parse shell command lines into operator trees and resolve command paths."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "cli",
    "linkedlist",
    "memory",
    "ops",
    "output",
    "paths",
    "strings",
    "tree",
]