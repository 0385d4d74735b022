"""Core type definitions."""

from typing import Literal, NewType

# URL path for routing (e.g., "/", "/tutorials/erc20")
# Compared by exact string equality everywhere; never normalised
URLPath = NewType("URLPath", str)

Difficulty = Literal["Beginner", "Intermediate", "Advanced"]
