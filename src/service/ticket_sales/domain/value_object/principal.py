"""
Principal - opaque, already authenticated caller identity

The core never inspects a principal beyond equality and hashing: it is used to
tell the administrator apart from buyers and to key holdings.
"""

from typing import TypeAlias


Principal: TypeAlias = str | int
