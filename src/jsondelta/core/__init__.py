"""jsondelta core: pointer building, value kinds, array alignment and the patch engine.

This package has no third-party dependencies and performs no I/O.
"""
from __future__ import annotations
