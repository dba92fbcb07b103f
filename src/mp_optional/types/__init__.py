"""Container types — public re-export surface.

Modules:
  optional.py — Optional, Present, Empty
"""

from mp_optional.types.optional import Empty, Optional, Present

__all__ = ["Empty", "Optional", "Present"]
