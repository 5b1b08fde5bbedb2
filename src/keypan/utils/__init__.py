from keypan.utils.helpers import (
  clamp,
  snap,
)

__all__ = [
  "clamp",
  "snap",
]
