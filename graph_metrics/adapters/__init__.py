"""外部适配层"""

from .edge_loader import EdgeLoader

__all__ = ["EdgeLoader"]
