from .panels import Panels
from .terminal import Terminal

__all__ = ['Panels', 'Terminal']
