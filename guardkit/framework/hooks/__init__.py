"""``guardkit.framework.hooks`` provides primitives to use hooks to extend guardkit's behaviour"""

from .manager import _create_hook_manager, get_hook_manager
from .markers import hook_impl

__all__ = ["_create_hook_manager", "get_hook_manager", "hook_impl"]
