"""Base class for chart plugins."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class Plugin(ABC):
    """
    Abstract base class for chart plugins.

    A plugin keeps only its options. Everything chart-specific is received
    through the host passed to :meth:`bind`.

    Usage:
        class MyPlugin(Plugin):
            def bind(self, host):
                functions = {"get_bubble_r": lambda d: 10}
                host.register_functions(functions)
                return functions
    """

    version = "0.0.0"

    def __init__(self, options: Any = None):
        self.options = options

    @abstractmethod
    def bind(self, host) -> dict[str, Callable[..., Any]]:
        """
        Register the plugin's operations in the host's function table.

        Args:
            host: ChartHost to bind to

        Returns:
            Mapping of function name to the bound callable
        """
        pass
