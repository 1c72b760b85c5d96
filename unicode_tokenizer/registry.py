"""Name-keyed tokenizer factory table.

Nothing is registered on import. The embedding application builds a
registry and fills it at startup::

    registry = register_builtin_tokenizers(TokenizerRegistry())
    tokenizer = registry.create("unicode")
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .models import Tokenizer
from .tokenizer import UnicodeTokenizer, unicode_tokenizer_constructor

logger = logging.getLogger(__name__)

TokenizerConstructor = Callable[[Mapping[str, Any]], Tokenizer]


class TokenizerRegistry:
    """Map tokenizer names to constructors."""

    def __init__(self):
        self._constructors: Dict[str, TokenizerConstructor] = {}

    def register(
        self, name: str, constructor: TokenizerConstructor, replace: bool = False
    ) -> None:
        """Register a constructor under a name.

        Args:
            name: Identifier used by configuration
            constructor: Callable taking a config mapping, returning a tokenizer
            replace: Overwrite an existing registration instead of failing

        Raises:
            ValueError: If the name is taken and replace is False
        """
        if name in self._constructors and not replace:
            raise ValueError(f"Tokenizer already registered: {name!r}")
        self._constructors[name] = constructor
        logger.debug("Registered tokenizer %r", name)

    def create(self, name: str, config: Optional[Mapping[str, Any]] = None) -> Tokenizer:
        """Instantiate a registered tokenizer.

        Raises:
            KeyError: If no tokenizer is registered under the name
        """
        try:
            constructor = self._constructors[name]
        except KeyError:
            available = ", ".join(self.names()) or "none"
            raise KeyError(f"Unknown tokenizer {name!r} (available: {available})") from None
        return constructor(config or {})

    def names(self) -> List[str]:
        return sorted(self._constructors)

    def __contains__(self, name: object) -> bool:
        return name in self._constructors


def register_builtin_tokenizers(registry: TokenizerRegistry) -> TokenizerRegistry:
    """Register the tokenizers shipped with this package."""
    registry.register(UnicodeTokenizer.name, unicode_tokenizer_constructor)
    return registry
