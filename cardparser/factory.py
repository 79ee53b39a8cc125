"""
Registry of business card parser implementations.

Parsers register a factory under a string identifier. The identifier to
use is normally read from configuration once at startup and handed to
``create_parser``.
"""

import logging
from typing import Callable, Dict, List, Optional

from .exceptions import ConfigurationError
from .parser import BusinessCardParser, DefaultBusinessCardParser

logger = logging.getLogger(__name__)

DEFAULT_PARSER = "default"

ParserFactory = Callable[..., BusinessCardParser]

_registry: Dict[str, ParserFactory] = {}


def register_parser(name: str) -> Callable[[ParserFactory], ParserFactory]:
    """Decorator registering a parser class or factory function under ``name``."""
    def decorator(factory: ParserFactory) -> ParserFactory:
        if name in _registry:
            raise ValueError(f"Parser already registered: {name}")
        _registry[name] = factory
        return factory
    return decorator


def available_parsers() -> List[str]:
    return sorted(_registry)


def _resolve(name: str) -> ParserFactory:
    try:
        return _registry[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown parser type '{name}'. Available: {', '.join(available_parsers())}"
        ) from None


def create_parser(parser_type: Optional[str] = None, **kwargs) -> BusinessCardParser:
    """Instantiate the parser registered under ``parser_type``.

    Falls back to the default parser when the identifier is unknown or its
    factory fails with a ConfigurationError.

    Args:
        parser_type: Registry identifier, None or empty for the default
        **kwargs: Passed through to the parser factory

    Returns:
        BusinessCardParser instance

    Raises:
        ConfigurationError: If the default parser itself cannot be built
    """
    name = parser_type or DEFAULT_PARSER

    if name != DEFAULT_PARSER:
        try:
            parser = _resolve(name)(**kwargs)
            logger.info(f"Created business card parser: {name}")
            return parser
        except ConfigurationError as e:
            logger.error(f"Error instantiating business card parser '{name}': {e}")
            logger.error(f"Falling back to '{DEFAULT_PARSER}' parser")

    parser = _resolve(DEFAULT_PARSER)(**kwargs)
    logger.info(f"Created business card parser: {DEFAULT_PARSER}")
    return parser


register_parser(DEFAULT_PARSER)(DefaultBusinessCardParser)
