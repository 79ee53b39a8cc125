"""
Business card contact parser.

Extracts a person's name, phone number and email address from the OCR
text of a business card.
"""

from .contact import ContactInfo, NOT_FOUND
from .exceptions import CardParserError, ConfigurationError, DocumentLoadError
from .factory import available_parsers, create_parser, register_parser
from .parser import BusinessCardParser, DefaultBusinessCardParser
from .phone import DEFAULT_REGION, PhoneMatcher
from .tagger import SpacyTagger, TaggedToken, load_tagger

__version__ = "1.0.0"

__all__ = [
    "ContactInfo",
    "NOT_FOUND",
    "CardParserError",
    "ConfigurationError",
    "DocumentLoadError",
    "available_parsers",
    "create_parser",
    "register_parser",
    "BusinessCardParser",
    "DefaultBusinessCardParser",
    "DEFAULT_REGION",
    "PhoneMatcher",
    "SpacyTagger",
    "TaggedToken",
    "load_tagger",
]
