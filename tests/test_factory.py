"""
Tests for the parser registry.
"""

import logging
from unittest.mock import Mock

import pytest

from cardparser import (
    BusinessCardParser,
    ConfigurationError,
    ContactInfo,
    DefaultBusinessCardParser,
    available_parsers,
    create_parser,
    register_parser,
)
from cardparser import factory


class EchoParser(BusinessCardParser):
    def __init__(self, **kwargs):
        self.kwargs = kwargs

    def get_contact_info(self, document):
        return ContactInfo(name=document)


class TestParserRegistry:
    """Test cases for parser registration and creation."""

    @pytest.fixture(autouse=True)
    def isolated_registry(self, monkeypatch):
        monkeypatch.setattr(factory, "_registry", dict(factory._registry))

    def test_default_is_registered(self):
        """Test the default parser is registered."""
        assert "default" in available_parsers()

    def test_create_default(self):
        """Test creating the default parser."""
        tagger = Mock()

        parser = create_parser(tagger=tagger)

        assert isinstance(parser, DefaultBusinessCardParser)
        assert parser.tagger is tagger

    def test_empty_identifier_means_default(self):
        """Test an empty identifier selects the default."""
        assert isinstance(create_parser("", tagger=Mock()), DefaultBusinessCardParser)

    def test_create_registered(self):
        """Test creating a registered parser."""
        register_parser("echo")(EchoParser)

        parser = create_parser("echo", spacy_model="en_core_web_sm")

        assert isinstance(parser, EchoParser)
        assert parser.kwargs == {"spacy_model": "en_core_web_sm"}
        assert "echo" in available_parsers()

    def test_register_duplicate(self):
        """Test registering a name twice."""
        register_parser("echo")(EchoParser)

        with pytest.raises(ValueError):
            register_parser("echo")(EchoParser)

    def test_unknown_falls_back_to_default(self, caplog):
        """Test an unknown identifier falls back to the default."""
        with caplog.at_level(logging.ERROR, logger="cardparser.factory"):
            parser = create_parser("com.example.MissingParser", tagger=Mock())

        assert isinstance(parser, DefaultBusinessCardParser)
        assert "com.example.MissingParser" in caplog.text

    def test_failing_factory_falls_back_to_default(self, caplog):
        """Test a failing factory falls back to the default."""
        @register_parser("broken")
        def broken(**kwargs):
            raise ConfigurationError("model missing")

        with caplog.at_level(logging.ERROR, logger="cardparser.factory"):
            parser = create_parser("broken", tagger=Mock())

        assert isinstance(parser, DefaultBusinessCardParser)
        assert "model missing" in caplog.text

    def test_default_failure_propagates(self, monkeypatch):
        """Test a failing default parser raises."""
        def broken(**kwargs):
            raise ConfigurationError("model missing")

        monkeypatch.setitem(factory._registry, "default", broken)

        with pytest.raises(ConfigurationError):
            create_parser("default")
