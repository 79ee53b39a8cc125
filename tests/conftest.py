"""
Shared fixtures.

``StubTagger`` stands in for the spaCy tagger: it splits each line on
whitespace and tags the words it was given as PERSON.
"""

import pytest

from cardparser import DefaultBusinessCardParser, PhoneMatcher, TaggedToken


class StubTagger:
    def __init__(self, person_words=()):
        self.person_words = set(person_words)
        self.calls = []

    def tag(self, text):
        self.calls.append(text)
        return [
            [TaggedToken(word, "PERSON" if word in self.person_words else "O") for word in line.split()]
            for line in text.splitlines()
            if line.strip()
        ]


@pytest.fixture
def stub_tagger():
    return StubTagger({"Mike", "Smith", "Lisa", "Haung", "Arthur", "Wilson", "Jane", "Doe"})


@pytest.fixture
def parser(stub_tagger):
    """Default parser with the stub tagger and the real phone matcher."""
    return DefaultBusinessCardParser(tagger=stub_tagger, phone_matcher=PhoneMatcher())
