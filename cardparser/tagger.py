"""
Tokenizer/tagger adapter backed by spaCy.

Turns business card text into tagged sentences: an ordered list of
sentences, each an ordered list of ``TaggedToken``. Business card OCR text
is expected to hold one sentence per line, so the end of a line is the
only sentence boundary.
"""

import logging
import threading
from typing import Iterable, List, NamedTuple

import spacy

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "en_core_web_sm"

# Entity category of tokens outside any named entity.
OUTSIDE = "O"


class TaggedToken(NamedTuple):
    text: str
    ner: str


TaggedSentence = List[TaggedToken]


class SpacyTagger:
    """Named-entity tagger wrapping a loaded spaCy pipeline.

    A spaCy ``Language`` object is expensive to build, so one tagger is
    meant to be created at startup and shared. Calls into the pipeline are
    serialised with a lock, which makes a shared instance safe to use from
    several request threads.
    """

    def __init__(self, nlp):
        """
        Args:
            nlp: Loaded spaCy pipeline with an ``ner`` component
        """
        self.nlp = nlp
        self._lock = threading.Lock()

    @property
    def model_name(self) -> str:
        meta = getattr(self.nlp, "meta", None) or {}
        return f"{meta.get('lang', '?')}_{meta.get('name', '?')}"

    def tag(self, text: str) -> List[TaggedSentence]:
        """Tokenize and tag the text.

        Args:
            text: Raw business card text, one sentence per line

        Returns:
            One list of tagged tokens per non-blank line, in document order
        """
        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if not lines:
            return []

        with self._lock:
            docs = list(self.nlp.pipe(lines))

        sentences = [self._tag_doc(doc) for doc in docs]
        logger.debug(f"Tagged {len(sentences)} sentences")
        return sentences

    @staticmethod
    def _tag_doc(doc: Iterable) -> TaggedSentence:
        return [TaggedToken(token.text, token.ent_type_ or OUTSIDE) for token in doc]


def load_tagger(model_name: str = DEFAULT_MODEL) -> SpacyTagger:
    """Load a spaCy model and wrap it in a tagger.

    Raises:
        ConfigurationError: If the model package is not installed
    """
    try:
        nlp = spacy.load(model_name)
    except OSError as e:
        raise ConfigurationError(
            f"spaCy model '{model_name}' is not available. "
            f"Install it with: python -m spacy download {model_name}"
        ) from e

    logger.info(f"Loaded spaCy model: {model_name}")
    return SpacyTagger(nlp)
