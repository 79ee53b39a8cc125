"""
Business card parsers.

A parser takes the OCR text of one business card and extracts the contact
information: the person's name, their phone number and their email address.

The default parser finds the name with spaCy named-entity recognition, the
phone number with libphonenumber and the email address with an RFC 5322
pattern.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Optional

import phonenumbers

from .contact import ContactInfo
from .phone import DEFAULT_REGION, PhoneMatcher
from .tagger import DEFAULT_MODEL, load_tagger

logger = logging.getLogger(__name__)

PERSON = "PERSON"

# RFC 5322 compliant address grammar.
EMAIL_REGEX = (
    r"(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r'|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")'
    r"@(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
    r"|\[(?:(?:(2(5[0-5]|[0-4][0-9])|1[0-9][0-9]|[1-9]?[0-9]))\.){3}"
    r"(?:(2(5[0-5]|[0-4][0-9])|1[0-9][0-9]|[1-9]?[0-9])|[a-z0-9-]*[a-z0-9]:"
    r"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21-\x5a\x53-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])+)\])"
)


class BusinessCardParser(ABC):
    """Contract for turning business card text into a ContactInfo."""

    @abstractmethod
    def get_contact_info(self, document: str) -> ContactInfo:
        """Extract the name, phone number and email address from a card.

        Args:
            document: Text of one business card

        Returns:
            ContactInfo with None for every field that was not found
        """


class DefaultBusinessCardParser(BusinessCardParser):
    """Parser combining NER for names, libphonenumber and a regex.

    Name extraction assumes the card text holds one sentence per line. The
    tokens tagged PERSON in the first line that has any are taken as the
    name and later lines are not looked at.
    """

    def __init__(self, tagger=None, phone_matcher: Optional[PhoneMatcher] = None,
                 spacy_model: str = DEFAULT_MODEL):
        """
        Args:
            tagger: Object with ``tag(text)`` returning tagged sentences.
                A spaCy tagger for ``spacy_model`` is loaded when omitted.
            phone_matcher: Object with ``find_first(text, region)``
            spacy_model: spaCy model package used when no tagger is given
        """
        self.tagger = tagger if tagger is not None else load_tagger(spacy_model)
        self.phone_matcher = phone_matcher or PhoneMatcher()
        self.email_pattern = re.compile(EMAIL_REGEX, re.IGNORECASE | re.ASCII)

    def get_contact_info(self, document: str) -> ContactInfo:
        return ContactInfo(
            name=self.extract_name(document),
            phone_number=self.extract_phone(document),
            email_address=self.extract_email(document),
        )

    # ======================================================
    # NAME
    # ======================================================

    def extract_name(self, document: str) -> Optional[str]:
        """Extract the person's name.

        PERSON tokens of the same sentence are joined with single spaces,
        even when other tokens sit between them.

        Returns:
            The name from the first sentence containing a PERSON token,
            or None if no sentence has one
        """
        for sentence in self.tagger.tag(document):
            candidate = " ".join(token.text for token in sentence if token.ner == PERSON)
            if candidate:
                return candidate

        logger.warning(f"Unable to parse name from text:\n{document}")
        return None

    # ======================================================
    # PHONE
    # ======================================================

    def extract_phone(self, document: str) -> Optional[str]:
        """Extract the phone number as a string of digits.

        An international number (explicit country code) is looked for
        first, then a national number for ``DEFAULT_REGION``. A local
        number from any other region is not recognised.

        Returns:
            ASCII digits of the number, including the country code if it was
            written on the card, or None
        """
        raw = self.phone_matcher.find_first(document, None)
        if raw is None:
            raw = self.phone_matcher.find_first(document, DEFAULT_REGION)

        if raw is None:
            logger.warning(f"Unable to parse phone number from text:\n{document}")
            return None

        return phonenumbers.normalize_digits_only(raw) or None

    # ======================================================
    # EMAIL
    # ======================================================

    def extract_email(self, document: str) -> Optional[str]:
        """Extract the first email address, as written on the card."""
        match = self.email_pattern.search(document)
        if match:
            return match.group(0)

        logger.warning(f"Unable to parse email address from text:\n{document}")
        return None
