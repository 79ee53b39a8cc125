"""
Phone number matching backed by Google's libphonenumber port.
"""

import logging
from typing import Optional

import phonenumbers

logger = logging.getLogger(__name__)

# Region used to read numbers written in national format without a
# country code.
DEFAULT_REGION = "US"


class PhoneMatcher:
    """Finds phone numbers in free text."""

    def __init__(self, leniency=phonenumbers.Leniency.VALID):
        self.leniency = leniency

    def find_first(self, text: str, region: Optional[str] = None) -> Optional[str]:
        """Return the raw text of the first phone number found.

        Args:
            text: Text to search
            region: Region code used for numbers without a country code.
                With None only numbers carrying an explicit ``+`` country
                code are recognised.

        Returns:
            The matched span as written, including punctuation, or None
        """
        logger.debug(f"Searching for phone number with region {region}")
        matcher = phonenumbers.PhoneNumberMatcher(text, region, leniency=self.leniency)
        for match in matcher:
            return match.raw_string
        return None
