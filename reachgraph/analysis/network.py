"""
Extended-network queries over professional connections.
"""

import logging
from typing import List, Optional

from ..classes.professional import Professional
from ..classes.utils import iter_reachable

logger = logging.getLogger(__name__)


def _connections(person: Professional) -> List[Professional]:
    return person.connections


def has_extended_connection_at_company(person: Optional[Professional], company_name: str) -> bool:
    """
    Check whether anyone in a professional's extended network works at a company.

    The extended network is everyone reachable through any number of
    connections, and includes ``person``.

    Args:
        person: Professional to start the search from, or None
        company_name: Company to look for (exact match)

    Returns:
        True as soon as a reachable professional works at ``company_name``
    """
    checked = 0
    for professional in iter_reachable(person, _connections):
        checked += 1
        if professional.company == company_name:
            logger.debug(f"Found connection at {company_name!r} after checking {checked} professionals")
            return True

    return False
