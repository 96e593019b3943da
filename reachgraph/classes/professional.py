"""
Professional representation for connection-network queries.
"""

from typing import List, Optional


class Professional:
    """
    A person in a professional network.

    Connections may be mutual or directed; this is decided by whoever builds
    the network. Equality is by identity.

    Attributes:
        company: Name of the company the person works for
        connections: Other professionals this person links to
    """

    def __init__(self, company: str, connections: Optional[List["Professional"]] = None):
        self.company = company
        self.connections: List[Professional] = list(connections) if connections is not None else []

    def connect(self, other: "Professional", mutual: bool = True) -> None:
        """
        Link this professional to ``other``.

        Args:
            other: Professional to link to
            mutual: Also link ``other`` back to this professional
        """
        self.connections.append(other)
        if mutual:
            other.connections.append(self)

    def __repr__(self) -> str:
        return f"Professional(company={self.company!r}, connections={len(self.connections)})"
