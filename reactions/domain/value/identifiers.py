"""Strongly typed identifiers for reaction entities.

Items are addressed by the host platform's positive integer id. Voters are
opaque strings handed in by the identity collaborator.
"""

from typing import NewType

ItemId = NewType("ItemId", int)
VoterId = NewType("VoterId", str)
