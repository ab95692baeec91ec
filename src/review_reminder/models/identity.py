"""
Identity Map

Association between repository usernames and chat provider identities,
parsed from a "name1:ID1,name2:ID2" configuration string.
"""

import logging
from typing import Dict, Iterator, Mapping, Optional


logger = logging.getLogger(__name__)


class IdentityMap(Mapping[str, Optional[str]]):
    """
    Read-only mapping from GitHub username to chat provider ID.

    A lookup miss through ``get`` or ``provider_id`` returns None.
    Keys parsed from a segment without ':' map to None as well.
    """

    def __init__(self, entries: Optional[Mapping[str, Optional[str]]] = None):
        self._entries: Dict[str, Optional[str]] = dict(entries or {})

    @classmethod
    def parse(cls, raw: Optional[str]) -> "IdentityMap":
        """
        Parse "name1:ID1,name2:ID2" into an IdentityMap.

        Each comma-separated segment is split on its first ':'. A segment
        without ':' yields a None ID. The last occurrence of a duplicate
        name wins. Never raises.

        Args:
            raw: Raw mapping string, may be empty or None

        Returns:
            Parsed IdentityMap
        """
        entries: Dict[str, Optional[str]] = {}
        if not raw:
            return cls(entries)

        for segment in raw.split(","):
            name, sep, provider_id = segment.partition(":")
            if not sep:
                logger.warning(f"Identity map entry without ID: {segment!r}")
                entries[name] = None
            else:
                entries[name] = provider_id

        return cls(entries)

    def provider_id(self, login: str) -> Optional[str]:
        """Return the chat ID for a login, or None when it is unmapped or empty."""
        return self._entries.get(login) or None

    def __getitem__(self, key: str) -> Optional[str]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"IdentityMap({self._entries!r})"
