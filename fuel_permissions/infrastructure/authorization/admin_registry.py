"""System administrator registry.

System administrators bypass every tuple-based check. The set is seeded at
startup from configuration and afterwards only replaced as a whole; there is
no add/remove of single entries.

The current set is held as a frozenset and swapped by one reference
assignment, so a concurrent reader sees either the old set or the new set,
never an empty or half-built one.
"""

from collections.abc import Iterable


def parse_admins_csv(admins_csv: str) -> frozenset[str]:
    """Parse a comma-separated list of subject ids.

    Surrounding whitespace is trimmed and empty entries are dropped, so
    "user3, user2,    " yields {"user3", "user2"}.

    Args:
        admins_csv: Comma-separated subject ids.

    Returns:
        frozenset[str]: Parsed subject ids.
    """
    return frozenset(
        entry.strip() for entry in admins_csv.split(",") if entry.strip()
    )


class AdminRegistry:
    """Holds the current system administrator set.

    Writers are expected to be serialized by the caller (the permissions
    engine's write lock). Readers need no lock.
    """

    def __init__(self, admins: Iterable[str] = ()) -> None:
        """Initialize registry.

        Args:
            admins: Initial subject ids.
        """
        self._admins: frozenset[str] = frozenset(admins)

    @property
    def members(self) -> frozenset[str]:
        """Current administrator set."""
        return self._admins

    def contains(self, subject: str) -> bool:
        """Check whether subject is a system administrator."""
        return subject in self._admins

    def replace(self, admins_csv: str) -> frozenset[str]:
        """Replace the whole set with the parse of admins_csv.

        Args:
            admins_csv: Comma-separated subject ids.

        Returns:
            frozenset[str]: The newly installed set.
        """
        admins = parse_admins_csv(admins_csv)
        self._admins = admins
        return admins
