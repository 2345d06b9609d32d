"""Notice-related enumerations."""

from enum import Enum


class NoticeType(str, Enum):
    """Visual severity of a notice; rendered as the ``notice-<type>`` class."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


class DismissScope(str, Enum):
    """Which store backs a notice's dismissed flag.

    The values are the ``meta`` field of the dismiss wire contract.
    """

    USER = "user"
    TRANSIENT = "transient"

    @classmethod
    def parse(cls, value: "DismissScope | str") -> "DismissScope":
        """Resolve wire values and their descriptive aliases.

        Raises:
            ValueError: If the value names no known scope.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        return cls(SCOPE_ALIASES.get(normalized, normalized))


SCOPE_ALIASES = {
    "per-user": DismissScope.USER.value,
    "per_user": DismissScope.USER.value,
    "shared-with-expiry": DismissScope.TRANSIENT.value,
    "shared": DismissScope.TRANSIENT.value,
}


class DismissOutcome(str, Enum):
    """Successful results of a dismiss call."""

    ACCEPTED = "ACCEPTED"
    ACCEPTED_NOOP = "ACCEPTED_NOOP"
