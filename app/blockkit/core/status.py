"""Build status enumeration.

Status codes for build results, used to tell a constructed entity apart
from a failed build carrying a validation report.
"""

from enum import Enum


class BuildStatus(Enum):
    """Status codes for build results.

    Attributes:
        SUCCESS: Every field and across-field check passed
        INVALID: At least one validation error was recorded
    """

    SUCCESS = "success"
    INVALID = "invalid"
