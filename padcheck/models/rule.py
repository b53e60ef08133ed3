"""Rule configuration data models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .diagnostic import Severity


class Policy(str, Enum):
    """Whether block interiors must or must not be padded by blank lines."""

    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def from_option(cls, option: Optional[str]) -> "Policy":
        """
        Select the policy for a configured option value.

        Only the literal ``"never"`` forbids padding; a missing option or any
        other value requires it.
        """
        if option == cls.NEVER.value:
            return cls.NEVER
        return cls.ALWAYS


class RuleSettings(BaseModel):
    """Configured severity and option of one rule."""

    severity: Severity = Severity.ERROR
    option: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return self.severity is not Severity.OFF
