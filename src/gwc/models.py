"""Domain models."""

from dataclasses import dataclass
from enum import Enum, auto

# alias name -> raw definition, as recorded in the Git config file
AliasSet = dict[str, str]


@dataclass(frozen=True)
class AliasEntry:
    """A named Git identity shortcut.

    Only ``name`` and the generated ``definition`` are ever written to disk;
    the identity fields cannot be recovered from an existing config file.
    """

    name: str
    user_name: str
    user_email: str

    @property
    def definition(self) -> str:
        return f"!git -c user.name='{self.user_name}' -c user.email='{self.user_email}'"


class SessionStep(Enum):
    LOAD_ALIASES = auto()
    CHOOSE_ALIAS = auto()
    CREATE_ALIAS = auto()
    PROMPT_MESSAGE = auto()
    EMIT_COMMAND = auto()
    DONE = auto()
    CANCELLED = auto()
    FAILED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStep.DONE, SessionStep.CANCELLED, SessionStep.FAILED)


@dataclass
class SessionState:
    """Transient state of one work-commit session. Never persisted."""

    step: SessionStep = SessionStep.LOAD_ALIASES
    selected_alias: str | None = None
    commit_message: str | None = None


@dataclass(frozen=True)
class SessionOutcome:
    """What a finished session did.

    ``command`` is set only when a command was handed to the runner;
    ``error`` carries the user-facing failure text for FAILED sessions.
    """

    step: SessionStep
    selected_alias: str | None = None
    commit_message: str | None = None
    command: str | None = None
    error: str | None = None


class IndicatorStyle(Enum):
    DEFAULT = "default"
    WARNING = "warning"


@dataclass(frozen=True)
class Indicator:
    text: str
    style: IndicatorStyle


@dataclass(frozen=True)
class ChoiceItem:
    """One selectable row in a choice prompt."""

    label: str
    description: str | None = None
    # Set only on the synthetic "create new alias" item.
    creates_alias: bool = False
