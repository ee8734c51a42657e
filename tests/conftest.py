"""Shared fixtures: isolated config paths and a scripted prompter."""

from pathlib import Path

import pytest

from gwc.models import ChoiceItem


class FakePrompter:
    """Scripted stand-in for the host UI.

    ``choices`` holds the label to pick at each choice prompt and
    ``answers`` the text for each text prompt; ``None`` in either list
    cancels that prompt.  Answers rejected by a prompt's validator are
    recorded and the next answer is tried, as a real prompt would re-ask.
    """

    def __init__(
        self,
        choices: list[str | None] | None = None,
        answers: list[str | None] | None = None,
    ) -> None:
        self.choices = list(choices or [])
        self.answers = list(answers or [])
        self.offered: list[list[ChoiceItem]] = []
        self.prompts: list[tuple[str, str | None]] = []
        self.validation_errors: list[str] = []
        self.infos: list[str] = []
        self.errors: list[str] = []

    async def prompt_choice(self, items: list[ChoiceItem]) -> ChoiceItem | None:
        self.offered.append(items)
        label = self.choices.pop(0)
        if label is None:
            return None
        return next(item for item in items if item.label == label)

    async def prompt_text(self, prompt, default=None, validate=None) -> str | None:
        self.prompts.append((prompt, default))
        while True:
            answer = self.answers.pop(0)
            if answer is None or validate is None:
                return answer
            error = validate(answer)
            if error is None:
                return answer
            self.validation_errors.append(error)

    def notify_info(self, text: str) -> None:
        self.infos.append(text)

    def notify_error(self, text: str) -> None:
        self.errors.append(text)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Keep settings and theme files out of the real home directory."""
    config_dir = tmp_path / "gwc-config"
    monkeypatch.setattr("gwc.config.CONFIG_PATH", config_dir / "config.json")
    monkeypatch.setattr("gwc.config._README_PATH", config_dir / "README.md")
    monkeypatch.setattr("gwc.config.THEME_CONFIG_PATH", config_dir / "theme.json")
    return config_dir


@pytest.fixture
def gitconfig(tmp_path: Path) -> Path:
    """Path to a not-yet-existing git config file."""
    return tmp_path / "home" / ".gitconfig"


@pytest.fixture
def make_prompter():
    return FakePrompter
