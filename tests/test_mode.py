"""Tests for ModeController: session handle lifecycle and indicator refresh."""

from pathlib import Path

import pytest

from gwc.constants import CREATE_ALIAS_LABEL
from gwc.git.aliases import AliasStore
from gwc.mode import ModeController
from gwc.models import Indicator, IndicatorStyle, SessionStep
from gwc.runners import CommandDispatchError, DryRunRunner


class ExplodingRunner:
    def run(self, command: str) -> None:
        raise CommandDispatchError("boom")


def _controller(gitconfig: Path, runner=None) -> tuple[ModeController, list[Indicator]]:
    seen: list[Indicator] = []
    controller = ModeController(
        AliasStore(gitconfig),
        runner or DryRunRunner(),
        "Work in progress",
        on_change=seen.append,
    )
    return controller, seen


class TestToggle:
    def test_off_by_default(self, gitconfig: Path):
        controller, _ = _controller(gitconfig)
        assert controller.is_active is False

    def test_toggle_starts_session(self, gitconfig: Path, make_prompter):
        """
        Given the mode is off
        When toggle is called
        Then a session is returned, the mode is on and the indicator says Stop
        """
        controller, seen = _controller(gitconfig)

        session = controller.toggle(make_prompter())

        assert session is not None
        assert controller.is_active is True
        assert seen[-1].text == "Stop Work Commit"
        assert seen[-1].style is IndicatorStyle.WARNING

    def test_toggle_while_active_aborts(self, gitconfig: Path, make_prompter):
        controller, _ = _controller(gitconfig)
        session = controller.toggle(make_prompter())

        assert controller.toggle(make_prompter()) is None
        assert session is not None and session.aborted is True

    def test_start_twice_raises(self, gitconfig: Path, make_prompter):
        controller, _ = _controller(gitconfig)
        controller.start(make_prompter())
        with pytest.raises(RuntimeError):
            controller.start(make_prompter())


class TestRunSessionResetsMode:
    @pytest.mark.parametrize(
        ("choices", "answers"),
        [
            ([None], []),
            ([CREATE_ALIAS_LABEL], [None]),
            ([CREATE_ALIAS_LABEL], ["proj1", None]),
            ([CREATE_ALIAS_LABEL], ["proj1", "Alice", None]),
            ([CREATE_ALIAS_LABEL], ["proj1", "Alice", "a@x.com", None]),
        ],
        ids=["choice", "alias-name", "user-name", "user-email", "message"],
    )
    async def test_cancel_at_any_step_turns_mode_off(
        self, gitconfig: Path, make_prompter, choices, answers
    ):
        """
        Given a session cancelled at one of its prompts
        When run_session returns
        Then the mode is off and the indicator was refreshed
        """
        controller, seen = _controller(gitconfig)
        session = controller.toggle(make_prompter(choices=choices, answers=answers))

        outcome = await controller.run_session(session)

        assert outcome.step is SessionStep.CANCELLED
        assert controller.is_active is False
        assert seen[-1].text.startswith("Start Work Commit")

    async def test_failure_turns_mode_off(self, gitconfig: Path, make_prompter):
        controller, _ = _controller(gitconfig, runner=ExplodingRunner())
        prompter = make_prompter(
            choices=[CREATE_ALIAS_LABEL], answers=["proj1", "Alice", "a@x.com", "wip"]
        )
        session = controller.toggle(prompter)

        outcome = await controller.run_session(session)

        assert outcome.step is SessionStep.FAILED
        assert controller.is_active is False

    async def test_indicator_count_refreshed_after_alias_created(
        self, gitconfig: Path, make_prompter
    ):
        """
        Given no aliases
        When a session creates one and completes
        Then the refreshed indicator counts the new alias
        """
        controller, seen = _controller(gitconfig)
        prompter = make_prompter(
            choices=[CREATE_ALIAS_LABEL], answers=["proj1", "Alice", "a@x.com", "wip"]
        )

        await controller.run_session(controller.toggle(prompter))

        assert seen[-1].text == "Start Work Commit (1 aliases)"

    async def test_unexpected_error_still_turns_mode_off(self, gitconfig: Path, make_prompter):
        controller, _ = _controller(gitconfig)
        prompter = make_prompter(choices=[])  # prompt_choice will pop from an empty list
        session = controller.toggle(prompter)

        with pytest.raises(IndexError):
            await controller.run_session(session)

        assert controller.is_active is False


class TestIndicator:
    def test_counts_aliases_when_off(self, gitconfig: Path):
        gitconfig.parent.mkdir(parents=True)
        gitconfig.write_text("[alias]\n    a = 1\n    b = 2\n")
        controller, _ = _controller(gitconfig)
        assert controller.indicator().text == "Start Work Commit (2 aliases)"
