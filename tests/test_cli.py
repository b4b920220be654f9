"""Tests for command line parsing and interactive command handling."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from ciphertrack.adapters.config import AppConfig
from ciphertrack.adapters.console import ConsoleDisplayAdapter
from ciphertrack.adapters.preferences import JsonPreferencesStore
from ciphertrack.application.services import PositionScale
from ciphertrack.domain.models import DisplayPreferences
from ciphertrack.main import HELP_TEXT, apply_preference_flags, handle_command, main, parse_args


@pytest.fixture
def controller() -> MagicMock:
    """Controller double recording every call."""
    mock = MagicMock()
    mock.submit_search = AsyncMock()
    mock.manual_refresh = AsyncMock(return_value=True)
    mock.navigate_back = AsyncMock()
    mock.set_scale = AsyncMock()
    return mock


@pytest.fixture
def store(tmp_path: Path) -> JsonPreferencesStore:
    """Preferences store in a temporary directory."""
    return JsonPreferencesStore(tmp_path / "prefs.json")


class TestParseArgs:
    """Tests for parse_args."""

    def test_when_no_arguments_then_interactive_defaults(self) -> None:
        """Given no arguments, when parsing, then no train and no overrides."""
        args = parse_args([])

        assert args.train_number is None
        assert args.once is False
        assert args.dark_mode is None
        assert args.compact_layout is None

    def test_when_flags_given_then_parsed(self) -> None:
        """Given a train and flags, when parsing, then all are captured."""
        args = parse_args(["12345", "--once", "--dark", "--compact", "--config", "c.toml"])

        assert args.train_number == "12345"
        assert args.once is True
        assert args.dark_mode is True
        assert args.compact_layout is True
        assert args.config_file == "c.toml"

    def test_when_conflicting_theme_flags_then_exit(self) -> None:
        """Given --dark and --light, when parsing, then argparse exits."""
        with pytest.raises(SystemExit):
            parse_args(["--dark", "--light"])


class TestApplyPreferenceFlags:
    """Tests for apply_preference_flags."""

    def test_when_no_flags_then_stored_preferences_kept(self) -> None:
        """Given no flags, when applying, then stored preferences are unchanged."""
        stored = DisplayPreferences(dark_mode=True)

        assert apply_preference_flags(stored, parse_args([])) is stored

    def test_when_flags_given_then_they_override_stored(self) -> None:
        """Given --light and --compact, when applying, then flags win."""
        stored = DisplayPreferences(dark_mode=True, compact_layout=False)

        result = apply_preference_flags(stored, parse_args(["--light", "--compact"]))

        assert result == DisplayPreferences(dark_mode=False, compact_layout=True)


class TestHandleCommand:
    """Tests for handle_command."""

    @pytest.mark.asyncio
    async def test_when_quit_then_session_ends(
        self, controller: MagicMock, store: JsonPreferencesStore
    ) -> None:
        """Given q, when handling, then False is returned."""
        assert await handle_command("q\n", controller, ConsoleDisplayAdapter(), store) is False

    @pytest.mark.asyncio
    async def test_when_train_number_then_search_submitted(
        self, controller: MagicMock, store: JsonPreferencesStore
    ) -> None:
        """Given a train number, when handling, then a search is submitted."""
        keep_going = await handle_command("16515\n", controller, ConsoleDisplayAdapter(), store)

        assert keep_going is True
        controller.submit_search.assert_awaited_once_with("16515")

    @pytest.mark.asyncio
    async def test_when_refresh_then_manual_refresh(
        self, controller: MagicMock, store: JsonPreferencesStore
    ) -> None:
        """Given r, when handling, then a manual refresh is requested."""
        await handle_command("r", controller, ConsoleDisplayAdapter(), store)

        controller.manual_refresh.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_when_refresh_not_allowed_then_user_told(
        self,
        controller: MagicMock,
        store: JsonPreferencesStore,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given no refreshable session, when pressing r, then a hint is printed."""
        controller.manual_refresh.return_value = False

        await handle_command("r", controller, ConsoleDisplayAdapter(), store)

        assert "Nothing to refresh" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_when_back_then_navigate_back(
        self, controller: MagicMock, store: JsonPreferencesStore
    ) -> None:
        """Given b, when handling, then the session is left."""
        await handle_command("b", controller, ConsoleDisplayAdapter(), store)

        controller.navigate_back.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_when_dark_toggled_then_saved_and_display_updated(
        self, controller: MagicMock, store: JsonPreferencesStore
    ) -> None:
        """Given d, when handling, then dark mode flips and is persisted."""
        display = ConsoleDisplayAdapter()

        await handle_command("d", controller, display, store)

        assert display.preferences.dark_mode is True
        assert store.load().dark_mode is True

    @pytest.mark.asyncio
    async def test_when_compact_toggled_then_scale_changes(
        self, controller: MagicMock, store: JsonPreferencesStore
    ) -> None:
        """Given c, when handling, then compact layout flips and the compact scale is applied."""
        display = ConsoleDisplayAdapter()

        await handle_command("c", controller, display, store)

        assert display.preferences.compact_layout is True
        assert store.load().compact_layout is True
        controller.set_scale.assert_awaited_once_with(PositionScale.for_layout(compact=True))

    @pytest.mark.asyncio
    async def test_when_unknown_command_then_help_printed(
        self,
        controller: MagicMock,
        store: JsonPreferencesStore,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Given an unknown command, when handling, then the help text is printed."""
        keep_going = await handle_command("??", controller, ConsoleDisplayAdapter(), store)

        assert keep_going is True
        assert HELP_TEXT in capsys.readouterr().out
        controller.submit_search.assert_not_awaited()


@pytest.mark.asyncio
async def test_when_once_without_train_then_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given --once without a train number, when running, then exit code 2."""
    monkeypatch.setattr("ciphertrack.main.AppConfig", AppConfig.for_testing)

    assert await main(["--once"]) == 2


@pytest.mark.asyncio
async def test_when_config_file_missing_then_exit_code_1(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Given a missing --config file, when running, then exit code 1."""
    monkeypatch.setattr("ciphertrack.main.AppConfig", AppConfig.for_testing)

    assert await main(["--config", str(tmp_path / "absent.toml"), "12345"]) == 1
