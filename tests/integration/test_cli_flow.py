import pytest
from typer.testing import CliRunner
from unittest.mock import MagicMock
from pathlib import Path

# Import the app instance from main
from langcore import main
from langcore.main import app
from langcore.infrastructure.cli.display import ConsoleDisplay
from langcore.infrastructure.config.settings import set_config_for_testing

# These fixtures are defined in tests/conftest.py:
# runner: CliRunner
# language_dir: Path (temporary language directory with an en_US locale)


@pytest.fixture(autouse=True)
def fresh_dependencies(mocker):
    """Rebuilds the dependency graph for every invocation and keeps logging untouched."""
    mocker.patch("langcore.main.setup_logging")
    main.reset_dependencies()
    yield
    main.reset_dependencies()


@pytest.fixture
def mock_console_display(mocker):
    """Patches ConsoleDisplay in main with a spec'd mock."""
    display = MagicMock(spec=ConsoleDisplay)
    mocker.patch("langcore.main.ConsoleDisplay", return_value=display)
    return display


def test_message_command_flow(runner: CliRunner, language_dir: Path, mock_console_display: MagicMock):
    """Test the full flow for the 'message' command with the real YAML store."""
    result = runner.invoke(app, [
        "--language-dir", str(language_dir),
        "message", "welcome",
        "-p", "player=Steve",
        "-p", "coins=12",
    ])

    assert result.exit_code == 0, f"CLI command failed: {result.stdout}"
    mock_console_display.send_message.assert_called_once_with("§8[§bTest§8] §r§aWelcome, Steve!")
    mock_console_display.send_title.assert_called_once_with("§6Hello Steve", "§7Enjoy your stay")
    mock_console_display.send_action_bar.assert_called_once_with("§eYou have 12 coins")
    mock_console_display.play_sound.assert_called_once_with("ENTITY_PLAYER_LEVELUP")
    mock_console_display.display_error.assert_not_called()


def test_message_command_missing_key(runner: CliRunner, language_dir: Path, mock_console_display: MagicMock):
    result = runner.invoke(app, ["-d", str(language_dir), "message", "does.not.exist"])

    assert result.exit_code == 0
    mock_console_display.send_message.assert_called_once_with("§cMissing message key: does.not.exist")


def test_lore_command_expands_lines(runner: CliRunner, language_dir: Path, mock_console_display: MagicMock):
    result = runner.invoke(app, [
        "-d", str(language_dir),
        "lore", "custom.wand_lore",
        "-p", "power=9",
        "-p", "effects=Fire\\nIce",
    ])

    assert result.exit_code == 0
    mock_console_display.send_lines.assert_called_once_with(["§5Power: 9", "§5Fire", "§5Ice"])


def test_lore_command_invalid_section(runner: CliRunner, language_dir: Path, mock_console_display: MagicMock):
    result = runner.invoke(app, ["-d", str(language_dir), "lore", "menu.info_lore", "-s", "nowhere"])

    assert result.exit_code == 0
    mock_console_display.display_error.assert_called_once_with(
        "Invalid section 'nowhere'. Choose 'gui' or 'items'."
    )


def test_bad_placeholder_is_rejected(runner: CliRunner, language_dir: Path, mock_console_display: MagicMock):
    result = runner.invoke(app, ["-d", str(language_dir), "render", "hi", "-p", "novalue"])

    assert result.exit_code != 0
    mock_console_display.send_message.assert_not_called()


def test_render_command_prints_plain_text(runner: CliRunner, language_dir: Path):
    """Uses the real rich display; color codes are turned into styles."""
    set_config_for_testing({"language_dir": str(language_dir)})

    result = runner.invoke(app, ["render", "&aHello {name}", "-p", "name=Bob"])

    assert result.exit_code == 0, f"CLI command failed: {result.stdout}"
    assert "Hello Bob" in result.stdout
    assert "&a" not in result.stdout
    assert "§" not in result.stdout


def test_render_plain_keeps_codes(runner: CliRunner, language_dir: Path):
    set_config_for_testing({"language_dir": str(language_dir)})

    result = runner.invoke(app, ["render", "&aHello {name}", "-p", "name=Bob", "--plain"])

    assert result.exit_code == 0
    assert "&aHello Bob" in result.stdout


def test_stats_command_lists_categories(runner: CliRunner, language_dir: Path):
    set_config_for_testing({"language_dir": str(language_dir)})

    result = runner.invoke(app, ["stats"])

    assert result.exit_code == 0
    assert "rendered-string" in result.stdout
    assert "small-caps" in result.stdout
    assert "hit ratio" in result.stdout


def test_reload_and_clear_cache_commands(runner: CliRunner, language_dir: Path, mock_console_display: MagicMock):
    result = runner.invoke(app, ["-d", str(language_dir), "reload"])
    assert result.exit_code == 0
    mock_console_display.display_info.assert_called_with("Reloaded language files for 'en_US'.")

    main.reset_dependencies()
    result = runner.invoke(app, ["-d", str(language_dir), "clear-cache"])
    assert result.exit_code == 0
    mock_console_display.display_info.assert_called_with("All language caches cleared.")


def test_initialization_failure_exits(runner: CliRunner, tmp_path: Path, mock_console_display: MagicMock, mocker):
    mocker.patch("langcore.main.LanguageSystem.builder", side_effect=RuntimeError("broken"))

    result = runner.invoke(app, ["-d", str(tmp_path), "stats"])

    assert result.exit_code == 1
    mock_console_display.display_error.assert_called_once_with("Application Initialization Failed: broken")
