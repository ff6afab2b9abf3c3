import pytest
from unittest.mock import MagicMock

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from langcore.domain.models.common import RenderedText
from langcore.infrastructure.cli.display import ConsoleDisplay, section_codes_to_text


@pytest.fixture
def mock_console():
    """Fixture to create a mock rich Console object."""
    return MagicMock()


@pytest.fixture
def console_display(mock_console: MagicMock):
    """Fixture to create a ConsoleDisplay instance with a mocked console."""
    return ConsoleDisplay(console=mock_console)


def printed(mock_console: MagicMock):
    args, _ = mock_console.print.call_args
    return args[0]


def test_section_codes_become_styles():
    text = section_codes_to_text("§aGreen §lBold§r plain")
    assert text.plain == "Green Bold plain"
    styles = {text.plain[span.start:span.end]: span.style for span in text.spans}
    assert styles["Green "].color.triplet.hex == "#55ff55"
    assert styles["Bold"].bold
    assert styles["Bold"].color.triplet.hex == "#55ff55"
    assert " plain" not in styles or not styles[" plain"]


def test_hex_codes_become_truecolor():
    text = section_codes_to_text("§x§F§F§5§7§3§3Hex")
    assert text.plain == "Hex"
    assert text.spans[0].style.color.triplet.hex == "#ff5733"


def test_color_code_resets_formatting():
    text = section_codes_to_text("§lBold§cRed")
    styles = {text.plain[span.start:span.end]: span.style for span in text.spans}
    assert not styles["Red"].bold


def test_plain_text_is_untouched():
    assert section_codes_to_text("No codes & such").plain == "No codes & such"


def test_send_message_prints_styled_text(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.send_message(RenderedText("§aHello"))
    mock_console.print.assert_called_once()
    output = printed(mock_console)
    assert isinstance(output, Text)
    assert output.plain == "Hello"


def test_send_title_prints_panel(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.send_title("§6Title", "")
    output = printed(mock_console)
    assert isinstance(output, Panel)
    assert output.renderable.plain == "Title"
    assert output.subtitle is None


def test_send_action_bar(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.send_action_bar(RenderedText("§eCoins: 5"))
    assert printed(mock_console).plain.endswith("Coins: 5")


def test_play_sound_validates_name(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.play_sound("minecraft:entity.player.levelup")
    assert printed(mock_console).plain == "♪ minecraft:entity.player.levelup"

    mock_console.reset_mock()
    with pytest.raises(ValueError):
        console_display.play_sound("not a sound!")
    mock_console.print.assert_not_called()


def test_send_lines_sends_each_line(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.send_lines(["§aOne", "§bTwo"])
    assert mock_console.print.call_count == 2


def test_display_error(console_display: ConsoleDisplay, mock_console: MagicMock):
    """Test that display_error prints an error panel."""
    console_display.display_error("Something went wrong")
    output = printed(mock_console)
    assert isinstance(output, Panel)
    assert output.renderable.plain == "Something went wrong"
    assert "Error" in output.title


def test_display_statistics_prints_table(console_display: ConsoleDisplay, mock_console: MagicMock):
    stats = {
        "categories": {"rendered-string": {"size": 3, "capacity": 1000}},
        "hits": 1,
        "misses": 3,
        "hit_ratio": 0.25,
    }
    console_display.display_statistics(stats)
    output = printed(mock_console)
    assert isinstance(output, Table)
    assert output.row_count == 4
