"""Key bindings for the autocorrect commands."""

from collections.abc import Callable

from typewright.commands import (
    Command,
    ConfiguredCommand,
    handle_backspace,
    handle_quote,
    handle_replacement,
)
from typewright.core import AutocorrectConfig, EditorView
from typewright.utils import Constants

ConfigProvider = Callable[[], AutocorrectConfig]


def bind_config(command: ConfiguredCommand, config_provider: ConfigProvider) -> Command:
    """Bind a command to a configuration that is read on every keystroke."""

    def bound(view: EditorView) -> bool:
        return command(view, config_provider())

    return bound


def build_keymap(config_provider: ConfigProvider) -> dict[str, Command]:
    """Map key names to autocorrect commands.

    Args:
        config_provider: Returns the configuration in effect; called once per
            keystroke so the host can swap configurations between keys

    Returns:
        Dict mapping key names ("Space", "Enter", "Backspace", '"', "'") to commands
    """
    replacement = bind_config(handle_replacement, config_provider)
    return {
        "Space": replacement,
        "Enter": replacement,
        Constants.PLAIN_DOUBLE_QUOTE: bind_config(
            handle_quote(Constants.PLAIN_DOUBLE_QUOTE), config_provider
        ),
        Constants.PLAIN_SINGLE_QUOTE: bind_config(
            handle_quote(Constants.PLAIN_SINGLE_QUOTE), config_provider
        ),
        "Backspace": bind_config(handle_backspace, config_provider),
    }
