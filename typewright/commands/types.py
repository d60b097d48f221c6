"""Command signatures."""

from collections.abc import Callable

from typewright.core import AutocorrectConfig, EditorView

# A command bound to a key: returns True when it handled the key, False to
# let the host run its default behaviour
Command = Callable[[EditorView], bool]

# An engine command before configuration is bound to it
ConfiguredCommand = Callable[[EditorView, AutocorrectConfig], bool]
