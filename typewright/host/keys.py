"""Keystroke scripts for replaying input."""

from loguru import logger

NAMED_KEYS = frozenset({"Space", "Enter", "Backspace"})

# Literal characters that stand for a named key
CHARACTER_KEYS = {" ": "Space", "\n": "Enter"}


def parse_key_script(script: str) -> list[str]:
    """Split a keystroke script into key names.

    Every character is one key press, with " " and newline meaning Space
    and Enter. Named keys are written in braces ("{Backspace}"); "{{" and
    "}}" stand for literal braces.

    Args:
        script: The keystroke script

    Returns:
        List of key names accepted by BufferView.press()

    Raises:
        ValueError: If a brace is unbalanced or names an unknown key
    """
    keys: list[str] = []
    i = 0
    while i < len(script):
        char = script[i]
        if char == "{":
            if script.startswith("{{", i):
                keys.append("{")
                i += 2
                continue
            close = script.find("}", i)
            if close == -1:
                logger.error(f"✗ Unterminated key name at offset {i} in key script")
                raise ValueError(f"Unterminated key name at offset {i}")
            name = script[i + 1 : close]
            if name not in NAMED_KEYS:
                available = ", ".join(sorted(NAMED_KEYS))
                logger.error(f"✗ Unknown key {{{name}}} in key script (available: {available})")
                raise ValueError(f"Unknown key name '{name}'")
            keys.append(name)
            i = close + 1
            continue
        if char == "}":
            if not script.startswith("}}", i):
                logger.error(f"✗ Unbalanced '}}' at offset {i} in key script")
                raise ValueError(f"Unbalanced '}}' at offset {i}")
            keys.append("}")
            i += 2
            continue
        keys.append(CHARACTER_KEYS.get(char, char))
        i += 1
    return keys
