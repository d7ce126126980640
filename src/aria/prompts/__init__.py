"""Prompt text shipped with ARIA.

Prompts live in ``<name>.txt`` files next to this module. A ``prompts/``
directory in the working directory takes precedence, so the persona can be
changed without touching the install.
"""

from functools import lru_cache
from pathlib import Path

_PACKAGE_DIR = Path(__file__).parent


def _candidates(name: str) -> tuple[Path, Path]:
    filename = f"{name}.txt"
    return Path.cwd() / "prompts" / filename, _PACKAGE_DIR / filename


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Return the text of prompt ``name``, stripped.

    Raises:
        FileNotFoundError: If neither the local nor the packaged file exists
    """
    searched = _candidates(name)
    for path in searched:
        if path.is_file():
            return path.read_text(encoding="utf-8").strip()

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        + "\n".join(f"  - {path}" for path in searched)
    )


def get_system_prompt() -> str:
    """ARIA persona instruction, used when the system prompt is enabled."""
    return load_prompt("system")


def clear_cache() -> None:
    load_prompt.cache_clear()


__all__ = [
    "clear_cache",
    "get_system_prompt",
    "load_prompt",
]
