"""Color & style helpers for list output.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disabled when stdout is not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overridable through TASK_CLI_* hex variables (environment or .env).
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Dict, Mapping

RESET_CODE = '0'
BOLD_CODE = '1'
DIM_CODE = '2'

# Default palette
HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_TODO_DEFAULT = '#48B3AF'
HEX_DONE_DEFAULT = '#A7E399'
HEX_INPROGRESS_DEFAULT = '#F6FF99'

_HEX_RE = re.compile(r"^#?[0-9a-fA-F]{6}$")
_TRUTHY = {"1", "true", "yes", "on"}


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"


def _pick_hex(env: Mapping[str, str], key: str, default: str) -> str:
    value = (env.get(key) or '').strip()
    if _HEX_RE.match(value):
        return '#' + value.lstrip('#')
    return default


@dataclass(frozen=True)
class Theme:
    enabled: bool = False
    truecolor: bool = False
    palette: Dict[str, str] = field(default_factory=lambda: {
        'primary': HEX_PRIMARY_DEFAULT,
        'todo': HEX_TODO_DEFAULT,
        'in-progress': HEX_INPROGRESS_DEFAULT,
        'done': HEX_DONE_DEFAULT,
    })

    @classmethod
    def from_env(cls, env: Mapping[str, str], isatty: bool) -> "Theme":
        force = env.get("FORCE_COLOR", "").lower() in _TRUTHY
        no_color = env.get("NO_COLOR") is not None
        enabled = (force or isatty) and not no_color
        colorterm = env.get("COLORTERM", "").lower()
        return cls(
            enabled=enabled,
            truecolor=enabled and any(tok in colorterm for tok in ("truecolor", "24bit")),
            palette={
                'primary': _pick_hex(env, 'TASK_CLI_PRIMARY', HEX_PRIMARY_DEFAULT),
                'todo': _pick_hex(env, 'TASK_CLI_TODO', HEX_TODO_DEFAULT),
                'in-progress': _pick_hex(env, 'TASK_CLI_INPROGRESS', HEX_INPROGRESS_DEFAULT),
                'done': _pick_hex(env, 'TASK_CLI_DONE', HEX_DONE_DEFAULT),
            },
        )

    def _code(self, part: str) -> str:
        return f"\033[{part}m" if self.enabled else ''

    def fg(self, name: str) -> str:
        """ANSI foreground sequence for a palette entry ('' when disabled)."""
        if not self.enabled:
            return ''
        r, g, b = _hex_to_rgb(self.palette[name])
        if self.truecolor:
            return _fg_truecolor(r, g, b)
        return _fg_256(r, g, b)

    @property
    def bold(self) -> str:
        return self._code(BOLD_CODE)

    @property
    def dim(self) -> str:
        return self._code(DIM_CODE)

    def color(self, text: str, *styles: str) -> str:
        """Apply ANSI styles to a given text."""
        if not self.enabled:
            return text
        return ''.join(styles) + text + self._code(RESET_CODE)


PLAIN = Theme()
