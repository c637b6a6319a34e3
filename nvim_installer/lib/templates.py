from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping

_TOKEN = re.compile(r"@([A-Z][A-Z0-9_]*)@")


def _templates_dir() -> Path:
    # nvim_installer/lib/templates.py -> nvim_installer/templates
    return Path(__file__).resolve().parents[1] / "templates"


def render_text(text: str, values: Mapping[str, str]) -> str:
    """Replace `@NAME@` tokens; an unknown token is a programming error."""

    def _sub(m: re.Match) -> str:
        key = m.group(1)
        if key not in values:
            raise KeyError(f"Template token without a value: @{key}@")
        return str(values[key])

    return _TOKEN.sub(_sub, text)


def render_template(name: str, values: Mapping[str, str]) -> str:
    text = (_templates_dir() / name).read_text(encoding="utf-8")
    return render_text(text, values)
