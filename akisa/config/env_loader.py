"""Loads .env files with KEY=VALUE format.

Supports:
- Comments (lines starting with #)
- Blank lines
- An optional leading ``export`` so shell-sourceable files work unchanged
- Quoted values (single or double quotes are stripped)
- Inline comments after values are NOT stripped (to keep values predictable)
"""

from pathlib import Path


def load_env_file(env_name: str, project_root: Path | None = None) -> dict[str, str]:
    """Load .env/<env_name>.env and return as dict. Returns empty dict if file is missing."""
    root = project_root or Path.cwd()
    env_file = root / ".env" / f"{env_name}.env"
    if not env_file.is_file():
        return {}
    return parse_env_text(env_file.read_text())


def parse_env_text(text: str) -> dict[str, str]:
    result: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):]
        key, _, value = line.partition("=")
        key = key.strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        if key:
            result[key] = value
    return result
