"""Settings for tint-kit, read from the environment and an optional .env file.

Load order (first wins):
  1. Existing OS environment variables, which are never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Variables:
  TINT_KIT_OUTPUT          text | json           (default: text)
  TINT_KIT_PRESERVE_ALPHA  1/true/yes/on         (default: off)
  TINT_KIT_LOG_LEVEL       DEBUG, INFO, ...      (default: WARNING)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

OUTPUT_FORMATS = ('text', 'json')
_TRUE = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
    output: str = 'text'
    preserve_alpha: bool = False
    log_level: int = logging.WARNING
    env_path: Path | None = None  # the .env that was loaded, if any


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes, comments and an `export ` prefix are allowed."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#'):
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, sep, value = line.partition('=')
        key = key.strip()
        if not sep or not key:
            continue
        result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Fill gaps in os.environ from a .env file and return that file, if any."""
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    missing = {k: v for k, v in _parse_dotenv(path).items() if k not in os.environ}
    os.environ.update(missing)
    return path


def load_settings(env_file: str | None = None) -> Settings:
    """Load .env (see module docs) and build Settings from the environment."""
    env_path = load_env(env_file)

    output = os.environ.get('TINT_KIT_OUTPUT', 'text').strip().lower()
    if output not in OUTPUT_FORMATS:
        output = 'text'

    preserve_alpha = os.environ.get('TINT_KIT_PRESERVE_ALPHA', '').strip().lower() in _TRUE

    level_name = os.environ.get('TINT_KIT_LOG_LEVEL', 'WARNING').strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    return Settings(output=output, preserve_alpha=preserve_alpha, log_level=level, env_path=env_path)
