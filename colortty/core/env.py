"""colortty settings from the environment and .env files.

Settings (all optional):
  COLORTTY_INPUT_FORMAT   default source format ('iterm' or 'mintty') when
                          neither -i nor the filename decides it.

Each setting is resolved on its own, first hit wins:
  1. The process environment.
  2. The .env file: the --env-file path, or else the nearest .env walking
     up from the cwd, never past a directory containing .git.

os.environ is only read, never written. Keys without the COLORTTY_ prefix
in a .env file belong to other tools and are ignored.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = 'COLORTTY_'
INPUT_FORMAT_VAR = 'COLORTTY_INPUT_FORMAT'


@dataclass(frozen=True)
class Settings:
    input_format: str | None = None
    dotenv_path: Path | None = None  # the .env file consulted, if any


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env in start or its parents; the first directory holding .git ends the search."""
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            break
    return None


def read_dotenv(path: Path) -> dict[str, str]:
    """COLORTTY_* assignments of a .env file.

    Accepts `KEY=value`, `KEY="value"`, `KEY='value'` and an `export ` prefix.
    Later assignments override earlier ones.
    """
    values: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, sep, value = line.partition('=')
        key = key.strip()
        if not sep or not key.startswith(ENV_PREFIX):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
            value = value[1:-1]
        values[key] = value
    return values


def load_settings(env_file: str | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Resolve Settings from `environ` (default: os.environ) over the .env file.

    An explicit env_file that does not exist raises FileNotFoundError.
    """
    if environ is None:
        environ = os.environ

    if env_file:
        dotenv_path: Path | None = Path(env_file)
        if not dotenv_path.is_file():
            raise FileNotFoundError(f'.env file not found: {env_file}')
    else:
        dotenv_path = find_dotenv(Path.cwd())

    file_values = read_dotenv(dotenv_path) if dotenv_path else {}

    def lookup(key: str) -> str | None:
        for source in (environ, file_values):
            value = source.get(key, '').strip()
            if value:
                return value
        return None

    return Settings(input_format=lookup(INPUT_FORMAT_VAR), dotenv_path=dotenv_path)
