"""
Configuration loading for filecount.

Values come from a JSON file and from command-line overrides:

    {
        "root": "src",
        "skip": [".git", "node_modules"],
        "ext": [".go", ".py"],
        "print_value": 500,
        "print_by_size": false,
        "workers": 8
    }

`print_lines` is accepted as an alias of `print_value`. Every problem found
here raises ConfigError before any traversal starts.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from filecount.core.errors import ConfigError
from filecount.core.models import ScanConfig, SelectMode
from filecount.logging.helpers import get_logger
from filecount.utils.suffixes import normalize_extensions

_KNOWN_KEYS = frozenset({'root', 'skip', 'ext', 'print_value', 'print_lines', 'print_by_size', 'workers'})

logger = get_logger('config')


def read_config_file(path: str | Path, *, required: bool = False) -> Dict[str, Any]:
    """Read a JSON configuration object from *path*.

    A missing file yields an empty mapping unless *required* is set.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding='utf-8')
    except FileNotFoundError:
        if required:
            raise ConfigError(f'config file {p} not found')
        logger.debug('no config file at %s – using defaults', p)
        return {}
    except OSError as exc:
        raise ConfigError(f'cannot read config file {p}: {exc}') from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f'malformed config file {p}: {exc}') from exc
    if not isinstance(data, dict):
        raise ConfigError(f'config file {p} must contain a JSON object')

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        logger.warning('⚠  ignoring unknown config keys in %s: %s', p, ', '.join(unknown))
    return data


def _string_list(values: Mapping[str, Any], key: str) -> list[str]:
    raw = values.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
        raise ConfigError(f'"{key}" must be a list of strings')
    return list(raw)


def _optional_int(value: Any, key: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f'"{key}" must be an integer')
    return value


def build_config(
    values: Mapping[str, Any] | None = None,
    *,
    root: str | Path | None = None,
    skip: Sequence[str] = (),
    ext: Sequence[str] = (),
    print_value: Optional[int] = None,
    by_size: Optional[bool] = None,
    workers: Optional[int] = None,
) -> ScanConfig:
    """Merge file *values* with overrides and validate the result.

    Scalar overrides replace file values; `skip` and `ext` overrides are
    appended to the lists from the file.
    """
    values = dict(values or {})

    raw_root = root if root not in (None, '') else values.get('root')
    if raw_root is None or (isinstance(raw_root, str) and not raw_root.strip()):
        raise ConfigError('Please specify root directory')
    if not isinstance(raw_root, (str, Path)):
        raise ConfigError('"root" must be a string')
    root_path = Path(raw_root).expanduser()
    if not root_path.exists():
        raise ConfigError(f'root {root_path} does not exist')

    skip_dirs = _string_list(values, 'skip') + list(skip)
    extensions = normalize_extensions(_string_list(values, 'ext') + list(ext))

    if print_value is not None:
        threshold = print_value
    elif 'print_value' in values:
        threshold = values['print_value']
    else:
        threshold = values.get('print_lines')
    threshold = _optional_int(threshold, 'print_value')

    size_mode = values.get('print_by_size', False) if by_size is None else by_size
    if not isinstance(size_mode, bool):
        raise ConfigError('"print_by_size" must be a boolean')

    worker_count = _optional_int(workers if workers is not None else values.get('workers'), 'workers')
    if worker_count is not None and worker_count <= 0:
        raise ConfigError('"workers" must be a positive integer')

    return ScanConfig(
        root=root_path,
        skip_dirs=tuple(dict.fromkeys(d for d in skip_dirs if d)),
        extensions=extensions,
        select_mode=SelectMode.SIZE if size_mode else SelectMode.LINES,
        select_threshold=threshold,
        workers=worker_count,
    )


def load_config(
    config_file: str | Path | None,
    *,
    required: bool = False,
    **overrides: Any,
) -> ScanConfig:
    """Read *config_file* (if any) and build a validated ScanConfig."""
    values = read_config_file(config_file, required=required) if config_file else {}
    return build_config(values, **overrides)
