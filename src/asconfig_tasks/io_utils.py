from __future__ import annotations

from pathlib import Path
from typing import Any

import json5
import yaml


def _parse_text(path: Path, text: str) -> Any:
    if path.suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    # json5 accepts plain JSON as well as comments, trailing commas and unquoted keys.
    return json5.loads(text)


def _load_data_with_error(
    path: Path,
    default: dict[str, Any],
) -> tuple[dict[str, Any], str | None]:
    """
    Load relaxed JSON or YAML and return (data, error_message).

    A missing file is not an error. Anything else that prevents reading an
    object from the file is reported in the message and `default` is returned.
    """
    if not path.exists():
        return default, None
    try:
        text = path.read_text(encoding="utf-8")
        data = _parse_text(path, text)
    except OSError as exc:
        return default, f"{path.name}: {exc.__class__.__name__}: {exc}"
    except UnicodeDecodeError as exc:
        return default, f"{path.name}: UnicodeDecodeError: {exc}"
    except yaml.YAMLError as exc:
        return default, f"{path.name}: YAMLError: {exc}"
    except ValueError as exc:
        return default, f"{path.name}: {exc.__class__.__name__}: {exc}"
    except RecursionError as exc:
        # Raised by the parsers on pathologically nested documents.
        return default, f"{path.name}: RecursionError: {exc}"
    if not isinstance(data, dict):
        return default, f"{path.name}: expected object, got {type(data).__name__}"
    return data, None
