"""Safe YAML loader."""
from pathlib import Path
from typing import Any, Union

import yaml


def load_yaml(path: Union[str, Path]) -> dict:
    with open(path, encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


def load_yaml_raw(path: Union[str, Path]) -> Any:
    """Parse ``path`` and return whatever the document holds.

    Unlike :func:`load_yaml` the result is not coerced to a mapping, so an
    empty file yields ``None`` and callers can tell it apart from ``{}``.
    """

    with open(path, encoding="utf-8") as fh:
        return yaml.safe_load(fh)
