"""Reading and writing ~/.lightpack/config.json."""

import logging
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from lightpack.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def load_model(path: Path, model_type: type[M]) -> Optional[M]:
    """
    Read and validate a model stored as JSON.

    Returns:
        The model, or None if ``path`` does not exist

    Raises:
        ConfigFileInvalidError: If the file is unreadable, empty or not JSON
        ConfigValidationError: If a value fails validation
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No config file at {path}")
        return None
    except OSError as e:
        raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

    if not text.strip():
        raise ConfigFileInvalidError(str(path), "File is empty")

    try:
        model = model_type.model_validate_json(text)
    except ValidationError as e:
        logger.error(f"Invalid config in {path}: {e}")
        raise wrap_pydantic_error(e, str(path)) from e

    logger.debug(f"Loaded {model_type.__name__} from {path}")
    return model


def save_model(model: BaseModel, path: Path) -> None:
    """
    Write a model as indented JSON, replacing ``path`` atomically.

    The JSON goes to a sibling ``.tmp`` file first, so a crash mid-write
    leaves the previous file intact.

    Raises:
        OSError: If the directory or file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(path.name + ".tmp")
    try:
        temp_path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
        temp_path.replace(path)
    finally:
        temp_path.unlink(missing_ok=True)
    logger.debug(f"Saved {type(model).__name__} to {path}")
