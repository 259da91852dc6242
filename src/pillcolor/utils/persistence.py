"""Reading and writing the pillcolor config file.

Writes go to ``<name>.tmp`` and are renamed over the target, and the
previous file is kept as ``<name>.bak``, so a crash mid-save never leaves a
half-written config behind.
"""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from pillcolor.exceptions import ConfigFileInvalidError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """Stateless JSON helpers for pydantic models."""

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Parse ``path`` into ``model_type``.

        Raises:
            FileNotFoundError: If there is no file at ``path``
            ConfigFileInvalidError: If the file is blank, unreadable or not JSON
            ConfigValidationError: If a field is out of range or mistyped
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileInvalidError(str(path), str(e)) from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "file is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.warning(f"Rejected {path}: {e.error_count()} validation error(s)")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def load_json_or_default(path: Path, model_type: type[T]) -> T:
        """Like ``load_json``, but a missing file yields ``model_type()``; nothing is written."""
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"No config at {path}, using defaults")
            return model_type()

    @staticmethod
    def save_json(data: BaseModel, path: Path, backup: bool = True) -> None:
        """
        Write ``data`` to ``path`` as indented JSON, creating parent directories.

        Raises:
            OSError: If the directory or file cannot be written
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(data.model_dump_json(indent=2), encoding="utf-8")
            temp_path.replace(path)
        finally:
            if temp_path.exists():
                temp_path.unlink()

        logger.debug(f"Saved {type(data).__name__} to {path}")
