"""Option models for read and write operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Node-style open flags mapped onto Python open() modes
OPEN_FLAGS: dict[str, str] = {
    "r": "r",
    "rs": "r",
    "r+": "r+",
    "rs+": "r+",
    "w": "w",
    "wx": "x",
    "w+": "w+",
    "wx+": "x+",
    "a": "a",
    "ax": "x",
    "as": "a",
    "a+": "a+",
    "ax+": "x+",
    "as+": "a+",
}


def _validate_flag(value: str) -> str:
    if value in OPEN_FLAGS.values() or value in OPEN_FLAGS:
        return value
    raise ValueError(f"Unknown file open flag: {value!r}")


class _FileOptions(BaseModel):
    """Shared behaviour for option models."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    flag: str

    @field_validator("flag")
    @classmethod
    def _check_flag(cls, value: str) -> str:
        return _validate_flag(value)

    @property
    def open_mode(self) -> str:
        """The flag translated to a Python open() mode."""
        return OPEN_FLAGS.get(self.flag, self.flag)

    @classmethod
    def coerce(cls, value: Any = None):
        """Build options from None, a bare encoding name, a mapping, or an instance.

        Args:
            value: Raw options supplied by a caller.

        Returns:
            An options instance. Mappings are never mutated.

        Raises:
            TypeError: If value has an unsupported type.
            pydantic.ValidationError: If a field value is invalid.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(encoding=value)
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"Unsupported options type: {type(value).__name__}")


class ReadOptions(_FileOptions):
    """Options accepted by PathController.read.

    Attributes:
        encoding: Text encoding for file reads. None returns bytes.
        flag: Open flag, Node-style or a Python open() mode.
        absolute_path: Return directory entries as absolute paths.
    """

    encoding: str | None = None
    flag: str = "r"
    absolute_path: bool = Field(default=False, alias="absolutePath")

    @field_validator("flag")
    @classmethod
    def _check_readable(cls, value: str) -> str:
        mode = OPEN_FLAGS.get(value, value)
        if "r" not in mode and "+" not in mode:
            raise ValueError(f"Flag {value!r} does not allow reading")
        return value


class WriteOptions(_FileOptions):
    """Options accepted by PathController.write.

    Attributes:
        encoding: Encoding used for text payloads.
        flag: Open flag, Node-style or a Python open() mode.
        mode: Permission bits applied when the file is created.
    """

    encoding: str = "utf-8"
    flag: str = "w"
    mode: int = Field(default=0o666, ge=0, le=0o7777)
