import os
import stat
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field


@dataclass(frozen=True)
class RawEntry:
    """What the walker reports for a single path."""

    name: str
    size: int
    mode: int
    mtime: float
    is_dir: bool

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "RawEntry":
        return cls(
            name=name,
            size=st.st_size,
            mode=st.st_mode,
            mtime=st.st_mtime,
            is_dir=stat.S_ISDIR(st.st_mode),
        )


def file_extension(name: str) -> str:
    """Return *name* from its last dot onward, or ``""`` when it has none.

    ``".gitignore"`` keeps its whole name, unlike :func:`os.path.splitext`.
    """
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


class MetadataRecord(BaseModel):
    """Immutable snapshot of one filesystem entry taken at walk time."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    size: int = Field(ge=0)
    mode: int
    mod_time: datetime
    is_dir: bool

    @computed_field
    @property
    def extension(self) -> str:
        return file_extension(self.name)


def extract(raw: RawEntry) -> MetadataRecord:
    """Convert a walker entry into a :class:`MetadataRecord`."""
    return MetadataRecord(
        name=raw.name,
        size=raw.size,
        mode=raw.mode,
        mod_time=datetime.fromtimestamp(raw.mtime).astimezone(),
        is_dir=raw.is_dir,
    )
