from dataclasses import dataclass, field
from typing import Any, Dict, Optional

SEARCH_TYPES = ("file", "directory", "all")
SEARCH_OPTION_KEYS = ("recursive", "pattern", "type")


@dataclass(frozen=True)
class FileInfo:
    filename: str
    path: str
    is_directory: bool
    is_file: bool
    mime: Optional[str]
    size: int
    # None when the backend sent "stat": null
    stat: Optional[Dict[str, Any]] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "FileInfo":
        # The backend owns the directory/file exclusivity; nothing is checked here.
        stat = row.get("stat")
        return cls(
            filename=row["filename"],
            path=row["path"],
            is_directory=row["isDirectory"],
            is_file=row["isFile"],
            mime=row["mime"],
            size=row["size"],
            stat=dict(stat) if stat is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "path": self.path,
            "isDirectory": self.is_directory,
            "isFile": self.is_file,
            "mime": self.mime,
            "size": self.size,
            "stat": dict(self.stat) if self.stat is not None else None,
        }


@dataclass
class SearchOptions:
    recursive: Optional[bool] = None
    pattern: Optional[str] = None
    type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type is not None and self.type not in SEARCH_TYPES:
            raise ValueError(f"Invalid search type {self.type!r}, expected one of {SEARCH_TYPES}")

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.recursive is not None:
            payload["recursive"] = self.recursive
        if self.pattern is not None:
            payload["pattern"] = self.pattern
        if self.type is not None:
            payload["type"] = self.type
        return payload
