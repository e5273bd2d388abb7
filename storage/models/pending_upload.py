"""
Pending Upload Models

Data class for files that must be uploaded once network conditions allow.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from core.constants import MediaKind


@dataclass
class PendingUploadRecord:
    """
    A capture that was deferred and waits for a better connection.

    Identity is (account_name, file_path): the same file queued twice for
    the same account is the same record.
    """

    account_name: str
    file_path: str
    kind: MediaKind = MediaKind.PICTURE
    created_at: datetime = field(default_factory=datetime.now)

    # Database ID (set after insertion)
    id: Optional[int] = None

    def __post_init__(self):
        """Ensure file_path is a string and kind is a MediaKind"""
        if isinstance(self.file_path, Path):
            self.file_path = str(self.file_path)
        if not isinstance(self.kind, MediaKind):
            self.kind = MediaKind(self.kind)

    @property
    def key(self) -> Tuple[str, str]:
        """Record identity"""
        return (self.account_name, self.file_path)

    @property
    def file_name(self) -> str:
        """Basename of the queued file"""
        return Path(self.file_path).name

    def file_exists(self) -> bool:
        """Check if the queued file is still on disk"""
        return Path(self.file_path).is_file()

    def to_dict(self) -> dict:
        """Convert to dictionary for database storage"""
        return {
            "account_name": self.account_name,
            "file_path": self.file_path,
            "kind": self.kind.value,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PendingUploadRecord":
        """Create PendingUploadRecord from dictionary (database row)"""
        return cls(
            id=data.get("id"),
            account_name=data["account_name"],
            file_path=data["file_path"],
            kind=MediaKind(data.get("kind") or MediaKind.PICTURE.value),
            created_at=(
                datetime.fromisoformat(data["created_at"])
                if data.get("created_at")
                else datetime.now()
            ),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, PendingUploadRecord):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        """Human-readable representation"""
        return (
            f"PendingUploadRecord(account='{self.account_name}', "
            f"file='{self.file_path}', kind={self.kind.value})"
        )
