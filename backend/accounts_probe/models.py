from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConnectionConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(gt=0, le=65535)
    user: str = Field(min_length=1)
    password: str
    database: str = Field(min_length=1)
    tls_verify: bool = False
    sslrootcert: Optional[str] = None


class Account(BaseModel):
    id: str
    name: str

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Account":
        # ids are usually integer/uuid columns; printing only needs text
        return cls(id=str(row["id"]), name=str(row["name"]))


@dataclass(frozen=True)
class QuerySuccess:
    """Rows exactly as the server returned them (no ORDER BY is applied)."""
    rows: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def accounts(self) -> List[Account]:
        return [Account.from_row(r) for r in self.rows]


@dataclass(frozen=True)
class QueryFailure:
    """Connection or query error; reads as an empty result for legacy callers."""
    cause: BaseException

    @property
    def rows(self) -> List[Dict[str, Any]]:
        return []

    @property
    def accounts(self) -> List[Account]:
        return []
