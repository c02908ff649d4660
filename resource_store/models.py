"""
Command payload models for resource store operations.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

EntityId = Union[int, str]


class CommandPayload(BaseModel):
    """Base for command payloads; unknown fields are rejected."""
    model_config = ConfigDict(extra="forbid")


class LoadCommand(CommandPayload):
    """Fetch or return a cached collection."""
    group_key: Optional[str] = Field(None, description="Collection view; default key when omitted")
    query_params: Optional[Dict[str, Any]] = Field(None, description="Passed to the transport list call")
    use_cache: bool = Field(True, description="Trust and write the list index")


class FindCommand(CommandPayload):
    """Fetch or return a single cached entity."""
    id: EntityId
    refresh: bool = False


class CreateCommand(CommandPayload):
    """Create an entity and index it under an existing collection view."""
    group_key: Optional[str] = None
    payload: Dict[str, Any]


class UpdateCommand(CommandPayload):
    """Replace an entity; collection membership is untouched."""
    id: EntityId
    payload: Dict[str, Any]


class DeleteCommand(CommandPayload):
    """Delete an entity and drop it from a collection view."""
    group_key: Optional[str] = None
    id: EntityId
