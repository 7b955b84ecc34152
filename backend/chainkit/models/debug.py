"""
Debug message models.

Messages flowing through the debug pipeline form a closed union
discriminated by ``kind``:
    - GeneralMessage: free-form text to log
    - StateSaveMessage: a named state payload to persist as JSON

Messages are immutable values; a message only lives for one dispatch.

Example:
    >>> toolkit.log(GeneralMessage(text="Application started."))
    >>> toolkit.log(StateSaveMessage(state_name="player_state", state_data=data))
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class GeneralMessage(BaseModel):
    """Plain debug text.

    Attributes:
        text: The message text (None or empty is rejected by NullCheckProcessor)
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["general"] = "general"
    text: str | None = None


class StateSaveMessage(BaseModel):
    """Request to persist a snapshot of some game state.

    The payload's public fields are written to ``<state_name>_state.json``
    by StateSaveProcessor. Any value pydantic can turn into JSON is
    accepted: models, dataclasses, dicts, lists and scalars.

    Attributes:
        state_name: Name used to build the output file name
        state_data: The payload to serialize
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["state_save"] = "state_save"
    state_name: str
    state_data: Any = None

    @property
    def text(self) -> str:
        """Log text for this message."""
        return f"Save State: {self.state_name}"


DebugMessage = Annotated[
    Union[GeneralMessage, StateSaveMessage],
    Field(discriminator="kind"),
]


# Demo payloads


class Vector3(BaseModel):
    """A point in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class PlayerData(BaseModel):
    """Snapshot of the player used by the debug demo."""

    health: int
    position: Vector3 = Field(default_factory=Vector3)
