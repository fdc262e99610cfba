from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class RemoteRollResponse(BaseModel):
    d1: int = Field(ge=1, le=6)
    d2: int = Field(ge=1, le=6)


class RemotePurchaseRequest(BaseModel):
    tile_id: int = Field(ge=0, le=39)


class RemotePurchaseResponse(BaseModel):
    success: bool


class ActivityEntryDTO(BaseModel):
    severity: str
    title: str
    body: str
    time: str


class PropertyDTO(BaseModel):
    position: int
    name: str
    owner_id: Optional[str] = None
    level: int = 0
    mortgaged: bool = False
    color_group: Optional[str] = None


class PlayerDTO(BaseModel):
    player_id: str
    name: str
    color: str
    cash: int
    position: int
    jail_turns: int
    jail_passes: int


class DeckDTO(BaseModel):
    cards_remaining: int
    withdrawn: int


class PendingCardDTO(BaseModel):
    card_id: str
    deck: str
    title: str
    text: str
    keep: bool


class SnapshotDTO(BaseModel):
    turn_number: int
    current_player_id: str
    phase: str
    last_dice: Optional[List[int]] = None
    players: List[PlayerDTO]
    properties: List[PropertyDTO]
    decks: Dict[str, DeckDTO]
    pending_card: Optional[PendingCardDTO] = None
    activity: List[ActivityEntryDTO] = Field(default_factory=list)
