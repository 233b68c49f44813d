from typing import Literal

from pydantic import BaseModel, Field

from features.whatsapp.model.attachments import Button, Interactive, Location, MediaAttachment, Reaction, Text
from features.whatsapp.model.context import Context
from features.whatsapp.model.error import Error


class Message(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages"""
    from_: str = Field(alias = "from")
    id: str
    timestamp: str
    type: Literal[
        "text", "image", "video", "audio", "document",
        "sticker", "location", "contacts",
        "interactive", "button", "reaction",
        "order", "system", "unsupported",
    ]
    text: Text | None = None
    image: MediaAttachment | None = None
    video: MediaAttachment | None = None
    audio: MediaAttachment | None = None
    document: MediaAttachment | None = None
    sticker: MediaAttachment | None = None
    location: Location | None = None
    contacts: list[dict] | None = None
    interactive: Interactive | None = None
    button: Button | None = None
    reaction: Reaction | None = None
    order: dict | None = None
    system: dict | None = None
    context: Context | None = None
    errors: list[Error] | None = None
