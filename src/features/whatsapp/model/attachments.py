"""Type-specific payloads of inbound WhatsApp messages.

https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages
"""

from typing import Literal

from pydantic import BaseModel


class Text(BaseModel):
    body: str


class MediaAttachment(BaseModel):
    """Shared shape of image, video, audio, document and sticker payloads."""
    id: str
    caption: str | None = None
    mime_type: str | None = None
    sha256: str | None = None
    filename: str | None = None  # documents only
    voice: bool | None = None  # audio only


class Location(BaseModel):
    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None


class Reaction(BaseModel):
    message_id: str
    emoji: str | None = None  # absent when a reaction is removed


class Button(BaseModel):
    payload: str | None = None
    text: str


class InteractiveReply(BaseModel):
    id: str
    title: str
    description: str | None = None


class Interactive(BaseModel):
    type: Literal["list_reply", "button_reply", "nfm_reply"]
    list_reply: InteractiveReply | None = None
    button_reply: InteractiveReply | None = None
    nfm_reply: dict | None = None
