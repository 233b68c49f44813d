from pydantic import BaseModel

from features.whatsapp.model.contact import Contact
from features.whatsapp.model.message import Message
from features.whatsapp.model.metadata import Metadata
from features.whatsapp.model.status import Status


class Value(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages"""
    messaging_product: str | None = None
    metadata: Metadata | None = None
    contacts: list[Contact] | None = None
    messages: list[Message] | None = None
    statuses: list[Status] | None = None
