from pydantic import BaseModel

from features.whatsapp.model.error import Error


class Status(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages/status"""
    id: str | None = None
    status: str | None = None
    timestamp: str | None = None
    recipient_id: str
    conversation: dict | None = None
    pricing: dict | None = None
    # absent and empty are different things: an empty list is a malformed delivery
    errors: list[Error] | None = None
