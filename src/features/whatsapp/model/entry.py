from pydantic import BaseModel

from features.whatsapp.model.change import Change


class Entry(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages"""
    id: str | None = None
    changes: list[Change]
