from pydantic import BaseModel

from features.whatsapp.model.message import Message
from features.whatsapp.model.update import Update
from features.whatsapp.model.value import Value
from util import log
from util.functions import first_or_none


def authoritative_value(update: Update) -> Value | None:
    """Only the first entry's first change is ever considered; the rest of the delivery is ignored."""
    entry = first_or_none(update.entry)
    change = first_or_none(entry.changes) if entry else None
    return change.value if change else None


class WebhookClassifier:
    """
    Pulls the canonical message and contact fields out of a webhook update.
    Never raises: missing parts of the payload degrade to empty values.
    """

    class Result(BaseModel):
        message: Message | None = None
        contact_name: str = ""
        contact_phone_number: str = ""

        @property
        def is_actionable(self) -> bool:
            return self.message is not None and self.message.type != "reaction"

    def extract(self, update: Update) -> Result:
        value = authoritative_value(update)
        if not value:
            log.t("  No change value found in the update")
            return WebhookClassifier.Result()

        message = first_or_none(value.messages)
        contact = first_or_none(value.contacts)
        contact_name = contact.profile.name if contact and contact.profile else None
        # the sender id is used even when the contacts list disagrees with it
        contact_phone_number = message.from_ if message else None
        return WebhookClassifier.Result(
            message = message,
            contact_name = contact_name or "",
            contact_phone_number = contact_phone_number or "",
        )
