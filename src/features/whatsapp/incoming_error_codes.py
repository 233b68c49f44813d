"""
Error codes that WhatsApp attaches to failed message statuses.
https://developers.facebook.com/docs/whatsapp/cloud-api/support/error-codes
"""

from features.whatsapp.webhook_errors import WhatsAppError

UNENGAGED_USER = 131047  # the 24h customer service window has closed
MESSAGE_UNDELIVERABLE = 131026
MEDIA_UPLOAD_ERROR = 131053

KNOWN_ERROR_KINDS: dict[int, WhatsAppError.Kind] = {
    UNENGAGED_USER: WhatsAppError.Kind.unengaged_user,
    MESSAGE_UNDELIVERABLE: WhatsAppError.Kind.message_undeliverable,
    MEDIA_UPLOAD_ERROR: WhatsAppError.Kind.media_upload_error,
}
