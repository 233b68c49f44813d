from typing import Any

from util import log
from util.functions import silent


class ObservabilitySink:
    """
    Operator-facing reporting for webhook failures. The default sink writes to the
    service log; replace it in the DI container to ship reports elsewhere.
    Reporting is best-effort: a failing sink never breaks the webhook response.
    """

    @silent
    def report_classified(self, kind: str, details: dict[str, Any] | None = None) -> None:
        if details:
            log.w(f"WhatsApp webhook error: {kind}", details)
        else:
            log.w(f"WhatsApp webhook error: {kind}")

    @silent
    def report_unclassified(self, error: Exception, breadcrumb: dict[str, Any]) -> None:
        log.e("Unclassified WhatsApp webhook failure", breadcrumb, error)
