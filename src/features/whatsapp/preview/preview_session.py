# shared with sessions already stored by the flow engine, do not change
PREVIEW_SESSION_ID_PREFIX = "wa-preview-"


def preview_session_id(identifier: str) -> str:
    return f"{PREVIEW_SESSION_ID_PREFIX}{identifier}"
