from typing import Annotated

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.core.exceptions import TextTooLongError


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def ensure_text_length(text: str, settings: Settings) -> None:
    """Reject input longer than the configured maximum."""
    if len(text) > settings.max_text_length:
        raise TextTooLongError(len(text), settings.max_text_length)
