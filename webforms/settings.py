"""Configurações padrão do pacote webforms."""
import logging
import os

DEFAULT_ALGORITHM = "sha512"

# \Z em vez de $ para não aceitar uma quebra de linha final
EMAIL_EXPRESSION = r"^\S+@\S+?\.\S{2,3}\Z"
USER_EXPRESSION = r"^[a-zA-Z0-9@.+\-_]{1,15}\Z"
ABSOLUTE_URL_EXPRESSION = r"^(https?:)?//\S+\.\S+"
RELATIVE_URL_EXPRESSION = r"\S+"

VALIDATION_ERROR = "Form failed validation."


def _read_log_level(default: int = logging.WARNING) -> int:
    name = os.environ.get("WEBFORMS_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


LOG_LEVEL = _read_log_level()
