import logging
import os
from datetime import datetime
from typing import Any, Dict
from urllib.parse import parse_qsl


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(levelname)s %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if os.getenv("KDE_DEBUG", "0") in ("1", "true", "TRUE"):
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    return logger


def redacted_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
    redacted = {}
    for k, v in headers.items():
        if k.lower() in ('authorization', 'cookie'):
            redacted[k] = '[REDACTED]'
        else:
            redacted[k] = v
    return redacted


def redact_payload(payload: Any) -> Any:
    if not isinstance(payload, (dict, list)):
        return payload
    secret_keys = (
        "token",
        "authorization",
        "cookie",
        "secret",
        "password",
    )
    if isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    redacted: Dict[str, Any] = {}
    for key, value in payload.items():
        key_l = str(key).lower()
        if any(k in key_l for k in secret_keys):
            redacted[key] = "***"
        elif key_l == "content" and isinstance(value, str):
            # file bodies can be large
            redacted[key] = truncate_text(value, limit=200)
        else:
            redacted[key] = redact_payload(value)
    return redacted


def append_log_line(path: str, line: str) -> None:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    safe_line = line.rstrip("\n")
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"[{timestamp}] {safe_line}\n")


def truncate_text(text: str, limit: int = 2000) -> str:
    if text is None:
        return ""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}...[truncated {len(text) - limit} chars]"


def format_bytes(num: int) -> str:
    step = 1024.0
    units = ['B', 'KB', 'MB', 'GB', 'TB']
    size = float(num)
    for unit in units:
        if size < step:
            return f"{size:.2f}{unit}"
        size /= step
    return f"{size:.2f}PB"


def query_part(url: str) -> str:
    """Return what follows the first ``?`` of ``url``, or ``url`` itself."""
    if "?" in url:
        return url.split("?", 1)[1]
    return url


def parse_url_params(url: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for key, value in parse_qsl(query_part(url), keep_blank_values=True):
        params[key] = value
    return params


def validate_url_params(params: Dict[str, str]) -> bool:
    if not params.get("cookie"):
        get_logger("kdesdk").error("Missing required parameter: cookie")
        return False
    return True
