from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import httpx

from .auth import KDEAuth
from .config import KDEConfig
from .messaging import KDEWindow, WindowHost
from .vfs import VFS


@dataclass
class KDESession:
    auth: KDEAuth
    vfs: VFS
    window: Optional[KDEWindow] = None


def initialize_kde(
    config: KDEConfig,
    host: Optional[WindowHost] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> KDESession:
    # Auth first: a missing cookie must fail before anything else is built.
    auth = KDEAuth(f"?cookie={quote(config.auth_cookie or '', safe='')}")
    vfs = VFS(
        config.base_url,
        timeout=config.default_timeout,
        transport=transport,
        http_log_path=config.http_log_path,
    )
    window = KDEWindow(config.allowed_origins, host) if host is not None else None
    return KDESession(auth=auth, vfs=vfs, window=window)
