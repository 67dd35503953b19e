from typing import Any, Optional
import json

try:
    import httpx
except ModuleNotFoundError as exc:  # pragma: no cover - user environment dependency
    raise ModuleNotFoundError(
        "Missing dependency 'httpx'. Install with: pip install httpx"
    ) from exc

from .utils import append_log_line, get_logger, redact_payload, redacted_headers, truncate_text


class VFSTransport:
    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_log_path: Optional[str] = None,
    ):
        # No validation: a bad base URL surfaces on the first request.
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.logger = get_logger('kdesdk')
        self.http_log_path = http_log_path
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self.url_for(path)
        headers = dict(kwargs.get('headers') or {})
        redacted = redacted_headers(headers)
        payload = None
        if "json" in kwargs:
            payload = redact_payload(kwargs.get("json"))
        elif "data" in kwargs:
            payload = redact_payload(kwargs.get("data"))
        self.logger.debug('HTTP %s %s params=%s headers=%s', method, url, kwargs.get('params'), redacted)
        if self.http_log_path:
            if payload is not None:
                append_log_line(self.http_log_path, f"{method} {url} headers={redacted} payload={payload}")
            else:
                append_log_line(self.http_log_path, f"{method} {url} params={kwargs.get('params')} headers={redacted}")

        resp = await self._client.request(method, url, **kwargs)

        self.logger.debug('HTTP %s %s -> %s %s', method, url, resp.status_code, resp.reason_phrase)
        if self.http_log_path:
            append_log_line(
                self.http_log_path,
                f"{method} {url} status={resp.status_code} response={self._describe_body(resp)}",
            )
        return resp

    @staticmethod
    def _describe_body(resp: httpx.Response) -> str:
        content_type = resp.headers.get("content-type", "")
        if "json" in content_type:
            try:
                return json.dumps(redact_payload(resp.json()), ensure_ascii=True)
            except ValueError:
                pass
        if content_type.startswith("text/"):
            return truncate_text(resp.text or "")
        return f"<{len(resp.content)} bytes>"

    async def aclose(self) -> None:
        await self._client.aclose()
