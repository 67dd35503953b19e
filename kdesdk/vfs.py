import base64
import posixpath
from typing import Any, BinaryIO, Dict, List, Mapping, Optional, Union

import httpx

from endpoints import VFS as ROUTES
from .client import VFSTransport
from .errors import VFSError
from .models import SEARCH_OPTION_KEYS, FileInfo, SearchOptions

Content = Union[bytes, str]


def _ok_or_raise(resp: httpx.Response, operation: str) -> httpx.Response:
    if not resp.is_success:
        raise VFSError(operation, resp.reason_phrase)
    return resp


def _encode_content(content: Content) -> str:
    # JSON carries text only; binary content travels as base64.
    if isinstance(content, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(content)).decode("ascii")
    return content


def _search_payload(options: Union[SearchOptions, Mapping[str, Any], None]) -> Dict[str, Any]:
    if options is None:
        return {}
    if not isinstance(options, SearchOptions):
        unknown = sorted(set(options) - set(SEARCH_OPTION_KEYS))
        if unknown:
            raise ValueError(f"Unknown search option(s): {', '.join(unknown)}")
        options = SearchOptions(**options)
    return options.to_payload()


class VFS:
    """Asynchronous client for the remote filesystem routes.

    Every method performs exactly one request. A non-2xx answer raises
    :class:`~kdesdk.errors.VFSError`; parse failures on a 2xx answer and
    transport errors propagate as raised by httpx/json.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_log_path: Optional[str] = None,
    ):
        self._transport = VFSTransport(
            base_url,
            timeout=timeout,
            transport=transport,
            http_log_path=http_log_path,
        )

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    async def _call(self, route: str, **kwargs: Any) -> httpx.Response:
        spec = ROUTES[route]
        return await self._transport.request(spec["method"], spec["path"], **kwargs)

    async def read_directory(self, path: str) -> List[FileInfo]:
        resp = await self._call("read_directory", params={"path": path})
        _ok_or_raise(resp, "Failed to read directory")
        return [FileInfo.from_dict(row) for row in resp.json()]

    async def read_file(self, path: str) -> bytes:
        resp = await self._call("read_file", params={"path": path})
        _ok_or_raise(resp, "Failed to read file")
        return resp.content

    async def write_file(self, path: str, content: Content) -> None:
        payload = {"path": path, "content": _encode_content(content)}
        resp = await self._call("write_file", json=payload)
        _ok_or_raise(resp, "Failed to write file")

    async def delete_file(self, path: str) -> None:
        resp = await self._call("delete_file", params={"path": path})
        _ok_or_raise(resp, "Failed to delete file")

    async def copy_file(self, source: str, destination: str) -> None:
        payload = {"source": source, "destination": destination}
        resp = await self._call("copy", json=payload)
        _ok_or_raise(resp, "Failed to copy file")

    async def move_file(self, source: str, destination: str) -> None:
        payload = {"source": source, "destination": destination}
        resp = await self._call("move", json=payload)
        _ok_or_raise(resp, "Failed to move file")

    async def create_directory(self, path: str) -> None:
        resp = await self._call("create_directory", json={"path": path})
        _ok_or_raise(resp, "Failed to create directory")

    async def get_file_info(self, path: str) -> FileInfo:
        resp = await self._call("file_info", params={"path": path})
        _ok_or_raise(resp, "Failed to get file info")
        return FileInfo.from_dict(resp.json())

    async def search_files(
        self,
        query: str,
        options: Union[SearchOptions, Mapping[str, Any], None] = None,
    ) -> List[FileInfo]:
        payload = {"query": query}
        payload.update(_search_payload(options))
        resp = await self._call("search", json=payload)
        _ok_or_raise(resp, "Failed to search files")
        return [FileInfo.from_dict(row) for row in resp.json()]

    async def upload_file(self, path: str, file: Union[bytes, BinaryIO]) -> None:
        filename = posixpath.basename(path.rstrip("/")) or "blob"
        resp = await self._call(
            "upload",
            data={"path": path},
            files={"file": (filename, file)},
        )
        _ok_or_raise(resp, "Failed to upload file")

    async def download_file(self, path: str) -> str:
        """Ask the backend for a download URL; the file bytes are not fetched."""
        resp = await self._call("download_url", params={"path": path})
        _ok_or_raise(resp, "Failed to generate download URL")
        return resp.text

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "VFS":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
