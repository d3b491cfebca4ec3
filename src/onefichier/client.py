"""FichierClient, an async binding over the 1fichier.com REST API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from onefichier.models import (
    ChangeAttrRequest,
    ChangeAttrResponse,
    CopyFilesRequest,
    CopyFilesResponse,
    CreateFolderRequest,
    CreateFolderResponse,
    DownloadTokenRequest,
    DownloadTokenResponse,
    FileInfo,
    FileInfoRequest,
    FileListResponse,
    FileRef,
    FolderInfo,
    ListFilesRequest,
    ListFoldersRequest,
    MoveFilesRequest,
    MoveFilesResponse,
    MoveFolderRequest,
    MoveFolderResponse,
    RemoteUploadInfoResponse,
    RemoteUploadListResponse,
    RemoteUploadRequest,
    RemoteUploadRequestResponse,
    RemoveFilesResponse,
    RemoveFolderResponse,
    RenameFilesResponse,
    RenameItem,
    ScanFileResponse,
    ShareFolderRequest,
    ShareFolderResponse,
    UploadResult,
    UploadServerResponse,
    UserInfoResponse,
    UserSettings,
    VoucherCheckResponse,
    VoucherListResponse,
    VoucherUseResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.1fichier.com/v1"


def _compact(body: Mapping[str, Any]) -> dict[str, Any]:
    """Drop top-level keys whose value is None."""
    return {key: value for key, value in body.items() if value is not None}


class FichierClient:
    """Async client for the 1fichier.com API.

    Each method issues exactly one HTTP request and returns the decoded JSON
    body. The ``status`` field of the response is not inspected; callers check
    it themselves (see onefichier.exceptions.ensure_ok). Transport failures and
    non-2xx responses raise httpx errors unchanged.

    Extra keyword arguments on every method (``timeout=``, ``headers=``,
    ``extensions=`` ...) are forwarded to httpx as-is.

    Example:
        async with FichierClient("my-api-key") as client:
            info = await client.get_user_info()
            print(info["email"])
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL) -> None:
        """Initialize the client.

        Args:
            api_key: 1fichier.com API key, sent as a bearer token
            base_url: API root URL
        """
        self._api_key = api_key
        self._base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            follow_redirects=True,
        )

    async def __aenter__(self) -> FichierClient:
        """Enter async context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit async context manager."""
        await self.close()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    async def close(self) -> None:
        """Close the underlying HTTP transport."""
        await self._client.aclose()

    async def _post(
        self, path: str, body: Mapping[str, Any] | None = None, **request_kwargs: Any
    ) -> Any:
        """POST body as JSON to path and return the decoded response.

        A body of None sends no content at all, which the API distinguishes
        from an empty object.
        """
        logger.debug(f"POST {path}")
        if body is not None:
            request_kwargs["json"] = _compact(body)
        response = await self._client.post(path, **request_kwargs)
        response.raise_for_status()
        return response.json()

    def _upload_host_url(self, server: str | None, path: str) -> httpx.URL:
        """Resolve path against the upload server, or the API root if none."""
        if server:
            if "://" not in server:
                server = f"https://{server}"
            return httpx.URL(server).join(path)
        return self._client.base_url.join(path.lstrip("/"))

    # Download

    async def get_download_token(
        self, data: DownloadTokenRequest, **request_kwargs: Any
    ) -> DownloadTokenResponse:
        """Generate a download link for a file.

        Args:
            data: File url plus optional token restrictions (single use,
                IP restriction, password, inline, CDN ...)

        Returns:
            Envelope with the generated download ``url``
        """
        return await self._post("/download/get_token.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    # Upload

    async def get_upload_server(
        self, pretty: int | None = None, **request_kwargs: Any
    ) -> UploadServerResponse:
        """Allocate an upload node.

        Returns:
            The upload server host (``url``) and the session ``id`` that the
            following upload_files() and get_upload_result() calls need
        """
        return await self._post(  # type: ignore[no-any-return]
            "/upload/get_upload_server.cgi", {"pretty": pretty}, **request_kwargs
        )

    async def upload_files(
        self,
        upload_id: str,
        files: Any,
        data: Mapping[str, Any] | None = None,
        *,
        server: str | None = None,
        **request_kwargs: Any,
    ) -> UploadResult | str:
        """Upload files as multipart/form-data.

        The body is encoded with httpx's multipart encoder. Headers are merged
        in order: the client's Authorization header, the encoder's headers
        (Content-Type with boundary, Content-Length), then any caller
        ``headers=``, so the caller wins on a collision.

        Args:
            upload_id: Session id from get_upload_server()
            files: Files in httpx ``files=`` format, typically
                ``[("file[]", (name, fileobj, mime_type))]``
            data: Extra form fields (``did`` folder id, ``mail`` ...)
            server: Upload host from get_upload_server(); the API root is used
                when omitted

        Returns:
            The upload manifest when the final response (after redirects) is
            JSON, otherwise the response text (the HTML end page)

        Raises:
            ValueError: If files is empty; httpx would otherwise send the form
                fields url-encoded instead of as multipart
        """
        if not files:
            raise ValueError("upload_files requires at least one file")

        url = self._upload_host_url(server, "/upload.cgi")
        encoded = httpx.Request(
            "POST", url, params={"id": upload_id}, data=data, files=files
        )
        headers = httpx.Headers({"Authorization": self._client.headers["Authorization"]})
        headers.update(
            {key: value for key, value in encoded.headers.items() if key.lower() != "host"}
        )
        headers.update(request_kwargs.pop("headers", None) or {})

        logger.info(f"Uploading to {encoded.url}")
        response = await self._client.post(
            encoded.url, content=encoded.read(), headers=headers, **request_kwargs
        )
        response.raise_for_status()
        if "json" not in response.headers.get("Content-Type", ""):
            return response.text
        return response.json()  # type: ignore[no-any-return]

    async def get_upload_result(
        self,
        xid: str,
        export: int | None = None,
        json: int | None = None,
        *,
        server: str | None = None,
        **request_kwargs: Any,
    ) -> UploadResult | str:
        """Fetch the result page of a finished upload.

        Args:
            xid: Upload session id
            export: Set to 1 for a CSV export
            json: Set to 1 for JSON, 2 for pretty JSON
            server: Upload host from get_upload_server()

        Returns:
            Decoded UploadResult when ``json`` is set, otherwise the raw page
            text (HTML, or CSV with ``export``)
        """
        params: list[tuple[str, str]] = [("xid", xid)]
        if export:
            params.append(("Export", str(export)))
        if json:
            params.append(("JSON", str(json)))

        url = self._upload_host_url(server, "/end.pl")
        logger.debug(f"GET {url}")
        response = await self._client.get(url, params=params, **request_kwargs)
        response.raise_for_status()
        if json:
            return response.json()  # type: ignore[no-any-return]
        return response.text

    # Files

    async def list_files(
        self, data: ListFilesRequest | None = None, **request_kwargs: Any
    ) -> FileListResponse:
        """List files of a folder (root when no folder_id), optionally by date range."""
        return await self._post("/file/ls.cgi", data or {}, **request_kwargs)  # type: ignore[no-any-return]

    async def get_file_info(
        self, data: FileInfoRequest, **request_kwargs: Any
    ) -> FileInfo:
        return await self._post("/file/info.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    async def scan_file(self, url: str, **request_kwargs: Any) -> ScanFileResponse:
        """Ask for an antivirus scan of a file."""
        return await self._post("/file/scan.cgi", {"url": url}, **request_kwargs)  # type: ignore[no-any-return]

    async def remove_files(
        self, files: list[FileRef], **request_kwargs: Any
    ) -> RemoveFilesResponse:
        """Remove files.

        The server answers for the batch as a whole; per-file results are not
        reconciled here.
        """
        return await self._post("/file/rm.cgi", {"files": files}, **request_kwargs)  # type: ignore[no-any-return]

    async def move_files(
        self, data: MoveFilesRequest, **request_kwargs: Any
    ) -> MoveFilesResponse:
        return await self._post("/file/mv.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    async def rename_files(
        self,
        urls: list[RenameItem],
        pretty: int | None = None,
        **request_kwargs: Any,
    ) -> RenameFilesResponse:
        """Rename files.

        Args:
            urls: Pairs of ``{"url": ..., "filename": ...}``
            pretty: Set to 1 for pretty-printed JSON output
        """
        return await self._post(  # type: ignore[no-any-return]
            "/file/rename.cgi", {"urls": urls, "pretty": pretty}, **request_kwargs
        )

    async def copy_files(
        self, data: CopyFilesRequest, **request_kwargs: Any
    ) -> CopyFilesResponse:
        """Copy files, possibly from another user's shared folder."""
        return await self._post("/file/cp.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    async def change_file_attributes(
        self, data: ChangeAttrRequest, **request_kwargs: Any
    ) -> ChangeAttrResponse:
        """Change file name, description, password, ACL and delivery flags."""
        return await self._post("/file/chattr.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    # Folders

    async def list_folders(
        self, data: ListFoldersRequest | None = None, **request_kwargs: Any
    ) -> FolderInfo:
        """Describe a folder and its sub-folders (root when no folder_id).

        Pass ``files=1`` to include the file items of the folder.
        """
        return await self._post("/folder/ls.cgi", data or {}, **request_kwargs)  # type: ignore[no-any-return]

    async def create_folder(
        self, data: CreateFolderRequest, **request_kwargs: Any
    ) -> CreateFolderResponse:
        return await self._post("/folder/mkdir.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    async def share_folder(
        self, data: ShareFolderRequest, **request_kwargs: Any
    ) -> ShareFolderResponse:
        return await self._post("/folder/share.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    async def move_folder(
        self, data: MoveFolderRequest, **request_kwargs: Any
    ) -> MoveFolderResponse:
        return await self._post("/folder/mv.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    async def remove_folder(
        self, folder_id: int, **request_kwargs: Any
    ) -> RemoveFolderResponse:
        return await self._post(  # type: ignore[no-any-return]
            "/folder/rm.cgi", {"folder_id": folder_id}, **request_kwargs
        )

    # Account

    async def get_user_info(
        self, data: UserSettings | None = None, **request_kwargs: Any
    ) -> UserInfoResponse:
        """Get account information, updating any settings given in data."""
        return await self._post("/user/info.cgi", data or {}, **request_kwargs)  # type: ignore[no-any-return]

    # Remote upload

    async def list_remote_uploads(self, **request_kwargs: Any) -> RemoteUploadListResponse:
        return await self._post("/remote/ls.cgi", **request_kwargs)  # type: ignore[no-any-return]

    async def get_remote_upload_info(
        self, id: str, **request_kwargs: Any
    ) -> RemoteUploadInfoResponse:
        return await self._post("/remote/info.cgi", {"id": id}, **request_kwargs)  # type: ignore[no-any-return]

    async def request_remote_upload(
        self, data: RemoteUploadRequest, **request_kwargs: Any
    ) -> RemoteUploadRequestResponse:
        """Queue URLs for the server to fetch into the account.

        ``headers`` in data are sent by the server when fetching, not by this
        client.
        """
        return await self._post("/remote/request.cgi", data, **request_kwargs)  # type: ignore[no-any-return]

    # Vouchers

    async def list_vouchers(self, **request_kwargs: Any) -> VoucherListResponse:
        """List unused vouchers."""
        return await self._post("/vouchers/ls.cgi", **request_kwargs)  # type: ignore[no-any-return]

    async def check_voucher(
        self, voucher: str, **request_kwargs: Any
    ) -> VoucherCheckResponse:
        return await self._post(  # type: ignore[no-any-return]
            "/vouchers/check.cgi", {"voucher": voucher}, **request_kwargs
        )

    async def use_voucher(
        self, voucher: str, user_email: str, **request_kwargs: Any
    ) -> VoucherUseResponse:
        return await self._post(  # type: ignore[no-any-return]
            "/vouchers/use.cgi",
            {"voucher": voucher, "user_email": user_email},
            **request_kwargs,
        )
