"""Request and response shapes for the 1fichier.com API.

Keys match the wire format exactly. Shapes with keys that are not valid Python
identifiers (``pass``, ``content-type``, ``2fa``) use the functional TypedDict
syntax so the exact key stays addressable.
"""

from typing import NotRequired, TypedDict

# Requests


class FileRef(TypedDict):
    """A file to remove, with its optional removal code."""

    url: str
    code: NotRequired[str]


class RenameItem(TypedDict):
    url: str
    filename: str


class FolderShare(TypedDict):
    email: str
    rw: int
    hide_links: int


class Acl(TypedDict, total=False):
    """Access restrictions attachable to a file."""

    ip: list[str]
    country: list[str]
    email: list[str]
    premium: int


DownloadTokenRequest = TypedDict(
    "DownloadTokenRequest",
    {
        "url": str,
        "inline": NotRequired[int],
        "cdn": NotRequired[int],
        "restrict_ip": NotRequired[int],
        "single": NotRequired[int],
        "pass": NotRequired[str],
        "no_ssl": NotRequired[int],
        "folder_id": NotRequired[int],
        "filename": NotRequired[str],
        "sharing_user": NotRequired[str],
    },
)


class ListFilesRequest(TypedDict, total=False):
    folder_id: int
    sharing_user: str
    sent_before: str
    sent_after: str


FileInfoRequest = TypedDict(
    "FileInfoRequest",
    {
        "url": str,
        "pass": NotRequired[str],
        "folder_id": NotRequired[int],
        "filename": NotRequired[str],
        "sharing_user": NotRequired[str],
    },
)


class MoveFilesRequest(TypedDict):
    urls: list[str]
    destination_folder_id: int
    destination_user: NotRequired[str]
    rename: NotRequired[str]


CopyFilesRequest = TypedDict(
    "CopyFilesRequest",
    {
        "urls": list[str],
        "folder_id": NotRequired[int],
        "pass": NotRequired[str],
        "sharing_user": NotRequired[str],
        "rename": NotRequired[str],
    },
)

ChangeAttrRequest = TypedDict(
    "ChangeAttrRequest",
    {
        "urls": list[str],
        "filename": NotRequired[str],
        "description": NotRequired[str],
        "pass": NotRequired[str],
        "no_ssl": NotRequired[int],
        "inline": NotRequired[int],
        "cdn": NotRequired[int],
        "acl": NotRequired[Acl],
    },
)


class ListFoldersRequest(TypedDict, total=False):
    folder_id: int
    sharing_user: str
    files: int


class CreateFolderRequest(TypedDict):
    name: str
    folder_id: NotRequired[int]
    sharing_user: NotRequired[str]


ShareFolderRequest = TypedDict(
    "ShareFolderRequest",
    {
        "folder_id": int,
        "share": NotRequired[int],
        "pass": NotRequired[str],
        "shares": NotRequired[list[FolderShare]],
    },
)


class MoveFolderRequest(TypedDict):
    folder_id: int
    destination_folder_id: int
    destination_user: NotRequired[str]
    rename: NotRequired[str]


class UserSettings(TypedDict, total=False):
    """Account settings; sending any of them updates the account."""

    ftp_mode: int
    ftp_did: int
    ftp_report: int
    ru_report: int
    default_domain: int
    page_limit: int
    default_port: int
    default_port_files: int
    use_cdn: int
    download_menu: int


class RemoteUploadRequest(TypedDict):
    urls: list[str]
    folder_id: NotRequired[int]
    headers: NotRequired[dict[str, str]]


# Responses

FileInfo = TypedDict(
    "FileInfo",
    {
        "url": str,
        "filename": str,
        "size": int,
        "date": str,
        "folder_id": int,
        "path": str,
        "checksum": str,
        "content_type": str,
        "description": str,
        "pass": int,
        "no_ssl": int,
        "inline": int,
        "cdn": int,
        "acl": Acl,
    },
)

FileListItem = TypedDict(
    "FileListItem",
    {
        "url": str,
        "filename": str,
        "size": int,
        "date": str,
        "checksum": str,
        "content-type": str,
        "pass": int,
        "acl": int,
        "cdn": int,
    },
)

FolderInfo = TypedDict(
    "FolderInfo",
    {
        "folder_id": int,
        "name": str,
        "create_date": str,
        "shared": str,
        "pass": int,
        "shares": list[FolderShare],
        "user": str,
        "rw": int,
        "hide_links": int,
        "files": int,
        "size": int,
        "sub_folders": "list[FolderInfo]",
        "items": list[FileListItem],
    },
)


class DownloadTokenResponse(TypedDict):
    url: str
    status: str
    message: str


class UploadServerResponse(TypedDict):
    url: str
    id: str


class UploadLink(TypedDict):
    download: str
    filename: str
    remove: str
    size: str
    whirlpool: str


class UploadResult(TypedDict):
    incoming: int
    links: list[UploadLink]


class FileListResponse(TypedDict):
    status: str
    count: int
    items: list[FileListItem]


class RemoveFilesResponse(TypedDict):
    status: str
    removed: int
    urls: list[str]


class MoveFilesResponse(TypedDict):
    status: str
    moved: int
    urls: list[str]
    filename: NotRequired[str]


class RenamedFile(TypedDict):
    url: str
    old_filename: str
    new_filename: str


class RenameFilesResponse(TypedDict):
    status: str
    renamed: int
    urls: list[RenamedFile]


class CopiedFile(TypedDict):
    from_url: str
    to_url: str


class CopyFilesResponse(TypedDict):
    status: str
    copied: int
    urls: list[CopiedFile]
    filename: NotRequired[str]


class ChangeAttrResponse(TypedDict):
    status: str
    updated: int
    urls: list[str]


class ScanFileResponse(TypedDict):
    status: str
    message: str
    date: NotRequired[str]


class CreateFolderResponse(TypedDict):
    status: str
    folder_id: int
    name: str
    message: str


class ShareFolderResponse(TypedDict):
    status: str
    url: NotRequired[str]
    message: str


class MoveFolderResponse(TypedDict):
    status: str
    message: str
    old_name: NotRequired[str]
    new_name: NotRequired[str]


class RemoveFolderResponse(TypedDict):
    status: str
    message: str


UserInfoResponse = TypedDict(
    "UserInfoResponse",
    {
        "status": str,
        "message": str,
        "email": str,
        "offer": int,
        "2fa": int,
        "mail_rm": int,
        "ftp_mode": int,
        "ftp_did": int,
        "ftp_report": int,
        "ru_report": int,
        "default_domain": int,
        "page_limit": int,
        "default_port": int,
        "default_port_files": int,
        "cdn": int,
        "download_menu": int,
        "use_cdn": int,
        "subscription_end": str,
        "default_quota": int,
        "default_cold_storage_quota": int,
        "hot_storage": int,
        "cold_storage": int,
        "stats_date": str,
        "allowed_cold_storage": int,
        "available_storage": int,
        "available_cold_storage": int,
        "extended_quota": int,
        "extended_quota_end": str,
        "overquota": int,
        "upload_forbidden": int,
    },
)


class RemoteUploadSummary(TypedDict):
    id: int
    request_date: str
    execution_date: str


class RemoteUploadListResponse(TypedDict):
    status: str
    data: list[RemoteUploadSummary]


class RemoteUploadLinkResult(TypedDict):
    status: str
    url: str
    download_link: str
    message: str


class RemoteUploadInfoResponse(TypedDict):
    id: int
    request_date: str
    execution_date: str
    links: list[str]
    result: list[RemoteUploadLinkResult]


class RemoteUploadRequestResponse(TypedDict):
    id: int
    date: str
    status: str
    urls: list[str]
    headers: dict[str, str]


class Voucher(TypedDict):
    voucher: str
    service: str


class VoucherListResponse(TypedDict):
    status: str
    count: int
    data: list[Voucher]


class VoucherCheckResponse(TypedDict):
    status: str
    service: str


class VoucherUseResponse(TypedDict):
    status: str
    message: str
