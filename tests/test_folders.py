"""Tests for folder endpoints."""

from __future__ import annotations

from helpers import RequestRecorder, json_body

from onefichier import FichierClient


class TestListFolders:
    """Tests for folder listing."""

    async def test_defaults_to_empty_body(
        self, client: FichierClient, recorder: RequestRecorder
    ) -> None:
        await client.list_folders()

        assert recorder.last.url.path == "/v1/folder/ls.cgi"
        assert json_body(recorder.last) == {}

    async def test_returns_nested_tree_as_sent(
        self, client: FichierClient, recorder: RequestRecorder
    ) -> None:
        """Test that sub-folders and items come back at whatever depth was sent."""
        tree = {
            "folder_id": 0,
            "name": "Root",
            "sub_folders": [
                {
                    "folder_id": 7,
                    "name": "Docs",
                    "sub_folders": [{"folder_id": 8, "name": "Old", "sub_folders": []}],
                }
            ],
            "items": [],
        }
        recorder.queue_json(tree)

        result = await client.list_folders({"folder_id": 0, "files": 1})

        assert json_body(recorder.last) == {"folder_id": 0, "files": 1}
        assert result == tree
        assert result["sub_folders"][0]["sub_folders"][0]["name"] == "Old"


class TestFolderOperations:
    """Tests for folder mutations."""

    async def test_create_folder(self, client: FichierClient, recorder: RequestRecorder) -> None:
        await client.create_folder({"name": "folder"})

        assert recorder.last.url.path == "/v1/folder/mkdir.cgi"
        assert json_body(recorder.last) == {"name": "folder"}

    async def test_create_folder_in_parent(
        self, client: FichierClient, recorder: RequestRecorder
    ) -> None:
        await client.create_folder({"name": "folder", "folder_id": 4})

        assert json_body(recorder.last) == {"name": "folder", "folder_id": 4}

    async def test_share_folder(self, client: FichierClient, recorder: RequestRecorder) -> None:
        await client.share_folder(
            {
                "folder_id": 1,
                "share": 1,
                "pass": "pw",
                "shares": [{"email": "a@example.com", "rw": 1, "hide_links": 0}],
            }
        )

        assert recorder.last.url.path == "/v1/folder/share.cgi"
        assert json_body(recorder.last) == {
            "folder_id": 1,
            "share": 1,
            "pass": "pw",
            "shares": [{"email": "a@example.com", "rw": 1, "hide_links": 0}],
        }

    async def test_move_folder(self, client: FichierClient, recorder: RequestRecorder) -> None:
        await client.move_folder({"folder_id": 1, "destination_folder_id": 2})

        assert recorder.last.url.path == "/v1/folder/mv.cgi"
        assert json_body(recorder.last) == {"folder_id": 1, "destination_folder_id": 2}

    async def test_remove_folder_repackages_id(
        self, client: FichierClient, recorder: RequestRecorder
    ) -> None:
        """Test that the integer argument is sent as folder_id."""
        await client.remove_folder(5)

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/v1/folder/rm.cgi"
        assert json_body(recorder.last) == {"folder_id": 5}
