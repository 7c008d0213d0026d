from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.errors import ProviderError
from app.services.storage import MediaGateway
from main import create_app


class FakeGateway(MediaGateway):
    """In-memory stand-in for the ImageKit gateway that records every call."""

    def __init__(self):
        self.calls: List[tuple] = []
        self.files: Dict[str, Dict[str, Any]] = {}
        self.error: Optional[ProviderError] = None
        self.auth_params = {"token": "tok", "expire": 1700000000, "signature": "sig"}

    def _record(self, *call):
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    def get_auth_params(self) -> Dict[str, Any]:
        self._record("auth")
        return self.auth_params

    def upload(self, payload, file_name, folder):
        self._record("upload", payload, file_name, folder)
        record = {
            "fileId": f"file_{len(self.files) + 1}",
            "name": file_name,
            "fileType": "image",
            "url": f"https://ik.imagekit.io/demo{folder}/{file_name}?updatedAt=1700000000000",
            "thumbnailUrl": f"https://ik.imagekit.io/demo/tr:n-ik_ml_thumbnail{folder}/{file_name}",
        }
        self.files[record["fileId"]] = record
        return record

    def list_files(self, options):
        self._record("list", options)
        return list(self.files.values())

    def get_details(self, file_id):
        self._record("details", file_id)
        if file_id not in self.files:
            raise ProviderError("The requested file does not exist.", "details")
        return self.files[file_id]

    def delete(self, file_id):
        self._record("delete", file_id)
        self.files.pop(file_id, None)


@pytest.fixture
def gateway():
    """Create a fake gateway with no stored files."""
    return FakeGateway()


@pytest.fixture
def client(gateway):
    """Create a test client for an app wired to the fake gateway."""
    return TestClient(create_app(gateway=gateway))


@pytest.fixture
def stored_files(gateway):
    """Seed the fake gateway with two files."""
    gateway.files = {
        "abc123": {
            "fileId": "abc123",
            "name": "cat.png",
            "fileType": "image",
            "url": "https://ik.imagekit.io/demo/uploads/cat.png?updatedAt=1700000000000",
            "thumbnail": "https://ik.imagekit.io/demo/tr:n-ik_ml_thumbnail/uploads/cat.png",
        },
        "def456": {
            "id": "def456",
            "name": "notes.pdf",
            "mime": "application/pdf",
            "url": "https://ik.imagekit.io/demo/uploads/notes.pdf",
        },
    }
    return gateway.files
