"""
Test suite for the image routes.

Storage is backed by a temporary directory so uploads really land on disk
and can be removed again through the public URL.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from la_motors.adapters.local_image_storage import LocalImageStorage
from la_motors.entrypoints.http.dependencies import (
    get_image_storage,
    get_upload_vehicle_image_use_case,
)
from la_motors.entrypoints.http.exception_handlers import register_exception_handlers
from la_motors.entrypoints.http.routes.images import router
from la_motors.use_cases.upload_vehicle_image import (
    MAX_IMAGE_BYTES,
    UploadVehicleImage,
    UploadVehicleImageResponse,
)

VEHICLE_ID = "11111111-1111-1111-1111-111111111111"
ADMIN = {"X-Admin-Password": "s3cret"}
JPEG = b"\xff\xd8\xff\xe0" + b"0" * 256


@pytest.fixture(autouse=True)
def admin_password(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ADMIN_PASSWORD", "s3cret")


@pytest.fixture
def storage(tmp_path: Path) -> LocalImageStorage:
    return LocalImageStorage(tmp_path, "http://testserver", "la-motors-inventory")


@pytest.fixture
def client(storage: LocalImageStorage) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router, prefix="/v1")
    app.dependency_overrides[get_image_storage] = lambda: storage
    return TestClient(app, raise_server_exceptions=False)


def upload(
    client: TestClient,
    content: bytes = JPEG,
    content_type: str = "image/jpeg",
    filename: str = "front.jpg",
    vehicle_id: str = VEHICLE_ID,
    **kwargs,
):
    return client.post(
        f"/v1/vehicles/{vehicle_id}/images",
        files={"file": (filename, content, content_type)},
        **kwargs,
    )


# ==============================================================================
# POST /v1/vehicles/{id}/images
# ==============================================================================


def test_upload_stores_file_and_returns_public_url(
    client: TestClient, storage: LocalImageStorage
) -> None:
    response = upload(client, headers=ADMIN)

    assert response.status_code == 201
    data = response.json()
    assert data["path"].startswith(f"{VEHICLE_ID}/")
    assert data["path"].endswith(".jpg")
    assert data["url"] == (
        f"http://testserver/storage/v1/object/public/la-motors-inventory/{data['path']}"
    )
    assert (storage.bucket_dir / data["path"]).read_bytes() == JPEG


def test_upload_rejects_unsupported_type(client: TestClient) -> None:
    response = upload(client, content=b"GIF89a", content_type="image/gif", headers=ADMIN)

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_CONTENT_TYPE"


def test_upload_rejects_oversized_file(client: TestClient) -> None:
    response = upload(client, content=b"0" * (5 * 1024 * 1024 + 1), headers=ADMIN)

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "FILE_TOO_LARGE"


def test_upload_stores_declared_type_extension_not_client_filename(
    client: TestClient, storage: LocalImageStorage
) -> None:
    response = upload(
        client,
        content=b"<script>alert(1)</script>",
        content_type="image/png",
        filename="x.html",
        headers=ADMIN,
    )

    assert response.status_code == 201
    path = response.json()["path"]
    assert path.endswith(".png")
    assert list(storage.bucket_dir.rglob("*.html")) == []


def test_upload_reads_at_most_one_byte_past_the_limit(client: TestClient) -> None:
    """Oversize bodies are cut at the limit plus one byte before validation."""
    use_case = Mock(spec=UploadVehicleImage)
    use_case.execute.return_value = UploadVehicleImageResponse(url="http://x/a.jpg", path="a.jpg")
    client.app.dependency_overrides[get_upload_vehicle_image_use_case] = lambda: use_case

    upload(client, content=b"0" * (MAX_IMAGE_BYTES + 4096), headers=ADMIN)

    request = use_case.execute.call_args.args[0]
    assert len(request.content) == MAX_IMAGE_BYTES + 1


def test_upload_rejects_malformed_vehicle_id(
    client: TestClient, storage: LocalImageStorage
) -> None:
    response = upload(client, vehicle_id="not-a-uuid", headers=ADMIN)

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "INVALID_UUID"
    assert not storage.bucket_dir.exists()


def test_upload_rejects_empty_file(client: TestClient) -> None:
    response = upload(client, content=b"", headers=ADMIN)

    assert response.status_code == 422


def test_upload_requires_file_field(client: TestClient) -> None:
    response = client.post(f"/v1/vehicles/{VEHICLE_ID}/images", headers=ADMIN)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "file"


def test_upload_requires_admin(client: TestClient, storage: LocalImageStorage) -> None:
    response = upload(client)

    assert response.status_code == 401
    assert not storage.bucket_dir.exists()


# ==============================================================================
# DELETE /v1/images
# ==============================================================================


def test_delete_image_removes_uploaded_file(
    client: TestClient, storage: LocalImageStorage
) -> None:
    uploaded = upload(client, headers=ADMIN).json()

    response = client.delete("/v1/images", params={"url": uploaded["url"]}, headers=ADMIN)

    assert response.status_code == 200
    assert response.json() == {"removed": True}
    assert not (storage.bucket_dir / uploaded["path"]).exists()


def test_delete_image_with_foreign_url_reports_not_removed(client: TestClient) -> None:
    response = client.delete(
        "/v1/images", params={"url": "https://elsewhere.com/a.jpg"}, headers=ADMIN
    )

    assert response.status_code == 200
    assert response.json() == {"removed": False}


def test_delete_image_requires_admin(client: TestClient) -> None:
    response = client.delete("/v1/images", params={"url": "https://elsewhere.com/a.jpg"})

    assert response.status_code == 401
