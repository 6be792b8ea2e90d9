import pytest
from bson import ObjectId

PDF_BYTES = b"%PDF-1.4 example curriculum vitae\n" * 3


@pytest.mark.asyncio
async def test_list_files(async_client, store, auth_headers):
    file_id = store.add_file("cv.pdf", PDF_BYTES)

    response = await async_client.get("/api/gridfs/files", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    (descriptor,) = body["files"]
    assert descriptor["_id"] == str(file_id)
    assert descriptor["filename"] == "cv.pdf"
    assert descriptor["length"] == len(PDF_BYTES)
    assert descriptor["contentType"] == "application/pdf"


@pytest.mark.asyncio
async def test_list_files_empty_bucket(async_client, auth_headers):
    response = await async_client.get("/api/gridfs/files", headers=auth_headers)

    assert response.json() == {"files": [], "count": 0}


@pytest.mark.asyncio
async def test_download_file(async_client, store, auth_headers):
    file_id = store.add_file("cv.pdf", PDF_BYTES, chunk_size=7)

    response = await async_client.get(
        f"/api/gridfs/files/{file_id}", headers=auth_headers
    )

    assert response.status_code == 200
    assert response.content == PDF_BYTES
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == 'attachment; filename="cv.pdf"'
    assert response.headers["content-length"] == str(len(PDF_BYTES))
    assert store.closed_streams == [file_id]


@pytest.mark.asyncio
async def test_download_defaults_content_type(async_client, store, auth_headers):
    file_id = store.add_file("blob.bin", b"\x00\x01\x02", content_type=None)

    response = await async_client.get(
        f"/api/gridfs/files/{file_id}", headers=auth_headers
    )

    assert response.headers["content-type"] == "application/octet-stream"
    assert response.content == b"\x00\x01\x02"


@pytest.mark.asyncio
async def test_download_non_ascii_filename(async_client, store, auth_headers):
    file_id = store.add_file("currículum.pdf", PDF_BYTES)

    response = await async_client.get(
        f"/api/gridfs/files/{file_id}", headers=auth_headers
    )

    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="curr?culum.pdf"')
    assert "filename*=UTF-8''curr%C3%ADculum.pdf" in disposition


@pytest.mark.asyncio
async def test_download_unknown_file(async_client, store, auth_headers):
    response = await async_client.get(
        f"/api/gridfs/files/{ObjectId()}", headers=auth_headers
    )

    assert response.status_code == 404
    assert response.json() == {"error": "File not found"}
    assert store.closed_streams == []


@pytest.mark.asyncio
async def test_download_malformed_id(async_client, auth_headers):
    response = await async_client.get("/api/gridfs/files/xyz", headers=auth_headers)

    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_download_requires_auth(async_client, store):
    file_id = store.add_file("cv.pdf", PDF_BYTES)

    response = await async_client.get(f"/api/gridfs/files/{file_id}")

    assert response.status_code == 401
