"""Single-image upload endpoint."""

from __future__ import annotations

import os

import pytest

from app.application.services import upload_service
from tests.support import auth_header

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(upload_service.settings, "UPLOAD_DIR", str(tmp_path))
    return tmp_path


def test_upload_requires_auth(client, upload_dir):
    response = client.post("/api/upload/image", files={"image": ("a.png", PNG_BYTES, "image/png")})

    assert response.status_code == 401


def test_upload_image(client, alice, upload_dir):
    response = client.post(
        "/api/upload/image",
        files={"image": ("photo.png", PNG_BYTES, "image/png")},
        headers=auth_header(alice),
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["originalname"] == "photo.png"
    assert data["mimetype"] == "image/png"
    assert data["size"] == len(PNG_BYTES)
    assert data["filename"].startswith("image-") and data["filename"].endswith(".png")
    assert data["url"] == f"http://testserver/uploads/{data['filename']}"
    assert (upload_dir / data["filename"]).read_bytes() == PNG_BYTES


def test_upload_url_honours_forwarded_proto(client, alice, upload_dir):
    headers = {**auth_header(alice), "X-Forwarded-Proto": "https"}
    response = client.post("/api/upload/image", files={"image": ("p.jpg", PNG_BYTES, "image/jpeg")}, headers=headers)

    assert response.json()["data"]["url"].startswith("https://testserver/uploads/")


def test_upload_accepts_image_extension_with_generic_mime(client, alice, upload_dir):
    response = client.post(
        "/api/upload/image",
        files={"image": ("scan.webp", PNG_BYTES, "application/octet-stream")},
        headers=auth_header(alice),
    )

    assert response.status_code == 201


def test_upload_rejects_non_image(client, alice, upload_dir):
    response = client.post(
        "/api/upload/image",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=auth_header(alice),
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Only image files are allowed! Received: text/plain"
    assert os.listdir(upload_dir) == []


def test_upload_without_file(client, alice, upload_dir):
    response = client.post("/api/upload/image", data={"title": "x"}, headers=auth_header(alice))

    assert response.status_code == 400
    assert response.json()["message"] == upload_service.NO_FILE_MESSAGE


def test_upload_wrong_field_name(client, alice, upload_dir):
    response = client.post(
        "/api/upload/image",
        files={"file": ("photo.png", PNG_BYTES, "image/png")},
        headers=auth_header(alice),
    )

    assert response.status_code == 400
    assert response.json()["message"] == 'Unexpected field name. Use "image" as field name.'


def test_upload_two_files(client, alice, upload_dir):
    response = client.post(
        "/api/upload/image",
        files=[
            ("image", ("a.png", PNG_BYTES, "image/png")),
            ("image", ("b.png", PNG_BYTES, "image/png")),
        ],
        headers=auth_header(alice),
    )

    assert response.status_code == 400
    assert response.json()["message"] == upload_service.TOO_MANY_FILES_MESSAGE


def test_upload_too_large(client, alice, upload_dir, monkeypatch):
    monkeypatch.setattr(upload_service.settings, "MAX_UPLOAD_SIZE", 16)
    response = client.post(
        "/api/upload/image",
        files={"image": ("big.png", PNG_BYTES, "image/png")},
        headers=auth_header(alice),
    )

    assert response.status_code == 400
    assert response.json()["message"] == "File too large. Maximum size is 10MB."


def test_generate_filename_keeps_extension():
    name = upload_service.generate_filename("Holiday Photo.JPG")

    assert name.startswith("image-")
    assert name.endswith(".JPG")
    assert " " not in name
