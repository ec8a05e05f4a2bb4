"""Pydantic schema for stored uploads."""

from pydantic import BaseModel


class UploadedImage(BaseModel):
    url: str
    filename: str
    originalname: str
    mimetype: str
    size: int
