from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class RawFile(BaseModel):
    """
    File record as returned by the provider.

    Only the fields the API projects are declared. Everything is optional and
    untyped so a record missing any of them, or carrying an unexpected value
    type, still validates.
    """

    model_config = ConfigDict(extra="ignore")

    fileId: Optional[Any] = None
    id: Optional[Any] = None
    name: Optional[Any] = None
    fileType: Optional[Any] = None
    mime: Optional[Any] = None
    url: Optional[Any] = None
    thumbnail: Optional[Any] = None
    thumbnailUrl: Optional[Any] = None


class PublicFile(BaseModel):
    id: str
    name: str
    filetype: Optional[str] = None
    url: str
    thumbnail: Optional[Any] = None


class UploadPayload(BaseModel):
    payload: Union[bytes, str]
    file_name: str
    folder: str = "/uploads"


class ListOptions(BaseModel):
    limit: int = 20
    skip: int = 0
    path: Optional[str] = None
    file_type: Optional[str] = None


class DeleteResponse(BaseModel):
    success: bool = True
    id: str


class ErrorResponse(BaseModel):
    error: str
