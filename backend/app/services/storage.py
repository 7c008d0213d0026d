import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Union

from imagekitio import ImageKit
from imagekitio.models.ListAndSearchFileRequestOptions import (
    ListAndSearchFileRequestOptions,
)
from imagekitio.models.UploadFileRequestOptions import UploadFileRequestOptions

from app.config import Settings
from app.errors import ProviderError
from app.models.schemas import ListOptions

logger = logging.getLogger(__name__)

RawRecord = Dict[str, Any]

# --- Interface Definition ---


class MediaGateway(ABC):
    @abstractmethod
    def get_auth_params(self) -> Dict[str, Any]:
        """Signature material for the client-side upload SDK."""
        pass

    @abstractmethod
    def upload(self, payload: Union[bytes, str], file_name: str, folder: str) -> RawRecord:
        pass

    @abstractmethod
    def list_files(self, options: ListOptions) -> List[RawRecord]:
        pass

    @abstractmethod
    def get_details(self, file_id: str) -> RawRecord:
        pass

    @abstractmethod
    def delete(self, file_id: str) -> None:
        pass


# --- ImageKit Implementation ---


def _provider_message(exc: Exception, fallback: str) -> str:
    # imagekitio exceptions carry the API message on `.message`
    message = getattr(exc, "message", None) or str(exc)
    return str(message) if message else fallback


class ImageKitGateway(MediaGateway):
    def __init__(self, client: ImageKit):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageKitGateway":
        client = ImageKit(
            public_key=settings.public_key,
            private_key=settings.private_key,
            url_endpoint=settings.url_endpoint,
        )
        logger.info("ImageKit client initialized for %s", settings.url_endpoint)
        return cls(client)

    def get_auth_params(self) -> Dict[str, Any]:
        try:
            return self.client.get_authentication_parameters()
        except Exception as e:
            logger.warning("Failed to generate auth parameters: %s", e)
            raise ProviderError(_provider_message(e, "Auth parameters failed"), "auth") from e

    def upload(self, payload: Union[bytes, str], file_name: str, folder: str) -> RawRecord:
        try:
            result = self.client.upload_file(
                file=payload,
                file_name=file_name,
                options=UploadFileRequestOptions(folder=folder),
            )
        except Exception as e:
            logger.warning("Failed to upload %s to %s: %s", file_name, folder, e)
            raise ProviderError(_provider_message(e, "Upload failed"), "upload") from e

        logger.info("Uploaded %s to %s", file_name, folder)
        return _raw(result)

    def list_files(self, options: ListOptions) -> List[RawRecord]:
        request_options = ListAndSearchFileRequestOptions(
            **options.model_dump(exclude_none=True)
        )
        try:
            result = self.client.list_files(options=request_options)
        except Exception as e:
            logger.warning("Failed to list files under %s: %s", options.path or "/", e)
            raise ProviderError(_provider_message(e, "List failed"), "list") from e

        return _raw(result) or []

    def get_details(self, file_id: str) -> RawRecord:
        try:
            result = self.client.get_file_details(file_id=file_id)
        except Exception as e:
            logger.warning("Failed to fetch details for %s: %s", file_id, e)
            raise ProviderError(_provider_message(e, "Fetch details failed"), "details") from e

        return _raw(result)

    def delete(self, file_id: str) -> None:
        try:
            self.client.delete_file(file_id=file_id)
        except Exception as e:
            logger.warning("Failed to delete %s: %s", file_id, e)
            raise ProviderError(_provider_message(e, "Delete failed"), "delete") from e

        logger.info("Deleted %s", file_id)


def _raw(result: Any) -> Any:
    """Return the provider's JSON body (camelCase keys) behind an SDK result object."""
    metadata = getattr(result, "response_metadata", None)
    if metadata is None:
        return result
    return metadata.raw
