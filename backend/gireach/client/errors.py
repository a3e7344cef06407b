"""Errors raised by the client-side stores."""

from typing import Optional


class ClientStoreError(Exception):
    """Base class for failures the stores surface to their callers."""


class ContentSaveError(ClientStoreError):
    def __init__(self, page_id: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.page_id = page_id
        self.status_code = status_code


class SettingsSaveError(ClientStoreError):
    def __init__(self, setting_key: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.setting_key = setting_key
        self.status_code = status_code
