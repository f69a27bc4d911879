"""Configuration model for the Azure file share filesystem."""

from __future__ import annotations

import os
from typing import Literal, Self

from pydantic import Field, SecretStr, model_validator

from azfilefs.configs.base import FileSystemConfig


class AzureFileFilesystemConfig(FileSystemConfig):
    """Configuration for an Azure Storage file share.

    Example:
        ```python
        config = AzureFileFilesystemConfig(
            share_name="reports",
            connection_string="DefaultEndpointsProtocol=https;AccountName=...",
            prefix="tenants/acme",
        )
        fs = config.create_fs()
        ```
    """

    type: Literal["azfile"] = Field("azfile", init=False)
    """Azure file share filesystem type"""

    share_name: str = Field(title="Share Name", examples=["reports"], min_length=3, max_length=63)
    """Name of the file share"""

    connection_string: SecretStr | None = Field(default=None, title="Connection String")
    """Storage account connection string"""

    account_url: str | None = Field(
        default=None,
        title="Account URL",
        examples=["https://myaccount.file.core.windows.net"],
    )
    """File service endpoint, used when no connection string is given"""

    credential: SecretStr | None = Field(default=None, title="Credential")
    """Account key or SAS token for the account URL"""

    prefix: str = Field(default="", title="Path Prefix", examples=["tenants/acme"])
    """Subtree of the share every operation is scoped to"""

    disable_recursive_delete: bool = Field(default=False, title="Disable Recursive Delete")
    """Only delete empty directories instead of removing their contents first"""

    @model_validator(mode="after")
    def _check_endpoint(self) -> Self:
        if self.connection_string is None and self.account_url is None:
            msg = "Either connection_string or account_url must be set"
            raise ValueError(msg)
        return self

    @classmethod
    def from_env(cls, env_prefix: str = "AZURE_FILE_STORAGE_") -> Self:
        """Build a configuration from environment variables.

        Reads ``{env_prefix}ACCOUNT``, ``{env_prefix}ACCESS_KEY`` and
        ``{env_prefix}SHARE_NAME``, plus the optional ``{env_prefix}PATH_PREFIX``.

        Raises:
            KeyError: If a required variable is not set
        """
        account = os.environ[f"{env_prefix}ACCOUNT"]
        access_key = os.environ[f"{env_prefix}ACCESS_KEY"]
        connection_string = (
            f"DefaultEndpointsProtocol=https;AccountName={account};AccountKey={access_key}"
        )
        return cls(
            share_name=os.environ[f"{env_prefix}SHARE_NAME"],
            connection_string=SecretStr(connection_string),
            prefix=os.environ.get(f"{env_prefix}PATH_PREFIX", ""),
        )
