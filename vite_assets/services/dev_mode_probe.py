import logging
import os

from vite_assets.exceptions.vite_exceptions import ConfigError
from vite_assets.misc.utils import file_content
from vite_assets.models.enums import StrictnessPolicy
from vite_assets.models.roots import Roots

logger = logging.getLogger(__name__)


class DevModeProbe:
    """
    Detects whether a Vite dev server is running by looking for the marker
    file the dev server writes into the site root. The probe never caches:
    every call reflects the current state of the marker file.
    """

    def __init__(
        self,
        roots: Roots,
        strictness: StrictnessPolicy,
        dev_file: str = ".dev",
        dev_server_key: str = "VITE_SERVER",
    ):
        self._roots = roots
        self._strictness = strictness
        self._dev_file = dev_file
        self._dev_server_key = dev_server_key

    @property
    def dev_file_path(self) -> str:
        return os.path.join(self._roots.effective_root, self._dev_file)

    def is_dev(self) -> bool:
        return os.path.exists(self.dev_file_path)

    def server_origin(self) -> str:
        try:
            content = file_content(self.dev_file_path) or ""
        except UnicodeDecodeError as decode_error:
            raise ConfigError(
                error_description=f"`{self._dev_file}` file is not valid UTF-8.",
                log_message=f"Dev marker file {self.dev_file_path} is not valid UTF-8: {decode_error}",
            ) from decode_error
        first_line = content.strip().split("\n", 1)[0].strip()
        key, separator, value = first_line.partition("=")
        if (key != self._dev_server_key or not separator) and self._strictness.raises():
            raise ConfigError(
                error_description=f"{self._dev_server_key} not found in `{self._dev_file}` file."
            )
        if key != self._dev_server_key:
            logger.warning(
                "Unexpected key %r in %s, using its value as dev server origin",
                key,
                self.dev_file_path,
            )
        return value
