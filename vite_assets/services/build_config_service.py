import logging
import os
import threading
from typing import Optional

from pydantic import ValidationError

from vite_assets.exceptions.vite_exceptions import ConfigError
from vite_assets.misc.utils import file_content
from vite_assets.models.build_config import BuildConfig
from vite_assets.models.roots import Roots

logger = logging.getLogger(__name__)


class BuildConfigService:
    def __init__(self, roots: Roots, config_file: str = "vite.config.json"):
        self._roots = roots
        self._config_file = config_file
        self._build_config: Optional[BuildConfig] = None
        self._lock = threading.Lock()

    @property
    def config_path(self) -> str:
        return os.path.join(self._roots.config, self._config_file)

    def get_build_config(self) -> BuildConfig:
        if self._build_config is None:
            with self._lock:
                if self._build_config is None:
                    self._build_config = self._load()
        return self._build_config

    def _load(self) -> BuildConfig:
        try:
            content = file_content(self.config_path)
        except UnicodeDecodeError as decode_error:
            raise ConfigError(
                error_description="Vite build config is invalid.",
                log_message=f"Vite build config at {self.config_path} is not valid UTF-8: {decode_error}",
            ) from decode_error
        if content is None:
            raise ConfigError(
                error_description="Vite build config not found.",
                log_message=f"Vite build config not found at {self.config_path}",
            )
        try:
            build_config = BuildConfig.model_validate_json(content)
        except ValidationError as validation_error:
            raise ConfigError(
                error_description="Vite build config is invalid.",
                log_message=f"Vite build config at {self.config_path} is invalid: {validation_error}",
            ) from validation_error
        logger.debug(
            "Loaded vite build config from %s: out_dir=%s, legacy=%s",
            self.config_path,
            build_config.out_dir,
            build_config.legacy,
        )
        return build_config
