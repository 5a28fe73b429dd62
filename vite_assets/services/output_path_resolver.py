import os
import threading
from typing import Optional

from vite_assets.exceptions.vite_exceptions import ConfigError
from vite_assets.misc.utils import get_relative_path
from vite_assets.models.roots import Roots
from vite_assets.services.build_config_service import BuildConfigService


class OutputPathResolver:
    """
    Vite's ``outDir`` expressed relative to the index root. For public folder
    setups, where the index root is not the project root, ``public/dist``
    becomes ``dist``.
    """

    def __init__(self, roots: Roots, build_config_service: BuildConfigService):
        self._roots = roots
        self._build_config_service = build_config_service
        self._relative_out_dir: Optional[str] = None
        self._lock = threading.Lock()

    def relative_out_dir(self) -> str:
        if self._relative_out_dir is None:
            with self._lock:
                if self._relative_out_dir is None:
                    self._relative_out_dir = self._resolve()
        return self._relative_out_dir

    def _resolve(self) -> str:
        out_dir = self._build_config_service.get_build_config().out_dir
        if self._roots.base is None:
            return out_dir

        absolute_out_dir = os.path.join(self._roots.base, out_dir)
        relative_out_dir = get_relative_path(self._roots.index, absolute_out_dir)
        if relative_out_dir is None:
            raise ConfigError(
                error_description="Vite outDir is not inside the index root.",
                log_message=f"Vite outDir {absolute_out_dir} is not inside the index root {self._roots.index}",
            )
        return relative_out_dir
