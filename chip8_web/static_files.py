"""Static asset serving under the /static prefix."""

import os

from fastapi import HTTPException
from fastapi.staticfiles import StaticFiles

from chip8_web.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

STATIC_PREFIX = "/static"


class AssetFiles(StaticFiles):
    """StaticFiles that tolerates a missing asset directory.

    Starlette checks the directory on the first request and fails with a
    RuntimeError when it is absent. Here an absent directory is only logged,
    and each lookup then answers 404. A file the process may not read
    answers 403. Path resolution, traversal rejection, conditional and range
    requests are Starlette's.
    """

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.exists(self.directory):
            log_with_context(
                logger,
                "warning",
                "Asset directory does not exist",
                directory=str(self.directory),
                event_type="static_dir_missing",
            )
            return
        await super().check_config()

    def lookup_path(self, path: str) -> tuple[str, os.stat_result | None]:
        # Starlette answers PermissionError with 401
        try:
            return super().lookup_path(path)
        except PermissionError as e:
            log_with_context(
                logger,
                "warning",
                "Permission denied reading asset",
                path=path,
                error=str(e),
                event_type="static_permission_denied",
            )
            raise HTTPException(status_code=403) from e
