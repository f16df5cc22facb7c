"""Static file responses.

Failures are raised as PnMainError subclasses so the web server's error
handler turns them into HTTP error responses.
"""

import os
import stat
from pathlib import Path
from typing import Union

from starlette.responses import FileResponse

from pn_main.exceptions import ResourceNotFoundError, StaticFileAccessError

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


def serve_html_file(path: Union[str, Path]) -> FileResponse:
    """Stream an HTML file from disk.

    Raises:
        ResourceNotFoundError: the file does not exist.
        StaticFileAccessError: the path is not a regular file or cannot be read.
    """
    path = Path(path)
    details = {"path": str(path)}

    try:
        stat_result = os.stat(path)
    except FileNotFoundError as e:
        raise ResourceNotFoundError(
            "STATIC_FILE_NOT_FOUND", "Static file does not exist", details=details
        ) from e
    except OSError as e:
        raise StaticFileAccessError(
            "STATIC_FILE_UNREADABLE", f"Cannot stat static file: {e}", details=details
        ) from e

    if not stat.S_ISREG(stat_result.st_mode):
        raise StaticFileAccessError(
            "STATIC_FILE_UNREADABLE", "Static path is not a regular file", details=details
        )
    if not os.access(path, os.R_OK):
        raise StaticFileAccessError(
            "STATIC_FILE_UNREADABLE", "Static file is not readable", details=details
        )

    return FileResponse(path, media_type=HTML_MEDIA_TYPE, stat_result=stat_result)
