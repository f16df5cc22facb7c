"""PN-MAIN Web Server entry point.

Startup order: open the log file (fatal on failure), build the route
table, then serve until the process is stopped (fatal on listen errors).
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import uvicorn

from pn_main import __version__
from pn_main.config import Config, ServerConfig
from pn_main.exceptions import ConfigurationError
from pn_main.logger import Logger, open_log_context, session_logger
from pn_main.web_server import PnMainWebServer

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PN-MAIN Web Server")
    parser.add_argument(
        "--host",
        type=str,
        default=Config.SERVER_HOST,
        help=f"Host address to bind to (default: {Config.SERVER_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Config.SERVER_PORT,
        help=f"Port number to listen on (default: {Config.SERVER_PORT})",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=Path(Config.LOG_PATH),
        help=f"Directory for the run's log file (default: {Config.LOG_PATH})",
    )
    parser.add_argument(
        "--log-stamp",
        type=str,
        default=Config.LOG_STAMP,
        help=f"Log file name without extension (default: {Config.LOG_STAMP})",
    )
    parser.add_argument(
        "--no-debug",
        action="store_true",
        help="Only record errors in the log file",
    )
    parser.add_argument(
        "--home-html",
        type=Path,
        default=Config.HOME_HTML_PATH,
        help="HTML file served at GET /",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ServerConfig:
    return ServerConfig(
        host=args.host,
        port=args.port,
        log_dir=args.log_dir,
        log_stamp=args.log_stamp,
        debug=Config.DEBUG_MODE and not args.no_debug,
        home_html_path=args.home_html,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    log_ctx = open_log_context(config)
    try:
        log_ctx.open()
    except ConfigurationError as e:
        logger.critical("FATAL: Logger initialization failed", error=str(e), **e.details)
        sys.exit(1)

    with log_ctx:
        file_logger = log_ctx.logger
        file_logger.info("Initializing services.", version=__version__)

        server = PnMainWebServer(config=config, logger=file_logger)

        try:
            file_logger.info(
                "Configuration",
                host=config.host,
                port=config.port,
                log_file=str(log_ctx.path),
                debug=config.debug,
                home_html=str(config.home_html_path),
                version=__version__,
            )
            serving = f"Now serving on 127.0.0.1:{config.port}"
            print(serving)
            file_logger.info(serving)
            uvicorn.run(server.get_app(), host=config.host, port=config.port, log_level="info")
            file_logger.info("Web server shutdown complete")
        except KeyboardInterrupt:
            file_logger.info("Web server stopped by user")
            sys.exit(0)
        except SystemExit as e:
            # uvicorn exits on its own when the port cannot be bound
            if e.code not in (0, None):
                file_logger.error("Web server exited", exit_code=e.code)
            raise
        except Exception as e:
            file_logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
            logger.critical("FATAL: Web server failed", error=str(e), error_type=type(e).__name__)
            sys.exit(1)


if __name__ == "__main__":
    main()
