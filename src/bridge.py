#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import List, Optional

from keystrokes import get_keystroke_injector
from pasteboard import get_clipboard_backend
from services import (
    BridgeConfig,
    ClipboardService,
    CommandRegistry,
    SelectionService,
    build_registry,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


class BridgeApp:
    """Selects the platform backends once and exposes them as commands."""

    def __init__(self, config: BridgeConfig) -> None:
        self.config = config
        self.clipboard_backend = get_clipboard_backend(
            config.platform, timeout=config.clipboard_timeout)
        self.injector = get_keystroke_injector(
            config.platform,
            osascript=config.osascript,
            powershell=config.powershell,
            settle_delay=config.settle_delay,
            copy_delay=config.copy_delay,
            timeout=config.helper_timeout,
        )
        self.clipboard_service = ClipboardService(self.clipboard_backend)
        self.selection_service = SelectionService(self.injector)
        self.registry: CommandRegistry = build_registry(
            self.clipboard_service, self.selection_service)

        logger.info(
            "Platform %s: clipboard=%s, keystrokes=%s",
            config.platform,
            self.clipboard_backend.name,
            self.injector.name,
        )

    def serve(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        import uvicorn

        from api import create_app

        app = create_app(self.registry)
        uvicorn.run(
            app,
            host=host or self.config.host,
            port=port or self.config.port,
            log_level=(log_level or self.config.log_level).lower(),
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="selection-bridge",
        description="Clipboard and selection commands for a desktop shell",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    subparsers = parser.add_subparsers(dest="action", required=True)

    serve = subparsers.add_parser("serve", help="Serve commands over local HTTP")
    serve.add_argument("--host", type=str, default=None,
                       help="Bind address (default: SELECTION_BRIDGE_HOST or 127.0.0.1)")
    serve.add_argument("-p", "--port", type=int, default=None,
                       help="Port (default: SELECTION_BRIDGE_PORT or 3030)")

    invoke = subparsers.add_parser("invoke", help="Run a single command")
    invoke.add_argument("command", help="Command name, see 'commands'")
    invoke.add_argument("--text", type=str, default=None,
                        help="Text argument for copy_to_clipboard")

    subparsers.add_parser("commands", help="List available commands")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = BridgeConfig.from_env()
    except ValueError as e:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    level_name = "DEBUG" if args.verbose else config.log_level
    logging.basicConfig(level=getattr(logging, level_name), format=LOG_FORMAT)

    try:
        app = BridgeApp(config)
    except Exception as e:
        logger.error(f"Could not start on platform {config.platform}: {e}")
        sys.exit(1)

    if args.action == "commands":
        for name in app.registry.names():
            print(name)
        return 0

    if args.action == "invoke":
        command_args = {}
        if args.text is not None:
            command_args["text"] = args.text
        result = app.registry.invoke(args.command, command_args)
        stream = sys.stdout if result.ok else sys.stderr
        print(result.message, file=stream)
        return 0 if result.ok else 1

    try:
        app.serve(host=args.host, port=args.port, log_level=level_name)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
