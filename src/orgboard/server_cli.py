"""CLI entry point for the OrgBoard API server."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="orgboard-server",
        description="OrgBoard API server for multi-tenant projects and tasks",
    )
    parser.add_argument("--host", default=None, help="Bind host (default: ORGBOARD_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: ORGBOARD_PORT or 5000)")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: SQLite database, console logs",
    )
    args = parser.parse_args(argv)

    # Must happen before orgboard.config is first imported
    if args.local:
        os.environ["ORGBOARD_LOCAL_MODE"] = "1"
        os.environ["ORGBOARD_LOCAL"] = "1"

    import uvicorn

    from orgboard.config import settings

    uvicorn.run(
        "orgboard.main:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
    )


if __name__ == "__main__":
    main()
