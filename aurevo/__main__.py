"""Run the aurevo server with uvicorn."""

import argparse

import uvicorn

from aurevo.app.env_loader import get_port


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the aurevo video server.")
    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host to bind to.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on. Defaults to $PORT, then 3000.",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development.",
    )
    args = parser.parse_args()

    port = args.port if args.port is not None else get_port()
    print(f"aurevo listening on {port}")
    uvicorn.run(
        "aurevo.app.app:app",
        host=args.host,
        port=port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
