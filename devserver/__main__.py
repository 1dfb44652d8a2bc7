"""
Entry point for running the development server as a module.

Usage:
    python -m devserver [--port 3000] [--host 127.0.0.1] [--api-key KEY]

Point the SDK at it with ``ProntoEnvironment.development("localhost:3000")``.
"""

import argparse
import os

import uvicorn

from .app import API_KEY_ENV_VAR, DEFAULT_API_KEY


def main():
    parser = argparse.ArgumentParser(
        description="pronto-devserver: local mock of the Pronto provisioning API"
    )
    parser.add_argument(
        "--port", type=int, default=3000,
        help="Port to serve on (default: 3000)"
    )
    parser.add_argument(
        "--host", type=str, default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--api-key", type=str, default=None,
        help=f"API key accepted by the server (default: ${API_KEY_ENV_VAR} or {DEFAULT_API_KEY})"
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload for development"
    )

    args = parser.parse_args()
    if args.api_key:
        os.environ[API_KEY_ENV_VAR] = args.api_key

    print(f"\n  pronto-devserver")
    print(f"  Serving http://{args.host}:{args.port}/api/v2\n")

    uvicorn.run(
        "devserver.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
