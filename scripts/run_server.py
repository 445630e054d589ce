#!/usr/bin/env python3
"""
Launch the tracker API with uvicorn.
"""

import argparse

import uvicorn

from nccd_tracker.core.config import debug_enabled


def main():
    parser = argparse.ArgumentParser(description="Run the NCCD evidence tracker API")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    print(f"Starting NCCD evidence tracker on http://{args.host}:{args.port}")
    if debug_enabled():
        print(f"API docs at http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "nccd_tracker.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if debug_enabled() else "info",
    )


if __name__ == "__main__":
    main()
