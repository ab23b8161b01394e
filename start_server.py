#!/usr/bin/env python3
"""
Run the Employee & Task Management API under uvicorn.

HOST, PORT and RELOAD control the server; everything else comes from
Settings.from_env() (see .env.example).
"""

import os

import uvicorn

from workforce.config import Settings


def main():
    settings = Settings.from_env()
    # Fail before uvicorn spawns workers
    settings.validate()

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    print("Starting Employee & Task Management API...")
    print(f"Environment: {settings.environment}")
    print(f"Listening on: http://{host}:{port} (reload={reload})")
    print("=" * 50)

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
