#!/usr/bin/env python3
"""Simple script to run the application."""
import uvicorn

from zen_sanctuary.services import ConfigService
from zen_sanctuary.utils.colored_logger import Colors

if __name__ == "__main__":
    config_service = ConfigService()
    host = config_service.get_host()
    port = config_service.get_port()

    print(Colors.CYAN)
    print("=" * 60)
    print("  Zen Sanctuary Server")
    print("=" * 60)
    print(f"\n  Local: http://localhost:{port}")
    print(f"  API:   http://localhost:{port}/api")
    print(f"  Docs:  http://localhost:{port}/docs")
    print("=" * 60)
    print(Colors.RESET)

    uvicorn.run(
        "zen_sanctuary.main:app",
        host=host,
        port=port,
        log_level="info"
    )
