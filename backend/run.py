#!/usr/bin/env python3
"""
SkyPulse Backend - Run Script
This script starts the FastAPI weather proxy
"""

import os
import sys
import subprocess
from pathlib import Path

TONES = {"info": "\033[94m", "ok": "\033[92m", "warn": "\033[93m", "fail": "\033[91m"}
RESET = "\033[0m"

def status(message, tone="info"):
    print(f"{TONES[tone]}{message}{RESET}")

def require_launch_dir(marker, directory):
    """Exit unless `marker` is present, i.e. we were started from `directory`."""
    if not Path(marker).exists():
        status(f"❌ Error: {marker} not found. Please run this script from the {directory} directory.", "fail")
        sys.exit(1)

def main():
    status("🚀 Starting SkyPulse Backend...")

    require_launch_dir("skypulse/main.py", "backend")

    # The API key is the only setting without a usable default
    if not Path("../.env").exists() and not Path(".env").exists() and not os.environ.get("WEATHER_API_KEY"):
        status("⚠️  Warning: no .env file and WEATHER_API_KEY is not set.", "warn")
        print("Please create a .env file with the following variables:")
        print("  WEATHER_API_KEY=your_weatherapi_key")
        print("  WEATHER_API_BASE_URL=https://api.weatherapi.com/v1")
        print("  PORT=5000")
        print("  LOGGER=20")
        sys.exit(1)

    port = os.environ.get("PORT", "5000")

    status("✅ All checks passed!", "ok")
    status("🌐 Starting Uvicorn server...")
    print(f"📍 Backend will be available at: http://localhost:{port}")
    print(f"📍 Weather endpoint: http://localhost:{port}/api/weather?city=London")
    print(f"📍 API Documentation: http://localhost:{port}/docs")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "skypulse.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", port
        ], check=True)
    except KeyboardInterrupt:
        status("\n👋 Backend server stopped.", "warn")
    except subprocess.CalledProcessError as e:
        status(f"\n❌ Error starting server: {e}", "fail")
        sys.exit(1)

if __name__ == "__main__":
    main()
