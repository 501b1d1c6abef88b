#!/usr/bin/env python3
"""
SkyPulse Frontend - Run Script
This script starts the Streamlit dashboard
"""

import os
import sys
import subprocess
from pathlib import Path

import requests

TONES = {"info": "\033[94m", "ok": "\033[92m", "warn": "\033[93m", "fail": "\033[91m"}
RESET = "\033[0m"

def status(message, tone="info"):
    print(f"{TONES[tone]}{message}{RESET}")

def require_launch_dir(marker, directory):
    """Exit unless `marker` is present, i.e. we were started from `directory`."""
    if not Path(marker).exists():
        status(f"❌ Error: {marker} not found. Please run this script from the {directory} directory.", "fail")
        sys.exit(1)

def check_http_endpoint(url):
    """Check if HTTP endpoint is accessible"""
    try:
        return requests.get(url, timeout=2).ok
    except requests.exceptions.RequestException:
        return False

def main():
    status("🚀 Starting SkyPulse Frontend...")

    require_launch_dir("app.py", "frontend")

    # Check if backend is running
    status("🔍 Checking backend connection...")
    backend_url = os.environ.get("BACKEND_URL", "http://localhost:5000")
    if not check_http_endpoint(f"{backend_url}/health"):
        status(f"⚠️  Warning: Backend doesn't appear to be running at {backend_url}", "warn")
        print("Please start the backend first:")
        print("  cd backend && python run.py")
        print()
        response = input("Continue anyway? (y/N): ").strip().lower()
        if response != 'y':
            sys.exit(1)

    status("✅ All checks passed!", "ok")
    status("🌐 Starting Streamlit server...")
    print("📍 Frontend will be available at: http://localhost:8501")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "streamlit",
            "run", "app.py"
        ], check=True)
    except KeyboardInterrupt:
        status("\n👋 Frontend server stopped.", "warn")
    except subprocess.CalledProcessError as e:
        status(f"\n❌ Error starting server: {e}", "fail")
        sys.exit(1)

if __name__ == "__main__":
    main()
