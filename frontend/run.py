#!/usr/bin/env python3
"""
Run script for the Wanderlust Travel Streamlit frontend.
"""

import streamlit.web.cli as stcli
import sys
import os

from config import PRIMARY_COLOR

if __name__ == "__main__":
    host = os.getenv("STREAMLIT_HOST", "0.0.0.0")
    port = os.getenv("STREAMLIT_PORT", "8501")

    sys.argv = [
        "streamlit",
        "run",
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "app.py"),
        "--server.address", host,
        "--server.port", port,
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
        "--theme.primaryColor", PRIMARY_COLOR,
    ]

    stcli.main()
