# config.py
import os

# Lighthouse CLI
LIGHTHOUSE_PATH = os.getenv("LIGHTHOUSE_PATH")  # optional explicit binary
LIGHTHOUSE_LOG_LEVEL = os.getenv("LIGHTHOUSE_LOG_LEVEL", "error")
MAX_WAIT_FOR_FCP = int(os.getenv("MAX_WAIT_FOR_FCP", 45000))  # ms
MAX_WAIT_FOR_LOAD = int(os.getenv("MAX_WAIT_FOR_LOAD", 60000))  # ms

# Chromium DevTools endpoint
DEVTOOLS_HOST = os.getenv("DEVTOOLS_HOST", "127.0.0.1")
DEVTOOLS_READY_TIMEOUT = float(os.getenv("DEVTOOLS_READY_TIMEOUT", 10))  # seconds

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
