"""
config.py
----------
Client settings: where the feedback API lives and fixed UI timings.
"""

import os
from dotenv import load_dotenv

load_dotenv()

API_URL = os.getenv("FEEDBACK_API_URL", "http://localhost:8000")
API_PREFIX = "/api"

# Seconds the "thank you" confirmation stays visible
THANK_YOU_DELAY = 3.0
