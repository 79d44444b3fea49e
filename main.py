"""
main.py
========
Central entry point for the EnglishNorm service.

Run with:
    uvicorn main:app --reload
"""

import logging

from dotenv import load_dotenv

load_dotenv()  # Load .env before any module reads env vars

# Pipeline loggers live under "englishnorm.*" and share one INFO handler
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Per-request SDK and HTTP client chatter would drown the chunk-level logs
for _transport_logger_name in (
    "openai",
    "openai._base_client",
    "httpx",
    "httpcore",
):
    logging.getLogger(_transport_logger_name).setLevel(logging.WARNING)

from englishnorm.api.normalize import app  # noqa: F401, E402

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
