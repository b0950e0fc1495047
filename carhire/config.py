import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

store_path = os.getenv("CARHIRE_STORE_PATH", None)
"""The file backing the record store. When unset, records are kept in memory."""

bucket_pages = int(os.getenv("CARHIRE_BUCKET_PAGES", "16"))
"""The number of pages handed to a region each time it grows. Opening a store created with another value fails."""

host = os.getenv("CARHIRE_HOST", "0.0.0.0")
"""The interface to bind to."""

port = int(os.getenv("CARHIRE_PORT", "8080"))
"""The port to listen on."""

api_root = "/api/v1"
"""The base url for the api."""
