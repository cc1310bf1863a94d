"""
Run the MarketDesk backend server.
"""
import os

from dotenv import load_dotenv
import uvicorn

backend_dir = os.path.dirname(os.path.abspath(__file__))

# Load environment before settings are read
load_dotenv(os.path.join(backend_dir, ".env"))

from marketdesk.core.config import settings  # noqa: E402

if __name__ == "__main__":
    print("Starting MarketDesk Backend Server...")
    print(f"API Docs: http://localhost:{settings.port}/docs")
    print("-" * 50)

    uvicorn.run(
        "marketdesk.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        app_dir=backend_dir,
    )
