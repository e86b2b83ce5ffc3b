"""
Entry point for the Test Record Service
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

from testbank.app import create_app
from testbank.config.settings import get_settings

settings = get_settings()
app = create_app(settings)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
