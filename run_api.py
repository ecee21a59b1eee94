"""Run FastAPI server."""
import logging
import sys
sys.path.insert(0, ".")

import uvicorn
from src.config import settings
from src.api.main import app

if __name__ == "__main__":
    logging.basicConfig(level=settings.log.level)
    print(f"Starting FastAPI on http://localhost:{settings.api.port}")
    uvicorn.run(app, host=settings.api.host, port=settings.api.port)
