"""
Entry point for the dsa-survey service.

Run with:
    uvicorn main:app --reload --port 3000
    python main.py
"""
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

import uvicorn
from config import get_settings
from dsa_survey.api.main import app

settings = get_settings()

if __name__ == "__main__":
    uvicorn.run(
        "dsa_survey.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )
