# phatfit/__main__.py
"""Run the API with uvicorn: ``python -m phatfit``."""
import uvicorn

from phatfit.config import settings

if __name__ == "__main__":
    uvicorn.run("phatfit.main:app", host=settings.host, port=settings.port)
