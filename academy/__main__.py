"""Run the API with uvicorn: python -m academy"""

import uvicorn

from academy.core.config import settings


if __name__ == "__main__":
    uvicorn.run("academy:app", host="0.0.0.0", port=settings.PORT)
