"""Main application entry point for the FastAPI application.

This module initializes the application and creates the FastAPI instance
using the application factory pattern. Run it directly, or point uvicorn at
``inkpost.main:app``.
"""

import uvicorn

from inkpost.core.application import create_application
from inkpost.core.config.settings import settings
from inkpost.core.initialization import initialize_application

# Initialize the application
initialize_application()

# Create the FastAPI application
app = create_application()


if __name__ == "__main__":
    uvicorn.run("inkpost.main:app", host=settings.API_HOST, port=settings.API_PORT)
