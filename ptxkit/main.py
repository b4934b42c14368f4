import logging

from fastapi import FastAPI

from ptxkit.api.endpoints import router
from ptxkit.core.config import load_config

settings = load_config()
logging.basicConfig(level=settings.logging.level)

app = FastAPI(
    title="PTX Inspection Service",
    description="A web service that reports the scans and point counts of PTX point cloud files",
    version="1.0.0",
)
app.state.settings = settings
app.include_router(router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
