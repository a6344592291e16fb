import logging
import os

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI

from routes import filters, handlers

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Sensu Entity Tools", version="0.1.0")

app.include_router(filters.router)
app.include_router(handlers.router)


@app.get("/")
def health():
    return {"status": "ok", "service": "sensu-entity-tools"}
