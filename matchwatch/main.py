from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from matchwatch.api.v1.routes.board import router as board_router
from matchwatch.core.logging import setup_logging

setup_logging()

app = FastAPI(
    title="Match Watch (live & upcoming streams)",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(board_router, prefix="")

@app.get("/healthz")
def healthz():
    return {"ok": True}
