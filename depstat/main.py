"""
depstat — FastAPI Backend
Serves module dependency statistics over HTTP.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from depstat import __version__
from depstat.routers.analyse import router as analyse_router

app = FastAPI(title="depstat API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyse_router)
