from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from devevents.api import bookings, events
from devevents.api.errors import register_error_handlers
from devevents.core.env import load_env
from devevents.database.mongo import connection
from devevents.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fails startup when MONGODB_URI is missing or the server is unreachable.
    await connection.get_database()
    yield
    connection.close()


def create_app(connect_on_startup: bool = True) -> FastAPI:
    app = FastAPI(title="devevents", lifespan=lifespan if connect_on_startup else None)
    register_error_handlers(app)
    app.include_router(events.router)
    app.include_router(bookings.router)

    @app.get("/ping")
    async def ping():
        return {"message": "pong"}

    return app


load_env()
configure_logging()
app = create_app()

if __name__ == "__main__":
    uvicorn.run("devevents.main:app", host="0.0.0.0", port=8000, reload=True)
