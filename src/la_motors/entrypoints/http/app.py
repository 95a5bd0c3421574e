from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from la_motors.entrypoints.http.exception_handlers import register_exception_handlers
from la_motors.entrypoints.http.routes.health import router as health_router
from la_motors.entrypoints.http.routes.images import router as images_router
from la_motors.entrypoints.http.routes.vehicles import router as vehicles_router
from la_motors.infra.config import VEHICLE_STORAGE_BUCKET, storage_root
from la_motors.ports.image_storage import PUBLIC_OBJECT_PREFIX


def build_app() -> FastAPI:
    app = FastAPI(
        title="LA Motors Inventory API",
        description="""
        Dealership inventory API backing the vehicle gallery, detail view and
        admin screen.

        ## Features
        - Browse the inventory with text search, facet filters and sorting
        - Vehicle detail and inventory statistics
        - Create, update and delete vehicles (admin)
        - Upload and remove vehicle images (admin)

        ## Authentication
        Write endpoints require the `X-Admin-Password` header.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        Listing never fails: if the record store is unreachable it returns
        an empty inventory.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        contact={
            "name": "LA Motors",
            "email": "dev@lamotors.cr",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(images_router, prefix="/v1")

    # Serves what LocalImageStorage.public_url() points at
    app.mount(
        f"{PUBLIC_OBJECT_PREFIX}/{VEHICLE_STORAGE_BUCKET}",
        StaticFiles(directory=storage_root() / VEHICLE_STORAGE_BUCKET, check_dir=False),
        name="vehicle-images",
    )

    return app


app = build_app()
