import logging

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from harmonic.auth.dependencies import enforce_route_policy
from harmonic.auth.policy import missing_policies
from harmonic.core import config
from harmonic.database import Database, StorageError
from harmonic.payments.stripe_adapter import PaymentError, PaymentIntentAdapter
from harmonic.routes import (
    auth_routes,
    class_routes,
    enrollment_routes,
    payment_routes,
    selection_routes,
    user_routes,
)

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=['health'])


@health_router.get('/')
def root():
    return {'message': 'Harmonic server is running ....'}


# Every route of these routers must be listed in ROUTE_POLICIES.
ROUTERS = (
    health_router,
    auth_routes.router,
    payment_routes.router,
    user_routes.router,
    class_routes.router,
    selection_routes.router,
    enrollment_routes.router,
)


def create_app(database: Database | None = None, payments: PaymentIntentAdapter | None = None) -> FastAPI:
    config.validate_runtime_config()

    app = FastAPI(title='Harmonic API')
    app.state.database = database or Database()
    app.state.payments = payments or PaymentIntentAdapter()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.on_event('startup')
    def initialize_database() -> None:
        try:
            app.state.database.init_schema()
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')

    @app.on_event('shutdown')
    def close_database() -> None:
        app.state.database.dispose()

    @app.exception_handler(StorageError)
    def handle_storage_error(request: Request, exc: StorageError):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'detail': 'Database error.'},
        )

    @app.exception_handler(PaymentError)
    def handle_payment_error(request: Request, exc: PaymentError):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'detail': 'Payment processor error.'},
        )

    missing = [entry for router in ROUTERS for entry in missing_policies(router.routes)]
    if missing:
        raise RuntimeError(f'Routes without an access policy: {missing}')

    guard = [Depends(enforce_route_policy)]
    for router in ROUTERS:
        app.include_router(router, dependencies=guard)

    return app
