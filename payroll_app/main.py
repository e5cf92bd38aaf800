# payroll_app/main.py
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payroll_app.config import Settings
from payroll_app.database import Database
from payroll_app.procedures import StoreProcedures
from payroll_app.utils.error_handler import register_exception_handlers

from payroll_app.auth.router import router as auth_router
from payroll_app.auth.legacy_router import router as legacy_auth_router
from payroll_app.employees.router import router as employees_router
from payroll_app.employee_types.router import router as employee_types_router
from payroll_app.payroll.router import router as payroll_router
from payroll_app.adjustments.router import allowances_router, deductions_router
from payroll_app.attendance.router import router as attendance_router
from payroll_app.tax_slabs.router import router as tax_slabs_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("payroll_app").setLevel(level)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    procedures: Optional[StoreProcedures] = None,
) -> FastAPI:
    """
    Build the API. Everything stateful (settings, engine, store routines) is
    handed in here and kept on app.state; nothing lives at module scope.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Payroll Management System", version="1.0")
    app.state.settings = settings
    app.state.db = database or Database.from_settings(settings)
    app.state.procedures = procedures or StoreProcedures()

    # -------------------- Middleware --------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # ------------------- ROUTERS -------------------
    app.include_router(auth_router)
    app.include_router(legacy_auth_router)
    app.include_router(employees_router)
    app.include_router(employee_types_router)
    app.include_router(payroll_router)
    app.include_router(allowances_router)
    app.include_router(deductions_router)
    app.include_router(attendance_router)
    app.include_router(tax_slabs_router)

    @app.get("/")
    def home():
        return {
            "message": "Welcome to Payroll Management System API",
            "endpoints": {
                "login": "/api/auth/login",
                "employees": "/api/employees",
                "employee_types": "/api/employee-types",
                "payroll": "/api/payroll",
                "allowances": "/api/allowances",
                "deductions": "/api/deductions",
                "attendance": "/api/attendance",
                "tax_slabs": "/api/tax-slabs",
            },
        }

    # ------------------- LIFECYCLE -------------------
    @app.on_event("startup")
    def _startup():
        logger.info("Connecting to database: %s", settings.safe_database_target)
        app.state.db.init()
        if settings.db_create_tables:
            app.state.db.create_tables()
            logger.info("Created missing tables")

        for r in app.routes:
            if hasattr(r, "path"):
                methods = sorted(getattr(r, "methods", None) or [])
                logger.debug("  %-45s %s", r.path, methods)

    @app.on_event("shutdown")
    def _shutdown():
        app.state.db.close()

    return app
