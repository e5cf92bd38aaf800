# payroll_app/__main__.py
# python -m payroll_app
import uvicorn

from payroll_app.config import Settings
from payroll_app.main import create_app


def main():
    settings = Settings.from_env()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
