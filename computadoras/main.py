import uvicorn
from prometheus_fastapi_instrumentator import Instrumentator

from computadoras import create_app
from computadoras.core.config import get_settings
from computadoras.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.LOG_LEVEL)
app = create_app(settings)
instrumentator = Instrumentator()
instrumentator.instrument(app).expose(app, include_in_schema=False)


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
