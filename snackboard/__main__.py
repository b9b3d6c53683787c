import uvicorn

from snackboard.config import settings
from snackboard.main import app


if __name__ == "__main__":
    print(f"{settings.app_name} running on http://localhost:{settings.port} (Press CTRL+C to quit)")
    uvicorn.run(app, host=settings.host, port=settings.port)
