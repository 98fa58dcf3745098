import sys
from pathlib import Path

# Load environment variables FIRST, before any other imports
from dotenv import load_dotenv
load_dotenv()

# Add project root to path (for IDE compatibility when running directly)
project_root = Path(__file__).parent.parent.resolve()
project_root_str = str(project_root)

if sys.path and Path(sys.path[0]).name == 'application':
    sys.path[0] = project_root_str
elif project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import logging

from quart import Quart
from quart_rate_limiter import RateLimiter
from quart_schema import QuartSchema

from application.routes import git_bp
from application.routes.common.error_handlers import register_error_handlers
from application.services.github_service_factory import get_github_service
from common.config.config import APP_LOG_FILE

# Configure root logging to both stdout and a file for debugging/triage.
log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.basicConfig(
    level=logging.INFO,
    format=log_format,
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(APP_LOG_FILE, mode="a"),
    ],
)

# httpx logs every request at INFO; the client already does.
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


def create_app() -> Quart:
    """Build the Quart application with blueprints and error handlers."""
    app = Quart(__name__)

    RateLimiter(app)

    QuartSchema(
        app,
        info={"title": "Git Resolver", "version": "1.0.0"},
        tags=[
            {"name": "Git", "description": "Commit resolution and tree reconciliation"},
        ],
        security=[{"bearerAuth": []}],
        security_schemes={
            "bearerAuth": {
                "type": "http",
                "scheme": "bearer",
            }
        },
    )

    register_error_handlers(app)
    app.register_blueprint(git_bp)  # URL prefix already set in blueprint

    @app.before_serving
    async def startup() -> None:
        # Create the shared service and its caches before the first request.
        get_github_service()
        logger.info("Git resolver service initialized")

    return app


app = create_app()

