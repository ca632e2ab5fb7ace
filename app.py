import logging

from flask import Flask
from flask_cors import CORS

from config import LOG_LEVEL, SECRET_KEY, SEED_PRODUCT_COUNT, SEED_RANDOM_SEED
from routes import init_routes

logger = logging.getLogger(__name__)


def create_app(database_url=None, seed_count=SEED_PRODUCT_COUNT):
    """Application factory pattern for better testing and configuration.

    Args:
        database_url: Optional database URL override. If not provided, uses config default.
        seed_count: Number of demo products to seed into an empty catalogue
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = Flask(__name__)
    app.config["SECRET_KEY"] = SECRET_KEY

    # Enable CORS for all routes
    CORS(app)

    # Initialize database and demo catalogue
    from db.database import configure_engine, create_tables
    from db.services.product_service import ProductService
    configure_engine(database_url)
    create_tables()
    if seed_count:
        ProductService().seed_products(seed_count, seed=SEED_RANDOM_SEED)

    # Initialize routes
    init_routes(app)

    logger.info("Pager application initialized")
    return app


# === Main ===
if __name__ == "__main__":
    import os
    app = create_app()
    debug_mode = os.getenv('FLASK_ENV') != 'production'
    app.run(host='0.0.0.0', port=5001, debug=debug_mode)
