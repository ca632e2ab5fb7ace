from flask import jsonify

from controllers.product_controller import ProductController
from db.database import test_connection


def init_routes(app, product_controller=None):
    """Initialize all Flask routes using MVC pattern"""

    product_controller = product_controller or ProductController()

    @app.route("/", methods=["GET"])
    def index():
        """Paged product list"""
        return product_controller.index()

    @app.route("/pager", methods=["GET"])
    def pager():
        """Paged product list (same view as the index)"""
        return product_controller.index()

    @app.route("/ajax-grid", methods=["GET"])
    def ajax_grid():
        """Product grid with AJAX pager links"""
        return product_controller.ajax_grid()

    @app.route("/ajax-pager", methods=["GET"])
    def ajax_pager():
        """Grid partial for AJAX pager requests"""
        return product_controller.ajax_pager()

    @app.route("/api/products", methods=["GET"])
    def api_products():
        result, status = product_controller.api_products()
        return jsonify(result), status

    @app.route("/api/health", methods=["GET"])
    def api_health():
        if test_connection():
            return jsonify({"status": "ok", "database": "connected"})
        return jsonify({"status": "error", "database": "unavailable"}), 503
