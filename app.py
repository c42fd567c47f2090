from flask import Flask
from routes.core import bp as core_bp
from routes.debug import bp as debug_bp


def create_app() -> Flask:
    app = Flask(__name__)
    # The action endpoint; this is what actually gets called in production.
    app.register_blueprint(core_bp)
    # Debug routes for when I want to check a URL without hitting Jira.
    app.register_blueprint(debug_bp)
    return app


app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000)
