from flask import Flask
import os


def create_app(config=None):
    """Flask application factory."""
    app = Flask(__name__,
                static_folder='static')

    app.config.update(
        OUTPUT_FOLDER=os.path.join(app.root_path, 'static', 'output'),
        HANOI_MAX_DISCS=10,
    )
    if config:
        app.config.update(config)

    # Create necessary directories
    os.makedirs(app.config['OUTPUT_FOLDER'], exist_ok=True)

    # Register blueprints
    from app.main import main_bp
    app.register_blueprint(main_bp)

    return app
