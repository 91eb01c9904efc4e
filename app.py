from flask import Flask
from models import db
from models.database import init_app as init_db
from routes import faculty_bp, catalog_bp


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object('config')
    if overrides:
        app.config.update(overrides)

    # Initialize database
    init_db(app)

    # Register blueprints
    app.register_blueprint(faculty_bp, url_prefix='/api/faculty')
    app.register_blueprint(catalog_bp, url_prefix='/api')

    # Create tables
    with app.app_context():
        db.create_all()

    @app.after_request
    def add_header(response):
        """Add headers to prevent caching."""
        response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
        response.headers['Pragma'] = 'no-cache'
        response.headers['Expires'] = '0'
        return response

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config['DEBUG'], port=5000)
