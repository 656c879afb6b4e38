import os
from dotenv import load_dotenv
load_dotenv()
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from config import config_dict, ProdConfig
from models import db
from routes.course_progress import course_progress_bp
from utils.logging_utils import setup_logging, get_logger

migrate = Migrate()


def create_app(env=None):
    env = (env or os.environ.get("FLASK_ENV", "production")).lower()

    app = Flask(__name__)
    app.config.from_object(config_dict.get(env, ProdConfig))

    setup_logging(app.config["LOG_LEVEL"], app.config.get("LOG_FILE"))
    logger = get_logger(__name__)
    logger.info("Environment: %s", env)

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"], "supports_credentials": True}})

    db.init_app(app)
    migrate.init_app(app, db)

    @app.route('/')
    def home():
        return jsonify({"message": "Course progress service is running"})

    app.register_blueprint(course_progress_bp, url_prefix='/api/course')

    return app

app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config['DEBUG'])
