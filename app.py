from flask import Flask, jsonify
import logging
import os
from config import get_config
from database.mongodb import MongoDB
from models.submission import SubmissionRepository
from routes.admin import admin_bp
from routes.quiz import quiz_bp
from services.bonus_service import BonusQuestionSelector
from services.rate_limiter import RateLimiter
from services.scoring_service import ScoringService

logger = logging.getLogger(__name__)


def create_app(config_class=None, repository=None, rate_limiter=None, scoring_service=None):
    """
    Build the Flask app.

    Services are created here and shared through ``app.extensions['quiz']``;
    pass any of them in to replace the default (tests inject a repository
    over an in-memory collection).
    """
    config_class = config_class or get_config()

    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=logging.DEBUG if app.config['DEBUG'] else logging.INFO,
        format='%(levelname)s - %(name)s - %(message)s'
    )

    try:
        config_class.validate(require_database=repository is None)
    except ValueError as e:
        logger.error(f"❌ Configuration Error: {e}")
        logger.error("💡 Make sure you have a .env file with all required variables")
        raise

    scoring_service = scoring_service or ScoringService.from_config(app.config)
    problems = scoring_service.check_question_bank()
    if problems:
        for problem in problems:
            logger.error(f"Question bank: {problem}")
        raise ValueError(f"Question bank is invalid ({len(problems)} problem(s))")

    if repository is None:
        mongo = MongoDB.from_config(app.config)
        mongo.init_database()
        app.extensions['mongodb'] = mongo
        repository = SubmissionRepository(mongo.get_submissions_collection())

    app.extensions['quiz'] = {
        'scoring_service': scoring_service,
        'bonus_selector': BonusQuestionSelector(
            scoring_service.bonus_questions,
            count=app.config['BONUS_QUESTION_COUNT'],
            tie_delta=app.config['BONUS_TIE_DELTA'],
        ),
        'repository': repository,
        'rate_limiter': rate_limiter or RateLimiter(
            max_requests=app.config['RATE_LIMIT_MAX_REQUESTS'],
            window_seconds=app.config['RATE_LIMIT_WINDOW_SECONDS'],
        ),
    }

    # Register blueprints
    app.register_blueprint(quiz_bp, url_prefix='/api/quiz')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')

    @app.route('/')
    def index():
        return jsonify({"status": "ok", "service": "role-fit-quiz"})

    return app


if __name__ == '__main__':
    app = create_app()
    port = int(os.environ.get('PORT', 5000))
    app.run(debug=app.config['DEBUG'], host='0.0.0.0', port=port)
