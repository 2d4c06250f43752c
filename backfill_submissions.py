#!/usr/bin/env python3
"""
Backfill derived fields on stored submissions.

Submissions created before skill profiles, evidence highlights,
recommendations and confidence bands were stored are re-scored from their
saved answers; fields that already hold data are left untouched.

Usage:
    python backfill_submissions.py
Requires MONGO_URI (and optionally MONGO_DB_NAME) in the environment or .env.
"""
import logging
import sys

from pymongo.errors import PyMongoError

from config import get_config
from database.mongodb import MongoDB
from models.submission import SubmissionRepository
from questions.role_playbooks import recommendations_for
from services.scoring_service import ScoringService

logger = logging.getLogger(__name__)


def _has_list(value, allow_empty=False):
    return isinstance(value, list) and (allow_empty or len(value) > 0)


def fields_to_backfill(submission, scoring_service):
    """Return the {field: value} updates a stored submission is missing."""
    profile = submission.skill_profile
    has_skill_profile = (
        isinstance(profile, dict)
        and isinstance(profile.get('tags'), list)
        and isinstance(profile.get('tag_frequency'), dict)
    )
    has_evidence = _has_list(submission.evidence_highlights)
    has_primary_recs = _has_list(submission.primary_recommendations)
    has_secondary_recs = _has_list(submission.secondary_recommendations, allow_empty=True)
    has_confidence = submission.dominance_score is not None and submission.confidence_band

    if has_skill_profile and has_evidence and has_primary_recs and has_secondary_recs and has_confidence:
        return {}

    result = scoring_service.score(submission.answers or {})
    primary_recs, secondary_recs = recommendations_for(submission.primary_role, submission.secondary_role)

    updates = {}
    if not has_skill_profile:
        updates['skill_profile'] = result.skill_profile
    if not has_evidence:
        updates['evidence_highlights'] = result.evidence_highlights
    if not has_primary_recs:
        updates['primary_recommendations'] = primary_recs
    if not has_secondary_recs:
        updates['secondary_recommendations'] = secondary_recs
    if not has_confidence:
        updates.update(scoring_service.summarize(result))
        updates['tie_detected'] = result.tie_detected
    return updates


def backfill_submission(repository, submission, scoring_service):
    """Update one submission in place. Returns True when it was modified."""
    updates = fields_to_backfill(submission, scoring_service)
    if not updates:
        logger.info(f"  ✓ Submission {submission.submission_id} already has all fields, skipping")
        return False

    repository.update_fields(submission.submission_id, updates)
    logger.info(f"  ✓ Updated submission {submission.submission_id} ({', '.join(sorted(updates))})")
    return True


def backfill_all(repository, scoring_service):
    """Returns counts: {'updated', 'skipped', 'errors'}"""
    submissions = repository.list_all()
    logger.info(f"Found {len(submissions)} submissions to process")

    counts = {'updated': 0, 'skipped': 0, 'errors': 0}
    for index, submission in enumerate(submissions, start=1):
        logger.info(f"Processing {index}/{len(submissions)}: {submission.submission_id}")
        try:
            if backfill_submission(repository, submission, scoring_service):
                counts['updated'] += 1
            else:
                counts['skipped'] += 1
        except PyMongoError as e:
            logger.error(f"  ✗ Error backfilling submission {submission.submission_id}: {e}")
            counts['errors'] += 1

    logger.info(
        f"Backfill complete: {counts['updated']} updated, "
        f"{counts['skipped']} skipped, {counts['errors']} errors"
    )
    return counts


def main():
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(name)s - %(message)s')

    config_class = get_config()
    config_class.validate()
    config = {key: getattr(config_class, key) for key in dir(config_class) if key.isupper()}

    mongo = MongoDB.from_config(config)
    try:
        repository = SubmissionRepository(mongo.get_submissions_collection())
        counts = backfill_all(repository, ScoringService.from_config(config))
    finally:
        mongo.close()

    return 1 if counts['errors'] else 0


if __name__ == '__main__':
    sys.exit(main())
