# models/submission.py
import logging
import uuid
from datetime import datetime, timezone

from pymongo import DESCENDING

logger = logging.getLogger(__name__)

# Fields added after the first release; older documents may lack them.
DERIVED_FIELDS = (
    'skill_profile',
    'evidence_highlights',
    'primary_recommendations',
    'secondary_recommendations',
    'dominance_score',
    'confidence_band',
)


class Submission:
    def __init__(self, submission_data):
        self.submission_id = submission_data.get('submission_id')
        self.created_at = submission_data.get('created_at')
        self.name = submission_data.get('name')
        self.team = submission_data.get('team')
        self.answers = submission_data.get('answers', {})
        self.totals = submission_data.get('totals', {})
        self.ranked_roles = submission_data.get('ranked_roles', [])
        self.primary_role = submission_data.get('primary_role')
        self.secondary_role = submission_data.get('secondary_role')
        self.tie_detected = submission_data.get('tie_detected', False)
        self.summary_text = submission_data.get('summary_text', '')
        self.skill_profile = submission_data.get('skill_profile')
        self.evidence_highlights = submission_data.get('evidence_highlights')
        self.primary_recommendations = submission_data.get('primary_recommendations')
        self.secondary_recommendations = submission_data.get('secondary_recommendations')
        self.dominance_score = submission_data.get('dominance_score')
        self.confidence_band = submission_data.get('confidence_band')
        self.bonus_questions_shown = submission_data.get('bonus_questions_shown', [])
        self.user_agent = submission_data.get('user_agent')
        self.ip_hash = submission_data.get('ip_hash')

    def to_dict(self):
        return {
            'submission_id': self.submission_id,
            'created_at': self.created_at,
            'name': self.name,
            'team': self.team,
            'answers': self.answers,
            'totals': self.totals,
            'ranked_roles': self.ranked_roles,
            'primary_role': self.primary_role,
            'secondary_role': self.secondary_role,
            'tie_detected': self.tie_detected,
            'summary_text': self.summary_text,
            'skill_profile': self.skill_profile,
            'evidence_highlights': self.evidence_highlights,
            'primary_recommendations': self.primary_recommendations,
            'secondary_recommendations': self.secondary_recommendations,
            'dominance_score': self.dominance_score,
            'confidence_band': self.confidence_band,
            'bonus_questions_shown': self.bonus_questions_shown,
            'user_agent': self.user_agent,
            'ip_hash': self.ip_hash,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(data or {})

    @classmethod
    def from_scoring(cls, result, answers, summary, recommendations, name=None, team=None,
                     bonus_questions_shown=None, user_agent=None, ip_hash=None):
        """
        Build a new submission from a ScoringResult.
        - answers: dict question id -> response (keys stored as strings)
        - summary: {'dominance_score', 'confidence_band'}
        - recommendations: (primary_list, secondary_list)
        """
        primary_recs, secondary_recs = recommendations
        return cls({
            'name': name,
            'team': team,
            'answers': {str(k): v for k, v in (answers or {}).items()},
            'totals': dict(result.totals),
            'ranked_roles': [dict(entry) for entry in result.ranked],
            'primary_role': result.primary_role,
            'secondary_role': result.secondary_role,
            'tie_detected': result.tie_detected,
            'summary_text': result.narrative,
            'skill_profile': result.skill_profile,
            'evidence_highlights': result.evidence_highlights,
            'primary_recommendations': primary_recs,
            'secondary_recommendations': secondary_recs,
            'dominance_score': summary['dominance_score'],
            'confidence_band': summary['confidence_band'],
            'bonus_questions_shown': list(bonus_questions_shown or []),
            'user_agent': user_agent,
            'ip_hash': ip_hash,
        })

    def missing_fields(self):
        return [field for field in DERIVED_FIELDS if getattr(self, field) is None]


class SubmissionRepository:
    """
    Persistence for submissions over a pymongo collection.
    The collection is injected so the caller owns the connection.
    """

    PROJECTION = {"_id": 0}

    def __init__(self, collection):
        self.collection = collection

    def create(self, submission):
        """Assign id and timestamp, insert, and return the submission"""
        submission.submission_id = str(uuid.uuid4())
        submission.created_at = datetime.now(timezone.utc).isoformat()

        self.collection.insert_one(submission.to_dict())
        logger.info(
            f"Stored submission {submission.submission_id} "
            f"(primary={submission.primary_role}, band={submission.confidence_band})"
        )
        return submission

    def get(self, submission_id):
        """Get submission by submission_id"""
        data = self.collection.find_one({"submission_id": submission_id}, self.PROJECTION)
        if data:
            return Submission.from_dict(data)
        return None

    def list_all(self):
        """All submissions, newest first"""
        cursor = self.collection.find({}, self.PROJECTION).sort("created_at", DESCENDING)
        return [Submission.from_dict(doc) for doc in cursor]

    def update_fields(self, submission_id, fields):
        result = self.collection.update_one(
            {"submission_id": submission_id},
            {"$set": fields}
        )
        return result.modified_count

    def delete_all(self):
        result = self.collection.delete_many({})
        logger.info(f"Deleted {result.deleted_count} submissions")
        return result.deleted_count
