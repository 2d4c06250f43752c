# database/mongodb.py
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi
import logging

logger = logging.getLogger(__name__)


class MongoDB:
    """
    Connection holder for the quiz database.

    Built once by the app factory (or a script) and passed to whatever needs
    it; pass ``client`` to reuse an existing MongoClient.
    """

    def __init__(self, uri=None, db_name='role_fit_quiz', client=None):
        if client is None:
            if not uri:
                raise ValueError("MONGO_URI is required to connect to MongoDB")
            # For MongoDB Atlas with SRV connection string
            client = MongoClient(
                uri,
                server_api=ServerApi('1'),
                retryWrites=True,
                w='majority'
            )

            # Test the connection
            try:
                client.admin.command('ping')
                logger.info("✅ Successfully connected to MongoDB")
            except PyMongoError as e:
                logger.error(f"❌ Connection failed: {e}")
                raise

        self.client = client
        self.db = client[db_name]

    @classmethod
    def from_config(cls, config):
        return cls(config.get('MONGO_URI'), config.get('MONGO_DB_NAME', 'role_fit_quiz'))

    def get_submissions_collection(self):
        return self.db.submissions

    def init_database(self):
        """Create indexes used by submission lookups and the admin dashboard"""
        try:
            submissions = self.get_submissions_collection()
            submissions.create_index("submission_id", unique=True)
            submissions.create_index([("created_at", DESCENDING)])
            submissions.create_index([("team", ASCENDING)])
            submissions.create_index([("primary_role", ASCENDING)])

            logger.info("✅ Database initialized with submission indexes")

        except PyMongoError as e:
            logger.error(f"❌ Database initialization failed: {e}")
            raise

    def close(self):
        self.client.close()
