"""
Base DAO

Holds the shared, injected `MongoClient` and the resolved MFlix `Database`.
Every entity DAO inherits from `AbstractMflixDao` and reads its collections from
`self.db`.
"""

from pymongo import MongoClient
from pymongo.database import Database


class AbstractMflixDao:
    """
    Parent of all MFlix DAOs.

    Parameters
    ----------
    mongo_client : MongoClient
        Process-wide client created by `connection_engine.create_mongo_client`.
    database_name : str
        Name of the MFlix database (`Settings.MFLIX_DB_NAME`).
    """

    def __init__(self, mongo_client: MongoClient, database_name: str):
        self.mongoClient = mongo_client
        self.databaseName = database_name
        self.db: Database = mongo_client[database_name]
