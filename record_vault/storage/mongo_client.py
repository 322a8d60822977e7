# ==============================================
# MongoConnection
# ==============================================
#
# PURPOSE:
#   Owns the single MongoDB connection used by a vault session.
#   Created once at process start, handed to the RecordStore,
#   and closed exactly once on exit or interrupt.
#
# CLASS: MongoConnection
# ----------------------
#   Stateful — holds the pymongo client.
#
#   Constructor:
#   ------------
#   - __init__(config: MongoConfig, client_factory=pymongo.MongoClient)
#       Store connection params. Don't connect yet.
#       client_factory lets tests substitute mongomock.MongoClient.
#
#   Methods:
#   --------
#   - connect() -> None
#       Create the client and ping the server.
#       Raises StoreUnavailableError on failure.
#
#   - disconnect() -> None
#       Close the client. Safe to call more than once.
#
#   - collection() -> pymongo.collection.Collection
#       The records collection (database from the URI, else config).
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MongoConnection(...) as conn:` usage.
#
# ==============================================

from pymongo import MongoClient as PyMongoClient
from pymongo.errors import ConfigurationError as PyMongoConfigurationError
from pymongo.errors import ConnectionFailure, OperationFailure

from record_vault.config import MongoConfig
from record_vault.errors import StoreUnavailableError


class MongoConnection:
    def __init__(self, config: MongoConfig, client_factory=PyMongoClient):
        # Store connection params. Don't connect yet.
        self.config = config
        self.client_factory = client_factory
        self.client = None  # Will hold the actual MongoDB client connection

    @property
    def is_connected(self) -> bool:
        return self.client is not None

    def connect(self):
        # Establish connection to MongoDB and verify it answers.
        if self.client is not None:
            return
        client = None
        try:
            client = self.client_factory(self.config.uri, **self.config.connect_options())
            client.admin.command("ping")
        except (ConnectionFailure, PyMongoConfigurationError) as e:
            print(f"✗ Could not connect to MongoDB: {e}")
            if client is not None:
                client.close()
            raise StoreUnavailableError(f"Failed to connect to MongoDB: {e}") from e
        except OperationFailure as e:
            print(f"✗ Authentication failed: {e}")
            client.close()
            raise StoreUnavailableError(f"MongoDB rejected the connection: {e}") from e
        self.client = client
        print("✓ Connected to MongoDB.")

    def disconnect(self):
        # Close connection.
        if self.client:
            self.client.close()
            print("✓ Disconnected from MongoDB.")
            self.client = None

    def collection(self):
        if not self.client:
            raise StoreUnavailableError("Not connected to MongoDB.")
        database = self.client.get_default_database(default=self.config.database)
        return database[self.config.collection]

    def __enter__(self):
        # For `with MongoConnection(...) as conn:` usage.
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
