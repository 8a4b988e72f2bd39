from fastapi import Request
from pymongo.collection import Collection

from app.core import database


def get_collection(request: Request) -> Collection:
    """
    Dependency returning the students collection.
    The client behind it is created once by create_app and shared by all requests.
    """
    return database.get_collection(request.app.state.mongo_client, request.app.state.settings)
