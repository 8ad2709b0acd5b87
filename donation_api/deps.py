# donation_api/deps.py
from fastapi import Request

from donation_api.core.config import Settings
from donation_api.core.sessions import SessionRegistry
from donation_api.repos import InMemoryDonationRepo, MongoDonationRepo


def build_repo(settings: Settings):
    if settings.use_mongo:
        from donation_api.db import donations_col
        return MongoDonationRepo(donations_col(settings))
    return InMemoryDonationRepo()


# Everything below is bound to the app in create_app()
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repo(request: Request):
    return request.app.state.repo


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions
