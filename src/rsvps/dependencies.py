import base64
import binascii

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from fastapi.security.utils import get_authorization_scheme_param

from src.config.settings import Settings
from src.rsvps.dtos import AdminCredential
from src.rsvps.service import RSVPService


class AdminBasicAuth(HTTPBasic):
    """
    HTTP Basic that decodes the credential as UTF-8 and never raises.

    A missing or undecodable header yields None; the auth gate turns that into
    the config error or the 401 challenge.
    """

    async def __call__(self, request: Request) -> HTTPBasicCredentials | None:
        authorization = request.headers.get("Authorization")
        scheme, param = get_authorization_scheme_param(authorization)
        if not authorization or scheme.lower() != "basic":
            return None
        try:
            decoded = base64.b64decode(param, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None
        username, separator, password = decoded.partition(":")
        if not separator:
            return None
        return HTTPBasicCredentials(username=username, password=password)


basic_auth = AdminBasicAuth(auto_error=False, realm="Admin")


def get_settings_from_app(request: Request) -> Settings:
    """Dependency to get the settings the app was created with."""
    return request.app.state.settings


def get_rsvp_service(request: Request) -> RSVPService:
    """Dependency to get the RSVP service built at startup. Override in tests."""
    return request.app.state.rsvp_service


def get_admin_credential(
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> AdminCredential | None:
    if credentials is None:
        return None
    return AdminCredential(username=credentials.username, password=credentials.password)
