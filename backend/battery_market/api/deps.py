"""Accessors for the collaborators wired onto ``app.state`` by ``create_app``."""
from __future__ import annotations

from fastapi import Request

from battery_market.core.config import Settings
from battery_market.services.admin_service import AdminService
from battery_market.services.auth_service import AuthService
from battery_market.services.battery_service import BatteryService
from battery_market.services.inquiry_service import InquiryService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_battery_service(request: Request) -> BatteryService:
    return request.app.state.battery_service


def get_inquiry_service(request: Request) -> InquiryService:
    return request.app.state.inquiry_service


def get_admin_service(request: Request) -> AdminService:
    return request.app.state.admin_service
