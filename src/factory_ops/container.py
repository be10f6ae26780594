from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Mapping, Optional

from .analytics.service import AnalyticsService
from .attendance.model import ATTENDANCE_SCHEMA, LEAVE_SCHEMA
from .auth.service import AuthService
from .auth.session import FlaskSessionStore, SessionManager, SessionStore
from .auth.verifier import CredentialVerifier, StaticCredentialVerifier, default_accounts
from .core.constants import DEFAULT_SESSION_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .employees.model import EMPLOYEE_SCHEMA
from .materials.model import RAW_MATERIAL_SCHEMA
from .production.model import PRODUCTION_SCHEMA
from .records.mysql_collection_store import MySQLCollectionStore
from .records.registry import HandlerRegistry
from .records.repository import CollectionStore
from .records.schema import RecordSchema
from .records.service import ResourceHandler
from .tools.model import STOCK_REQUEST_SCHEMA, TOOL_STOCK_SCHEMA
from .transfer.service import RecordTransferService

SCHEMAS: tuple[RecordSchema, ...] = (
    EMPLOYEE_SCHEMA,
    ATTENDANCE_SCHEMA,
    LEAVE_SCHEMA,
    PRODUCTION_SCHEMA,
    RAW_MATERIAL_SCHEMA,
    TOOL_STOCK_SCHEMA,
    STOCK_REQUEST_SCHEMA,
)

StoreFactory = Callable[[RecordSchema], CollectionStore]


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    registry: HandlerRegistry
    sessions: SessionManager

    auth_service: AuthService
    analytics_service: AnalyticsService
    transfer_service: RecordTransferService


def build_container(
    *,
    db_config: dict,
    store_factory: Optional[StoreFactory] = None,
    verifier: Optional[CredentialVerifier] = None,
    accounts: Optional[Mapping[str, str]] = None,
    session_store: Optional[SessionStore] = None,
    session_days: int = DEFAULT_SESSION_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))

    if store_factory is None:
        def store_factory(schema: RecordSchema) -> CollectionStore:
            return MySQLCollectionStore(conn, schema)

    registry = HandlerRegistry(ResourceHandler(schema, store_factory(schema)) for schema in SCHEMAS)

    if verifier is None:
        accounts = dict(accounts or {})
        verifier = StaticCredentialVerifier.from_plain(
            default_accounts(
                admin_password=accounts.get("admin", "admin123"),
                guest_password=accounts.get("guest", "guest123"),
            )
        )

    sessions = SessionManager(session_store or FlaskSessionStore(), lifetime=timedelta(days=int(session_days)))

    return Container(
        conn=conn,
        registry=registry,
        sessions=sessions,
        auth_service=AuthService(verifier, sessions),
        analytics_service=AnalyticsService(registry),
        transfer_service=RecordTransferService(registry),
    )
