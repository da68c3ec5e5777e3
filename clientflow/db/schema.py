# clientflow/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Float, DateTime, ForeignKey, Text, func, text
)

metadata = MetaData()

clients = Table(
    "clients",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("email", String),
    Column("phone", String),
    Column("company", String),
    Column("notes", Text),
    Column("managed_by", String),
    Column("status", String, server_default=text("'active'")),
    Column("created_at", DateTime, server_default=func.current_timestamp()),
)

services = Table(
    "services",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("client_id", Integer, ForeignKey("clients.id", ondelete="CASCADE")),
    Column("service_type", String, nullable=False),
    Column("price", Float, server_default=text("0")),
)

payments = Table(
    "payments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("client_id", Integer, ForeignKey("clients.id", ondelete="CASCADE")),
    Column("total_amount", Float, server_default=text("0")),
    Column("advance_paid", Float, server_default=text("0")),
    Column("remaining_balance", Float, server_default=text("0")),
    Column("last_updated", DateTime, server_default=func.current_timestamp()),
)

tasks = Table(
    "tasks",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("client_id", Integer, ForeignKey("clients.id", ondelete="CASCADE")),
    Column("title", String, nullable=False),
    Column("assigned_to", String),
    # Text, not Date: older rows hold whatever the front-end sent, including ""
    Column("due_date", String),
    Column("status", String, server_default=text("'pending'")),
    Column("created_at", DateTime, server_default=func.current_timestamp()),
)

# Ledger rows outlive their client (no FK): restore and client deletion leave them alone
transactions = Table(
    "transactions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("client_id", Integer),
    Column("amount", Float, nullable=False),
    Column("type", String, server_default=text("'payment'")),
    Column("created_at", DateTime, server_default=func.current_timestamp()),
)

# Tables covered by backup/restore, in foreign-key insert order
SNAPSHOT_TABLES = (clients, services, payments, tasks)
