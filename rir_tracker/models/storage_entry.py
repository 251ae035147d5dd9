# rir_tracker/models/storage_entry.py
from datetime import datetime
from .. import db


class StorageEntry(db.Model):
    """One key of the key-value store; ``value`` holds JSON text."""

    __tablename__ = "storage_entries"

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
