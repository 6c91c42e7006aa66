from datetime import datetime
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Every entity (policial, pessoa, boletim, log) and every index key lives here
class KVEntry(db.Model):
    __tablename__ = 'kv_store'

    key = db.Column(db.String(255), primary_key=True)
    value = db.Column(db.JSON, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<KVEntry {self.key}>'
