from datetime import date, datetime

# Bookkeeping columns only admins see
ADMIN_ONLY_FIELDS = {"updated_at"}


def _serialize(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def normalize_entity(row, admin=False):
    data = {}
    for column in row.__table__.columns:
        if not admin and column.key in ADMIN_ONLY_FIELDS:
            continue
        data[column.key] = _serialize(getattr(row, column.key))
    return data
